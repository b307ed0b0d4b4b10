# tests/test_data_acquisition.py
import asyncio
import time

import pytest

from agents.data_acquisition_agent import NoResultsError, data_acquisition_agent


def test_collects_successes_and_skips_failures(make_citation, make_adapter):
    a1, a2 = make_citation(title="One"), make_citation(title="Two")
    b1 = make_citation(title="Three")
    adapters = [
        make_adapter("A", results=[a1, a2]),
        make_adapter("Broken", error=RuntimeError("boom")),
        make_adapter("Empty"),
        make_adapter("B", results=[b1]),
    ]

    results = asyncio.run(data_acquisition_agent.aggregate("q", adapters))

    assert len(results) == 3
    # per-adapter order preserved
    assert results.index(a1) < results.index(a2)
    assert b1 in results
    assert all(a.queries == ["q"] for a in adapters)


def test_all_empty_is_total_failure(make_adapter):
    adapters = [make_adapter("A"), make_adapter("B")]

    with pytest.raises(NoResultsError) as exc_info:
        asyncio.run(data_acquisition_agent.aggregate("nothing here", adapters))

    assert exc_info.value.query == "nothing here"


def test_all_failing_is_total_failure(make_adapter):
    adapters = [make_adapter("A", error=ValueError("x")), make_adapter("B", error=TimeoutError())]

    with pytest.raises(NoResultsError):
        asyncio.run(data_acquisition_agent.aggregate("q", adapters))


def test_no_adapters_is_total_failure():
    with pytest.raises(NoResultsError):
        asyncio.run(data_acquisition_agent.aggregate("q", []))


def test_adapters_run_concurrently(make_citation, make_adapter):
    adapters = [
        make_adapter(f"Slow{i}", results=[make_citation(title=f"T{i}")], delay=0.2)
        for i in range(3)
    ]

    start = time.perf_counter()
    results = asyncio.run(data_acquisition_agent.aggregate("q", adapters))
    elapsed = time.perf_counter() - start

    assert len(results) == 3
    assert elapsed < 0.5


def test_slow_failure_does_not_drop_fast_success(make_citation, make_adapter):
    fast = make_adapter("Fast", results=[make_citation(title="Fast")])
    slow_broken = make_adapter("SlowBroken", error=ConnectionError("down"), delay=0.05)

    results = asyncio.run(data_acquisition_agent.aggregate("q", [slow_broken, fast]))

    assert [c.title for c in results] == ["Fast"]
