# tests/test_search_citations_api.py
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies.pipeline import get_search_service
from api.main import create_app
from services.citation_search_service import CitationSearchService
from state.citation_schema import Source
from utils.settings import Settings


@pytest.fixture
def build_client():
    def _build(service):
        app = create_app(Settings())
        app.dependency_overrides[get_search_service] = lambda: service
        return TestClient(app, raise_server_exceptions=False)

    return _build


@pytest.fixture
def service(make_citation, make_adapter):
    return CitationSearchService([
        make_adapter("Semantic Scholar", results=[
            make_citation(title="Machine learning ethics", doi="10.1/a", source=Source.SEMANTIC_SCHOLAR,
                          citation_count=12, year=2024),
        ]),
        make_adapter("CrossRef", results=[
            make_citation(title="Machine learning ethics", doi="10.1/a"),
            make_citation(title="Unrelated work"),
        ]),
    ])


def test_health(build_client, service):
    r = build_client(service).get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_search_success(build_client, service):
    r = build_client(service).post("/search-citations", json={"query": "machine learning ethics"})

    assert r.status_code == 200
    body = r.json()
    assert body["query"] == "machine learning ethics"
    assert body["expandedQuery"] == "machine learning ethics"
    assert body["totalFound"] == 2
    top = body["results"][0]
    assert top["title"] == "Machine learning ethics"
    assert top["source"] == "Semantic Scholar"
    assert top["citationCount"] == 12
    assert top["doi"] == "10.1/a"
    assert isinstance(top["relevanceScore"], float)


@pytest.mark.parametrize("payload", [{}, {"query": ""}, {"query": "   "}, {"userId": "u1"}])
def test_missing_query_is_400(build_client, service, payload):
    r = build_client(service).post("/search-citations", json=payload)

    assert r.status_code == 400
    assert r.json() == {"error": "Query is required"}


def test_malformed_body_is_400(build_client, service):
    r = build_client(service).post(
        "/search-citations", content="not json", headers={"content-type": "application/json"}
    )

    assert r.status_code == 400
    assert r.json() == {"error": "Query is required"}


def test_total_failure_is_404_with_queries(build_client, make_adapter):
    service = CitationSearchService([make_adapter("A"), make_adapter("B", error=RuntimeError("down"))])

    r = build_client(service).post("/search-citations", json={"query": "obscure topic"})

    assert r.status_code == 404
    body = r.json()
    assert body["error"] == "No results found. Please try a different search term."
    assert body["query"] == "obscure topic"
    assert body["expandedQuery"] == "obscure topic"


def test_unexpected_error_is_generic_500(build_client):
    broken = MagicMock()
    broken.search = AsyncMock(side_effect=KeyError("secret internals"))

    r = build_client(broken).post("/search-citations", json={"query": "q"})

    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Internal server error"
    assert "secret internals" not in r.text


def test_collaborator_failures_keep_200_and_same_results(build_client, service, make_citation):
    baseline = build_client(service).post("/search-citations", json={"query": "machine learning ethics"}).json()

    expander = MagicMock()
    expander.expand = AsyncMock(side_effect=RuntimeError("gateway down"))
    history = MagicMock()
    history.record.side_effect = RuntimeError("db down")
    service.expander = expander
    service.history = history

    r = build_client(service).post(
        "/search-citations", json={"query": "machine learning ethics", "userId": "u1"}
    )

    assert r.status_code == 200
    assert r.json() == baseline
