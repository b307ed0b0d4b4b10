# tests/test_query_expansion.py
import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from services.query_expansion_service import EXPANSION_SYSTEM_PROMPT, QueryExpansionService


def _client(content=None, error=None):
    client = MagicMock()
    if error is not None:
        client.chat.completions.create = AsyncMock(side_effect=error)
    else:
        response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
        client.chat.completions.create = AsyncMock(return_value=response)
    return client


def test_without_api_key_returns_input():
    service = QueryExpansionService(api_key=None)

    assert not service.enabled
    assert asyncio.run(service.expand("ethics of AI")) == "ethics of AI"


def test_expansion_is_trimmed_and_uses_prompt():
    client = _client(content="  artificial intelligence ethics OR AI fairness \n")
    service = QueryExpansionService(api_key="k", model="m", client=client)

    result = asyncio.run(service.expand("ethics of AI"))

    assert result == "artificial intelligence ethics OR AI fairness"
    kwargs = client.chat.completions.create.await_args.kwargs
    assert kwargs["model"] == "m"
    assert kwargs["messages"][0] == {"role": "system", "content": EXPANSION_SYSTEM_PROMPT}
    assert '"ethics of AI"' in kwargs["messages"][1]["content"]


def test_api_error_falls_back_to_input():
    service = QueryExpansionService(api_key="k", client=_client(error=RuntimeError("503")))

    assert asyncio.run(service.expand("ethics of AI")) == "ethics of AI"


def test_empty_completion_falls_back_to_input():
    service = QueryExpansionService(api_key="k", client=_client(content="   "))

    assert asyncio.run(service.expand("ethics of AI")) == "ethics of AI"
