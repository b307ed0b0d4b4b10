# tests/conftest.py
import asyncio
from typing import List, Optional

import pytest

from agents.provider_agent import ProviderAgent
from state.citation_schema import NormalizedCitation, Source


class FakeAdapter(ProviderAgent):
    """Provider adapter that returns canned citations, or raises, without I/O."""

    def __init__(self, name: str, results: Optional[List[NormalizedCitation]] = None,
                 error: Optional[Exception] = None, delay: float = 0.0):
        self.name = name
        self.results = results or []
        self.error = error
        self.delay = delay
        self.queries: List[str] = []

    async def search(self, query: str) -> List[NormalizedCitation]:
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.results)


@pytest.fixture
def make_citation():
    def _make(**overrides) -> NormalizedCitation:
        fields = {
            "title": "Protein folding dynamics",
            "authors": "Jane Doe",
            "year": None,
            "abstract": "No abstract available",
            "url": None,
            "source": Source.CROSSREF,
            "citation_count": 0,
            "doi": None,
        }
        fields.update(overrides)
        return NormalizedCitation(**fields)

    return _make


@pytest.fixture
def make_adapter():
    return FakeAdapter
