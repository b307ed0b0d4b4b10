# agents/arxiv_agent.py
import logging
from typing import Any, Dict, List

from agents.provider_agent import ProviderAgent
from clients.arxiv_client import search_arxiv
from services.data_normalization_service import join_authors, normalize_date
from state.citation_schema import NO_ABSTRACT, UNTITLED, NormalizedCitation, Source
from utils.id_normalization import normalize_doi
from utils.sanitization import clean_text

logger = logging.getLogger(__name__)


class ArxivAgent(ProviderAgent):
    """arXiv exposes no citation counts; every record carries 0."""

    name = Source.ARXIV.value

    def __init__(self, base_url: str, max_results: int = 10, timeout: float = 10.0):
        self.base_url = base_url
        self.max_results = max_results
        self.timeout = timeout

    async def _fetch(self, query: str) -> List[Dict[str, Any]]:
        return await search_arxiv(
            query,
            base_url=self.base_url,
            max_results=self.max_results,
            timeout=self.timeout,
        )

    def _to_citation(self, raw: Dict[str, Any]) -> NormalizedCitation:
        return NormalizedCitation(
            title=clean_text(raw.get("title")) or UNTITLED,
            authors=join_authors(raw.get("authors")),
            year=normalize_date(raw.get("published")),
            abstract=clean_text(raw.get("summary")) or NO_ABSTRACT,
            url=raw.get("id") or None,
            source=Source.ARXIV,
            citation_count=0,
            doi=normalize_doi(raw.get("doi")),
        )
