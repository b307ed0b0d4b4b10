# agents/semantic_scholar_agent.py
import logging
from typing import Any, Dict, List, Optional

from agents.provider_agent import ProviderAgent
from clients.semantic_scholar_client import search_semantic_scholar
from services.data_normalization_service import coerce_citation_count, join_authors, normalize_date
from state.citation_schema import NO_ABSTRACT, UNTITLED, NormalizedCitation, Source
from utils.id_normalization import normalize_doi
from utils.sanitization import clean_text

logger = logging.getLogger(__name__)

S2_PAPER_URL = "https://www.semanticscholar.org/paper/"


class SemanticScholarAgent(ProviderAgent):
    name = Source.SEMANTIC_SCHOLAR.value

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        limit: int = 10,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.limit = limit
        self.timeout = timeout

    async def _fetch(self, query: str) -> List[Dict[str, Any]]:
        return await search_semantic_scholar(
            query,
            base_url=self.base_url,
            api_key=self.api_key,
            limit=self.limit,
            timeout=self.timeout,
        )

    def _to_citation(self, raw: Dict[str, Any]) -> NormalizedCitation:
        year = raw.get("year") or normalize_date(raw.get("publicationDate"))

        url = raw.get("url")
        if not url and raw.get("paperId"):
            url = f"{S2_PAPER_URL}{raw['paperId']}"

        ext_ids = raw.get("externalIds") or {}

        return NormalizedCitation(
            title=clean_text(raw.get("title")) or UNTITLED,
            authors=join_authors(raw.get("authors")),
            year=year,
            abstract=clean_text(raw.get("abstract")) or NO_ABSTRACT,
            url=url or None,
            source=Source.SEMANTIC_SCHOLAR,
            citation_count=coerce_citation_count(raw.get("citationCount")),
            doi=normalize_doi(ext_ids.get("DOI")),
        )
