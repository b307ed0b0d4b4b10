# agents/crossref_agent.py
import logging
from typing import Any, Dict, List, Optional

from agents.provider_agent import ProviderAgent
from clients.crossref_client import search_crossref
from services.data_normalization_service import coerce_citation_count, join_authors
from state.citation_schema import NO_ABSTRACT, UNTITLED, NormalizedCitation, Source
from utils.id_normalization import normalize_doi
from utils.sanitization import clean_text, strip_markup

logger = logging.getLogger(__name__)


def _published_year(item: Dict[str, Any]) -> Optional[int]:
    # "published": {"date-parts": [[2021, 5, 3]]}
    date_parts = (item.get("published") or {}).get("date-parts") or []
    if not date_parts or not date_parts[0]:
        return None
    year = date_parts[0][0]
    return int(year) if year else None


class CrossRefAgent(ProviderAgent):
    name = Source.CROSSREF.value

    def __init__(self, base_url: str, mailto: str, rows: int = 10, timeout: float = 10.0):
        self.base_url = base_url
        self.mailto = mailto
        self.rows = rows
        self.timeout = timeout

    async def _fetch(self, query: str) -> List[Dict[str, Any]]:
        return await search_crossref(
            query,
            base_url=self.base_url,
            mailto=self.mailto,
            rows=self.rows,
            timeout=self.timeout,
        )

    def _to_citation(self, raw: Dict[str, Any]) -> NormalizedCitation:
        titles = raw.get("title") or []
        title = clean_text(titles[0]) if titles else ""

        doi = normalize_doi(raw.get("DOI"))
        url = raw.get("URL") or (f"https://doi.org/{raw['DOI']}" if raw.get("DOI") else None)

        return NormalizedCitation(
            title=title or UNTITLED,
            authors=join_authors(raw.get("author")),
            year=_published_year(raw),
            abstract=strip_markup(raw.get("abstract")) or NO_ABSTRACT,
            url=url,
            source=Source.CROSSREF,
            citation_count=coerce_citation_count(raw.get("is-referenced-by-count")),
            doi=doi,
        )
