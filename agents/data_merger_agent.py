# agents/data_merger_agent.py
import logging
from typing import List, Set

from state.citation_schema import NormalizedCitation
from utils.id_normalization import normalize_title_key

logger = logging.getLogger(__name__)


def identity_key(citation: NormalizedCitation) -> str:
    """
    DOI when present, otherwise the normalized title.
    DOI is authoritative: equal titles with different DOIs stay distinct.
    """
    if citation.doi and citation.doi.strip():
        return citation.doi
    return normalize_title_key(citation.title)


class DataMergerAgent:
    """
    Drops duplicate citations across providers.
    First occurrence wins; later duplicates are discarded, not merged.
    """

    def dedupe(self, citations: List[NormalizedCitation]) -> List[NormalizedCitation]:
        seen: Set[str] = set()
        unique: List[NormalizedCitation] = []

        for citation in citations:
            key = identity_key(citation)
            if key in seen:
                continue
            seen.add(key)
            unique.append(citation)

        logger.info(f"🔗 DataMerger deduplicated {len(citations)} → {len(unique)} unique citations")
        return unique


data_merger_agent = DataMergerAgent()
