# agents/provider_agent.py
import logging
from typing import Any, Dict, List

from state.citation_schema import NormalizedCitation

logger = logging.getLogger(__name__)


class ProviderAgent:
    """
    Base class for provider adapters.

    `search` never raises: transport errors, bad statuses and unusable
    payloads all end up as an empty list plus a log line. Subclasses only
    fetch raw items and map one item to a NormalizedCitation.
    """

    name: str = "provider"

    async def _fetch(self, query: str) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def _to_citation(self, raw: Dict[str, Any]) -> NormalizedCitation:
        raise NotImplementedError

    async def search(self, query: str) -> List[NormalizedCitation]:
        logger.info(f"🔎 {self.name}: searching for '{query}'")

        try:
            raw_results = await self._fetch(query)
        except Exception as e:
            logger.error(f"{self.name} search failed: {type(e).__name__}: {e}")
            return []

        if not isinstance(raw_results, list):
            logger.error(f"{self.name} returned a malformed payload ({type(raw_results).__name__})")
            return []

        citations: List[NormalizedCitation] = []
        for raw in raw_results:
            try:
                citations.append(self._to_citation(raw))
            except Exception as e:
                logger.warning(f"{self.name}: skipping malformed record: {e}")

        logger.info(f"📘 {self.name} returned {len(citations)} citations")
        return citations
