# agents/data_acquisition_agent.py
import asyncio
import logging
from typing import List, Sequence

from agents.provider_agent import ProviderAgent
from state.citation_schema import NormalizedCitation

logger = logging.getLogger(__name__)


class NoResultsError(Exception):
    """Raised when every provider failed or came back empty."""

    def __init__(self, query: str):
        super().__init__(f"No provider returned results for '{query}'")
        self.query = query


class DataAcquisitionAgent:
    async def aggregate(
        self, query: str, adapters: Sequence[ProviderAgent]
    ) -> List[NormalizedCitation]:
        """
        Runs every adapter against the same query and waits for all of them.
        One slow or failing provider never cancels the others.

        Raises:
            NoResultsError: if no adapter produced a single record.
        """
        logger.info(f"🌐 DataAcquisitionAgent → {len(adapters)} providers for '{query}'")

        outcomes = await asyncio.gather(
            *(adapter.search(query) for adapter in adapters),
            return_exceptions=True,
        )

        combined: List[NormalizedCitation] = []
        for adapter, outcome in zip(adapters, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"{adapter.name} failed: {type(outcome).__name__}: {outcome}")
                continue
            if not outcome:
                logger.warning(f"{adapter.name} returned no results")
                continue
            combined.extend(outcome)

        logger.info(f"📥 Total citations fetched (before dedupe): {len(combined)}")

        if not combined:
            raise NoResultsError(query)
        return combined


data_acquisition_agent = DataAcquisitionAgent()
