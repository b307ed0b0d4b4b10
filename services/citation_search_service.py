# File: services/citation_search_service.py

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from agents.data_acquisition_agent import DataAcquisitionAgent, NoResultsError
from agents.data_merger_agent import DataMergerAgent
from agents.provider_agent import ProviderAgent
from agents.ranking_agent import DEFAULT_POLICY, RankingAgent, ScoringPolicy
from services.query_expansion_service import QueryExpansionService
from services.search_history_service import SearchHistoryStore
from state.citation_schema import ScoredCitation

logger = logging.getLogger(__name__)


class QueryValidationError(ValueError):
    """Raised before any work is done when the query is missing or blank."""


class CitationSearchError(NoResultsError):
    """Total provider failure, carrying both query strings for the response."""

    def __init__(self, query: str, expanded_query: str):
        super().__init__(expanded_query)
        self.original_query = query
        self.expanded_query = expanded_query


@dataclass(frozen=True)
class SearchOutcome:
    query: str
    expanded_query: str
    results: List[ScoredCitation]
    total_found: int


class CitationSearchService:
    """
    PIPELINE:
    1. Query expansion (optional, falls back to the original query)
    2. Concurrent provider fan-out
    3. Deduplication
    4. Ranking against the ORIGINAL query
    5. Search history (optional, failures swallowed)
    """

    def __init__(
        self,
        adapters: Sequence[ProviderAgent],
        expander: Optional[QueryExpansionService] = None,
        history: Optional[SearchHistoryStore] = None,
        top_k: int = 10,
        policy: ScoringPolicy = DEFAULT_POLICY,
    ):
        self.adapters = list(adapters)
        self.expander = expander
        self.history = history
        self.top_k = top_k
        self.acquisition = DataAcquisitionAgent()
        self.merger = DataMergerAgent()
        self.ranker = RankingAgent(policy)

    async def _expand(self, query: str) -> str:
        if self.expander is None:
            return query
        try:
            return await self.expander.expand(query) or query
        except Exception as e:
            logger.error(f"Query expansion failed, using original query: {e}")
            return query

    async def _record_history(
        self,
        user_id: Optional[str],
        query: str,
        expanded_query: str,
        results: List[ScoredCitation],
    ) -> None:
        if not user_id or self.history is None:
            return
        payload = [r.model_dump(mode="json", by_alias=True) for r in results]
        try:
            await asyncio.to_thread(self.history.record, user_id, query, expanded_query, payload)
        except Exception as e:
            logger.error(f"Failed to store search history: {e}")

    async def search(self, query: Optional[str], user_id: Optional[str] = None) -> SearchOutcome:
        """
        Raises:
            QueryValidationError: empty or missing query.
            CitationSearchError: every provider failed or returned nothing.
        """
        if not query or not query.strip():
            raise QueryValidationError("Query is required")

        logger.info(f"Searching for: {query}")

        expanded_query = await self._expand(query)

        try:
            citations = await self.acquisition.aggregate(expanded_query, self.adapters)
        except NoResultsError as e:
            raise CitationSearchError(query, expanded_query) from e

        unique = self.merger.dedupe(citations)
        ranked = self.ranker.rank(unique, query)
        top = ranked[: self.top_k]

        await self._record_history(user_id, query, expanded_query, top)

        return SearchOutcome(
            query=query,
            expanded_query=expanded_query,
            results=top,
            total_found=len(ranked),
        )
