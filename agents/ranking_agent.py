# agents/ranking_agent.py
import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from state.citation_schema import NormalizedCitation, ScoredCitation, Source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringPolicy:
    """
    Weights of the relevance heuristic.
    Changing any value changes ranking output; bump `version` with it.
    """
    version: str = "1"
    exact_title_match: float = 10.0
    title_term_match: float = 3.0
    exact_abstract_match: float = 5.0
    abstract_term_match: float = 1.0
    citation_weight: float = 0.5
    recency_bonus: float = 3.0
    recency_window_years: int = 5
    preferred_source: str = Source.SEMANTIC_SCHOLAR.value
    preferred_source_bonus: float = 0.5
    min_term_length: int = 3


DEFAULT_POLICY = ScoringPolicy()


def query_terms(query_lower: str, policy: ScoringPolicy = DEFAULT_POLICY) -> List[str]:
    return [t for t in query_lower.split() if len(t) >= policy.min_term_length]


def score_citation(
    citation: NormalizedCitation,
    query: str,
    policy: ScoringPolicy = DEFAULT_POLICY,
    current_year: Optional[int] = None,
) -> float:
    if current_year is None:
        current_year = datetime.now().year

    query_lower = query.lower()
    terms = query_terms(query_lower, policy)
    title = citation.title.lower()
    abstract = citation.abstract.lower()

    score = 0.0

    # Lexical match
    if query_lower in title:
        score += policy.exact_title_match
    score += policy.title_term_match * sum(1 for t in terms if t in title)

    if query_lower in abstract:
        score += policy.exact_abstract_match
    score += policy.abstract_term_match * sum(1 for t in terms if t in abstract)

    # Log-damped popularity
    score += math.log(citation.citation_count + 1) * policy.citation_weight

    if citation.year and current_year - citation.year <= policy.recency_window_years:
        score += policy.recency_bonus

    if citation.source == policy.preferred_source:
        score += policy.preferred_source_bonus

    return score


class RankingAgent:
    def __init__(self, policy: ScoringPolicy = DEFAULT_POLICY):
        self.policy = policy

    def rank(
        self,
        citations: List[NormalizedCitation],
        original_query: str,
        current_year: Optional[int] = None,
    ) -> List[ScoredCitation]:
        """
        Scores against the user's original query (never the expanded one)
        and sorts descending. sorted() is stable, so ties keep input order.
        """
        if current_year is None:
            current_year = datetime.now().year

        scored = [
            ScoredCitation.from_citation(
                c, score_citation(c, original_query, self.policy, current_year)
            )
            for c in citations
        ]
        ranked = sorted(scored, key=lambda s: s.relevance_score, reverse=True)

        logger.info(f"🏅 Ranked {len(ranked)} citations (policy v{self.policy.version})")
        return ranked


ranking_agent = RankingAgent()
