# File: state/citation_schema.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

UNTITLED = "Untitled"
UNKNOWN_AUTHORS = "Unknown"
NO_ABSTRACT = "No abstract available"


class Source(str, Enum):
    SEMANTIC_SCHOLAR = "Semantic Scholar"
    CROSSREF = "CrossRef"
    ARXIV = "arXiv"


class NormalizedCitation(BaseModel):
    """
    Provider-independent paper record.
    Every adapter must emit fully populated instances; sentinels stand in
    for whatever the provider left out.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
    )

    title: str = UNTITLED
    authors: str = UNKNOWN_AUTHORS
    year: Optional[int] = None
    abstract: str = NO_ABSTRACT
    url: Optional[str] = None
    source: Source
    citation_count: int = Field(default=0, ge=0)
    doi: Optional[str] = None

    @field_validator("title", "authors", "abstract")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must be a non-empty string")
        return value


class ScoredCitation(NormalizedCitation):
    relevance_score: float

    @classmethod
    def from_citation(cls, citation: NormalizedCitation, score: float) -> "ScoredCitation":
        return cls(**citation.model_dump(), relevance_score=score)
