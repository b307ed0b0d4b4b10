# File: api/models/citation_models.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional

from state.citation_schema import ScoredCitation


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchCitationsRequest(_CamelModel):
    # Optional here so a missing query is answered with 400, not 422
    query: Optional[str] = None
    user_id: Optional[str] = None


class SearchCitationsResponse(_CamelModel):
    query: str
    expanded_query: str
    results: List[ScoredCitation]
    total_found: int


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class NoResultsResponse(_CamelModel):
    error: str
    query: str
    expanded_query: str
