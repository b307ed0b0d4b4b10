# api/routers/citations.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import logging

from api.dependencies.pipeline import get_search_service
from api.models.citation_models import (
    ErrorResponse,
    NoResultsResponse,
    SearchCitationsRequest,
    SearchCitationsResponse,
)
from services.citation_search_service import (
    CitationSearchError,
    CitationSearchService,
    QueryValidationError,
)

router = APIRouter()
logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No results found. Please try a different search term."


@router.post(
    "/search-citations",
    response_model=SearchCitationsResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": NoResultsResponse},
        500: {"model": ErrorResponse},
    },
)
async def search_citations_endpoint(
    payload: SearchCitationsRequest,
    service: CitationSearchService = Depends(get_search_service),
):
    try:
        outcome = await service.search(payload.query, user_id=payload.user_id)

    except QueryValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=str(e)).model_dump(exclude_none=True),
        )

    except CitationSearchError as e:
        logger.warning(f"No results for '{e.original_query}' (searched '{e.expanded_query}')")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=NoResultsResponse(
                error=NO_RESULTS_MESSAGE,
                query=e.original_query,
                expanded_query=e.expanded_query,
            ).model_dump(by_alias=True),
        )

    except Exception:
        logger.error("Error in search_citations_endpoint", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="Internal server error",
                details="Please check the server logs for more information",
            ).model_dump(),
        )

    return SearchCitationsResponse(
        query=outcome.query,
        expanded_query=outcome.expanded_query,
        results=outcome.results,
        total_found=outcome.total_found,
    )
