# File: api/dependencies/pipeline.py
import logging
from typing import List, Optional

from fastapi import Request

from agents.arxiv_agent import ArxivAgent
from agents.crossref_agent import CrossRefAgent
from agents.provider_agent import ProviderAgent
from agents.semantic_scholar_agent import SemanticScholarAgent
from database.db import create_db_engine, create_session_factory, init_db
from services.citation_search_service import CitationSearchService
from services.query_expansion_service import QueryExpansionService
from services.search_history_service import SearchHistoryStore
from utils.settings import Settings

logger = logging.getLogger(__name__)


def build_provider_agents(settings: Settings) -> List[ProviderAgent]:
    agents: List[ProviderAgent] = [
        SemanticScholarAgent(
            base_url=settings.semantic_scholar_api_url,
            api_key=settings.semantic_scholar_api_key,
            limit=settings.provider_result_limit,
            timeout=settings.provider_timeout,
        ),
        CrossRefAgent(
            base_url=settings.crossref_api_url,
            mailto=settings.crossref_mailto,
            rows=settings.provider_result_limit,
            timeout=settings.provider_timeout,
        ),
    ]
    if settings.enable_arxiv:
        agents.append(ArxivAgent(
            base_url=settings.arxiv_api_url,
            max_results=settings.provider_result_limit,
            timeout=settings.provider_timeout,
        ))
    return agents


def build_history_store(settings: Settings) -> Optional[SearchHistoryStore]:
    if not settings.database_url:
        logger.info("DATABASE_URL not set, search history disabled")
        return None
    try:
        engine = create_db_engine(settings.database_url)
        init_db(engine)
    except Exception as e:
        logger.error(f"❌ Failed to initialize history database, history disabled: {e}", exc_info=True)
        return None
    return SearchHistoryStore(create_session_factory(engine))


def build_search_service(settings: Settings) -> CitationSearchService:
    return CitationSearchService(
        adapters=build_provider_agents(settings),
        expander=QueryExpansionService(
            api_key=settings.llm_api_key,
            base_url=settings.llm_base_url,
            model=settings.llm_model,
        ),
        history=build_history_store(settings),
        top_k=settings.top_k,
    )


def get_search_service(request: Request) -> CitationSearchService:
    return request.app.state.search_service
