# api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies.pipeline import build_search_service
from api.routers import citations, health
from utils.settings import Settings, load_environment

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        env = load_environment()
        settings = Settings.from_env()
        logger.info(f"🔧 Loaded environment: {env}")

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Starting citation search service")
        if not hasattr(app.state, "search_service"):
            app.state.search_service = build_search_service(settings)
        yield
        logger.info("🛑 Shutting down citation search service")

    app = FastAPI(
        title="Citation Search API",
        version="1.0.0",
        description="Multi-provider academic citation search with deduplication and ranking.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request payload: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Query is required"},
        )

    app.include_router(health.router)
    app.include_router(citations.router, tags=["Citations"])
    return app


app = create_app()
