# utils/settings.py
"""
Application configuration.

Values are read from the environment once, at start-up, and handed to the
components that need them. Nothing below the API layer calls os.getenv.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_SEMANTIC_SCHOLAR_URL = "https://api.semanticscholar.org/graph/v1"
DEFAULT_CROSSREF_URL = "https://api.crossref.org"
DEFAULT_ARXIV_URL = "https://export.arxiv.org/api/query"
DEFAULT_LLM_BASE_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_LLM_MODEL = "google/gemini-2.5-flash"


def load_environment() -> str:
    env = os.getenv("APP_ENV", "local")
    if env == "local":
        load_dotenv(".env.local")
    else:
        load_dotenv(".env")
    return env


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _get_optional(name: str) -> Optional[str]:
    return (os.getenv(name) or "").strip() or None


def _get_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name, "")
    values = [v.strip() for v in raw.split(",") if v.strip()]
    return values or list(default)


@dataclass
class Settings:
    """
    Central configuration for the citation search service.

    Attributes:
        semantic_scholar_api_key: Optional key sent as x-api-key.
        crossref_mailto: Contact address for CrossRef's polite pool.
        enable_arxiv: Adds arXiv as a third provider.
        provider_timeout: Per-request transport timeout, seconds.
        llm_api_key: Enables query expansion when set.
        database_url: Enables search history when set.
    """

    semantic_scholar_api_key: Optional[str] = None
    semantic_scholar_api_url: str = DEFAULT_SEMANTIC_SCHOLAR_URL
    crossref_api_url: str = DEFAULT_CROSSREF_URL
    crossref_mailto: str = "citations@example.com"
    arxiv_api_url: str = DEFAULT_ARXIV_URL
    enable_arxiv: bool = False
    provider_timeout: float = 10.0
    provider_result_limit: int = 10

    llm_api_key: Optional[str] = None
    llm_base_url: str = DEFAULT_LLM_BASE_URL
    llm_model: str = DEFAULT_LLM_MODEL

    database_url: Optional[str] = None

    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    top_k: int = 10

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            semantic_scholar_api_key=_get_optional("SEMANTIC_SCHOLAR_API_KEY"),
            semantic_scholar_api_url=os.getenv("SEMANTIC_SCHOLAR_API_URL", DEFAULT_SEMANTIC_SCHOLAR_URL),
            crossref_api_url=os.getenv("CROSSREF_API_URL", DEFAULT_CROSSREF_URL),
            crossref_mailto=os.getenv("CROSSREF_MAILTO", "citations@example.com"),
            arxiv_api_url=os.getenv("ARXIV_API_URL", DEFAULT_ARXIV_URL),
            enable_arxiv=_get_bool("ENABLE_ARXIV"),
            provider_timeout=float(os.getenv("PROVIDER_TIMEOUT", "10")),
            provider_result_limit=int(os.getenv("PROVIDER_RESULT_LIMIT", "10")),
            llm_api_key=_get_optional("LLM_API_KEY"),
            llm_base_url=os.getenv("LLM_BASE_URL", DEFAULT_LLM_BASE_URL),
            llm_model=os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL),
            database_url=_get_optional("DATABASE_URL"),
            allowed_origins=_get_list("ALLOWED_ORIGINS", ["*"]),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            top_k=int(os.getenv("TOP_K", "10")),
        )
