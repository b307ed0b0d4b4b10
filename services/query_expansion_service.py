# File: services/query_expansion_service.py
import logging
from typing import Optional

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

EXPANSION_SYSTEM_PROMPT = (
    "You are an academic research assistant. Expand the user's statement into a "
    "precise academic search query. Extract key concepts, add relevant synonyms, "
    "and identify the main research topic. Return ONLY the expanded search query, "
    "no explanation."
)


class QueryExpansionService:
    """
    Rewrites a free-text statement into an academic search query through an
    OpenAI-compatible chat completions endpoint.

    `expand` never raises. Without an API key, or on any error, the input is
    returned unchanged.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        model: str = "google/gemini-2.5-flash",
        timeout: float = 30.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key
        self.model = model
        self._client = client
        if self._client is None and api_key:
            # single attempt, no client-side retries
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=0,
            )

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def expand(self, text: str) -> str:
        if not self.enabled:
            logger.info("LLM API key not configured, using original query")
            return text

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": EXPANSION_SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": f'Expand this statement into an academic search query: "{text}"',
                    },
                ],
            )
        except Exception as e:
            logger.error(f"Query expansion failed, using original query: {e}")
            return text

        if not response.choices or not response.choices[0].message.content:
            logger.warning("LLM returned empty expansion, using original query")
            return text

        expanded = response.choices[0].message.content.strip()
        if not expanded:
            return text

        logger.info(f"✨ Expanded query: {expanded}")
        return expanded
