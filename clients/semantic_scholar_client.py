# clients/semantic_scholar_client.py
import logging
from typing import Any, Dict, List, Optional

import aiohttp

logger = logging.getLogger(__name__)

S2_FIELDS = [
    "title",
    "authors",
    "year",
    "abstract",
    "url",
    "citationCount",
    "publicationDate",
    "externalIds",
]


async def search_semantic_scholar(
    query: str,
    *,
    base_url: str,
    api_key: Optional[str] = None,
    limit: int = 10,
    timeout: float = 10.0,
    session: Optional[aiohttp.ClientSession] = None,
) -> List[Dict[str, Any]]:
    """
    Single GET against /paper/search. Returns the raw `data` items.
    Non-2xx responses are logged and yield []; transport errors propagate.
    """
    params = {
        "query": query,
        "limit": str(limit),
        "fields": ",".join(S2_FIELDS),
    }
    headers = {"User-Agent": "citation-search-service"}
    if api_key:
        headers["x-api-key"] = api_key

    url = f"{base_url.rstrip('/')}/paper/search"
    client_timeout = aiohttp.ClientTimeout(total=timeout)

    own_session = session is None
    if own_session:
        session = aiohttp.ClientSession(timeout=client_timeout)
    try:
        async with session.get(url, params=params, headers=headers, timeout=client_timeout) as resp:
            if resp.status != 200:
                body = await resp.text()
                logger.error(f"Semantic Scholar API error: {resp.status} {body[:200]}")
                return []
            data = await resp.json(content_type=None)
    finally:
        if own_session:
            await session.close()

    results = (data or {}).get("data") or []
    if not results:
        logger.info("No results from Semantic Scholar")
    return results
