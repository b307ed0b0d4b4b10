# clients/crossref_client.py
import logging
from typing import Any, Dict, List, Optional

import aiohttp

logger = logging.getLogger(__name__)


async def search_crossref(
    query: str,
    *,
    base_url: str,
    mailto: str,
    rows: int = 10,
    timeout: float = 10.0,
    session: Optional[aiohttp.ClientSession] = None,
) -> List[Dict[str, Any]]:
    """
    Single GET against /works. Returns the raw `message.items`.

    The mailto in the User-Agent puts requests in CrossRef's polite pool;
    anonymous traffic is heavily throttled.
    """
    params = {"query": query, "rows": str(rows)}
    headers = {"User-Agent": f"citation-search-service (mailto:{mailto})"}

    url = f"{base_url.rstrip('/')}/works"
    client_timeout = aiohttp.ClientTimeout(total=timeout)

    own_session = session is None
    if own_session:
        session = aiohttp.ClientSession(timeout=client_timeout)
    try:
        async with session.get(url, params=params, headers=headers, timeout=client_timeout) as resp:
            if resp.status != 200:
                body = await resp.text()
                logger.error(f"CrossRef API error: {resp.status} {body[:200]}")
                return []
            data = await resp.json(content_type=None)
    finally:
        if own_session:
            await session.close()

    items = ((data or {}).get("message") or {}).get("items") or []
    if not items:
        logger.info("No results from CrossRef")
    return items
