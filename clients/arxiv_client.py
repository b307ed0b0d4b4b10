# clients/arxiv_client.py
import logging
from typing import Any, Dict, List, Optional

import aiohttp
from defusedxml import ElementTree as ET

logger = logging.getLogger(__name__)

ATOM_NS = "{http://www.w3.org/2005/Atom}"
ARXIV_NS = "{http://arxiv.org/schemas/atom}"


def parse_arxiv_feed(xml_text: str) -> List[Dict[str, Any]]:
    """Atom feed -> list of plain dict entries (raises on malformed XML)."""
    root = ET.fromstring(xml_text)

    papers = []
    for entry in root.findall(f"{ATOM_NS}entry"):
        id_elem = entry.find(f"{ATOM_NS}id")
        if id_elem is None or not id_elem.text:
            continue

        title_elem = entry.find(f"{ATOM_NS}title")
        summary_elem = entry.find(f"{ATOM_NS}summary")
        published = entry.find(f"{ATOM_NS}published")
        doi_elem = entry.find(f"{ARXIV_NS}doi")

        authors = [
            name.text
            for a in entry.findall(f"{ATOM_NS}author")
            if (name := a.find(f"{ATOM_NS}name")) is not None and name.text
        ]

        papers.append({
            "id": id_elem.text.strip(),
            "title": title_elem.text if title_elem is not None else None,
            "summary": summary_elem.text if summary_elem is not None else None,
            "authors": authors,
            "published": published.text if published is not None else None,
            "doi": doi_elem.text if doi_elem is not None else None,
        })

    return papers


async def search_arxiv(
    query: str,
    *,
    base_url: str,
    max_results: int = 10,
    timeout: float = 10.0,
    session: Optional[aiohttp.ClientSession] = None,
) -> List[Dict[str, Any]]:
    params = {
        "search_query": f"all:{query}",
        "start": "0",
        "max_results": str(max_results),
    }
    client_timeout = aiohttp.ClientTimeout(total=timeout)

    own_session = session is None
    if own_session:
        session = aiohttp.ClientSession(timeout=client_timeout)
    try:
        async with session.get(base_url, params=params, timeout=client_timeout) as resp:
            if resp.status != 200:
                body = await resp.text()
                logger.error(f"arXiv API error: {resp.status} {body[:200]}")
                return []
            text = await resp.text()
    finally:
        if own_session:
            await session.close()

    papers = parse_arxiv_feed(text)
    if not papers:
        logger.info("No results from arXiv")
    return papers
