#File: services/data_normalization_service.py
import logging
import re
from datetime import datetime
from typing import List, Any, Optional

from state.citation_schema import UNKNOWN_AUTHORS
from utils.sanitization import clean_text

logger = logging.getLogger(__name__)


def normalize_date(date_str: Any) -> Optional[int]:
    """
    Extracts a 4-digit year from various date formats.
    Supports: YYYY, YYYY-MM-DD, ISO Strings.
    Returns: Year as Integer or None.
    """
    if not date_str:
        return None

    if isinstance(date_str, int) and not isinstance(date_str, bool):
        return date_str

    date_str = str(date_str).strip()

    # 1. Exact 4-digit year
    if re.match(r"^\d{4}$", date_str):
        return int(date_str)

    # 2. ISO / standard date starting with YYYY
    match = re.search(r"(\d{4})-\d{2}-\d{2}", date_str)
    if match:
        return int(match.group(1))

    # 3. Try standard datetime parsing
    try:
        # arXiv returns '2023-10-15T12:00:00Z'
        dt = datetime.fromisoformat(date_str.replace("Z", "+00:00"))
        return dt.year
    except ValueError:
        pass

    # 4. Fallback: any plausible year (1900 - 2099) on a word boundary
    match = re.search(r"\b(?:19|20)\d{2}\b", date_str)
    if match:
        return int(match.group(0))

    return None


def normalize_authors(authors: Any) -> List[str]:
    """
    Standardizes author list to simple list of strings.
    Handles: strings, list of strings, list of dicts.
    """
    normalized = []

    if not authors:
        return []

    if isinstance(authors, str):
        # Handle comma-separated list of authors
        return [a.strip() for a in authors.split(",") if a.strip()]

    if isinstance(authors, list):
        for a in authors:
            if isinstance(a, str):
                name = clean_text(a)
            elif isinstance(a, dict):
                # {'name': '...'} (Semantic Scholar) or {'given', 'family'} (CrossRef)
                name = a.get("name") or f"{a.get('given') or ''} {a.get('family') or ''}"
                name = clean_text(name)
            else:
                continue
            if name:
                normalized.append(name)

    return normalized


def join_authors(authors: Any) -> str:
    """Display form used on citations: 'A, B, C' or the Unknown sentinel."""
    names = normalize_authors(authors)
    return ", ".join(names) if names else UNKNOWN_AUTHORS


def coerce_citation_count(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Ignoring non-numeric citation count: {value!r}")
        return 0
    return max(count, 0)
