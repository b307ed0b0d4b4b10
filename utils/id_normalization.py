# utils/id_normalization.py
from typing import Optional
import re

DOI_PREFIXES = (
    "https://doi.org/",
    "http://doi.org/",
    "https://dx.doi.org/",
    "http://dx.doi.org/",
    "doi:",
)


def normalize_doi(raw_doi: Optional[str]) -> Optional[str]:
    """
    Bare, lower-cased DOI ("10.1000/xyz") or None.
    DOIs are case-insensitive, so providers disagreeing on case still match.
    """
    if not raw_doi or not isinstance(raw_doi, str):
        return None

    doi = raw_doi.strip()
    lowered = doi.lower()
    for prefix in DOI_PREFIXES:
        if lowered.startswith(prefix):
            doi = doi[len(prefix):]
            break

    doi = doi.strip().lower()
    return doi or None


def normalize_title_key(title: Optional[str]) -> str:
    # lower + trim, interior whitespace runs collapsed to one space
    return re.sub(r"\s+", " ", (title or "").strip().lower())
