# utils/sanitization.py
from typing import Optional
import re

CONTROL_CHARS = r"[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f-\x9f]"
MARKUP_TAGS = r"<[^>]+>"


def clean_text(value: Optional[str]) -> str:
    if value is None:
        return ""

    text = re.sub(CONTROL_CHARS, "", value)
    text = text.strip()

    text = re.sub(r"\s+", " ", text)

    return text


def strip_markup(value: Optional[str]) -> str:
    """
    Drops XML/JATS tags (CrossRef abstracts arrive as <jats:p>...</jats:p>).
    """
    if not value:
        return ""
    return clean_text(re.sub(MARKUP_TAGS, " ", value))
