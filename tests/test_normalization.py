# tests/test_normalization.py
import pytest

from services.data_normalization_service import (
    coerce_citation_count,
    join_authors,
    normalize_date,
)
from utils.id_normalization import normalize_doi, normalize_title_key
from utils.sanitization import strip_markup


@pytest.mark.parametrize("raw,expected", [
    ("2019", 2019),
    ("2019-07-01", 2019),
    ("2017-06-12T17:57:34Z", 2017),
    ("Published in Spring 2008", 2008),
    (2021, 2021),
    (None, None),
    ("", None),
    ("no date", None),
])
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


def test_join_authors():
    assert join_authors([{"name": "A"}, {"given": "B", "family": "C"}, "D"]) == "A, B C, D"
    assert join_authors([{"given": "", "family": ""}]) == "Unknown"
    assert join_authors(None) == "Unknown"


@pytest.mark.parametrize("raw,expected", [
    ("10.1000/ABC", "10.1000/abc"),
    ("https://doi.org/10.1000/abc", "10.1000/abc"),
    ("doi:10.1000/abc ", "10.1000/abc"),
    ("   ", None),
    (None, None),
])
def test_normalize_doi(raw, expected):
    assert normalize_doi(raw) == expected


def test_normalize_title_key():
    assert normalize_title_key("  Deep \t  LEARNING ") == "deep learning"


def test_coerce_citation_count():
    assert coerce_citation_count("12") == 12
    assert coerce_citation_count(None) == 0
    assert coerce_citation_count("many") == 0
    assert coerce_citation_count(-1) == 0
    assert coerce_citation_count(True) == 0
    assert coerce_citation_count(float("inf")) == 0
    assert coerce_citation_count(1e400) == 0


def test_strip_markup():
    assert strip_markup("<jats:p>Hello <jats:italic>world</jats:italic></jats:p>") == "Hello world"
    assert strip_markup(None) == ""
