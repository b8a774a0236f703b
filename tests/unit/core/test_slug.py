"""Unit tests for core/utils/slug.py"""

import pytest

from mdtree.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Go Basics", "go-basics"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-ch-rs"),
    ("Café Notes", "caf-notes"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify lowercases and collapses every run outside [a-z0-9] to one hyphen."""
    assert slugify(text) == expected


def test_slugify_strips_leading_trailing_hyphens():
    assert slugify("!leading?") == "leading"
