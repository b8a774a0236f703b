"""Slug generation for wikilink targets and note identifiers"""

import re


_NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """Lowercase text, collapse every run outside [a-z0-9] to '-', strip edge hyphens."""
    return _NON_ALNUM_RE.sub('-', text.lower()).strip('-')
