"""Wikilink and hashtag extraction for note cataloguing"""

import re

from mdtree.core.models import LinkSet, Scalar
from mdtree.exceptions import require_text


WIKILINK_RE = re.compile(r'\[\[([^\]]+)\]\]')
TAG_RE = re.compile(r'#([A-Za-z0-9_-]+)')


def extract_wikilinks(body: str) -> set[str]:
    """Return link targets of every [[Page]] / [[Page|Display]] in body."""
    targets = (m.group(1).split('|')[0].strip() for m in WIKILINK_RE.finditer(body))
    return {t for t in targets if t}


def _frontmatter_tags(tags: Scalar | None) -> set[str]:
    """Normalize a front matter `tags` value: list, comma-separated string, or absent.

    Any other shape, such as a bare `true`, contributes no tags.
    """
    if not tags or not isinstance(tags, (list, str)):
        return set()
    if isinstance(tags, str):
        tags = tags.split(',')
    return {t.strip() for t in tags if isinstance(t, str) and t.strip()}


def extract_links(body: str, frontmatter_tags: Scalar | None = None) -> LinkSet:
    """Collect wikilink targets and tags from body text.

    Tags are every #word in the body unioned with frontmatter_tags, which the
    caller passes from its already-extracted front matter.
    """
    require_text(body, "body")
    tags = {m.group(1) for m in TAG_RE.finditer(body)}
    return LinkSet(
        wikilinks=extract_wikilinks(body),
        tags=tags | _frontmatter_tags(frontmatter_tags),
    )
