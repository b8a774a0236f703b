"""Inline span scanning: emphasis, strike, code, wikilinks, and links within one run of text"""

import logging
import re
from dataclasses import dataclass

from mdtree.core.models import InlineNode, Link, Mark, Marked, Text
from mdtree.core.utils.slug import slugify
from mdtree.exceptions import require_text


logger = logging.getLogger(__name__)

WIKILINK_PREFIX = "/workspace/pages/"

# Scan order doubles as the tie-break rank for matches of equal start and length.
# Single-character delimiters never pair with half of a doubled one.
INLINE_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r'\*\*(.+?)\*\*'), 'bold'),
    (re.compile(r'__(.+?)__'), 'bold'),
    (re.compile(r'(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)'), 'italic'),
    (re.compile(r'(?<!_)_(?!_)(.+?)(?<!_)_(?!_)'), 'italic'),
    (re.compile(r'~~(.+?)~~'), 'strike'),
    (re.compile(r'`(.+?)`'), 'code'),
    (re.compile(r'\[\[(.+?)\]\]'), 'wikilink'),
    (re.compile(r'\[(.+?)\]\((.+?)\)'), 'link'),
]


@dataclass(frozen=True)
class Span:
    """A matched inline construct and the source offsets it covers."""
    start: int
    end: int
    rank: int
    node: InlineNode


def wikilink_node(inner: str, prefix: str = WIKILINK_PREFIX) -> Link:
    """Build a Link for the inside of [[Page]] or [[Page|Display]]."""
    parts = inner.split('|')
    page = parts[0].strip()
    display = parts[1].strip() if len(parts) > 1 else ''
    return Link(text=display or page, href=prefix + slugify(page))


def _node_for(kind: str, match: re.Match, prefix: str) -> InlineNode:
    if kind == 'wikilink':
        return wikilink_node(match.group(1), prefix)
    if kind == 'link':
        return Link(text=match.group(1), href=match.group(2))
    return Marked(value=match.group(1), mark=Mark(kind))


def find_spans(line: str, wikilink_prefix: str = WIKILINK_PREFIX) -> list[Span]:
    """Collect every match of every syntax, unfiltered and unsorted."""
    spans = []
    for rank, (pattern, kind) in enumerate(INLINE_PATTERNS):
        for m in pattern.finditer(line):
            spans.append(Span(m.start(), m.end(), rank, _node_for(kind, m, wikilink_prefix)))
    return spans


def resolve_spans(spans: list[Span]) -> list[Span]:
    """Order spans by start offset and drop any that overlap an accepted one.

    At equal start the longer span wins, then the earlier syntax in
    INLINE_PATTERNS.
    """
    ordered = sorted(spans, key=lambda s: (s.start, s.start - s.end, s.rank))
    accepted: list[Span] = []
    cursor = 0
    for span in ordered:
        if span.start < cursor:
            logger.debug("Dropping inline span %d-%d overlapping accepted span ending at %d",
                          span.start, span.end, cursor)
            continue
        accepted.append(span)
        cursor = span.end
    return accepted


def scan_inline(line: str, wikilink_prefix: str = WIKILINK_PREFIX) -> list[InlineNode]:
    """Split a run of text into ordered, non-overlapping inline nodes.

    Text between matches is kept verbatim as Text nodes; an empty line yields [].
    """
    require_text(line, "line")
    if not line:
        return []

    nodes: list[InlineNode] = []
    cursor = 0
    for span in resolve_spans(find_spans(line, wikilink_prefix)):
        if span.start > cursor:
            nodes.append(Text(value=line[cursor:span.start]))
        nodes.append(span.node)
        cursor = span.end
    if cursor < len(line):
        nodes.append(Text(value=line[cursor:]))
    return nodes
