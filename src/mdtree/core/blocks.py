"""Line-oriented block parser producing the document tree"""

import logging
import re

from mdtree.core.inline import WIKILINK_PREFIX, scan_inline
from mdtree.core.models import (
    BlockQuote, BulletList, CodeBlock, DocumentNode, Heading,
    HorizontalRule, ListItem, OrderedList, Paragraph,
)
from mdtree.exceptions import require_text


logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r'^(#{1,6})\s+(.+)$')
BULLET_RE = re.compile(r'^[-*+]\s+')
ORDERED_RE = re.compile(r'^\d+\.\s+')
HR_RE = re.compile(r'^(-{3,}|\*{3,}|_{3,})$')
FENCE = '```'
QUOTE_PREFIX = '> '


def _parse_fence(lines: list[str], i: int) -> tuple[CodeBlock, int]:
    """Collect a fenced code block opened at lines[i]; unterminated fences run to end of input."""
    language = lines[i][len(FENCE):].strip() or None
    start = i
    i += 1
    code_lines = []
    while i < len(lines) and not lines[i].startswith(FENCE):
        code_lines.append(lines[i])
        i += 1
    if i < len(lines):
        i += 1  # closing fence
    else:
        logger.debug("Unterminated code fence opened at line %d", start + 1)
    return CodeBlock(language=language, code='\n'.join(code_lines)), i


def _parse_quote(lines: list[str], i: int, prefix: str) -> tuple[BlockQuote, int]:
    """Join consecutive quote lines into one inline run. An all-empty quote has no children."""
    quoted = []
    while i < len(lines) and lines[i].startswith(QUOTE_PREFIX):
        quoted.append(lines[i][len(QUOTE_PREFIX):])
        i += 1
    return BlockQuote(children=scan_inline(' '.join(quoted), prefix)), i


def _parse_list(lines: list[str], i: int, marker: re.Pattern, prefix: str) -> tuple[list[ListItem], int]:
    """Consume consecutive lines matching marker, stripping it from each item."""
    items = []
    while i < len(lines) and marker.match(lines[i]):
        items.append(ListItem(children=scan_inline(marker.sub('', lines[i], count=1), prefix)))
        i += 1
    return items, i


def parse_blocks(body: str, wikilink_prefix: str = WIKILINK_PREFIX) -> list[DocumentNode]:
    """Parse a Markdown body into an ordered list of block nodes.

    Single forward pass; the first matching rule claims each line:
    blank, heading, fence, quote, bullet list, ordered list, rule, paragraph.
    """
    require_text(body, "body")
    lines = body.replace('\r\n', '\n').split('\n')
    nodes: list[DocumentNode] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if not line.strip():
            i += 1
            continue

        if m := HEADING_RE.match(line):
            nodes.append(Heading(level=len(m.group(1)), children=scan_inline(m.group(2), wikilink_prefix)))
            i += 1
            continue

        if line.startswith(FENCE):
            block, i = _parse_fence(lines, i)
            nodes.append(block)
            continue

        if line.startswith(QUOTE_PREFIX):
            quote, i = _parse_quote(lines, i, wikilink_prefix)
            if quote.children:
                nodes.append(quote)
            continue

        if BULLET_RE.match(line):
            items, i = _parse_list(lines, i, BULLET_RE, wikilink_prefix)
            nodes.append(BulletList(items=items))
            continue

        if ORDERED_RE.match(line):
            items, i = _parse_list(lines, i, ORDERED_RE, wikilink_prefix)
            nodes.append(OrderedList(items=items))
            continue

        if HR_RE.match(line):
            nodes.append(HorizontalRule())
            i += 1
            continue

        nodes.append(Paragraph(children=scan_inline(line, wikilink_prefix)))
        i += 1

    return nodes
