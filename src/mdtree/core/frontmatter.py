"""Restricted front-matter extraction and rendering

Only the header shapes found in exported vault notes are understood:
``key: value`` lines whose value is a plain or quoted string, a flow-style
``[a, b]`` array, or a ``true``/``false`` boolean. Anything else degrades to
"no metadata" instead of raising.
"""

import logging

import yaml

from mdtree.core.models import FrontMatter, Scalar
from mdtree.exceptions import require_text


logger = logging.getLogger(__name__)

DELIMITER = '---'


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def _unquote(value: str) -> tuple[str, bool]:
    """Strip one layer of matching single or double quotes. Returns (value, was_quoted).

    Inside single quotes a doubled `''` is the YAML escape for one quote.
    """
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        inner = value[1:-1]
        if value[0] == "'":
            inner = inner.replace("''", "'")
        return inner, True
    return value, False


def parse_value(value: str) -> Scalar:
    """Convert one trimmed header value to a string, bool, or list of strings."""
    unquoted, quoted = _unquote(value)
    if quoted:
        return unquoted
    if value.startswith('[') and value.endswith(']'):
        items = (_unquote(part.strip())[0] for part in value[1:-1].split(','))
        return [item for item in items if item]
    if value == 'true':
        return True
    if value == 'false':
        return False
    return value


def parse_header(text: str) -> FrontMatter:
    """Parse the lines between the delimiters into a FrontMatter mapping."""
    frontmatter: FrontMatter = {}
    for line in text.splitlines():
        if line.lstrip().startswith('#'):
            continue
        key, sep, value = line.partition(':')
        key = key.strip()
        if not sep or not key:
            if line.strip():
                logger.debug("Skipping front matter line without key: %r", line)
            continue
        frontmatter[key] = parse_value(value.strip())
    return frontmatter


def extract(raw: str) -> tuple[FrontMatter, str]:
    """Split raw file text into (frontmatter, body).

    Missing or unclosed front matter yields ({}, raw). The body is returned
    exactly as it appears after the closing delimiter line.
    """
    require_text(raw, "raw")
    lines = raw.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return {}, raw

    for i in range(1, len(lines)):
        if _is_delimiter(lines[i]):
            header = ''.join(lines[1:i])
            body = ''.join(lines[i + 1:])
            return parse_header(header), body

    logger.debug("Front matter opened but never closed; treating whole input as body")
    return {}, raw


def render_frontmatter(frontmatter: FrontMatter) -> str:
    """Return a '---' delimited YAML header for frontmatter, or '' when empty.

    Lists are written in flow style so the header reads back through extract().
    """
    if not frontmatter:
        return ''
    header = yaml.safe_dump(
        dict(frontmatter),
        default_flow_style=None,
        allow_unicode=True,
        sort_keys=False,
        width=10_000,
    )
    return f"{DELIMITER}\n{header}{DELIMITER}\n"
