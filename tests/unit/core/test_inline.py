"""Unit tests for core/inline.py"""

import pytest

from mdtree.core.inline import find_spans, resolve_spans, scan_inline, wikilink_node
from mdtree.core.models import Link, Mark, Marked, Text
from mdtree.exceptions import InvalidInputError


def _plain(nodes) -> str:
    """Concatenate node text with mark syntax stripped."""
    return "".join(n.text if isinstance(n, Link) else n.value for n in nodes)


@pytest.mark.parametrize("line", [
    "Nothing special here.",
    "Price is 5 * 3 = 15",
    "unbalanced [bracket and `tick",
    "   ",
])
def test_plain_line_is_single_text(line):
    """A line with no complete inline syntax is returned as one Text node."""
    assert scan_inline(line) == [Text(value=line)]


def test_empty_line():
    assert scan_inline("") == []


@pytest.mark.parametrize("line,mark,value", [
    ("**bold**",     Mark.bold,   "bold"),
    ("__bold__",     Mark.bold,   "bold"),
    ("*italic*",     Mark.italic, "italic"),
    ("_italic_",     Mark.italic, "italic"),
    ("~~gone~~",     Mark.strike, "gone"),
    ("`x = 1`",      Mark.code,   "x = 1"),
])
def test_single_mark(line, mark, value):
    """Each delimiter pair maps to its mark."""
    assert scan_inline(line) == [Marked(value=value, mark=mark)]


def test_wikilink_with_display_text():
    assert scan_inline("See [[Go Basics|this]]") == [
        Text(value="See "),
        Link(text="this", href="/workspace/pages/go-basics"),
    ]


def test_wikilink_without_display_text():
    assert scan_inline("[[Page A]]") == [Link(text="Page A", href="/workspace/pages/page-a")]


def test_wikilink_custom_prefix():
    assert scan_inline("[[Page A]]", wikilink_prefix="/notes/") == [
        Link(text="Page A", href="/notes/page-a"),
    ]


def test_markdown_link():
    assert scan_inline("go [home](https://example.com) now") == [
        Text(value="go "),
        Link(text="home", href="https://example.com"),
        Text(value=" now"),
    ]


def test_mixed_spans_in_order():
    """Spans from different syntaxes are merged by start offset with gaps kept verbatim."""
    nodes = scan_inline("a `code` b **bold** c ~~x~~")
    assert nodes == [
        Text(value="a "),
        Marked(value="code", mark=Mark.code),
        Text(value=" b "),
        Marked(value="bold", mark=Mark.bold),
        Text(value=" c "),
        Marked(value="x", mark=Mark.strike),
    ]


def test_bold_is_not_read_as_italic():
    assert scan_inline("Hi **there**") == [Text(value="Hi "), Marked(value="there", mark=Mark.bold)]


def test_bold_followed_by_italic():
    """A doubled delimiter never closes a single-delimiter span."""
    assert scan_inline("**bold** and *italic*") == [
        Marked(value="bold", mark=Mark.bold),
        Text(value=" and "),
        Marked(value="italic", mark=Mark.italic),
    ]
    assert scan_inline("__a__ _b_") == [
        Marked(value="a", mark=Mark.bold),
        Text(value=" "),
        Marked(value="b", mark=Mark.italic),
    ]


def test_longer_span_wins_at_same_start():
    """At equal start the longer match is kept: the link outlasts the wikilink."""
    assert scan_inline("[[A]](u)") == [Link(text="[A]", href="u")]


def test_outer_span_wins_over_nested_span():
    """An earlier-starting span swallows any span that starts inside it."""
    assert scan_inline("**[[link]]**") == [Marked(value="[[link]]", mark=Mark.bold)]


def test_code_span_protects_contents():
    assert scan_inline("`a*b*c`") == [Marked(value="a*b*c", mark=Mark.code)]


@pytest.mark.parametrize("line", [
    "**[[link]]** and *it* `c*o*de` [t](u) _x_ ~~s~~",
    "a*b_c*d_e",
    "[[A|B]] [x](y) **z** __w__",
    "snake_case_name and *emph*",
])
def test_spans_do_not_overlap(line):
    """Resolved spans are ordered and each starts at or after the previous end."""
    spans = resolve_spans(find_spans(line))
    for prev, cur in zip(spans, spans[1:]):
        assert cur.start >= prev.end


@pytest.mark.parametrize("line,expected", [
    ("x **b** y *i* z",                  "x b y i z"),
    ("plain `code` _it_ end",            "plain code it end"),
    ("a*b_c*d_e",                        "ab_cd_e"),
    ("See [[Go Basics|this]] and ~~s~~", "See this and s"),
])
def test_plain_text_reconstruction(line, expected):
    """Node text concatenation equals the source with only delimiters removed."""
    assert _plain(scan_inline(line)) == expected


def test_wikilink_node_takes_first_pipe_segment():
    assert wikilink_node(" Page | Shown | extra ") == Link(text="Shown", href="/workspace/pages/page")


def test_scan_inline_rejects_none():
    with pytest.raises(InvalidInputError):
        scan_inline(None)
