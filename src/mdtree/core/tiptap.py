"""Conversion between the document tree and Tiptap editor JSON

Tiptap documents look like ``{"type": "doc", "content": [...]}``; formatting
lives in a ``marks`` list on text nodes and block attributes in ``attrs``.
"""

import logging
from typing import Any

from mdtree.core.models import (
    BlockQuote, BulletList, CodeBlock, DocumentNode, Heading, HorizontalRule,
    InlineNode, Link, ListItem, Mark, Marked, OrderedList, Paragraph, Table, Text,
)
from mdtree.exceptions import InvalidInputError


logger = logging.getLogger(__name__)


# --- tree -> tiptap ---

def _text_node(text: str, marks: list[dict] | None = None) -> dict[str, Any]:
    node: dict[str, Any] = {"type": "text", "text": text}
    if marks:
        node["marks"] = marks
    return node


def inline_to_tiptap(children: list[InlineNode]) -> list[dict[str, Any]]:
    """Convert inline nodes to Tiptap text nodes; empty runs are omitted."""
    out = []
    for child in children:
        if isinstance(child, Text):
            if child.value:
                out.append(_text_node(child.value))
        elif isinstance(child, Marked):
            if child.value:
                out.append(_text_node(child.value, [{"type": child.mark.value}]))
        elif isinstance(child, Link):
            if child.text:
                out.append(_text_node(child.text, [{"type": "link", "attrs": {"href": child.href}}]))
        else:
            raise TypeError(f"Unsupported inline node: {type(child).__name__}")
    return out


def _paragraph(children: list[InlineNode]) -> dict[str, Any]:
    content = inline_to_tiptap(children)
    return {"type": "paragraph", "content": content} if content else {"type": "paragraph"}


def _list(kind: str, items: list[ListItem]) -> dict[str, Any]:
    return {
        "type": kind,
        "content": [{"type": "listItem", "content": [_paragraph(item.children)]} for item in items],
    }


def node_to_tiptap(node: DocumentNode) -> dict[str, Any]:
    if isinstance(node, Heading):
        out = {"type": "heading", "attrs": {"level": node.level}}
        if content := inline_to_tiptap(node.children):
            out["content"] = content
        return out
    if isinstance(node, Paragraph):
        return _paragraph(node.children)
    if isinstance(node, CodeBlock):
        out = {"type": "codeBlock", "attrs": {"language": node.language} if node.language else {}}
        if node.code:
            out["content"] = [_text_node(node.code)]
        return out
    if isinstance(node, BlockQuote):
        return {"type": "blockquote", "content": [_paragraph(node.children)]}
    if isinstance(node, BulletList):
        return _list("bulletList", node.items)
    if isinstance(node, OrderedList):
        return _list("orderedList", node.items)
    if isinstance(node, HorizontalRule):
        return {"type": "horizontalRule"}
    if isinstance(node, Table):
        return node.raw if isinstance(node.raw, dict) else {"type": "table"}
    raise TypeError(f"Unsupported document node: {type(node).__name__}")


def to_tiptap(nodes: list[DocumentNode]) -> dict[str, Any]:
    """Wrap converted block nodes in a Tiptap doc node."""
    return {"type": "doc", "content": [node_to_tiptap(n) for n in nodes]}


# --- tiptap -> tree ---

_SUPPORTED_MARKS = {m.value for m in Mark}


def _text_to_inline(node: dict[str, Any]) -> InlineNode | None:
    """Map one Tiptap text node to an inline node, collapsing stacked marks to one."""
    text = node.get("text") or ""
    if not text:
        return None
    marks = [m for m in node.get("marks") or [] if isinstance(m, dict)]
    for mark in marks:
        if mark.get("type") == "link":
            href = (mark.get("attrs") or {}).get("href") or ""
            return Link(text=text, href=href)
    supported = [m["type"] for m in marks if m.get("type") in _SUPPORTED_MARKS]
    if len(marks) > 1:
        logger.debug("Collapsing %d marks on %r to one", len(marks), text)
    if supported:
        return Marked(value=text, mark=Mark(supported[0]))
    return Text(value=text)


def inline_from_tiptap(content: list[dict[str, Any]] | None) -> list[InlineNode]:
    out: list[InlineNode] = []
    for node in content or []:
        kind = node.get("type")
        if kind == "text":
            inline = _text_to_inline(node)
            if inline is not None:
                out.append(inline)
        elif kind == "hardBreak":
            out.append(Text(value=" "))
        else:
            logger.warning("Skipping unsupported inline node type %r", kind)
    return out


def _joined_paragraphs(content: list[dict[str, Any]] | None) -> list[InlineNode]:
    """Merge the inline content of child paragraphs into one run separated by spaces."""
    merged: list[InlineNode] = []
    for child in content or []:
        if child.get("type") != "paragraph":
            logger.warning("Skipping unsupported nested node type %r", child.get("type"))
            continue
        if merged:
            merged.append(Text(value=" "))
        merged.extend(inline_from_tiptap(child.get("content")))
    return merged


def _items(node: dict[str, Any]) -> list[ListItem]:
    return [
        ListItem(children=_joined_paragraphs(item.get("content")))
        for item in node.get("content") or []
        if item.get("type") == "listItem"
    ]


def node_from_tiptap(node: dict[str, Any]) -> DocumentNode | None:
    """Convert one Tiptap block node; returns None for unsupported types."""
    kind = node.get("type")
    attrs = node.get("attrs") or {}
    if kind == "heading":
        level = min(max(int(attrs.get("level") or 1), 1), 6)
        return Heading(level=level, children=inline_from_tiptap(node.get("content")))
    if kind == "paragraph":
        return Paragraph(children=inline_from_tiptap(node.get("content")))
    if kind == "codeBlock":
        code = "".join(c.get("text") or "" for c in node.get("content") or [])
        return CodeBlock(language=attrs.get("language") or None, code=code)
    if kind == "blockquote":
        return BlockQuote(children=_joined_paragraphs(node.get("content")))
    if kind == "bulletList":
        return BulletList(items=_items(node))
    if kind == "orderedList":
        return OrderedList(items=_items(node))
    if kind == "horizontalRule":
        return HorizontalRule()
    if kind == "table":
        return Table(raw=node)
    logger.warning("Skipping unsupported block node type %r", kind)
    return None


def from_tiptap(doc: dict[str, Any]) -> list[DocumentNode]:
    """Convert a Tiptap doc into a list of block nodes."""
    if not isinstance(doc, dict):
        raise InvalidInputError(f"Tiptap document must be a dict, got {type(doc).__name__}")
    nodes = (node_from_tiptap(n) for n in doc.get("content") or [] if isinstance(n, dict))
    return [n for n in nodes if n is not None]
