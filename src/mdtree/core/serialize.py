"""Document tree to Markdown serialization"""

from mdtree.core.models import (
    BlockQuote, BulletList, CodeBlock, DocumentNode, Heading, HorizontalRule,
    InlineNode, Link, Mark, Marked, OrderedList, Paragraph, Table, Text,
)


TABLE_PLACEHOLDER = "[Table content - not yet fully supported]"

MARK_SYNTAX: dict[Mark, str] = {
    Mark.bold:   "**",
    Mark.italic: "*",
    Mark.strike: "~~",
    Mark.code:   "`",
}


def inline_to_markdown(children: list[InlineNode]) -> str:
    """Render inline nodes back to Markdown, wrapping each marked run in its delimiter.

    An italic run containing `*` is wrapped in `_` so it reads back as one run.
    """
    parts = []
    for node in children:
        if isinstance(node, Text):
            parts.append(node.value)
        elif isinstance(node, Marked):
            delim = MARK_SYNTAX[node.mark]
            if node.mark is Mark.italic and '*' in node.value and '_' not in node.value:
                delim = '_'
            parts.append(f"{delim}{node.value}{delim}")
        elif isinstance(node, Link):
            parts.append(f"[{node.text}]({node.href})")
        else:
            raise TypeError(f"Unsupported inline node: {type(node).__name__}")
    return ''.join(parts)


def node_to_markdown(node: DocumentNode) -> str:
    """Render a single block node; may return '' for nodes with no content."""
    if isinstance(node, Heading):
        return '#' * node.level + ' ' + inline_to_markdown(node.children)
    if isinstance(node, Paragraph):
        return inline_to_markdown(node.children)
    if isinstance(node, CodeBlock):
        return f"```{node.language or ''}\n{node.code}\n```"
    if isinstance(node, BlockQuote):
        text = inline_to_markdown(node.children)
        return '\n'.join('> ' + line for line in text.split('\n')) if text else ''
    if isinstance(node, BulletList):
        return '\n'.join('- ' + inline_to_markdown(item.children) for item in node.items)
    if isinstance(node, OrderedList):
        return '\n'.join(
            f"{n}. {inline_to_markdown(item.children)}" for n, item in enumerate(node.items, start=1)
        )
    if isinstance(node, HorizontalRule):
        return '---'
    if isinstance(node, Table):
        return TABLE_PLACEHOLDER
    raise TypeError(f"Unsupported document node: {type(node).__name__}")


def serialize(nodes: list[DocumentNode]) -> str:
    """Render a document tree as Markdown, one blank line between top-level blocks."""
    rendered = (node_to_markdown(node) for node in nodes)
    return '\n\n'.join(md for md in rendered if md)
