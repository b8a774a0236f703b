"""Document tree, inline node, and metadata models for the conversion pipeline"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class Mark(str, Enum):
    """The single formatting mark a Marked run carries."""
    bold = "bold"
    italic = "italic"
    strike = "strike"
    code = "code"


# --- inline nodes ---

class Text(BaseModel):
    """Unmarked text."""
    type: Literal["text"] = "text"
    value: str


class Marked(BaseModel):
    """Text carrying exactly one mark; stacked marks are not modelled."""
    type: Literal["marked"] = "marked"
    value: str
    mark: Mark


class Link(BaseModel):
    type: Literal["link"] = "link"
    text: str
    href: str


InlineNode = Annotated[Union[Text, Marked, Link], Field(discriminator="type")]


# --- block nodes ---

class ListItem(BaseModel):
    """One list entry: a single inline run, no nested blocks."""
    children: list[InlineNode] = []


class Heading(BaseModel):
    type: Literal["heading"] = "heading"
    level: int = Field(ge=1, le=6)
    children: list[InlineNode] = []


class Paragraph(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    children: list[InlineNode] = []


class CodeBlock(BaseModel):
    type: Literal["code_block"] = "code_block"
    language: Optional[str] = None
    code: str = ""


class BlockQuote(BaseModel):
    """Quoted lines joined into one paragraph-equivalent inline run."""
    type: Literal["blockquote"] = "blockquote"
    children: list[InlineNode] = []


class BulletList(BaseModel):
    type: Literal["bullet_list"] = "bullet_list"
    items: list[ListItem] = []


class OrderedList(BaseModel):
    """Ordered list; source numbering is not kept (items render from 1)."""
    type: Literal["ordered_list"] = "ordered_list"
    items: list[ListItem] = []


class HorizontalRule(BaseModel):
    type: Literal["horizontal_rule"] = "horizontal_rule"


class Table(BaseModel):
    """Opaque pass-through placeholder; table structure is never decomposed."""
    type: Literal["table"] = "table"
    raw: Any = None


DocumentNode = Annotated[
    Union[Heading, Paragraph, CodeBlock, BlockQuote, BulletList, OrderedList, HorizontalRule, Table],
    Field(discriminator="type"),
]

DocumentAdapter = TypeAdapter(list[DocumentNode])


# --- metadata ---

Scalar = Union[bool, str, list[str]]
FrontMatter = dict[str, Scalar]


class LinkSet(BaseModel):
    """Deduplicated wikilink targets and tags found in one source file."""
    wikilinks: set[str] = set()
    tags: set[str] = set()


# --- import pipeline records ---

class Note(BaseModel):
    """Public store contract: one imported source file, its metadata, and its tree."""
    slug: str
    path: str
    title: str
    hash: str                       # sha256 of the raw file, front matter included
    markdown: str                   # body without front matter
    frontmatter: FrontMatter = {}
    content: list[DocumentNode] = []
    wikilinks: list[str] = []       # sorted
    tags: list[str] = []            # sorted


class ImportResult(BaseModel):
    """Outcome of importing a file or vault directory."""
    counts: dict[str, int] = {"created": 0, "updated": 0, "unchanged": 0}
    slugs: list[str] = []
    skipped: list[str] = []
    errors: list[str] = []

    @property
    def success(self) -> bool:
        return not self.errors
