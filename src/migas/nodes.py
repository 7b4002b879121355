"""Typed markdown syntax tree (mdast) nodes for Migas.

The output side of conversion. All nodes are frozen dataclasses with slots,
and every class carries its mdast ``kind`` ("listItem", "paragraph", ...)
as a class variable, which serialization emits as ``"type"``.

Node Hierarchy:
Node (base)
├── Block (flow content)
│   ├── Root
│   ├── Paragraph
│   ├── Heading
│   ├── ThematicBreak
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   └── Code
└── Inline (phrasing content)
    ├── Text
    ├── Emphasis
    ├── Strong
    ├── Delete
    ├── InlineCode
    ├── Break
    ├── Link
    └── Image

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal

from migas.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all mdast nodes.

    ``location`` is filled in from the source hast node by ``State.patch``.

    """

    kind: ClassVar[str] = "node"

    location: SourceLocation | None = field(default=None, kw_only=True, compare=False)


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text."""

    kind: ClassVar[str] = "text"

    value: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized text.

    HTML: <em>, <i>
    Markdown: *text*

    """

    kind: ClassVar[str] = "emphasis"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong text.

    HTML: <strong>, <b>
    Markdown: **text**

    """

    kind: ClassVar[str] = "strong"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Delete(Node):
    """Deleted text.

    HTML: <del>, <s>, <strike>
    Markdown: ~~text~~

    """

    kind: ClassVar[str] = "delete"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class InlineCode(Node):
    """Inline code.

    HTML: <code>, <kbd>, <samp>, <var>
    Markdown: `code`

    """

    kind: ClassVar[str] = "inlineCode"

    value: str


@dataclass(frozen=True, slots=True)
class Break(Node):
    """Hard line break (<br>)."""

    kind: ClassVar[str] = "break"


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    HTML: <a href="url" title="title">text</a>
    Markdown: [text](url "title")

    """

    kind: ClassVar[str] = "link"

    url: str
    title: str | None
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    HTML: <img src="url" alt="alt">
    Markdown: ![alt](url "title")

    """

    kind: ClassVar[str] = "image"

    url: str
    alt: str
    title: str | None = None


type Inline = Text | Emphasis | Strong | Delete | InlineCode | Break | Link | Image

INLINE_TYPES: tuple[type[Node], ...] = (
    Text,
    Emphasis,
    Strong,
    Delete,
    InlineCode,
    Break,
    Link,
    Image,
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph."""

    kind: ClassVar[str] = "paragraph"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Heading.

    HTML: <h1> ... <h6>
    Markdown: # Heading

    """

    kind: ClassVar[str] = "heading"

    depth: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (<hr>)."""

    kind: ClassVar[str] = "thematicBreak"


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote."""

    kind: ClassVar[str] = "blockquote"

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Code block.

    HTML: <pre><code class="language-py">...</code></pre>
    Markdown: fenced code

    """

    kind: ClassVar[str] = "code"

    value: str
    lang: str | None = None


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    ``spread`` marks a loose item (blank lines between its blocks).
    ``checked`` is True/False for task items, None otherwise.

    """

    kind: ClassVar[str] = "listItem"

    spread: bool
    checked: bool | None
    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    HTML: <ul>/<ol> with <li> children

    """

    kind: ClassVar[str] = "list"

    ordered: bool
    start: int | None
    spread: bool
    children: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Root of a converted tree."""

    kind: ClassVar[str] = "root"

    children: tuple[Block, ...]


type Block = Root | Paragraph | Heading | ThematicBreak | BlockQuote | Code | List | ListItem
