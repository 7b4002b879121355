"""Handlers for flow-level elements.

Covers paragraphs, headings, quotes, rules, preformatted code, and the
elements whose content is dropped during conversion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from migas.hast import Element
from migas.nodes import INLINE_TYPES, BlockQuote, Code, Heading, Paragraph, ThematicBreak
from migas.state import trim_inline
from migas.utils.text import text_content

if TYPE_CHECKING:
    from migas.hast import Parent
    from migas.nodes import Block
    from migas.protocols import ConversionState

HEADING_DEPTHS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}

# Elements whose content never reaches the markdown output
IGNORED_TAGS = frozenset(
    {
        "applet",
        "area",
        "basefont",
        "bgsound",
        "datalist",
        "dialog",
        "embed",
        "frameset",
        "head",
        "iframe",
        "link",
        "map",
        "meta",
        "noscript",
        "object",
        "param",
        "rp",
        "script",
        "style",
        "template",
        "title",
        "track",
    }
)


def paragraph(
    state: ConversionState, node: Element, parent: Parent | None = None
) -> Paragraph | tuple[Block, ...] | None:
    """``<p>``: a paragraph, or nothing if it holds only whitespace.

    Block content inside a paragraph (invalid HTML) is flowed instead.
    """
    children = state.all(node)
    if not all(isinstance(child, INLINE_TYPES) for child in children):
        return state.to_flow(children)
    children = trim_inline(children)
    if not children:
        return None
    return state.patch(node, Paragraph(children=children))  # type: ignore[arg-type]


def heading(state: ConversionState, node: Element, parent: Parent | None = None) -> Heading:
    """``<h1>`` to ``<h6>``."""
    depth = HEADING_DEPTHS[node.tag_name]
    children = trim_inline(state.all(node))
    return state.patch(node, Heading(depth=depth, children=children))  # type: ignore[arg-type]


def blockquote(state: ConversionState, node: Element, parent: Parent | None = None) -> BlockQuote:
    return state.patch(node, BlockQuote(children=state.to_flow(state.all(node))))


def thematic_break(
    state: ConversionState, node: Element, parent: Parent | None = None
) -> ThematicBreak:
    return state.patch(node, ThematicBreak())


def code_block(state: ConversionState, node: Element, parent: Parent | None = None) -> Code:
    """``<pre>``: a code block.

    The language comes from a ``language-*`` (or ``lang-*``) class on a
    ``<code>`` first child. One trailing line feed is removed.
    """
    lang = None
    head = node.children[0] if node.children else None
    if isinstance(head, Element) and head.tag_name == "code":
        lang = _language(head)

    value = text_content(node)
    if value.endswith("\n"):
        value = value[:-1]
    return state.patch(node, Code(value=value, lang=lang))


def ignore(state: ConversionState, node: Element, parent: Parent | None = None) -> None:
    return None


def _language(node: Element) -> str | None:
    classes = node.get("class_name") or ()
    if isinstance(classes, str):
        classes = tuple(classes.split())
    for token in classes:
        for prefix in ("language-", "lang-"):
            if token.startswith(prefix) and len(token) > len(prefix):
                return token[len(prefix) :]
    return None
