"""Element handlers for hast to mdast conversion.

A handler receives the conversion state, the element, and its parent, and
returns an mdast node, a tuple of nodes (spliced into the parent), or None
(dropped). Tags without a handler are unwrapped.

Custom handlers override built-ins through ``ConvertConfig.handlers``:

    >>> from migas import ConvertConfig, to_mdast
    >>> def no_images(state, node, parent):
    ...     return None
    >>> config = ConvertConfig(handlers={"img": no_images})

Thread Safety:
Handlers are plain functions without state. Safe to share.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from migas.handlers.blocks import (
    IGNORED_TAGS,
    blockquote,
    code_block,
    heading,
    ignore,
    paragraph,
    thematic_break,
)
from migas.handlers.inline import (
    delete,
    emphasis,
    form_input,
    image,
    inline_code,
    line_break,
    link,
    strong,
)
from migas.handlers.list_item import extract_leading_checkbox, is_spread, list_item
from migas.handlers.lists import list_

if TYPE_CHECKING:
    from migas.hast import Element, Parent
    from migas.nodes import Node

type Handler = Callable[[Any, Element, Parent | None], Node | tuple[Node, ...] | None]

DEFAULT_HANDLERS: Mapping[str, Handler] = MappingProxyType(
    {
        **{tag: ignore for tag in IGNORED_TAGS},
        "p": paragraph,
        "h1": heading,
        "h2": heading,
        "h3": heading,
        "h4": heading,
        "h5": heading,
        "h6": heading,
        "blockquote": blockquote,
        "hr": thematic_break,
        "pre": code_block,
        "ul": list_,
        "ol": list_,
        "li": list_item,
        "strong": strong,
        "b": strong,
        "em": emphasis,
        "i": emphasis,
        "del": delete,
        "s": delete,
        "strike": delete,
        "code": inline_code,
        "kbd": inline_code,
        "samp": inline_code,
        "var": inline_code,
        "a": link,
        "img": image,
        "br": line_break,
        "input": form_input,
    }
)

__all__ = [
    "DEFAULT_HANDLERS",
    "Handler",
    "extract_leading_checkbox",
    "is_spread",
    "list_item",
]
