"""
Migas: HTML syntax trees to markdown syntax trees.

Converts hast-shaped HTML trees into typed, immutable mdast-shaped trees.
List items get the full treatment: a leading checkbox turns an item into a
task item, and items are marked loose (spread) when their markdown would
have blank lines between blocks.

Quick Start:
    >>> from migas import to_mdast
    >>> from migas.html import parse_fragment
    >>> tree = parse_fragment('<ul><li><input type="checkbox" checked> ship it</li></ul>')
    >>> item = to_mdast(tree).children[0].children[0]
    >>> item.checked, item.spread
    (True, False)

Installation:
    pip install migas              # zero runtime dependencies
"""

from migas.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from migas.errors import ConversionError, HandlerError, MigasError
from migas.handlers import DEFAULT_HANDLERS, extract_leading_checkbox, is_spread, list_item
from migas.hast import Element, h, text
from migas.hast import Root as HastRoot
from migas.location import SourceLocation
from migas.nodes import (
    Block,
    BlockQuote,
    Break,
    Code,
    Delete,
    Emphasis,
    Heading,
    Image,
    Inline,
    InlineCode,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Strong,
    ThematicBreak,
)
from migas.phrasing import phrasing
from migas.serialization import to_dict, to_json
from migas.state import State
from migas.utils.logger import get_logger
from migas.whitespace import minify_whitespace

__version__ = "0.1.0"

logger = get_logger(__name__)


def to_mdast(tree: HastRoot | Element, config: ConvertConfig | None = None) -> Root:
    """Convert a hast tree to an mdast Root.

    Whitespace-only text that cannot render (indentation between block
    tags) is removed first, so handlers see the first real child of each
    element.

    Args:
        tree: hast Root or Element to convert
        config: Conversion config (defaults to the context's active config)

    Returns:
        mdast Root holding the converted block content

    Raises:
        ConversionError: If ``tree`` is not a hast Root or Element
    """
    if not isinstance(tree, HastRoot | Element):
        raise ConversionError("expected a hast Root or Element", type(tree).__name__)

    tree = minify_whitespace(tree)

    state = State(config if config is not None else get_convert_config())
    if isinstance(tree, HastRoot):
        converted = state.all(tree)
    else:
        converted = state.one(tree)
        if converted is None:
            converted = ()
        elif not isinstance(converted, tuple):
            converted = (converted,)

    logger.debug("Converted <%s> into %d node(s)", getattr(tree, "tag_name", "root"), len(converted))
    return state.patch(tree, Root(children=state.to_flow(converted)))


__all__ = [
    "DEFAULT_HANDLERS",
    "Block",
    "BlockQuote",
    "Break",
    "Code",
    "ConversionError",
    "ConvertConfig",
    "Delete",
    "Element",
    "Emphasis",
    "HandlerError",
    "HastRoot",
    "Heading",
    "Image",
    "Inline",
    "InlineCode",
    "Link",
    "List",
    "ListItem",
    "MigasError",
    "Node",
    "Paragraph",
    "Root",
    "SourceLocation",
    "State",
    "Strong",
    "ThematicBreak",
    "convert_config_context",
    "extract_leading_checkbox",
    "get_convert_config",
    "h",
    "is_spread",
    "list_item",
    "minify_whitespace",
    "phrasing",
    "reset_convert_config",
    "set_convert_config",
    "text",
    "to_dict",
    "to_json",
    "to_mdast",
]
