"""Per-conversion state for hast to mdast conversion.

A ``State`` is created fresh for each ``to_mdast`` call. It resolves the
handler for every element, converts children in order, groups inline
results into paragraphs where block content is expected, and copies source
positions onto the nodes it produces.

Thread Safety:
State instances are not shared; create one per conversion. Handlers are
stateless functions and may be shared freely.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from migas.errors import HandlerError
from migas.hast import Comment, Content, Element, Parent, Text
from migas.nodes import INLINE_TYPES, Block, Node, Paragraph
from migas.nodes import Text as TextNode
from migas.phrasing import PhrasingPredicate, phrasing
from migas.utils.logger import get_logger
from migas.utils.text import collapse_whitespace

if TYPE_CHECKING:
    from migas.config import ConvertConfig
    from migas.handlers import Handler

logger = get_logger(__name__)

type HandlerResult = Node | tuple[Node, ...] | None


class State:
    """Conversion context handed to every handler.

    Attributes:
        config: Active ConvertConfig
        handlers: Tag name to handler mapping (built-ins overlaid with config)

    """

    __slots__ = ("config", "handlers", "_is_phrasing")

    def __init__(
        self,
        config: ConvertConfig,
        is_phrasing: PhrasingPredicate = phrasing,
    ) -> None:
        from migas.handlers import DEFAULT_HANDLERS

        self.config = config
        self.handlers: Mapping[str, Handler] = MappingProxyType(
            {**DEFAULT_HANDLERS, **config.handlers}
        )
        self._is_phrasing = is_phrasing

    def is_phrasing(self, node: Content | Parent) -> bool:
        """Classify a hast node as phrasing content."""
        return self._is_phrasing(node)

    def one(self, node: Content, parent: Parent | None = None) -> HandlerResult:
        """Convert a single hast node.

        Text becomes mdast text with whitespace collapsed, comments are
        dropped, and elements go to the handler registered for their tag.
        Elements without a handler are unwrapped: their children are
        converted in their place, as block content for flow elements.
        """
        match node:
            case Text(value=value):
                return self.patch(node, TextNode(value=collapse_whitespace(value, self.config.newlines)))
            case Comment():
                return None
            case Element(tag_name=tag_name):
                handler = self.handlers.get(tag_name)
                if handler is None:
                    logger.debug("No handler for <%s>, converting its children", tag_name)
                    if self.is_phrasing(node):
                        return self.all(node)
                    return self.to_flow(self.all(node))
                return _checked_result(tag_name, handler(self, node, parent))
            case _:
                return None

    def all(self, parent: Parent) -> tuple[Node, ...]:
        """Convert every child of ``parent``, flattening handler results."""
        results: list[Node] = []
        for child in parent.children:
            result = self.one(child, parent)
            if result is None:
                continue
            if isinstance(result, tuple):
                results.extend(result)
            else:
                results.append(result)
        return tuple(results)

    def to_flow(self, nodes: Iterable[Node]) -> tuple[Block, ...]:
        """Wrap runs of inline nodes into paragraphs.

        Runs made only of whitespace text are dropped; whitespace at the
        edges of each paragraph is trimmed.
        """
        flow: list[Block] = []
        run: list[Node] = []

        for node in nodes:
            if isinstance(node, INLINE_TYPES):
                run.append(node)
                continue
            self._flush(run, flow)
            flow.append(node)  # type: ignore[arg-type]

        self._flush(run, flow)
        return tuple(flow)

    def patch[N: Node](self, source: Content | Parent, target: N) -> N:
        """Return ``target`` with the source position of ``source``.

        Nodes are immutable, so the positioned node is a copy. Targets are
        returned as-is when the source has no position.
        """
        location = source.location
        if location is None or target.location == location:
            return target
        return dataclasses.replace(target, location=location)

    def _flush(self, run: list[Node], flow: list[Block]) -> None:
        if run:
            children = trim_inline(tuple(run))
            if children:
                flow.append(Paragraph(children=children, location=children[0].location))
            run.clear()


def trim_inline(nodes: tuple[Node, ...]) -> tuple[Node, ...]:
    """Strip whitespace from the edges of an inline run.

    Leading and trailing text is trimmed, and text left empty is dropped.
    """
    items = list(nodes)

    while items and isinstance(items[0], TextNode):
        value = items[0].value.lstrip()
        if value:
            items[0] = dataclasses.replace(items[0], value=value)
            break
        items.pop(0)

    while items and isinstance(items[-1], TextNode):
        value = items[-1].value.rstrip()
        if value:
            items[-1] = dataclasses.replace(items[-1], value=value)
            break
        items.pop()

    return tuple(items)


def _checked_result(tag_name: str, result: object) -> HandlerResult:
    if result is None or isinstance(result, Node):
        return result
    if isinstance(result, tuple) and all(isinstance(item, Node) for item in result):
        return result
    raise HandlerError(tag_name, f"expected mdast node(s) or None, got {type(result).__name__}")
