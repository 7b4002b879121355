"""Handler for ``<ul>`` and ``<ol>``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from migas.nodes import List, ListItem, Node, Text

if TYPE_CHECKING:
    from migas.hast import Element, Parent
    from migas.protocols import ConversionState


def list_(state: ConversionState, node: Element, parent: Parent | None = None) -> List:
    """Convert a list element.

    Content that did not convert to a list item (stray text or elements
    directly inside ``<ul>``) is wrapped in tight, non-task items. The list
    is spread when any of its items is.
    """
    ordered = node.tag_name == "ol"
    items = _items(state, state.all(node))

    return state.patch(
        node,
        List(
            ordered=ordered,
            start=_start(node.get("start")) if ordered else None,
            spread=any(item.spread for item in items),
            children=items,
        ),
    )


def _items(state: ConversionState, nodes: tuple[Node, ...]) -> tuple[ListItem, ...]:
    items: list[ListItem] = []
    stray: list[Node] = []

    def flush() -> None:
        if any(not (isinstance(n, Text) and not n.value.strip()) for n in stray):
            items.append(ListItem(spread=False, checked=None, children=state.to_flow(tuple(stray))))
        stray.clear()

    for child in nodes:
        if isinstance(child, ListItem):
            flush()
            items.append(child)
        else:
            stray.append(child)
    flush()

    return tuple(items)


def _start(value: object) -> int:
    """Parse the ``start`` attribute of ``<ol>``; invalid values give 1."""
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return 1
