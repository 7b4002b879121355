"""Protocols for Migas.

Defines the contract handlers rely on when converting an element: the
capabilities a conversion state offers to them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from migas.hast import Content, Parent
    from migas.nodes import Block, Node


class ConversionState(Protocol):
    """What a handler may ask of the surrounding conversion.

    ``migas.state.State`` is the implementation used by ``to_mdast``; tests
    and embedders may pass anything with the same shape.

    Thread Safety:
        Implementations hold per-conversion state. Do not share one instance
        between concurrent conversions.

    """

    def is_phrasing(self, node: Content | Parent) -> bool:
        """Classify a hast node as phrasing (inline) content."""
        ...

    def all(self, parent: Parent) -> tuple[Node, ...]:
        """Convert every child of ``parent``, in order."""
        ...

    def to_flow(self, nodes: tuple[Node, ...]) -> tuple[Block, ...]:
        """Turn a mix of inline and block nodes into block content."""
        ...

    def patch[N: Node](self, source: Content | Parent, target: N) -> N:
        """Return ``target`` carrying the source position of ``source``.

        Called once per node a handler produces. Implementations that update
        ``target`` in place may return None; ``list_item`` then keeps
        ``target``. Other handlers use the return value.

        """
        ...
