"""Drop insignificant whitespace from hast trees.

Pretty-printed HTML puts indentation between tags. Inside flow containers
(``<li>``, ``<div>``, the root...) a whitespace-only text node at the edge
of the container, or next to a block element, renders as nothing. Removing
those nodes before conversion means handlers see the first real child of an
element, which is what task checkbox detection relies on.

Whitespace between two phrasing nodes is kept (``<em>a</em> <em>b</em>``),
and preformatted elements are left untouched.

Example:
    >>> from migas.hast import h, text
    >>> item = h("li", {}, text("\\n  "), h("input", {"type": "checkbox"}), text(" a\\n"))
    >>> minify_whitespace(item).children[0].tag_name
    'input'

Thread Safety:
Pure functions over immutable trees. Safe to call from any thread.

"""

from __future__ import annotations

import dataclasses
import re

from migas.hast import Comment, Content, Element, Root, Text
from migas.phrasing import PhrasingPredicate, phrasing

_INTER_ELEMENT_WHITESPACE = re.compile(r"[ \t\n\f\r]*")

# Elements whose text is rendered as written
PRESERVED_TAGS = frozenset({"listing", "plaintext", "pre", "textarea", "xmp"})


def minify_whitespace[T: Root | Element](tree: T, is_phrasing: PhrasingPredicate = phrasing) -> T:
    """Remove whitespace-only text that cannot render.

    Args:
        tree: hast Root or Element
        is_phrasing: Phrasing content predicate

    Returns:
        ``tree`` itself when nothing was removed, otherwise a copy that shares
        every unchanged subtree
    """
    if isinstance(tree, Element) and tree.tag_name in PRESERVED_TAGS:
        return tree

    children = tuple(
        minify_whitespace(child, is_phrasing) if isinstance(child, Element) else child
        for child in tree.children
    )
    if not (isinstance(tree, Element) and is_phrasing(tree)):
        children = tuple(
            child
            for index, child in enumerate(children)
            if not _is_droppable(children, index, is_phrasing)
        )

    if len(children) == len(tree.children) and all(
        new is old for new, old in zip(children, tree.children, strict=True)
    ):
        return tree
    return dataclasses.replace(tree, children=children)


def _is_droppable(
    children: tuple[Content, ...], index: int, is_phrasing: PhrasingPredicate
) -> bool:
    child = children[index]
    if not isinstance(child, Text) or not _INTER_ELEMENT_WHITESPACE.fullmatch(child.value):
        return False
    before = _neighbour(children, range(index - 1, -1, -1))
    after = _neighbour(children, range(index + 1, len(children)))
    return _is_boundary(before, is_phrasing) or _is_boundary(after, is_phrasing)


def _neighbour(children: tuple[Content, ...], indexes: range) -> Content | None:
    """First non-comment sibling in ``indexes`` order."""
    for index in indexes:
        if not isinstance(children[index], Comment):
            return children[index]
    return None


def _is_boundary(node: Content | None, is_phrasing: PhrasingPredicate) -> bool:
    # The container edge, or a block element
    return node is None or (isinstance(node, Element) and not is_phrasing(node))
