"""Conversion of ``<li>`` elements into mdast list items.

Two decisions are made per item:

- Task state: a checkbox or radio control at the very start of the item
  (possibly inside ``<p>`` or inline wrappers such as ``<strong>``) marks
  it as a task item. The control is removed from a clone of the item; the
  input tree is never touched.
- Spread: whether the markdown equivalent would be a loose item. A ``<p>``
  child means loose, and so do two or more block children, since blocks are
  separated by blank lines. A single block wrapper such as ``<div>`` is
  searched recursively for the same signals.

Example:
    >>> from migas.hast import h, text
    >>> item = h("li", {}, h("p", {}, h("input", {"type": "checkbox"}), text(" todo")))
    >>> checked, clone = extract_leading_checkbox(item)
    >>> checked, clone.children[0].children[0].value
    (False, 'todo')

Thread Safety:
Pure functions over immutable trees. Safe to call from any thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from migas.hast import Element
from migas.nodes import ListItem
from migas.phrasing import PhrasingPredicate, phrasing
from migas.tree import drop_first_child, trim_leading_text, with_children
from migas.utils.logger import get_logger

if TYPE_CHECKING:
    from migas.hast import Parent
    from migas.protocols import ConversionState

logger = get_logger(__name__)

CHECKABLE_TYPES = frozenset({"checkbox", "radio"})


def list_item(state: ConversionState, node: Element, parent: Parent | None = None) -> ListItem:
    """Convert an ``<li>`` element.

    Args:
        state: Conversion capabilities (phrasing test, child conversion, patch)
        node: The ``<li>`` element
        parent: Enclosing element (unused)

    Returns:
        ListItem carrying the source position of the (possibly rewritten) item
    """
    checked, clone = extract_leading_checkbox(node, state.is_phrasing)
    spread = is_spread(clone, state.is_phrasing)
    children = state.to_flow(state.all(clone))

    result = ListItem(spread=spread, checked=checked, children=children)
    patched = state.patch(clone, result)
    # A patch that updates in place returns nothing
    return result if patched is None else patched


def is_checkbox(node: object) -> bool:
    """Check for an ``<input type="checkbox">`` or ``<input type="radio">``."""
    return (
        isinstance(node, Element)
        and node.tag_name == "input"
        and node.get("type") in CHECKABLE_TYPES
    )


def is_spread(node: Element, is_phrasing: PhrasingPredicate = phrasing) -> bool:
    """Check whether a list item should render loose.

    Args:
        node: Element whose children are inspected
        is_phrasing: Phrasing content predicate

    Returns:
        True if a ``<p>`` child, two block children, or a block child that is
        itself spread is found
    """
    seen_flow = False

    for child in node.children:
        if not isinstance(child, Element) or is_phrasing(child):
            continue

        if child.tag_name == "p" or seen_flow or is_spread(child, is_phrasing):
            return True

        seen_flow = True

    return False


def extract_leading_checkbox(
    node: Element, is_phrasing: PhrasingPredicate = phrasing
) -> tuple[bool | None, Element]:
    """Remove a checkbox that starts ``node``'s content.

    Only the first child is followed at each level, and only through ``<p>``
    or phrasing elements. This admits odd trees such as a checkbox as the
    first child of ``<video>``; such trees are invalid HTML to begin with.

    Args:
        node: Element to inspect (usually an ``<li>``)
        is_phrasing: Phrasing content predicate

    Returns:
        Tuple of (checked state, clone). When no checkbox is found the state
        is None and the clone is ``node`` itself.
    """
    parents = [node]

    while parents[-1].children:
        candidate = parents[-1].children[0]

        if is_checkbox(candidate):
            checked = bool(candidate.get("checked"))
            logger.debug("Extracted task checkbox (checked=%s) from <%s>", checked, node.tag_name)
            return checked, _rebuild_without_head(parents)

        if isinstance(candidate, Element) and (
            candidate.tag_name == "p" or is_phrasing(candidate)
        ):
            parents.append(candidate)
            continue

        break

    return None, node


def _rebuild_without_head(parents: list[Element]) -> Element:
    """Copy the spine innermost-first, leaving out the checkbox.

    The innermost parent loses its first child (the checkbox) and has the
    text that followed it left-trimmed. Every outer parent gets the rebuilt
    inner element in place of its first child.
    """
    innermost = parents[-1]
    clone = with_children(innermost, trim_leading_text(drop_first_child(innermost)))

    for parent in reversed(parents[:-1]):
        clone = with_children(parent, (clone, *drop_first_child(parent)))

    return clone
