"""Persistent updates for hast trees.

Helpers that return a new node with one change applied and share every
untouched child by reference. Nothing here mutates its input.

Thread Safety:
Pure functions. Safe to call from any thread.

"""

from __future__ import annotations

import dataclasses

from migas.hast import Content, Element, Text

# Stripped from the text after a removed checkbox: ASCII whitespace, the Zs
# space separators, U+2028/U+2029 and the BOM. U+0085 and U+001C..U+001F are
# kept as text.
LEADING_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def with_children(node: Element, children: tuple[Content, ...]) -> Element:
    """Copy ``node`` (tag, properties, location) with new children."""
    return dataclasses.replace(node, children=children)


def drop_first_child(node: Element) -> tuple[Content, ...]:
    """Children of ``node`` minus the first one."""
    return node.children[1:]


def trim_leading_text(children: tuple[Content, ...]) -> tuple[Content, ...]:
    """Left-trim a leading Text child, dropping it if nothing remains.

    Other leading nodes (and an empty sequence) pass through unchanged.

    """
    if not children:
        return children
    head = children[0]
    if not isinstance(head, Text):
        return children
    value = head.value.lstrip(LEADING_WHITESPACE)
    if not value:
        return children[1:]
    if value == head.value:
        return children
    return (dataclasses.replace(head, value=value), *children[1:])
