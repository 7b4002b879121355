"""HTML syntax tree (hast) nodes for Migas.

The input side of conversion. Nodes are frozen dataclasses with slots:
- Immutability: conversion never edits its input, rewrites share subtrees
- Pattern matching: ``match`` on Element/Text/Comment dispatches naturally

Node Hierarchy:
Root
├── Element (tag_name, properties, children)
├── Text (value)
└── Comment (value)

Properties follow hast conventions: boolean attributes hold ``True`` (or
``False`` when explicitly off), ``class`` is stored as ``class_name`` with a
tuple of tokens, everything else keeps its attribute name and string value.

Example:
    >>> from migas.hast import h, text
    >>> item = h("li", {}, h("input", {"type": "checkbox", "checked": True}), text(" done"))
    >>> item.children[0].tag_name
    'input'

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from migas.location import SourceLocation

type PropertyValue = str | int | float | bool | tuple[str, ...] | None

_NO_PROPERTIES: Mapping[str, PropertyValue] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Text:
    """Character data."""

    value: str
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Comment:
    """HTML comment. Never converted."""

    value: str
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Element:
    """An HTML element.

    Equality is structural (tag, properties, children); location is
    provenance only and does not take part in comparisons.

    """

    tag_name: str
    properties: Mapping[str, PropertyValue] = field(default_factory=lambda: _NO_PROPERTIES)
    children: tuple[Content, ...] = ()
    location: SourceLocation | None = field(default=None, compare=False)

    def get(self, name: str, default: PropertyValue = None) -> PropertyValue:
        """Look up a property by its hast name."""
        return self.properties.get(name, default)


@dataclass(frozen=True, slots=True)
class Root:
    """Document or fragment root."""

    children: tuple[Content, ...] = ()
    location: SourceLocation | None = field(default=None, compare=False)


type Content = Element | Text | Comment

type Parent = Root | Element


def h(
    tag_name: str,
    properties: Mapping[str, PropertyValue] | None = None,
    *children: Content,
    location: SourceLocation | None = None,
) -> Element:
    """Build an Element.

    Args:
        tag_name: Lowercase tag name
        properties: hast properties (copied into a read-only mapping)
        *children: Child nodes
        location: Source position (optional)

    Returns:
        New Element
    """
    props = MappingProxyType(dict(properties)) if properties else _NO_PROPERTIES
    return Element(tag_name=tag_name, properties=props, children=children, location=location)


def text(value: str, location: SourceLocation | None = None) -> Text:
    """Build a Text node."""
    return Text(value=value, location=location)
