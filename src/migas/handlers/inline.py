"""Handlers for phrasing-level elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from migas.handlers.list_item import is_checkbox
from migas.nodes import Break, Delete, Emphasis, Image, InlineCode, Link, Strong, Text
from migas.utils.text import collapse_whitespace, text_content

if TYPE_CHECKING:
    from migas.hast import Element, Parent
    from migas.protocols import ConversionState
    from migas.state import State


def strong(state: ConversionState, node: Element, parent: Parent | None = None) -> Strong:
    return state.patch(node, Strong(children=state.all(node)))  # type: ignore[arg-type]


def emphasis(state: ConversionState, node: Element, parent: Parent | None = None) -> Emphasis:
    return state.patch(node, Emphasis(children=state.all(node)))  # type: ignore[arg-type]


def delete(state: ConversionState, node: Element, parent: Parent | None = None) -> Delete:
    return state.patch(node, Delete(children=state.all(node)))  # type: ignore[arg-type]


def inline_code(state: ConversionState, node: Element, parent: Parent | None = None) -> InlineCode:
    return state.patch(node, InlineCode(value=collapse_whitespace(text_content(node))))


def line_break(state: ConversionState, node: Element, parent: Parent | None = None) -> Break:
    return state.patch(node, Break())


def link(state: ConversionState, node: Element, parent: Parent | None = None) -> Link:
    """``<a>``: a link; a missing ``href`` gives an empty URL."""
    url = node.get("href")
    title = node.get("title")
    return state.patch(
        node,
        Link(
            url="" if url is None else str(url),
            title=None if title is None else str(title),
            children=state.all(node),  # type: ignore[arg-type]
        ),
    )


def image(state: ConversionState, node: Element, parent: Parent | None = None) -> Image:
    src = node.get("src")
    alt = node.get("alt")
    title = node.get("title")
    return state.patch(
        node,
        Image(
            url="" if src is None else str(src),
            alt="" if alt is None else str(alt),
            title=None if title is None else str(title),
        ),
    )


def form_input(state: State, node: Element, parent: Parent | None = None) -> Text | Image | None:
    """``<input>`` outside the head of a list item.

    Checkboxes and radios become the configured ``[x]``/``[ ]`` markers,
    image inputs become images, and other inputs become their value.
    """
    if is_checkbox(node):
        marker = state.config.checked if node.get("checked") else state.config.unchecked
        return state.patch(node, Text(value=marker))

    if node.get("type") == "image":
        return image(state, node, parent)

    value = node.get("value")
    if value is None or value is True or value == "":
        return None
    return state.patch(node, Text(value=str(value)))
