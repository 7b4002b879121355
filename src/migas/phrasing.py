"""Phrasing content classification for hast nodes.

Phrasing content is the inline level of HTML: text and the elements that
render within a line (``<span>``, ``<a>``, ``<img>``...). Everything else is
flow content and implies structural separation when adjacent.

This module answers the question for one node at a time and does not look at
descendants. Conversion code receives it as a parameter so callers can swap
in their own content model.

Example:
    >>> from migas.hast import h
    >>> phrasing(h("strong"))
    True
    >>> phrasing(h("div"))
    False

Thread Safety:
Pure functions over immutable data. Safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Callable

from migas.hast import Content, Element, Root, Text

type PhrasingPredicate = Callable[[Content | Root], bool]

PHRASING_TAGS = frozenset(
    {
        "a",
        "abbr",
        # `area` is phrasing only inside `map`; that context is not checked.
        "area",
        "b",
        "bdi",
        "bdo",
        "br",
        "button",
        "cite",
        "code",
        "data",
        "datalist",
        "del",
        "dfn",
        "em",
        "i",
        "input",
        "ins",
        "kbd",
        "keygen",
        "label",
        "map",
        "mark",
        "meter",
        "noscript",
        "output",
        "progress",
        "q",
        "ruby",
        "s",
        "samp",
        "script",
        "select",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "template",
        "textarea",
        "time",
        "u",
        "var",
        "wbr",
    }
)

EMBEDDED_TAGS = frozenset(
    {
        "audio",
        "canvas",
        "embed",
        "iframe",
        "img",
        "math",
        "object",
        "picture",
        "svg",
        "video",
    }
)

# `rel` keywords allowed on a <link> that sits in <body>
BODY_OK_REL = frozenset(
    {
        "dns-prefetch",
        "modulepreload",
        "pingback",
        "preconnect",
        "prefetch",
        "preload",
        "prerender",
        "stylesheet",
    }
)


def _rel_tokens(value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.lower().split())
    if isinstance(value, tuple | list):
        return tuple(str(token).lower() for token in value)
    return ()


def is_body_ok_link(node: Element) -> bool:
    """Check whether a ``<link>`` element may appear in ``<body>``.

    A link is body-ok when it carries ``itemprop``, or when it has a ``rel``
    whose tokens are all body-ok keywords.

    """
    if node.tag_name != "link":
        return False
    if node.get("itemprop") is not None:
        return True
    tokens = _rel_tokens(node.get("rel"))
    return bool(tokens) and all(token in BODY_OK_REL for token in tokens)


def phrasing(node: Content | Root) -> bool:
    """Check whether ``node`` is phrasing content.

    Args:
        node: Any hast node

    Returns:
        True for text and inline-level elements
    """
    match node:
        case Text():
            return True
        case Element(tag_name=tag_name):
            if tag_name in PHRASING_TAGS or tag_name in EMBEDDED_TAGS:
                return True
            if tag_name == "link":
                return is_body_ok_link(node)
            if tag_name == "meta":
                return node.get("itemprop") is not None
            return False
        case _:
            return False
