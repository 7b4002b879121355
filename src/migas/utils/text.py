"""Text helpers for Migas.

Example:
    >>> from migas.utils.text import collapse_whitespace
    >>> collapse_whitespace("a \\n\\t b")
    'a b'
"""

from __future__ import annotations

import re

from migas.hast import Comment, Element, Root, Text

# HTML's inter-element whitespace: space, tab, LF, FF, CR
_WHITESPACE_RUN = re.compile(r"[ \t\n\f\r]+")
_WHITESPACE_RUN_NO_NEWLINE = re.compile(r"[ \t\f\r]+")
_SPACED_NEWLINE = re.compile(r"[ \t\f\r]*\n[ \t\f\r]*")


def collapse_whitespace(value: str, newlines: bool = False) -> str:
    """Collapse runs of HTML whitespace into single spaces.

    Args:
        value: Raw text value
        newlines: Keep line feeds (dropping spaces around them) instead of folding them

    Returns:
        Text with whitespace runs collapsed
    """
    if not newlines:
        return _WHITESPACE_RUN.sub(" ", value)
    value = _SPACED_NEWLINE.sub("\n", value)
    return _WHITESPACE_RUN_NO_NEWLINE.sub(" ", value)


def text_content(node: Root | Element | Text | Comment) -> str:
    """Concatenate every text descendant of ``node``, comments excluded."""
    match node:
        case Text(value=value):
            return value
        case Comment():
            return ""
        case _:
            return "".join(text_content(child) for child in node.children)
