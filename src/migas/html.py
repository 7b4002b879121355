"""Build hast trees from HTML source text.

A small tree builder on top of the standard library ``html.parser``. It is
lenient rather than complete: it knows void elements, closes an open
``<p>`` when a block starts, closes an open ``<li>`` when the next item
starts, and ignores stray end tags. That covers the HTML that editors and
markdown renderers produce.

Example:
    >>> root = parse_fragment('<ul><li><input type="checkbox" checked> done</ul>')
    >>> item = root.children[0].children[0]
    >>> item.children[0].properties["checked"]
    True

Thread Safety:
Each call builds its own parser. Safe to call from any thread.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser
from types import MappingProxyType

from migas.hast import Comment, Content, Element, PropertyValue, Root, Text
from migas.location import SourceLocation

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Attributes whose presence alone means "on"
BOOLEAN_ATTRIBUTES = frozenset(
    {
        "allowfullscreen",
        "async",
        "autofocus",
        "autoplay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "hidden",
        "inert",
        "ismap",
        "loop",
        "multiple",
        "muted",
        "nomodule",
        "novalidate",
        "open",
        "readonly",
        "required",
        "reversed",
        "selected",
    }
)

# Start tags that implicitly close an open <p>
CLOSES_PARAGRAPH = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "details",
        "div",
        "dl",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "ul",
    }
)

LIST_TAGS = frozenset({"ul", "ol", "menu"})


@dataclass(slots=True)
class _OpenElement:
    tag_name: str
    properties: dict[str, PropertyValue]
    location: SourceLocation
    children: list[Content] = field(default_factory=list)

    def freeze(self) -> Element:
        return Element(
            tag_name=self.tag_name,
            properties=MappingProxyType(self.properties),
            children=tuple(self.children),
            location=self.location,
        )


class _TreeBuilder(HTMLParser):
    def __init__(self, source_file: str | None) -> None:
        super().__init__(convert_charrefs=True)
        self._source_file = source_file
        self._root: list[Content] = []
        self._stack: list[_OpenElement] = []

    def _location(self) -> SourceLocation:
        lineno, col_offset = self.getpos()
        return SourceLocation(lineno=lineno, col_offset=col_offset, source_file=self._source_file)

    def _append(self, node: Content) -> None:
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self._root.append(node)

    def _close_top(self) -> None:
        self._append_closed(self._stack.pop())

    def _append_closed(self, open_element: _OpenElement) -> None:
        self._append(open_element.freeze())

    def _close_through(self, tag_name: str, boundary: frozenset[str] = frozenset()) -> bool:
        """Close open elements up to and including ``tag_name``.

        Stops without closing anything if a ``boundary`` tag is reached first.
        """
        for index in range(len(self._stack) - 1, -1, -1):
            open_tag = self._stack[index].tag_name
            if open_tag == tag_name:
                while len(self._stack) > index:
                    self._close_top()
                return True
            if open_tag in boundary:
                return False
        return False

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in CLOSES_PARAGRAPH:
            self._close_through("p", boundary=LIST_TAGS | {"li", "blockquote", "div"})
        if tag == "li":
            self._close_through("li", boundary=LIST_TAGS)

        element = _OpenElement(tag, _properties(attrs), self._location())
        if tag in VOID_TAGS:
            self._append_closed(element)
        else:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._append(_OpenElement(tag, _properties(attrs), self._location()).freeze())

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_TAGS:
            return
        self._close_through(tag)

    def handle_data(self, data: str) -> None:
        if not data:
            return
        parent = self._stack[-1].children if self._stack else self._root
        if parent and isinstance(parent[-1], Text):
            previous = parent[-1]
            parent[-1] = Text(value=previous.value + data, location=previous.location)
        else:
            self._append(Text(value=data, location=self._location()))

    def handle_comment(self, data: str) -> None:
        self._append(Comment(value=data, location=self._location()))

    def finish(self) -> Root:
        self.close()
        while self._stack:
            self._close_top()
        return Root(children=tuple(self._root))


def _properties(attrs: list[tuple[str, str | None]]) -> dict[str, PropertyValue]:
    properties: dict[str, PropertyValue] = {}
    for name, value in attrs:
        if name in properties or (name == "class" and "class_name" in properties):
            continue
        if name in BOOLEAN_ATTRIBUTES:
            properties[name] = True
        elif name == "class":
            properties["class_name"] = tuple((value or "").split())
        else:
            properties[name] = "" if value is None else value
    return properties


def parse_fragment(source: str, source_file: str | None = None) -> Root:
    """Parse HTML text into a hast Root.

    Args:
        source: HTML source (a fragment or a full document)
        source_file: Path recorded on every node's location (optional)

    Returns:
        Root whose children are the top-level nodes of ``source``
    """
    builder = _TreeBuilder(source_file)
    builder.feed(source)
    return builder.finish()
