"""Tests for persistent hast updates."""

from migas.hast import h, text
from migas.tree import drop_first_child, trim_leading_text, with_children


class TestWithChildren:
    def test_keeps_tag_properties_and_location(self) -> None:
        node = h("li", {"id": "x"}, text("a"))
        copy = with_children(node, (text("b"),))
        assert copy.tag_name == "li"
        assert copy.properties is node.properties
        assert copy.children == (text("b"),)
        assert node.children == (text("a"),)


class TestDropFirstChild:
    def test_drops_head(self) -> None:
        tail = h("em")
        assert drop_first_child(h("p", {}, text("a"), tail)) == (tail,)

    def test_empty(self) -> None:
        assert drop_first_child(h("p")) == ()


class TestTrimLeadingText:
    def test_trims(self) -> None:
        assert trim_leading_text((text("  a "), h("b"))) == (text("a "), h("b"))

    def test_drops_blank_text(self) -> None:
        tail = h("b")
        result = trim_leading_text((text(" \n\t"), tail))
        assert result == (tail,)
        assert result[0] is tail

    def test_unchanged_text_kept_by_reference(self) -> None:
        children = (text("a"), h("b"))
        assert trim_leading_text(children) is children

    def test_element_head_untouched(self) -> None:
        children = (h("b"), text("  a"))
        assert trim_leading_text(children) is children

    def test_empty(self) -> None:
        assert trim_leading_text(()) == ()

    def test_only_first_text_considered(self) -> None:
        assert trim_leading_text((text(" "), text("  b"))) == (text("  b"),)

    def test_unicode_spaces_and_bom_trimmed(self) -> None:
        assert trim_leading_text((text("\u3000\u00a0\ufeff\u2028a"),)) == (text("a"),)

    def test_information_separators_kept(self) -> None:
        children = (text("\x1c\x1fa"),)
        assert trim_leading_text(children) is children

    def test_next_line_kept(self) -> None:
        children = (text("\u0085a"),)
        assert trim_leading_text(children) is children
