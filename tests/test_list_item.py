"""Tests for list item conversion: task checkboxes and loose items."""

import pytest

from migas.config import ConvertConfig
from migas.handlers.list_item import extract_leading_checkbox, is_checkbox, is_spread, list_item
from migas.hast import Comment, Element, h, text
from migas.location import SourceLocation
from migas.nodes import ListItem, Paragraph
from migas.nodes import Text as TextNode
from migas.state import State

LOC = SourceLocation(lineno=4, col_offset=2)


def _checkbox(checked: bool = False, kind: str = "checkbox") -> Element:
    props: dict[str, object] = {"type": kind}
    if checked:
        props["checked"] = True
    return h("input", props)


class RecordingState:
    """Minimal conversion state that records what the handler asks for."""

    def __init__(self) -> None:
        self.converted: list[Element] = []
        self.patched: list[tuple[object, object]] = []

    def is_phrasing(self, node) -> bool:  # type: ignore[no-untyped-def]
        return isinstance(node, Element) and node.tag_name in {"span", "strong", "input", "em"}

    def all(self, parent):  # type: ignore[no-untyped-def]
        self.converted.append(parent)
        return (TextNode(value="converted"),)

    def to_flow(self, nodes):  # type: ignore[no-untyped-def]
        return (Paragraph(children=tuple(nodes)),)

    def patch(self, source, target):  # type: ignore[no-untyped-def]
        self.patched.append((source, target))
        return target


# =============================================================================
# Checkbox detection
# =============================================================================


class TestIsCheckbox:
    def test_checkbox(self) -> None:
        assert is_checkbox(_checkbox())

    def test_radio(self) -> None:
        assert is_checkbox(_checkbox(kind="radio"))

    @pytest.mark.parametrize("kind", ["text", "submit", "image", None])
    def test_other_inputs(self, kind: str | None) -> None:
        assert not is_checkbox(h("input", {"type": kind} if kind else {}))

    def test_text_node(self) -> None:
        assert not is_checkbox(text("[x]"))


# =============================================================================
# extract_leading_checkbox
# =============================================================================


class TestExtractLeadingCheckbox:
    def test_checked_checkbox_only_child(self) -> None:
        item = h("li", {}, _checkbox(checked=True))
        checked, clone = extract_leading_checkbox(item)
        assert checked is True
        assert clone.children == ()
        assert clone.tag_name == "li"

    def test_unchecked_inside_paragraph(self) -> None:
        item = h("li", {}, h("p", {}, _checkbox(), text(" text")))
        checked, clone = extract_leading_checkbox(item)
        assert checked is False
        assert clone == h("li", {}, h("p", {}, text("text")))

    def test_radio_counts(self) -> None:
        item = h("li", {}, _checkbox(checked=True, kind="radio"), text("option"))
        checked, clone = extract_leading_checkbox(item)
        assert checked is True
        assert clone.children == (text("option"),)

    def test_checked_attribute_coerced_to_bool(self) -> None:
        item = h("li", {}, h("input", {"type": "checkbox", "checked": "checked"}))
        checked, _ = extract_leading_checkbox(item)
        assert checked is True

    def test_checked_false_property(self) -> None:
        item = h("li", {}, h("input", {"type": "checkbox", "checked": False}))
        checked, _ = extract_leading_checkbox(item)
        assert checked is False

    def test_nested_in_phrasing_wrappers(self) -> None:
        item = h(
            "li",
            {},
            h("p", {}, h("strong", {}, _checkbox(checked=True), text("  bold")), text(" tail")),
        )
        checked, clone = extract_leading_checkbox(item)
        assert checked is True
        assert clone == h(
            "li", {}, h("p", {}, h("strong", {}, text("bold")), text(" tail"))
        )

    def test_whitespace_only_text_after_checkbox_dropped(self) -> None:
        item = h("li", {}, _checkbox(), text("   \n"), h("em", {}, text("x")))
        _, clone = extract_leading_checkbox(item)
        assert clone.children == (h("em", {}, text("x")),)

    def test_only_innermost_text_trimmed(self) -> None:
        item = h("li", {}, h("span", {}, _checkbox()), text("  keep leading space"))
        _, clone = extract_leading_checkbox(item)
        assert clone.children[1] == text("  keep leading space")
        assert clone.children[0] == h("span", {})

    def test_text_before_checkbox_blocks_detection(self) -> None:
        item = h("li", {}, text("first "), _checkbox(checked=True))
        checked, clone = extract_leading_checkbox(item)
        assert checked is None
        assert clone is item

    def test_checkbox_not_first_in_wrapper(self) -> None:
        item = h("li", {}, h("span", {}, text("a"), _checkbox(checked=True)))
        checked, clone = extract_leading_checkbox(item)
        assert checked is None
        assert clone is item

    def test_flow_wrapper_blocks_descent(self) -> None:
        item = h("li", {}, h("div", {}, _checkbox(checked=True)))
        checked, clone = extract_leading_checkbox(item)
        assert checked is None
        assert clone is item

    def test_comment_before_checkbox_blocks_detection(self) -> None:
        item = h("li", {}, Comment(value="note"), _checkbox())
        checked, clone = extract_leading_checkbox(item)
        assert checked is None
        assert clone is item

    def test_empty_item(self) -> None:
        item = h("li")
        checked, clone = extract_leading_checkbox(item)
        assert checked is None
        assert clone is item

    def test_embedded_phrasing_wrapper_is_descended(self) -> None:
        # Invalid HTML, accepted as is.
        item = h("li", {}, h("video", {}, _checkbox(checked=True)))
        checked, clone = extract_leading_checkbox(item)
        assert checked is True
        assert clone == h("li", {}, h("video", {}))

    def test_properties_and_location_kept(self) -> None:
        item = h("li", {"class_name": ("task",)}, _checkbox(), text("x"), location=LOC)
        _, clone = extract_leading_checkbox(item)
        assert clone.properties == {"class_name": ("task",)}
        assert clone.location == LOC

    def test_untouched_subtrees_shared(self) -> None:
        tail = h("ul", {}, h("li", {}, text("nested")))
        after = h("em", {}, text("after"))
        para = h("p", {}, _checkbox(), text("todo"), after)
        item = h("li", {}, para, tail)
        _, clone = extract_leading_checkbox(item)
        assert clone.children[1] is tail
        assert clone.children[0].children[1] is after
        assert clone.children[0] is not para

    def test_input_not_mutated(self) -> None:
        para = h("p", {}, _checkbox(checked=True), text(" text"))
        item = h("li", {}, para)
        children_before = item.children
        extract_leading_checkbox(item)
        assert item.children is children_before
        assert item.children[0] is para
        assert para.children[1] == text(" text")

    def test_second_extraction_finds_nothing(self) -> None:
        item = h("li", {}, h("p", {}, _checkbox(checked=True), text("done")))
        _, clone = extract_leading_checkbox(item)
        checked, again = extract_leading_checkbox(clone)
        assert checked is None
        assert again is clone

    def test_custom_phrasing_predicate(self) -> None:
        item = h("li", {}, h("custom-wrap", {}, _checkbox(checked=True)))
        checked, _ = extract_leading_checkbox(
            item, lambda node: isinstance(node, Element) and node.tag_name == "custom-wrap"
        )
        assert checked is True


# =============================================================================
# is_spread
# =============================================================================


class TestIsSpread:
    def test_phrasing_only(self) -> None:
        item = h("li", {}, text("a "), h("strong", {}, text("b")), h("code", {}, text("c")))
        assert is_spread(item) is False

    def test_empty(self) -> None:
        assert is_spread(h("li")) is False

    def test_direct_paragraph(self) -> None:
        assert is_spread(h("li", {}, h("p", {}, text("a")))) is True

    def test_two_flow_children(self) -> None:
        item = h("li", {}, h("div", {}, text("a")), h("ul", {}, h("li", {}, text("b"))))
        assert is_spread(item) is True

    def test_single_flow_child(self) -> None:
        item = h("li", {}, text("a"), h("ul", {}, h("li", {}, text("b"))))
        assert is_spread(item) is False

    def test_nested_paragraph_in_wrapper(self) -> None:
        item = h("li", {}, h("div", {}, h("p", {}, text("a"))))
        assert is_spread(item) is True

    def test_two_nested_flow_children(self) -> None:
        item = h("li", {}, h("div", {}, h("div", {}), h("blockquote", {})))
        assert is_spread(item) is True

    def test_paragraph_inside_phrasing_ignored(self) -> None:
        item = h("li", {}, h("span", {}, h("p", {}, text("a"))))
        assert is_spread(item) is False

    def test_comments_ignored(self) -> None:
        item = h("li", {}, Comment(value="x"), h("div", {}), Comment(value="y"))
        assert is_spread(item) is False

    def test_input_not_mutated(self) -> None:
        item = h("li", {}, h("div", {}, h("p", {}, text("a"))))
        before = item.children
        is_spread(item)
        assert item.children is before


# =============================================================================
# list_item handler
# =============================================================================


class TestListItemHandler:
    def test_uses_clone_for_children_and_patch(self) -> None:
        state = RecordingState()
        item = h("li", {}, _checkbox(checked=True), text(" done"), location=LOC)
        result = list_item(state, item)

        assert isinstance(result, ListItem)
        assert result.kind == "listItem"
        assert result.checked is True
        assert result.spread is False
        assert state.converted[0].children == (text("done"),)
        assert len(state.patched) == 1
        source, target = state.patched[0]
        assert source is state.converted[0]
        assert target is result

    def test_without_checkbox_passes_original(self) -> None:
        state = RecordingState()
        item = h("li", {}, text("plain"))
        result = list_item(state, item)
        assert result.checked is None
        assert state.converted[0] is item
        assert state.patched[0][0] is item

    def test_spread_computed_after_extraction(self) -> None:
        state = RecordingState()
        item = h("li", {}, h("p", {}, _checkbox()), h("p", {}, text("body")))
        result = list_item(state, item)
        assert result.checked is False
        assert result.spread is True

    def test_patch_returning_nothing_keeps_result(self) -> None:
        class InPlacePatchState(RecordingState):
            def patch(self, source, target):  # type: ignore[no-untyped-def]
                self.patched.append((source, target))

        state = InPlacePatchState()
        result = list_item(state, h("li", {}, _checkbox(checked=True), text(" done")))
        assert isinstance(result, ListItem)
        assert result.checked is True
        assert state.patched[0][1] is result

    def test_state_phrasing_predicate_used(self) -> None:
        state = RecordingState()
        # RecordingState does not treat <b> as phrasing, so no descent.
        item = h("li", {}, h("b", {}, _checkbox(checked=True)))
        assert list_item(state, item).checked is None

    def test_with_real_state(self) -> None:
        state = State(ConvertConfig())
        item = h(
            "li",
            {},
            h("p", {}, _checkbox(checked=True), text(" ship it")),
            location=LOC,
        )
        result = list_item(state, item)
        assert result == ListItem(
            spread=True,
            checked=True,
            children=(Paragraph(children=(TextNode(value="ship it"),)),),
        )
        assert result.location == LOC
