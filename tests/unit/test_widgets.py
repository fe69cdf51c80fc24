#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_widgets.py
"""Unit tests for the widget tree."""

import pytest

from md2fxml.widgets import WIDGET_TYPES, GridPane, Separator, Text, TextArea, TextFlow, VBox


@pytest.mark.unit
class TestWidgetTree:
    """Tests for tree structure."""

    def test_add_child_links_parent(self):
        box = VBox()
        flow = box.add_child(TextFlow())

        assert box.children == [flow]
        assert flow.parent is box

    @pytest.mark.parametrize("leaf_type", [Text, TextArea, Separator])
    def test_leaves_reject_children(self, leaf_type):
        with pytest.raises(TypeError, match="cannot contain child widgets"):
            leaf_type().add_child(VBox())

    def test_iter_tree_and_find_all(self):
        root = VBox()
        flow = root.add_child(TextFlow())
        first = flow.add_child(Text(text="a"))
        second = root.add_child(VBox()).add_child(TextFlow()).add_child(Text(text="b"))

        assert list(root.iter_tree())[:3] == [root, flow, first]
        assert root.find_all(Text) == [first, second]

    def test_repr(self):
        assert repr(Text(text="hi")) == "Text('hi')"
        assert repr(Separator()) == "Separator(children=0)"

    def test_registry(self):
        assert set(WIDGET_TYPES) == {"VBox", "HBox", "TextFlow", "Text", "TextArea", "Separator", "GridPane"}


@pytest.mark.unit
class TestWidgetBehaviour:
    """Tests for observable properties and events."""

    def test_max_width_listener_only_on_change(self):
        calls = []
        box = VBox()
        box.add_max_width_listener(lambda widget, old, new: calls.append((widget, old, new)))

        box.max_width = 100.0
        box.max_width = 100.0
        box.max_width = 50.0

        assert calls == [(box, None, 100.0), (box, 100.0, 50.0)]

    def test_click_fires_handlers(self):
        events = []
        text = Text(text="link")
        text.add_event_handler("onMouseClicked", events.append)

        event = text.click()

        assert events == [event]
        assert event.source is text
        assert event.event_type == "onMouseClicked"

    def test_click_without_handlers(self):
        assert Text().click().source is not None

    def test_text_area_editable(self):
        assert TextArea().editable is True
        assert TextArea({"editable": "false"}).editable is False

    def test_grid_cell_lookup(self):
        grid = GridPane()
        cell = grid.add_child(VBox({"GridPane.rowIndex": "1", "GridPane.columnIndex": "2"}))

        assert grid.cell_at(1, 2) is cell
        assert grid.cell_at(0, 0) is None
