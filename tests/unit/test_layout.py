#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_layout.py
"""Unit tests for the post-layout pass."""

import pytest

from md2fxml.exceptions import PayloadIntegrityError
from md2fxml.layout import PostLayoutProcessor
from md2fxml.utils.encoding import encode_payload
from md2fxml.widgets import ColumnConstraints, GridPane, TextArea, VBox


def tree_with_code(*literals):
    root = VBox()
    for literal in literals:
        area = root.add_child(TextArea({"editable": "false"}))
        area.user_data = encode_payload(literal)
    return root


@pytest.mark.unit
class TestDecodeCodePayloads:
    """Tests for decode_code_payloads."""

    def test_decodes_each_payload_once(self):
        root = tree_with_code("a < b\n", "print('x')")
        processor = PostLayoutProcessor(root)

        assert processor.decode_code_payloads() == 2
        assert [area.text for area in root.find_all(TextArea)] == ["a < b\n", "print('x')"]
        assert processor.decode_code_payloads() == 0

    def test_skips_areas_without_payload(self):
        root = VBox()
        area = root.add_child(TextArea())

        assert PostLayoutProcessor(root).decode_code_payloads() == 0
        assert area.text == ""
        assert area.payload_decoded is False

    def test_bad_payload_raises(self):
        root = VBox()
        root.add_child(TextArea()).user_data = "%%%"

        with pytest.raises(PayloadIntegrityError):
            PostLayoutProcessor(root).decode_code_payloads()


@pytest.mark.unit
class TestResolveColumnWidths:
    """Tests for resolve_column_widths."""

    def grid(self, *fractions):
        root = VBox()
        grid = root.add_child(GridPane())
        grid.column_constraints = [ColumnConstraints(min_width=fraction) for fraction in fractions]
        return root, grid

    def test_fraction_times_width(self):
        root, grid = self.grid(0.25, 0.75)
        PostLayoutProcessor(root).resolve_column_widths(800.0)

        assert [c.max_width for c in grid.column_constraints] == [200.0, 600.0]

    def test_recomputed_on_each_call(self):
        root, grid = self.grid(0.5)
        processor = PostLayoutProcessor(root)
        processor.resolve_column_widths(100.0)
        processor.resolve_column_widths(300.0)

        assert grid.column_constraints[0].max_width == 150.0

    @pytest.mark.parametrize("width", [0.0, -10.0])
    def test_non_positive_width_ignored(self, width):
        root, grid = self.grid(0.5)
        PostLayoutProcessor(root).resolve_column_widths(width)

        assert grid.column_constraints[0].max_width is None

    def test_zero_fraction_left_alone(self):
        root, grid = self.grid(0.0, 1.0)
        PostLayoutProcessor(root).resolve_column_widths(400.0)

        assert grid.column_constraints[0].max_width is None
        assert grid.column_constraints[1].max_width == 400.0

    def test_grids_nested_anywhere(self):
        root, outer = self.grid(1.0)
        inner = outer.add_child(VBox()).add_child(GridPane())
        inner.column_constraints = [ColumnConstraints(min_width=0.5)]

        PostLayoutProcessor(root).resolve_column_widths(200.0)
        assert inner.column_constraints[0].max_width == 100.0
