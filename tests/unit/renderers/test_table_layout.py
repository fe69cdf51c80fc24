#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_table_layout.py
"""Unit tests for table grid cursor and column weights."""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2fxml.ast import TableBlock
from md2fxml.exceptions import StructuralConsistencyError
from md2fxml.renderers._table_layout import TableContext, cell_weight


@pytest.mark.unit
class TestCellWeight:
    """Tests for the per-cell weight formula."""

    def test_formula(self):
        assert cell_weight(8.0, 2) == pytest.approx(2.0)
        assert cell_weight(9.0, 0) == pytest.approx(3.0)

    def test_zero_width(self):
        assert cell_weight(0.0, 3) == 0.0

    def test_more_children_lower_weight(self):
        assert cell_weight(10.0, 4) < cell_weight(10.0, 1)


@pytest.mark.unit
class TestTableContext:
    """Tests for TableContext."""

    def test_cursor_moves(self):
        context = TableContext(table=TableBlock())
        context.next_column()
        context.next_column()
        context.next_row()

        assert (context.row, context.column) == (1, 0)

    def test_weights_accumulate_per_column(self):
        context = TableContext(table=TableBlock())
        for row in ([1.0, 2.0], [3.0, 4.0]):
            for weight in row:
                context.add_weight(weight)
                context.next_column()
            context.next_row()

        assert context.column_weights == [4.0, 6.0]
        assert context.weight_sum == 10.0
        assert context.fractions() == pytest.approx([0.4, 0.6])

    def test_shorter_rows_are_fine(self):
        context = TableContext(table=TableBlock())
        context.add_weight(1.0)
        context.next_column()
        context.add_weight(1.0)
        context.next_row()
        context.add_weight(2.0)

        assert context.column_weights == [3.0, 1.0]

    def test_column_beyond_known_raises(self):
        context = TableContext(table=TableBlock())
        context.next_column()
        context.next_column()

        with pytest.raises(StructuralConsistencyError, match="Inconsistent column index 2"):
            context.add_weight(1.0)

    def test_fractions_empty_without_weight(self):
        context = TableContext(table=TableBlock())
        assert context.fractions() == []

        context.add_weight(0.0)
        assert context.fractions() == []

    @given(st.lists(st.floats(min_value=0.0, max_value=1e6, allow_subnormal=False), min_size=1, max_size=12))
    def test_fractions_normalized(self, weights):
        context = TableContext(table=TableBlock())
        for weight in weights:
            context.add_weight(weight)
            context.next_column()

        fractions = context.fractions()
        if sum(weights) > 0:
            assert all(0.0 <= fraction <= 1.0 for fraction in fractions)
            assert math.isclose(sum(fractions), 1.0, rel_tol=1e-9)
        else:
            assert fractions == []
