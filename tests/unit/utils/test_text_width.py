#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_text_width.py
"""Unit tests for text width measurement."""

import pytest

from md2fxml.utils.text import char_width, display_width


@pytest.mark.unit
class TestDisplayWidth:
    """Tests for char_width and display_width."""

    @pytest.mark.parametrize(
        "char, width",
        [
            ("a", 1),
            (" ", 1),
            ("表", 2),
            ("\uff21", 2),
            ("\u0301", 0),
            ("\u200b", 0),
            ("\t", 0),
        ],
    )
    def test_char_width(self, char, width):
        assert char_width(char) == width

    def test_wide_width_parameter(self):
        assert char_width("表", wide_width=3) == 3
        assert display_width("表格", wide_width=1) == 2

    def test_mixed_text(self):
        assert display_width("ab表") == 4
        assert display_width("é") == 1
        assert display_width("") == 0
