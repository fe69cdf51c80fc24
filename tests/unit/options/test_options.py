#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_options.py
"""Unit tests for parser and renderer options."""

import dataclasses

import pytest

from md2fxml.options import FxmlRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestFxmlRendererOptions:
    """Tests for FxmlRendererOptions."""

    def test_defaults(self):
        options = FxmlRendererOptions()

        assert options.include_header is True
        assert options.bullet_prefix == "· "
        assert options.image_prefix == "! "
        assert options.hyperlink_handler == "handleHyperlinkClick"
        assert options.width_precision == 6

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            FxmlRendererOptions().width_precision = 3  # type: ignore[misc]

    def test_create_updated_returns_copy(self):
        options = FxmlRendererOptions()
        updated = options.create_updated(bullet_prefix="- ")

        assert updated.bullet_prefix == "- "
        assert options.bullet_prefix == "· "
        assert updated.width_precision == options.width_precision

    def test_create_updated_validates(self):
        with pytest.raises(ValueError, match="width_precision"):
            FxmlRendererOptions().create_updated(width_precision=0)

    @pytest.mark.parametrize("precision", [0, 13, -1])
    def test_precision_range(self, precision):
        with pytest.raises(ValueError, match="width_precision must be between 1 and 12"):
            FxmlRendererOptions(width_precision=precision)

    @pytest.mark.parametrize("name", ["", "on click", "1handler", "a-b"])
    def test_handler_must_be_identifier(self, name):
        with pytest.raises(ValueError, match="hyperlink_handler"):
            FxmlRendererOptions(hyperlink_handler=name)

    def test_from_mapping(self):
        options = FxmlRendererOptions.from_mapping({"include_header": False, "width_precision": 3})
        assert options == FxmlRendererOptions(include_header=False, width_precision=3)

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown FxmlRendererOptions field"):
            FxmlRendererOptions.from_mapping({"bogus": 1, "include_header": True})

    def test_fields_carry_help_metadata(self):
        for field in dataclasses.fields(FxmlRendererOptions):
            assert field.metadata.get("help")


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self):
        options = MarkdownParserOptions()

        assert options.parse_tables is True
        assert options.parse_strikethrough is True
        assert options.autolink_urls is True
        assert options.wide_char_width == 2

    def test_wide_char_width_positive(self):
        with pytest.raises(ValueError, match="wide_char_width"):
            MarkdownParserOptions(wide_char_width=0)

    def test_from_mapping(self):
        assert MarkdownParserOptions.from_mapping({"parse_tables": False}).parse_tables is False
