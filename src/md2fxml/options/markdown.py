#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/options/markdown.py
"""Configuration options for markdown parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2fxml.constants import DEFAULT_WIDE_CHAR_WIDTH
from md2fxml.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognize GFM pipe tables.
    parse_strikethrough : bool, default True
        Recognize ``~~strikethrough~~``.
    autolink_urls : bool, default True
        Turn bare URLs into links.
    wide_char_width : int, default 2
        Width counted for East Asian wide and full-width characters when
        measuring table cells.

    """

    parse_tables: bool = field(default=True, metadata={"help": "Parse GFM tables", "importance": "core"})
    parse_strikethrough: bool = field(
        default=True, metadata={"help": "Parse ~~strikethrough~~ text", "importance": "core"}
    )
    autolink_urls: bool = field(default=True, metadata={"help": "Turn bare URLs into links", "importance": "core"})
    wide_char_width: int = field(
        default=DEFAULT_WIDE_CHAR_WIDTH,
        metadata={"help": "Measured width of wide characters in table cells", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.wide_char_width < 1:
            raise ValueError(f"wide_char_width must be at least 1, got {self.wide_char_width}")
