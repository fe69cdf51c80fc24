#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/options/fxml.py
"""Configuration options for FXML rendering.

This module defines options for rendering the AST into FXML markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2fxml.constants import (
    DEFAULT_BULLET_PREFIX,
    DEFAULT_HYPERLINK_HANDLER,
    DEFAULT_IMAGE_PREFIX,
    DEFAULT_WIDTH_PRECISION,
)
from md2fxml.options.base import BaseRendererOptions


@dataclass(frozen=True)
class FxmlRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-FXML rendering.

    Parameters
    ----------
    include_header : bool, default True
        Emit the XML declaration and the ``<?import ...?>`` prologue.
    bullet_prefix : str, default "· "
        Prefix text of every item in an unordered list.
    image_prefix : str, default "! "
        Text placed before an image's alt text.
    hyperlink_handler : str, default "handleHyperlinkClick"
        Controller handler bound to the click event of link-bearing runs.
    width_precision : int, default 6
        Decimal places used for column width fractions.

    """

    include_header: bool = field(
        default=True,
        metadata={"help": "Emit the XML declaration and import prologue", "importance": "core"},
    )
    bullet_prefix: str = field(
        default=DEFAULT_BULLET_PREFIX,
        metadata={"help": "Prefix text for unordered list items", "importance": "advanced"},
    )
    image_prefix: str = field(
        default=DEFAULT_IMAGE_PREFIX,
        metadata={"help": "Text placed before an image's alt text", "importance": "advanced"},
    )
    hyperlink_handler: str = field(
        default=DEFAULT_HYPERLINK_HANDLER,
        metadata={"help": "Controller handler name bound to hyperlink clicks", "importance": "advanced"},
    )
    width_precision: int = field(
        default=DEFAULT_WIDTH_PRECISION,
        metadata={"help": "Decimal places for column width fractions", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if not 1 <= self.width_precision <= 12:
            raise ValueError(f"width_precision must be between 1 and 12, got {self.width_precision}")
        if not self.hyperlink_handler.isidentifier():
            raise ValueError(f"hyperlink_handler must be an identifier, got {self.hyperlink_handler!r}")
