#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/options/__init__.py
"""Options dataclasses for md2fxml parsers and renderers."""

from md2fxml.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2fxml.options.fxml import FxmlRendererOptions
from md2fxml.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "FxmlRendererOptions",
    "MarkdownParserOptions",
]
