#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2fxml/parsers/__init__.py
"""Parsers producing the md2fxml AST.

- MarkdownParser: Parse markdown with mistune (requires mistune)

"""

from md2fxml.parsers.base import BaseParser
from md2fxml.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = [
    "BaseParser",
    "MarkdownParser",
    "markdown_to_ast",
]
