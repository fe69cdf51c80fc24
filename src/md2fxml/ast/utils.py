#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/ast/utils.py
r"""Utility functions for working with AST nodes.

Functions
---------
extract_alt_text : Flatten an image's children into its alt text
extract_plain_text : Concatenate every Text and Code literal under a node
count_children : Number of immediate children of a node

Examples
--------
    >>> from md2fxml.ast import Image, SoftBreak, Text
    >>> image = Image(destination="a.png", children=[Text("line1"), SoftBreak(), Text("line2")])
    >>> extract_alt_text(image)
    'line1\nline2'

"""

from __future__ import annotations

from md2fxml.ast.nodes import Code, HardBreak, Node, SoftBreak, Text
from md2fxml.ast.visitors import NodeWalker


class _AltTextCollector(NodeWalker):
    def __init__(self) -> None:
        self.parts: list[str] = []

    def visit_text(self, node: Text) -> None:
        self.parts.append(node.literal)

    def visit_soft_break(self, node: SoftBreak) -> None:
        self.parts.append("\n")

    def visit_hard_break(self, node: HardBreak) -> None:
        self.parts.append("\n")


class _PlainTextCollector(_AltTextCollector):
    def visit_code(self, node: Code) -> None:
        self.parts.append(node.literal)


def extract_alt_text(node: Node) -> str:
    r"""Flatten the children of ``node`` into one alt-text string.

    Text literals are concatenated verbatim and each soft or hard line break
    contributes ``"\n"``. Every other kind only contributes its descendants.
    The traversal is read-only.

    Parameters
    ----------
    node : Node
        Usually an :class:`~md2fxml.ast.nodes.Image`

    Returns
    -------
    str
        The flattened alt text

    """
    collector = _AltTextCollector()
    collector.visit_children(node)
    return "".join(collector.parts)


def extract_plain_text(node: Node) -> str:
    """Concatenate text, code and line breaks under ``node`` (node included)."""
    collector = _PlainTextCollector()
    node.accept(collector)
    return "".join(collector.parts)


def count_children(node: Node) -> int:
    """Return the number of immediate children of ``node``."""
    return len(node.children)
