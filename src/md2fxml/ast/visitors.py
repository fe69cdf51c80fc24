#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

:class:`NodeVisitor` declares one abstract ``visit_*`` method per node kind.
A concrete visitor that forgets a kind cannot be instantiated, so every
renderer built on it handles the complete node set.

:class:`NodeWalker` is a convenience base for read-only traversals that only
care about a few kinds: its methods recurse into children by default.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2fxml.ast.nodes import (
    BlockQuote,
    BulletList,
    Code,
    Document,
    Emphasis,
    FencedCodeBlock,
    HardBreak,
    Heading,
    Image,
    IndentedCodeBlock,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    RawBlock,
    RawInline,
    SoftBreak,
    Strikethrough,
    StrongEmphasis,
    TableBlock,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses must implement a ``visit_*`` method for every node kind.

    Examples
    --------
    Rendering a document:

        >>> renderer = FxmlRenderer()
        >>> document.accept(renderer)

    """

    def visit_children(self, node: Node) -> None:
        """Visit every child of ``node`` in document order."""
        for child in node.children:
            child.accept(self)

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_fenced_code_block(self, node: FencedCodeBlock) -> Any:
        """Visit a FencedCodeBlock node."""

    @abstractmethod
    def visit_indented_code_block(self, node: IndentedCodeBlock) -> Any:
        """Visit an IndentedCodeBlock node."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""

    @abstractmethod
    def visit_raw_block(self, node: RawBlock) -> Any:
        """Visit a RawBlock node."""

    @abstractmethod
    def visit_table_block(self, node: TableBlock) -> Any:
        """Visit a TableBlock node."""

    @abstractmethod
    def visit_table_head(self, node: TableHead) -> Any:
        """Visit a TableHead node."""

    @abstractmethod
    def visit_table_body(self, node: TableBody) -> Any:
        """Visit a TableBody node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong_emphasis(self, node: StrongEmphasis) -> Any:
        """Visit a StrongEmphasis node."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_raw_inline(self, node: RawInline) -> Any:
        """Visit a RawInline node."""

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""

    @abstractmethod
    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""


class NodeWalker(NodeVisitor):
    """Visitor whose every method recurses into children.

    Override only the kinds you care about; the rest are walked through.
    """

    def generic_visit(self, node: Node) -> None:
        """Visit the children of a node that has no specific handling."""
        self.visit_children(node)

    def visit_document(self, node: Document) -> None:
        self.generic_visit(node)

    def visit_heading(self, node: Heading) -> None:
        self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        self.generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> None:
        self.generic_visit(node)

    def visit_bullet_list(self, node: BulletList) -> None:
        self.generic_visit(node)

    def visit_ordered_list(self, node: OrderedList) -> None:
        self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> None:
        self.generic_visit(node)

    def visit_fenced_code_block(self, node: FencedCodeBlock) -> None:
        self.generic_visit(node)

    def visit_indented_code_block(self, node: IndentedCodeBlock) -> None:
        self.generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self.generic_visit(node)

    def visit_raw_block(self, node: RawBlock) -> None:
        self.generic_visit(node)

    def visit_table_block(self, node: TableBlock) -> None:
        self.generic_visit(node)

    def visit_table_head(self, node: TableHead) -> None:
        self.generic_visit(node)

    def visit_table_body(self, node: TableBody) -> None:
        self.generic_visit(node)

    def visit_table_row(self, node: TableRow) -> None:
        self.generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> None:
        self.generic_visit(node)

    def visit_text(self, node: Text) -> None:
        self.generic_visit(node)

    def visit_code(self, node: Code) -> None:
        self.generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> None:
        self.generic_visit(node)

    def visit_strong_emphasis(self, node: StrongEmphasis) -> None:
        self.generic_visit(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self.generic_visit(node)

    def visit_link(self, node: Link) -> None:
        self.generic_visit(node)

    def visit_image(self, node: Image) -> None:
        self.generic_visit(node)

    def visit_raw_inline(self, node: RawInline) -> None:
        self.generic_visit(node)

    def visit_soft_break(self, node: SoftBreak) -> None:
        self.generic_visit(node)

    def visit_hard_break(self, node: HardBreak) -> None:
        self.generic_visit(node)
