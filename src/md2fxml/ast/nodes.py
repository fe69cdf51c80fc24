#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/ast/nodes.py
"""AST node classes consumed by the FXML renderer.

The node set mirrors a CommonMark document with the GFM table and
strikethrough extensions. Nodes are produced by a parser (see
:mod:`md2fxml.parsers.markdown`) and are read-only from the renderer's point
of view.

Node Hierarchy
--------------
All nodes inherit from :class:`Node` and support the visitor pattern.

Block-level nodes:
    - Document, Heading, Paragraph, BlockQuote
    - BulletList, OrderedList, ListItem
    - FencedCodeBlock, IndentedCodeBlock, ThematicBreak, RawBlock
    - TableBlock, TableHead, TableBody, TableRow, TableCell

Inline nodes:
    - Text, Code, Emphasis, StrongEmphasis, Strikethrough
    - Link, Image, RawInline, SoftBreak, HardBreak

Every node owns an ordered ``children`` list. When a node is constructed it
adopts its children by setting their ``parent`` reference; the parent is a
back-reference used for structural validation and never for mutation.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node(ABC):
    """Base class for all AST nodes.

    Attributes
    ----------
    children : list of Node
        Child nodes in document order
    parent : Node or None
        Non-owning reference to the node that adopted this one

    """

    children: list[Node]
    parent: Optional[Node]

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    @property
    def kind(self) -> str:
        """Name of the node kind (the class name)."""
        return type(self).__name__

    def append_child(self, child: Node) -> Node:
        """Adopt ``child`` as the last child of this node and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def iter_ancestors(self) -> Iterator[Node]:
        """Yield the parent chain from the nearest ancestor upwards."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """


def _parent_field() -> Any:
    return field(default=None, init=False, repr=False, compare=False)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing block-level children.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading with a level of 1 or more and inline children.

    Parameters
    ----------
    level : int
        Heading level; every level from 4 upwards renders alike
    children : list of Node, default = empty list
        Inline content

    """

    level: int
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Heading level must be at least 1, got {self.level}")
        super().__post_init__()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level children."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block_quote(self)


@dataclass
class BulletList(Node):
    """Unordered list whose children are :class:`ListItem` nodes."""

    children: list[Node] = field(default_factory=list)
    tight: bool = True
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Node):
    """Ordered list whose children are :class:`ListItem` nodes.

    Parameters
    ----------
    start : int, default = 1
        Number of the first item
    children : list of Node, default = empty list
        List items
    tight : bool, default = True
        Whether the list was written without blank lines between items

    """

    start: int = 1
    children: list[Node] = field(default_factory=list)
    tight: bool = True
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_ordered_list(self)


@dataclass
class ListItem(Node):
    """Single list item containing block-level children."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class FencedCodeBlock(Node):
    """Fenced code block.

    Parameters
    ----------
    literal : str
        Code content, verbatim
    info : str or None, default = None
        Info string following the opening fence

    """

    literal: str
    info: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_fenced_code_block(self)


@dataclass
class IndentedCodeBlock(Node):
    """Indented code block holding verbatim ``literal`` text."""

    literal: str
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_indented_code_block(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_thematic_break(self)


@dataclass
class RawBlock(Node):
    """Raw block-level markup (e.g. an HTML block), kept verbatim."""

    literal: str
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_raw_block(self)


# ============================================================================
# Table Nodes
# ============================================================================


@dataclass
class TableBlock(Node):
    """Table whose children are a :class:`TableHead` and optionally a :class:`TableBody`."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_block(self)


@dataclass
class TableHead(Node):
    """Header section of a table, holding :class:`TableRow` children."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_head(self)


@dataclass
class TableBody(Node):
    """Body section of a table, holding :class:`TableRow` children."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_body(self)


@dataclass
class TableRow(Node):
    """Table row holding :class:`TableCell` children."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell with inline children.

    Parameters
    ----------
    alignment : {"left", "center", "right"} or None, default = None
        Column alignment declared by the delimiter row
    width : float, default = 0.0
        Approximate text width of the cell, measured by the parser
    children : list of Node, default = empty list
        Inline content

    """

    alignment: Optional[Alignment] = None
    width: float = 0.0
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Table cell width must be non-negative, got {self.width}")
        super().__post_init__()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_cell(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text with a verbatim ``literal``."""

    literal: str
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)


@dataclass
class Code(Node):
    """Inline code span with a verbatim ``literal``."""

    literal: str
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code(self)


@dataclass
class Emphasis(Node):
    """Emphasized (italic) inline content."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_emphasis(self)


@dataclass
class StrongEmphasis(Node):
    """Strongly emphasized (bold) inline content."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strong_emphasis(self)


@dataclass
class Strikethrough(Node):
    """Struck-through inline content."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    destination : str
        Raw link destination as written in the source
    title : str or None, default = None
        Optional link title
    children : list of Node, default = empty list
        Link text

    """

    destination: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image reference; its children make up the alt text.

    Parameters
    ----------
    destination : str
        Raw image source as written in the source
    title : str or None, default = None
        Optional image title
    children : list of Node, default = empty list
        Alt text content

    """

    destination: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class RawInline(Node):
    """Raw inline markup (e.g. an inline HTML tag), kept verbatim."""

    literal: str
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_raw_inline(self)


@dataclass
class SoftBreak(Node):
    """Soft line break (a newline inside a paragraph)."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_soft_break(self)


@dataclass
class HardBreak(Node):
    """Hard line break (two trailing spaces or a backslash)."""

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = _parent_field()

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_hard_break(self)


BLOCK_NODE_TYPES: tuple[type[Node], ...] = (
    Document,
    Heading,
    Paragraph,
    BlockQuote,
    BulletList,
    OrderedList,
    ListItem,
    FencedCodeBlock,
    IndentedCodeBlock,
    ThematicBreak,
    RawBlock,
    TableBlock,
    TableHead,
    TableBody,
    TableRow,
    TableCell,
)

INLINE_NODE_TYPES: tuple[type[Node], ...] = (
    Text,
    Code,
    Emphasis,
    StrongEmphasis,
    Strikethrough,
    Link,
    Image,
    RawInline,
    SoftBreak,
    HardBreak,
)
