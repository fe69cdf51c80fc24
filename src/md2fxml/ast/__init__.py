#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/ast/__init__.py
"""Abstract Syntax Tree consumed by the FXML renderer.

The AST is produced by a markdown parser and walked read-only by
:class:`md2fxml.renderers.fxml.FxmlRenderer`.

Examples
--------
Building a small document by hand:

    >>> from md2fxml.ast import Document, Heading, Paragraph, Text, Emphasis
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text("Title")]),
    ...     Paragraph(children=[Text("Some "), Emphasis(children=[Text("text")])]),
    ... ])

"""

from md2fxml.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    Alignment,
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
from md2fxml.ast.utils import count_children, extract_alt_text, extract_plain_text
from md2fxml.ast.visitors import NodeVisitor, NodeWalker

__all__ = [
    "BLOCK_NODE_TYPES",
    "INLINE_NODE_TYPES",
    "Alignment",
    "BlockQuote",
    "BulletList",
    "Code",
    "Document",
    "Emphasis",
    "FencedCodeBlock",
    "HardBreak",
    "Heading",
    "Image",
    "IndentedCodeBlock",
    "Link",
    "ListItem",
    "Node",
    "NodeVisitor",
    "NodeWalker",
    "OrderedList",
    "Paragraph",
    "RawBlock",
    "RawInline",
    "SoftBreak",
    "Strikethrough",
    "StrongEmphasis",
    "TableBlock",
    "TableBody",
    "TableCell",
    "TableHead",
    "TableRow",
    "Text",
    "ThematicBreak",
    "count_children",
    "extract_alt_text",
    "extract_plain_text",
]
