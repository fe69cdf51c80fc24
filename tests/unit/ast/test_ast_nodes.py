#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_ast_nodes.py
"""Unit tests for AST node classes and visitor dispatch."""

import pytest

from md2fxml.ast import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
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
    NodeVisitor,
    NodeWalker,
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


@pytest.mark.unit
class TestNodeConstruction:
    """Tests for node construction and parent links."""

    def test_children_adopted_on_construction(self):
        text = Text("hello")
        para = Paragraph(children=[text])
        doc = Document(children=[para])

        assert text.parent is para
        assert para.parent is doc
        assert doc.parent is None

    def test_append_child_sets_parent(self):
        doc = Document()
        para = doc.append_child(Paragraph())

        assert doc.children == [para]
        assert para.parent is doc

    def test_iter_ancestors(self):
        cell = TableCell(children=[Text("x")])
        row = TableRow(children=[cell])
        body = TableBody(children=[row])
        table = TableBlock(children=[body])

        assert list(cell.iter_ancestors()) == [row, body, table]

    def test_kind_is_class_name(self):
        assert StrongEmphasis().kind == "StrongEmphasis"
        assert TableCell().kind == "TableCell"

    def test_parent_excluded_from_equality(self):
        first = Paragraph(children=[Text("a")])
        second = Text("a")
        Document(children=[first])

        assert first.children[0] == second

    def test_ordered_list_defaults(self):
        ordered = OrderedList()

        assert ordered.start == 1
        assert ordered.tight is True

    def test_heading_level_must_be_positive(self):
        with pytest.raises(ValueError, match="at least 1"):
            Heading(level=0)

    def test_heading_level_above_six_allowed(self):
        assert Heading(level=9).level == 9

    def test_table_cell_width_must_be_non_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            TableCell(width=-1.0)

    def test_node_type_groups_are_disjoint(self):
        assert not set(BLOCK_NODE_TYPES) & set(INLINE_NODE_TYPES)
        assert Paragraph in BLOCK_NODE_TYPES
        assert Text in INLINE_NODE_TYPES


class _KindRecorder(NodeWalker):
    def __init__(self):
        self.kinds = []

    def generic_visit(self, node):
        self.kinds.append(node.kind)
        super().generic_visit(node)


@pytest.mark.unit
class TestVisitorDispatch:
    """Tests for accept/visit dispatch."""

    @pytest.mark.parametrize(
        "node, method",
        [
            (Document(), "visit_document"),
            (Heading(level=1), "visit_heading"),
            (Paragraph(), "visit_paragraph"),
            (BlockQuote(), "visit_block_quote"),
            (BulletList(), "visit_bullet_list"),
            (OrderedList(), "visit_ordered_list"),
            (ListItem(), "visit_list_item"),
            (FencedCodeBlock(literal=""), "visit_fenced_code_block"),
            (IndentedCodeBlock(literal=""), "visit_indented_code_block"),
            (ThematicBreak(), "visit_thematic_break"),
            (RawBlock(literal=""), "visit_raw_block"),
            (TableBlock(), "visit_table_block"),
            (TableHead(), "visit_table_head"),
            (TableBody(), "visit_table_body"),
            (TableRow(), "visit_table_row"),
            (TableCell(), "visit_table_cell"),
            (Text(""), "visit_text"),
            (Code(""), "visit_code"),
            (Emphasis(), "visit_emphasis"),
            (StrongEmphasis(), "visit_strong_emphasis"),
            (Strikethrough(), "visit_strikethrough"),
            (Link(destination=""), "visit_link"),
            (Image(destination=""), "visit_image"),
            (RawInline(literal=""), "visit_raw_inline"),
            (SoftBreak(), "visit_soft_break"),
            (HardBreak(), "visit_hard_break"),
        ],
    )
    def test_accept_calls_matching_visit_method(self, node, method):
        calls = []

        class Spy(NodeWalker):
            pass

        spy = Spy()
        setattr(spy, method, lambda n: calls.append(n))
        node.accept(spy)

        assert calls == [node]

    def test_incomplete_visitor_cannot_be_instantiated(self):
        class Partial(NodeVisitor):
            def visit_document(self, node):
                pass

        with pytest.raises(TypeError):
            Partial()

    def test_walker_visits_in_document_order(self):
        doc = Document(
            children=[
                Heading(level=1, children=[Text("T")]),
                Paragraph(children=[Emphasis(children=[Text("e")]), SoftBreak()]),
            ]
        )
        recorder = _KindRecorder()
        doc.accept(recorder)

        assert recorder.kinds == ["Document", "Heading", "Text", "Paragraph", "Emphasis", "Text", "SoftBreak"]
