#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/renderers/fxml.py
"""FXML rendering from AST.

This module provides the FxmlRenderer class which converts AST nodes into
declarative JavaFX FXML markup. The markup is meant to be instantiated by an
FXML loader (see :mod:`md2fxml.loader`) and then finished by the post-layout
pass (see :mod:`md2fxml.layout`), which decodes code block payloads and
turns column width fractions into absolute widths.

Inline content becomes ``Text`` runs inside ``TextFlow`` containers, with
:class:`~md2fxml.renderers._text_flow.TextFlowCoordinator` deciding when
containers open and close. Lists, tables and links push typed context frames
onto a stack for the duration of their rendering.

"""

from __future__ import annotations

import logging
import re
from typing import Mapping

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
from md2fxml.ast.utils import count_children, extract_alt_text
from md2fxml.ast.visitors import NodeVisitor
from md2fxml.constants import (
    ATTR_ALIGNMENT,
    ATTR_GRID_COLUMN,
    ATTR_GRID_ROW,
    ATTR_ON_CLICK,
    ATTR_USER_DATA,
    ATTR_WIDTH_FRACTION,
    CELL_ALIGNMENTS,
    FXML_PROLOGUE,
    HEADING_PREFABS,
    PREFAB_BLOCK_QUOTE,
    PREFAB_CODE_BLOCK,
    PREFAB_DOCUMENT,
    PREFAB_EMPHASIS,
    PREFAB_HYPERLINK,
    PREFAB_LIST_BLOCK_INNER,
    PREFAB_LIST_BLOCK_OUTER,
    PREFAB_STRIKETHROUGH,
    PREFAB_STRONG_EMPHASIS,
    PREFAB_TABLE,
    PREFAB_TABLE_CELL,
    PREFAB_TEXT,
    PROP_COLUMN_CONSTRAINTS,
    PROP_USER_DATA,
    TAG_COLUMN_CONSTRAINTS,
    TAG_DOCUMENT,
    TAG_GRID,
    TAG_HBOX,
    TAG_SEPARATOR,
    TAG_TEXT,
    TAG_TEXT_AREA,
    TAG_VBOX,
)
from md2fxml.exceptions import StructuralConsistencyError
from md2fxml.options.fxml import FxmlRendererOptions
from md2fxml.renderers._markup_writer import MarkupEmitter
from md2fxml.renderers._render_context import LinkContext, ListContext, RenderContextStack
from md2fxml.renderers._table_layout import TableContext, cell_weight
from md2fxml.renderers._text_flow import TextFlowCoordinator
from md2fxml.renderers.base import BaseRenderer
from md2fxml.utils.decorators import debug_timer
from md2fxml.utils.encoding import encode_payload
from md2fxml.utils.security import DefaultUrlSanitizer, UrlSanitizer

logger = logging.getLogger(__name__)

_RAW_LINE_BREAK = re.compile(r" *<br */?> *", re.IGNORECASE)
_RAW_RULE = re.compile(r" *<hr */?> *", re.IGNORECASE)

_SECTION = (TableHead, TableBody)
_ROW_CHAIN: tuple[tuple[type[Node], ...], ...] = (_SECTION, (TableBlock,))
_CELL_CHAIN: tuple[tuple[type[Node], ...], ...] = ((TableRow,), _SECTION, (TableBlock,))


class FxmlRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to FXML markup.

    Parameters
    ----------
    options : FxmlRendererOptions or None, default = None
        FXML rendering options
    url_sanitizer : UrlSanitizer or None, default = None
        Sanitizer applied to every link and image destination. Defaults to
        :class:`~md2fxml.utils.security.DefaultUrlSanitizer`.

    Examples
    --------
        >>> from md2fxml.ast import Document, Paragraph, Text
        >>> doc = Document(children=[Paragraph(children=[Text("Hello")])])
        >>> markup = FxmlRenderer().render_to_string(doc)

    """

    def __init__(self, options: FxmlRendererOptions | None = None, url_sanitizer: UrlSanitizer | None = None):
        """Initialize the FXML renderer with options."""
        BaseRenderer._validate_options_type(options, FxmlRendererOptions, "fxml")
        options = options or FxmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: FxmlRendererOptions = options
        self.url_sanitizer: UrlSanitizer = url_sanitizer or DefaultUrlSanitizer()
        self._reset()

    def _reset(self) -> None:
        self._emitter = MarkupEmitter()
        self._text_flow = TextFlowCoordinator(self._emitter)
        self._contexts = RenderContextStack()

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an FXML string.

        All per-document state is created fresh for every call.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            FXML text

        Raises
        ------
        StructuralConsistencyError
            If a table row or cell breaks its ancestor chain; nothing is
            returned for the document in that case

        """
        self._reset()
        try:
            with debug_timer(logger, "Rendering (fxml)"):
                doc.accept(self)
            return self._emitter.getvalue()
        finally:
            self._reset()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _link_aware(self, base: Mapping[str, str]) -> dict[str, str]:
        """Return ``base`` plus hyperlink attributes when a usable link is active."""
        attrs = dict(base)
        link = self._contexts.innermost(LinkContext)
        if link is not None and link.is_active:
            attrs.update(PREFAB_HYPERLINK)
            attrs[ATTR_ON_CLICK] = f"#{self.options.hyperlink_handler}"
            attrs[ATTR_USER_DATA] = link.href  # type: ignore[assignment]
        return attrs

    def _open_box(self, tag: str, attrs: Mapping[str, str] | None = None) -> None:
        self._emitter.open_tag(tag, attrs)
        self._emitter.line()

    def _close_box(self, tag: str) -> None:
        self._emitter.close_tag(tag)
        self._emitter.line()

    def _separator(self) -> None:
        self._emitter.empty_tag(TAG_SEPARATOR)
        self._emitter.line()

    def _render_code_block(self, literal: str) -> None:
        # The text is restored on the live widget by the post-layout pass
        self._open_box(TAG_TEXT_AREA, PREFAB_CODE_BLOCK)
        self._emitter.open_tag(PROP_USER_DATA)
        self._emitter.raw(encode_payload(literal))
        self._close_box(PROP_USER_DATA)
        self._close_box(TAG_TEXT_AREA)

    def _render_raw(self, literal: str) -> None:
        fragment = literal.rstrip("\r\n")
        if _RAW_LINE_BREAK.fullmatch(fragment):
            self._text_flow.close_flow()
        elif _RAW_RULE.fullmatch(fragment):
            self._separator()
        else:
            logger.debug("Dropping unsupported raw content: %.40r", literal)

    def _render_list(self, node: Node, context: ListContext, attrs: Mapping[str, str] | None = None) -> None:
        self._open_box(TAG_VBOX, attrs)
        self._contexts.push(context)
        self.visit_children(node)
        self._contexts.pop(context)
        self._emitter.line()
        self._close_box(TAG_VBOX)

    def _render_styled_run(self, node: Node, style: Mapping[str, str]) -> None:
        self._text_flow.open_run(self._link_aware(style))
        self.visit_children(node)
        self._text_flow.close_run()

    def _append_inline_literal(self, literal: str) -> None:
        if not self._text_flow.is_continuing():
            self._text_flow.open_run(self._link_aware(PREFAB_TEXT))
        self._emitter.text(literal)

    def _active_table(self, node: Node, chain: tuple[tuple[type[Node], ...], ...]) -> TableContext:
        """Return the context of the table ``node`` belongs to, validating its ancestor chain.

        Raises
        ------
        StructuralConsistencyError
            If the ancestors of ``node`` do not match ``chain`` or the table
            they lead to is not the table currently being rendered

        """
        ancestor: Node | None = node
        for expected in chain:
            ancestor = ancestor.parent if ancestor is not None else None
            if not isinstance(ancestor, expected):
                raise StructuralConsistencyError(f"Illegal parent of {node.kind}", node_kind=node.kind)

        context = self._contexts.innermost(TableContext)
        if context is None or context.table is not ancestor:
            raise StructuralConsistencyError(
                f"{node.kind} does not belong to the table being rendered", node_kind=node.kind
            )
        return context

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        if self.options.include_header:
            self._emitter.raw(FXML_PROLOGUE)
        self._open_box(TAG_DOCUMENT, PREFAB_DOCUMENT)
        self.visit_children(node)
        self._text_flow.close_flow()
        self._close_box(TAG_DOCUMENT)

    def visit_heading(self, node: Heading) -> None:
        style = HEADING_PREFABS[min(node.level, len(HEADING_PREFABS)) - 1]
        self._text_flow.open_flow()
        self._text_flow.open_run(style)
        self.visit_children(node)
        self._text_flow.close_flow()

    def visit_paragraph(self, node: Paragraph) -> None:
        self._text_flow.open_flow()
        self._text_flow.open_run(self._link_aware(PREFAB_TEXT))
        self.visit_children(node)
        self._text_flow.close_flow()

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._open_box(TAG_VBOX, PREFAB_BLOCK_QUOTE)
        self.visit_children(node)
        self._close_box(TAG_VBOX)

    def visit_bullet_list(self, node: BulletList) -> None:
        self._render_list(node, ListContext(is_ordered=False))

    def visit_ordered_list(self, node: OrderedList) -> None:
        self._render_list(node, ListContext(next_ordinal=node.start, is_ordered=True), PREFAB_LIST_BLOCK_OUTER)

    def visit_list_item(self, node: ListItem) -> None:
        context = self._contexts.innermost(ListContext)
        if context is None:
            prefix = self.options.bullet_prefix
        else:
            prefix = context.take_prefix(self.options.bullet_prefix)

        self._open_box(TAG_HBOX, PREFAB_LIST_BLOCK_OUTER)
        self._emitter.open_tag(TAG_TEXT, PREFAB_TEXT)
        self._emitter.text(prefix)
        self._close_box(TAG_TEXT)

        self._open_box(TAG_VBOX, PREFAB_LIST_BLOCK_INNER)
        self.visit_children(node)
        self._emitter.line()
        self._close_box(TAG_VBOX)
        self._close_box(TAG_HBOX)

    def visit_fenced_code_block(self, node: FencedCodeBlock) -> None:
        self._render_code_block(node.literal)

    def visit_indented_code_block(self, node: IndentedCodeBlock) -> None:
        self._render_code_block(node.literal)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self._separator()

    def visit_raw_block(self, node: RawBlock) -> None:
        self._render_raw(node.literal)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table_block(self, node: TableBlock) -> None:
        self._open_box(TAG_GRID, PREFAB_TABLE)
        context = self._contexts.push(TableContext(table=node))

        self.visit_children(node)

        fractions = context.fractions()
        if fractions:
            precision = self.options.width_precision
            self._open_box(PROP_COLUMN_CONSTRAINTS)
            for fraction in fractions:
                self._emitter.empty_tag(TAG_COLUMN_CONSTRAINTS, {ATTR_WIDTH_FRACTION: f"{fraction:.{precision}f}"})
                self._emitter.line()
            self._close_box(PROP_COLUMN_CONSTRAINTS)

        self._contexts.pop(context)
        self._close_box(TAG_GRID)

    def visit_table_head(self, node: TableHead) -> None:
        self.visit_children(node)

    def visit_table_body(self, node: TableBody) -> None:
        self.visit_children(node)

    def visit_table_row(self, node: TableRow) -> None:
        context = self._active_table(node, _ROW_CHAIN)
        self.visit_children(node)
        context.next_row()

    def visit_table_cell(self, node: TableCell) -> None:
        context = self._active_table(node, _CELL_CHAIN)

        attrs = {
            ATTR_GRID_ROW: str(context.row),
            ATTR_GRID_COLUMN: str(context.column),
            ATTR_ALIGNMENT: CELL_ALIGNMENTS.get(node.alignment, CELL_ALIGNMENTS[None]),
        }
        attrs.update(PREFAB_TABLE_CELL)
        self._open_box(TAG_VBOX, attrs)
        self.visit_children(node)
        self._text_flow.close_flow()
        self._close_box(TAG_VBOX)

        context.add_weight(cell_weight(node.width, count_children(node)))
        context.next_column()

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        self._append_inline_literal(node.literal)

    def visit_code(self, node: Code) -> None:
        # A run carries one font, so inline code joins the surrounding run
        self._append_inline_literal(node.literal)

    def visit_emphasis(self, node: Emphasis) -> None:
        self._render_styled_run(node, PREFAB_EMPHASIS)

    def visit_strong_emphasis(self, node: StrongEmphasis) -> None:
        self._render_styled_run(node, PREFAB_STRONG_EMPHASIS)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self._render_styled_run(node, PREFAB_STRIKETHROUGH)

    def visit_link(self, node: Link) -> None:
        self._text_flow.open_flow()
        context = self._contexts.push(LinkContext(self.url_sanitizer.sanitize_link_url(node.destination)))
        self._render_styled_run(node, PREFAB_TEXT)
        self._contexts.pop(context)

    def visit_image(self, node: Image) -> None:
        self._text_flow.open_flow()
        alt_text = extract_alt_text(node)

        own_context = None
        if self._contexts.innermost(LinkContext) is None:
            own_context = self._contexts.push(LinkContext(self.url_sanitizer.sanitize_image_url(node.destination)))

        self._text_flow.open_run(self._link_aware(PREFAB_HYPERLINK))
        self._emitter.text(self.options.image_prefix + alt_text)
        self._text_flow.close_run()

        if own_context is not None:
            self._contexts.pop(own_context)
        self._text_flow.close_flow()

    def visit_raw_inline(self, node: RawInline) -> None:
        self._render_raw(node.literal)

    def visit_soft_break(self, node: SoftBreak) -> None:
        self._text_flow.close_flow()

    def visit_hard_break(self, node: HardBreak) -> None:
        self._text_flow.close_flow()
