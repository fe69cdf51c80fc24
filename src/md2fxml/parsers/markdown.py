#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/parsers/markdown.py
"""Markdown to AST parser.

This module builds the md2fxml AST from markdown text using mistune. mistune
is run without a renderer, and its token stream is converted node by node.
Tables, strikethrough and bare-URL autolinks are provided by mistune
plugins and can be switched off through :class:`MarkdownParserOptions`.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Callable, Union

from md2fxml.ast import (
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
    extract_plain_text,
)
from md2fxml.constants import DEPS_MARKDOWN
from md2fxml.exceptions import ParsingError
from md2fxml.options.markdown import MarkdownParserOptions
from md2fxml.parsers.base import BaseParser
from md2fxml.utils.decorators import debug_timer, requires_dependencies
from md2fxml.utils.inputs import load_text_content
from md2fxml.utils.text import display_width

logger = logging.getLogger(__name__)

_ALIGNMENTS = frozenset({"left", "center", "right"})


def _children_of(token: dict[str, Any]) -> list[dict[str, Any]]:
    children = token.get("children", [])
    if not isinstance(children, list):
        return []
    return [child for child in children if isinstance(child, dict)]


def _attrs_of(token: dict[str, Any]) -> dict[str, Any]:
    attrs = token.get("attrs", {})
    return attrs if isinstance(attrs, dict) else {}


class MarkdownParser(BaseParser):
    r"""Convert markdown to the md2fxml AST.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

        self._inline_handlers: dict[str, Callable[[dict[str, Any]], Node | None]] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "softbreak": self._handle_softbreak_token,
            "linebreak": self._handle_linebreak_token,
            "inline_html": self._handle_inline_html_token,
        }

    def _plugins(self) -> list[str]:
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.autolink_urls:
            plugins.append("url")
        return plugins

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markdown input: file path, file-like object, raw bytes or text

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        import mistune

        markdown_content = load_text_content(input_data)
        markdown = mistune.create_markdown(plugins=self._plugins(), renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            try:
                tokens, _state = markdown.parse(markdown_content)
            except Exception as e:
                raise ParsingError(f"Failed to parse markdown: {e}", parsing_stage="tokenize", original_error=e) from e

            children = self._process_tokens(tokens if isinstance(tokens, list) else [])

        return Document(children=children)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block-level mistune token into an AST node."""
        token_type = token.get("type", "")

        if token_type == "heading":
            level = _attrs_of(token).get("level", 1)
            return Heading(level=level, children=self._process_inline_tokens(_children_of(token)))
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(children=self._process_inline_tokens(_children_of(token)))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(_children_of(token)))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return RawBlock(literal=token.get("raw", ""))
        elif token_type == "blank_line":
            return None

        logger.debug(f"Skipping unsupported block token: {token_type!r}")
        return None

    def _process_code_block(self, token: dict[str, Any]) -> Node:
        literal = token.get("raw", "")
        if token.get("style") == "indent":
            return IndentedCodeBlock(literal=literal)
        info = _attrs_of(token).get("info") or None
        return FencedCodeBlock(literal=literal, info=info)

    def _process_list(self, token: dict[str, Any]) -> Node:
        attrs = _attrs_of(token)
        tight = bool(token.get("tight", attrs.get("tight", True)))
        items: list[Node] = [
            ListItem(children=self._process_tokens(_children_of(child)))
            for child in _children_of(token)
            if child.get("type") == "list_item"
        ]
        if attrs.get("ordered", False):
            return OrderedList(start=int(attrs.get("start", 1)), children=items, tight=tight)
        return BulletList(children=items, tight=tight)

    def _process_table(self, token: dict[str, Any]) -> TableBlock:
        """Process a table token.

        mistune puts header cells directly under ``table_head``; they are
        wrapped into one :class:`TableRow` so head and body share the same
        Cell -> Row -> Section -> Block chain.
        """
        sections: list[Node] = []
        for section_token in _children_of(token):
            section_type = section_token.get("type", "")
            if section_type == "table_head":
                header_row = TableRow(children=self._process_table_cells(_children_of(section_token)))
                sections.append(TableHead(children=[header_row]))
            elif section_type == "table_body":
                rows: list[Node] = [
                    TableRow(children=self._process_table_cells(_children_of(row_token)))
                    for row_token in _children_of(section_token)
                ]
                sections.append(TableBody(children=rows))
        return TableBlock(children=sections)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[Node]:
        cells: list[Node] = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            align = _attrs_of(cell_token).get("align")
            cell = TableCell(
                alignment=align if align in _ALIGNMENTS else None,
                children=self._process_inline_tokens(_children_of(cell_token)),
            )
            cell.width = float(display_width(extract_plain_text(cell), self.options.wide_char_width))
            cells.append(cell)
        return cells

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            token_type = token.get("type", "")
            handler = self._inline_handlers.get(token_type)
            if handler is None:
                logger.debug(f"Skipping unsupported inline token: {token_type!r}")
                continue
            node = handler(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(literal=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> StrongEmphasis:
        return StrongEmphasis(children=self._process_inline_tokens(_children_of(token)))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(children=self._process_inline_tokens(_children_of(token)))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(children=self._process_inline_tokens(_children_of(token)))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(literal=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = _attrs_of(token)
        return Link(
            destination=attrs.get("url", ""),
            title=attrs.get("title"),
            children=self._process_inline_tokens(_children_of(token)),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle an image token; the alt text arrives as inline children."""
        attrs = _attrs_of(token)
        return Image(
            destination=attrs.get("url", ""),
            title=attrs.get("title"),
            children=self._process_inline_tokens(_children_of(token)),
        )

    def _handle_softbreak_token(self, token: dict[str, Any]) -> SoftBreak:
        return SoftBreak()

    def _handle_linebreak_token(self, token: dict[str, Any]) -> HardBreak:
        return HardBreak()

    def _handle_inline_html_token(self, token: dict[str, Any]) -> RawInline:
        return RawInline(literal=token.get("raw", ""))


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    """Parse markdown text into an AST Document.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        AST document node

    Examples
    --------
        >>> doc = markdown_to_ast("# Title\n\nSome text")

    """
    return MarkdownParser(options).parse(markdown_content)
