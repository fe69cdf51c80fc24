"""The major exported API functions for markdown to FXML conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2fxml/api.py
import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, Union

from md2fxml.ast.nodes import Document
from md2fxml.controller import DocumentController, HyperlinkConsumer
from md2fxml.exceptions import MarkupLoadError
from md2fxml.loader import FxmlLoader
from md2fxml.options.fxml import FxmlRendererOptions
from md2fxml.options.markdown import MarkdownParserOptions
from md2fxml.parsers.markdown import MarkdownParser
from md2fxml.renderers.fxml import FxmlRenderer
from md2fxml.utils.decorators import debug_timer
from md2fxml.utils.security import UrlSanitizer

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO[bytes], IO[str], bytes]
Output = Union[str, Path, IO[bytes], IO[str]]


def _split_kwargs_for_parser_and_renderer(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split keyword options between parser and renderer by field name.

    Returns
    -------
    tuple[dict, dict]
        (parser_kwargs, renderer_kwargs)

    """
    parser_fields = {f.name for f in fields(MarkdownParserOptions)}
    renderer_fields = {f.name for f in fields(FxmlRendererOptions)}

    parser_kwargs: dict[str, Any] = {}
    renderer_kwargs: dict[str, Any] = {}
    unmatched = []
    for key, value in kwargs.items():
        if key in parser_fields:
            parser_kwargs[key] = value
        elif key in renderer_fields:
            renderer_kwargs[key] = value
        else:
            unmatched.append(key)

    if unmatched:
        logger.warning(f"Ignoring options that match neither parser nor renderer: {unmatched}")
    return parser_kwargs, renderer_kwargs


def _merge_options(options: Any, options_class: type, overrides: dict[str, Any]) -> Any:
    if options is None:
        options = options_class()
    if overrides:
        options = options.create_updated(**overrides)
    return options


def to_ast(
    source: Source,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> Document:
    """Parse markdown into an AST Document.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, a path to a markdown file, or a file-like object
    parser_options : MarkdownParserOptions, optional
        Parser options
    kwargs : Any
        Parser option fields that override ``parser_options``

    Returns
    -------
    Document
        AST document node

    """
    options = _merge_options(parser_options, MarkdownParserOptions, kwargs)
    return MarkdownParser(options).parse(source)


def ast_to_fxml(
    document: Document,
    output: Optional[Output] = None,
    *,
    renderer_options: Optional[FxmlRendererOptions] = None,
    url_sanitizer: Optional[UrlSanitizer] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render an AST Document to FXML markup.

    Parameters
    ----------
    document : Document
        AST document node
    output : str, Path, IO[bytes], IO[str] or None, optional
        Destination for the markup. If None, the markup is returned.
    renderer_options : FxmlRendererOptions, optional
        Renderer options
    url_sanitizer : UrlSanitizer, optional
        Replaces the default link and image URL sanitizer
    kwargs : Any
        Renderer option fields that override ``renderer_options``

    Returns
    -------
    str or None
        The markup, or None when it was written to ``output``

    Raises
    ------
    StructuralConsistencyError
        If a table row or cell is found outside its table structure

    """
    options = _merge_options(renderer_options, FxmlRendererOptions, kwargs)
    renderer = FxmlRenderer(options, url_sanitizer=url_sanitizer)
    if output is None:
        return renderer.render_to_string(document)
    renderer.render(document, output)
    return None


def to_fxml(
    source: Source,
    output: Optional[Output] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[FxmlRendererOptions] = None,
    url_sanitizer: Optional[UrlSanitizer] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Convert markdown to FXML markup.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, a path to a markdown file, or a file-like object
    output : str, Path, IO[bytes], IO[str] or None, optional
        Destination for the markup. If None, the markup is returned.
    parser_options : MarkdownParserOptions, optional
        Parser options
    renderer_options : FxmlRendererOptions, optional
        Renderer options
    url_sanitizer : UrlSanitizer, optional
        Replaces the default link and image URL sanitizer
    kwargs : Any
        Parser or renderer option fields, routed by name

    Returns
    -------
    str or None
        The markup, or None when it was written to ``output``

    Examples
    --------
        >>> markup = to_fxml("# Title\\n\\nSome *emphasis*.")
        >>> to_fxml("notes.md", output="notes.fxml", include_header=False)

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    with debug_timer(logger, "Conversion (markdown -> fxml)"):
        document = to_ast(source, parser_options=parser_options, **parser_kwargs)
        return ast_to_fxml(
            document,
            output,
            renderer_options=renderer_options,
            url_sanitizer=url_sanitizer,
            **renderer_kwargs,
        )


def load_fxml(markup: str, controller: Optional[DocumentController] = None) -> DocumentController:
    """Load FXML markup into a widget tree bound to ``controller``.

    The controller is attached before it is returned, so code blocks are
    already decoded.

    Raises
    ------
    MarkupLoadError
        If the loader rejects the markup or the markup has no ``body``

    """
    controller = controller or DocumentController()
    FxmlLoader(controller).load(markup)
    if controller.body is None:
        raise MarkupLoadError("Markup does not define the document body")
    controller.attach()
    return controller


def to_fxml_controller(
    source: Source,
    hyperlink_consumer: Optional[HyperlinkConsumer] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[FxmlRendererOptions] = None,
    url_sanitizer: Optional[UrlSanitizer] = None,
    **kwargs: Any,
) -> DocumentController:
    """Convert markdown and load the markup into a controller-bound widget tree.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, a path to a markdown file, or a file-like object
    hyperlink_consumer : callable, optional
        Receives the URL of every clicked hyperlink
    parser_options, renderer_options, url_sanitizer, kwargs
        As for :func:`to_fxml`

    Returns
    -------
    DocumentController
        Attached controller whose ``body`` is the document root

    Examples
    --------
        >>> controller = to_fxml_controller("[home](https://example.com)", hyperlink_consumer=print)
        >>> controller.on_resize(640.0)

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    options = _merge_options(renderer_options, FxmlRendererOptions, renderer_kwargs)
    document = to_ast(source, parser_options=parser_options, **parser_kwargs)
    markup = FxmlRenderer(options, url_sanitizer=url_sanitizer).render_to_string(document)

    controller = DocumentController(
        hyperlink_consumer=hyperlink_consumer,
        hyperlink_handler=options.hyperlink_handler,
    )
    return load_fxml(markup, controller)
