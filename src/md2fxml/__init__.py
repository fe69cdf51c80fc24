"""md2fxml - Render markdown as declarative JavaFX FXML markup.

md2fxml parses markdown into a small AST and renders it as FXML: headings,
paragraphs and inline styles become ``Text`` runs inside ``TextFlow``
containers, lists and block quotes become nested ``VBox``/``HBox`` boxes,
tables become ``GridPane`` grids with proportional column widths, and code
blocks become read-only ``TextArea`` controls.

Markup that is loaded into a widget tree is finished by a post-layout pass:
code block text is decoded from its payload, and column widths follow the
width of the container.

Requirements
------------
- Python 3.10+
- mistune for markdown parsing, defusedxml for loading markup

Examples
--------
Convert markdown to FXML:

    >>> from md2fxml import to_fxml
    >>> markup = to_fxml("# Title\\n\\nSome **bold** text.")

Load the result and follow hyperlink clicks:

    >>> from md2fxml import to_fxml_controller
    >>> controller = to_fxml_controller("[docs](https://example.com)", hyperlink_consumer=print)
    >>> controller.on_resize(800.0)

See Also
--------
md2fxml.ast : AST node definitions and utilities
md2fxml.renderers : The FXML renderer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2fxml requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from md2fxml.api import ast_to_fxml, load_fxml, to_ast, to_fxml, to_fxml_controller
from md2fxml.controller import DocumentController
from md2fxml.exceptions import (
    DependencyError,
    MarkupLoadError,
    Md2FxmlError,
    ParsingError,
    PayloadIntegrityError,
    RenderingError,
    StructuralConsistencyError,
)
from md2fxml.options import FxmlRendererOptions, MarkdownParserOptions

__all__ = [
    "__version__",
    "DependencyError",
    "DocumentController",
    "FxmlRendererOptions",
    "MarkdownParserOptions",
    "MarkupLoadError",
    "Md2FxmlError",
    "ParsingError",
    "PayloadIntegrityError",
    "RenderingError",
    "StructuralConsistencyError",
    "ast_to_fxml",
    "load_fxml",
    "to_ast",
    "to_fxml",
    "to_fxml_controller",
]
