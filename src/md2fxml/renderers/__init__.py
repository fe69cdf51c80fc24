#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2fxml/renderers/__init__.py
"""AST renderers for converting documents to FXML markup.

- FxmlRenderer: Render to declarative JavaFX FXML (always available)

Examples
--------
Convert AST to FXML:

    >>> from md2fxml.ast import Document, Heading, Text
    >>> from md2fxml.renderers import FxmlRenderer
    >>> from md2fxml.options import FxmlRendererOptions
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text("Title")])
    ... ])
    >>> renderer = FxmlRenderer(FxmlRendererOptions(include_header=False))
    >>> markup = renderer.render_to_string(doc)

"""

from md2fxml.renderers.base import BaseRenderer
from md2fxml.renderers.fxml import FxmlRenderer

__all__ = [
    "BaseRenderer",
    "FxmlRenderer",
]
