#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/renderers/base.py
"""Base class for AST renderers.

The BaseRenderer provides the shared interface for converting the md2fxml
AST into an output format: options validation and text output writing.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2fxml.ast import Document
from md2fxml.exceptions import InvalidOptionsError
from md2fxml.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Common interface of the md2fxml AST renderers.

    Subclasses implement :meth:`render_to_string`; writing to files and
    streams is shared.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If rendering fails

        """

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write the result to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            File path or file-like object

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Reject options built for another renderer before any work starts."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write ``text`` to a path, a text stream or a binary stream (as UTF-8).

        Examples
        --------
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output("<VBox/>", buffer)
            >>> buffer.getvalue()
            b'<VBox/>'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif isinstance(output, io.TextIOBase):
            output.write(text)
        else:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
