#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/parsers/base.py
"""Base class for document parsers.

A parser turns source text into the md2fxml AST. The renderer never depends
on a concrete parser; any code able to build the AST can feed it.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2fxml.ast import Document
from md2fxml.exceptions import InvalidOptionsError
from md2fxml.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for parsers producing the md2fxml AST.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
        >>> class EmptyParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document(children=[])

    """

    def __init__(self, options: BaseParserOptions | None = None):
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Reject options built for another parser before any work starts."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Build a :class:`~md2fxml.ast.Document` from ``input_data``.

        Strings are treated as source text unless they name an existing
        file; bytes and binary streams are decoded first.

        Raises
        ------
        ParsingError
            If parsing fails
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError
