#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/renderers/_markup_writer.py
"""Serializer for element/attribute markup events.

:class:`MarkupEmitter` is the only place that knows the textual syntax of
the output. It keeps no state besides its buffer: it does not track which
elements are open, so balancing is the caller's job.
"""

from __future__ import annotations

import html
import re
from typing import Mapping, Optional

# Characters XML 1.0 does not allow anywhere in a document, not even as references
_XML_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

REPLACEMENT_CHARACTER = "\ufffd"


def escape_markup(text: str) -> str:
    """Escape text for use as XML character data or a quoted attribute value.

    Control characters that XML 1.0 forbids (everything below U+0020 except
    tab, line feed and carriage return) and the noncharacters U+FFFE and
    U+FFFF are replaced with U+FFFD, so the result always loads.
    """
    return html.escape(_XML_ILLEGAL_CHARS.sub(REPLACEMENT_CHARACTER, text), quote=True)


class MarkupEmitter:
    """Accumulate markup text from open/close/raw/text events.

    Examples
    --------
    >>> emitter = MarkupEmitter()
    >>> emitter.open_tag("Text", {"fill": "#248F"})
    >>> emitter.text("a < b")
    >>> emitter.close_tag("Text")
    >>> emitter.getvalue()
    '<Text fill="#248F">a &lt; b</Text>'

    """

    def __init__(self) -> None:
        self._output: list[str] = []
        self._last_char = ""

    def _append(self, chunk: str) -> None:
        if chunk:
            self._output.append(chunk)
            self._last_char = chunk[-1]

    @staticmethod
    def _format_attrs(attrs: Optional[Mapping[str, str]]) -> str:
        if not attrs:
            return ""
        return "".join(f' {name}="{escape_markup(str(value))}"' for name, value in attrs.items())

    def open_tag(self, name: str, attrs: Optional[Mapping[str, str]] = None) -> None:
        """Emit ``<name attr="...">``."""
        self._append(f"<{name}{self._format_attrs(attrs)}>")

    def empty_tag(self, name: str, attrs: Optional[Mapping[str, str]] = None) -> None:
        """Emit a self-closing ``<name attr="..."/>``."""
        self._append(f"<{name}{self._format_attrs(attrs)}/>")

    def close_tag(self, name: str) -> None:
        """Emit ``</name>``."""
        self._append(f"</{name}>")

    def raw(self, text: str) -> None:
        """Emit ``text`` unchanged; the caller guarantees it is well-formed."""
        self._append(text)

    def text(self, text: str) -> None:
        """Emit ``text`` as escaped character data."""
        self._append(escape_markup(text))

    def line(self) -> None:
        """Emit a newline unless the output is empty or already ends with one."""
        if self._last_char and self._last_char != "\n":
            self._append("\n")

    def getvalue(self) -> str:
        """Return everything emitted so far."""
        return "".join(self._output)
