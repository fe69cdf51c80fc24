#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/utils/text.py
"""Text measurement helpers."""

from __future__ import annotations

import unicodedata

from md2fxml.constants import DEFAULT_WIDE_CHAR_WIDTH


def char_width(char: str, wide_width: int = DEFAULT_WIDE_CHAR_WIDTH) -> int:
    """Return the approximate display width of a single character.

    Combining marks and control characters are zero-width; East Asian wide
    (``W``) and full-width (``F``) characters count ``wide_width``.
    """
    if unicodedata.combining(char) or unicodedata.category(char) in ("Cc", "Cf"):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return wide_width
    return 1


def display_width(text: str, wide_width: int = DEFAULT_WIDE_CHAR_WIDTH) -> int:
    """Return the approximate display width of ``text``.

    Examples
    --------
    >>> display_width("abc")
    3
    >>> display_width("表格")
    4

    """
    return sum(char_width(c, wide_width) for c in text)
