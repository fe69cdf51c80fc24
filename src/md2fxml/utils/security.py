#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/utils/security.py
"""URL sanitization used by the renderer.

The renderer never embeds a raw link or image destination. It asks a
:class:`UrlSanitizer` for a safe version and embeds only that. An empty
string means "no usable URL"; the renderer then emits no hyperlink.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable
from urllib.parse import urlparse

from md2fxml.constants import DANGEROUS_SCHEMES, SAFE_IMAGE_DATA_PREFIX, SAFE_LINK_SCHEMES

logger = logging.getLogger(__name__)


@runtime_checkable
class UrlSanitizer(Protocol):
    """Capability consumed by the renderer to clean link and image URLs."""

    def sanitize_link_url(self, url: str) -> str:
        """Return a safe version of a link destination, or ``""``."""
        ...

    def sanitize_image_url(self, url: str) -> str:
        """Return a safe version of an image source, or ``""``."""
        ...


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative URL.

    Relative URLs do not have a scheme and typically start with #, /, ./, ../, or ?.

    Examples
    --------
    >>> is_relative_url("#section")
    True
    >>> is_relative_url("https://example.com")
    False

    """
    if not url or not url.strip():
        return True

    stripped = url.strip()
    if stripped.startswith(("#", "/", "./", "../", "?")):
        return True
    return ":" not in stripped.split("/", 1)[0]


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Examples
    --------
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous("/relative/path")
    False

    """
    if not url or not url.strip():
        return False

    url_lower = url.lower().strip()
    if is_relative_url(url_lower):
        return False

    if any(url_lower.startswith(scheme) for scheme in DANGEROUS_SCHEMES):
        return True

    try:
        scheme = urlparse(url_lower).scheme
    except ValueError:
        return True
    return scheme in ("javascript", "vbscript", "about")


class DefaultUrlSanitizer:
    """Allow-list sanitizer for link and image URLs.

    Relative URLs pass through. Absolute URLs are kept only when their scheme
    is in the allow-list; images additionally accept ``data:image/*`` URIs.
    Everything else sanitizes to ``""``.
    """

    def __init__(self, allowed_schemes: frozenset[str] = SAFE_LINK_SCHEMES):
        self.allowed_schemes = frozenset(s.lower() for s in allowed_schemes)

    def sanitize_link_url(self, url: str) -> str:
        return self._sanitize(url, allow_image_data=False)

    def sanitize_image_url(self, url: str) -> str:
        return self._sanitize(url, allow_image_data=True)

    def _sanitize(self, url: str, *, allow_image_data: bool) -> str:
        cleaned = (url or "").strip()
        if not cleaned:
            return ""
        if is_url_scheme_dangerous(cleaned):
            logger.debug("Dropping URL with dangerous scheme: %.50s", cleaned)
            return ""
        if is_relative_url(cleaned):
            return cleaned

        lowered = cleaned.lower()
        if allow_image_data and lowered.startswith(SAFE_IMAGE_DATA_PREFIX):
            return cleaned

        try:
            scheme = urlparse(lowered).scheme
        except ValueError:
            logger.debug("Dropping unparseable URL: %.50s", cleaned)
            return ""
        if scheme in self.allowed_schemes:
            return cleaned

        logger.debug("Dropping URL with disallowed scheme %r", scheme)
        return ""
