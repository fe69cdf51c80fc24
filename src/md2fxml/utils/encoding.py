#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/utils/encoding.py
"""Payload encoding for content carried through the markup unescaped.

Code block text may contain any character, including ones that are
meaningful in XML. Instead of escaping it, the renderer stores the text as
base64 over UTF-8 bytes; the post-layout pass decodes it and installs the
real text on the live widget.
"""

from __future__ import annotations

import base64
import binascii
import logging

from md2fxml.exceptions import PayloadIntegrityError

logger = logging.getLogger(__name__)


def encode_payload(text: str) -> str:
    """Encode ``text`` into an XML-safe ASCII payload.

    Parameters
    ----------
    text : str
        Arbitrary text

    Returns
    -------
    str
        Base64 of the UTF-8 bytes of ``text``

    Raises
    ------
    PayloadIntegrityError
        If ``text`` has no UTF-8 form (it contains a lone surrogate)

    Examples
    --------
    >>> encode_payload("a < b")
    'YSA8IGI='

    """
    try:
        raw = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PayloadIntegrityError(f"Text cannot be encoded as a payload: {e}", payload=text, original_error=e) from e
    return base64.b64encode(raw).decode("ascii")


def decode_payload(payload: str) -> str:
    """Decode a payload produced by :func:`encode_payload`.

    Surrounding whitespace is ignored so payloads survive pretty-printed
    markup.

    Parameters
    ----------
    payload : str
        Base64 payload

    Returns
    -------
    str
        The original text

    Raises
    ------
    PayloadIntegrityError
        If the payload is not valid base64 or not valid UTF-8

    """
    try:
        raw = base64.b64decode(payload.strip(), validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError) as e:
        logger.error("Undecodable payload of length %d", len(payload))
        raise PayloadIntegrityError(f"Invalid encoded payload: {e}", payload=payload, original_error=e) from e
