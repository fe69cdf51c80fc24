#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/utils/inputs.py
"""Loading markdown source text from paths, bytes and streams.

Byte input is decoded with chardet-based detection first, then a list of
fallback encodings. latin-1 accepts any byte sequence, so decoding with the
default fallbacks always succeeds.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")

# Linux limits a path component to 255 characters
_MAX_PATH_LIKE_LENGTH = 260


def detect_encoding(data: bytes, sample_size: int = 8192, confidence_threshold: float = 0.7) -> str | None:
    """Detect the encoding of ``data`` using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyse
    sample_size : int, default 8192
        Number of leading bytes passed to chardet
    confidence_threshold : float, default 0.7
        Minimum confidence for a detection to be used

    Returns
    -------
    str or None
        Detected encoding, or None when detection is inconclusive

    """
    if not data:
        return None

    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        return None
    return encoding


def read_text_with_encoding_detection(
    data: bytes, fallback_encodings: tuple[str, ...] = DEFAULT_FALLBACK_ENCODINGS
) -> str:
    """Decode ``data`` as text, trying the detected encoding and then each fallback.

    Examples
    --------
    >>> read_text_with_encoding_detection(b"# Title")
    '# Title'

    """
    detected = detect_encoding(data)
    candidates = ((detected,) if detected else ()) + tuple(fallback_encodings)

    for encoding in candidates:
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
    """Load markdown text from a path, raw bytes, a stream or a literal string.

    A string naming an existing file is read as a path; any other string is
    taken as the markdown content itself.

    Parameters
    ----------
    input_data : str, Path, IO[bytes], IO[str] or bytes
        Source to load

    Returns
    -------
    str
        Markdown text

    """
    if isinstance(input_data, bytes):
        return read_text_with_encoding_detection(input_data)
    if isinstance(input_data, Path):
        return read_text_with_encoding_detection(input_data.read_bytes())
    if isinstance(input_data, str):
        if len(input_data) <= _MAX_PATH_LIKE_LENGTH and "\n" not in input_data:
            try:
                path = Path(input_data)
                if path.is_file():
                    return read_text_with_encoding_detection(path.read_bytes())
            except OSError:
                pass
        return input_data

    content = input_data.read()
    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content)
    return content
