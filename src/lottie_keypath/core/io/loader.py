from __future__ import annotations

"""
Lottie Document Loader.

Reads raw animation JSON from streams or files and decodes it into the plain
mapping consumed by the tree builder. Byte input is decoded as UTF-8 and a
leading byte order mark is dropped.
"""

import json
import logging
from typing import Any, BinaryIO, TextIO

from lottie_keypath.domain.errors import InputDecodeError

logger = logging.getLogger(__name__)

INPUT_ENCODING = "utf-8-sig"
_BOM = "\ufeff"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def decode_document(body: str) -> Any:
    """
    Decode raw JSON text.

    Args:
        body: Complete document text.

    Returns:
        Any: Decoded JSON value.

    Raises:
        InputDecodeError: If the text is not valid JSON. The decoder message is kept.
    """
    if body.startswith(_BOM):
        body = body[1:]
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise InputDecodeError(str(e)) from e


def decode_bytes(raw: bytes) -> Any:
    """
    Decode UTF-8 bytes, with or without a byte order mark, as JSON.

    Raises:
        InputDecodeError: If the bytes are not UTF-8 or not valid JSON.
    """
    try:
        body = raw.decode(INPUT_ENCODING)
    except UnicodeDecodeError as e:
        raise InputDecodeError(str(e)) from e
    return decode_document(body)


def load_from_stream(stream: TextIO) -> Any:
    """Read a text stream to completion and decode it."""
    try:
        body = stream.read()
    except UnicodeDecodeError as e:
        raise InputDecodeError(str(e)) from e
    logger.debug(f"Read {len(body)} characters from stream")
    return decode_document(body)


def load_from_binary_stream(stream: BinaryIO) -> Any:
    """Read a byte stream to completion and decode it."""
    raw = stream.read()
    logger.debug(f"Read {len(raw)} bytes from stream")
    return decode_bytes(raw)


def load_from_file(path: str) -> Any:
    """
    Read a file and decode it.

    Raises:
        OSError: If the file cannot be read.
        InputDecodeError: If the content is not UTF-8 JSON.
    """
    with open(path, "rb") as f:
        raw = f.read()
    logger.debug(f"Read {len(raw)} bytes from '{path}'")
    return decode_bytes(raw)
