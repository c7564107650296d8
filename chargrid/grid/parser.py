# -*- coding: utf-8 -*-
"""
Turns raw input into the character sequence a grid is built from.

Main roles:
- drop whitespace bytes from raw input
- read a file once, in bounded chunks, and collect its non-whitespace bytes

Every source is handled at byte level. A typed string is first encoded
(``SOURCE_ENCODING``), so the same text gives the same items whether it
was typed or read from a file, and each item is exactly one byte.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Iterable, Iterator, List, Union

from ..config import FILE_ENCODING, READ_CHUNK_SIZE, SOURCE_ENCODING, WHITESPACE
from ..errors import GridIOError
from ..logging_utils import get_logger

logger = get_logger()

_WHITESPACE_BYTES = WHITESPACE.encode("ascii")

Source = Union[str, bytes, bytearray, Iterable[bytes]]


def strip_whitespace_bytes(chunk: bytes) -> bytes:
    """Remove whitespace bytes from ``chunk``."""
    return bytes(chunk).translate(None, _WHITESPACE_BYTES)


def encode_text(text: str) -> bytes:
    """Bytes of a typed string; lone surrogates are kept rather than rejected."""
    return text.encode(SOURCE_ENCODING, "surrogatepass")


def decode_bytes(data: bytes) -> List[str]:
    """
    Map each byte to one character.

    latin-1 is used so that every byte value survives unchanged; no
    attempt is made to interpret multi-byte encodings.
    """
    return list(data.decode(FILE_ENCODING))


def read_chunks(stream: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield ``stream`` in chunks of at most ``chunk_size`` bytes."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        yield chunk


def collect_items(source: Source) -> List[str]:
    """
    Build the item list for a grid from any supported source.

    Parameters
    ----------
    source : str, bytes or iterable of bytes
        A string typed by the user, raw file contents, or chunks of them.

    Returns
    -------
    list of str
        One character per non-whitespace byte, in input order.
    """
    if isinstance(source, str):
        source = encode_text(source)
    if isinstance(source, (bytes, bytearray)):
        return decode_bytes(strip_whitespace_bytes(source))

    kept = bytearray()
    for chunk in source:
        kept += strip_whitespace_bytes(chunk)
    return decode_bytes(bytes(kept))


def read_file_bytes(
    path: Union[str, os.PathLike],
    chunk_size: int = READ_CHUNK_SIZE,
) -> bytes:
    """
    Read ``path`` once and return its non-whitespace bytes.

    Raises
    ------
    GridIOError
        If the file cannot be opened or read.
    """
    kept = bytearray()
    try:
        with open(path, "rb") as f:
            for chunk in read_chunks(f, chunk_size):
                kept += strip_whitespace_bytes(chunk)
            size = f.tell()
    except OSError as e:
        logger.error("Cannot open file '%s': %s", path, e)
        raise GridIOError(f"Cannot open file '{path}'", path=path) from e

    if size == 0:
        logger.warning("File '%s' is empty.", path)
    logger.debug("Read %d bytes from '%s', kept %d.", size, path, len(kept))
    return bytes(kept)
