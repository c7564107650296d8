# -*- coding: utf-8 -*-
"""
Saving grids to files and loading them back.

The saved format is the item sequence with a line break after every
``column_count`` characters. Loading strips those breaks again, so a
save/load round trip gives back the same characters.
"""

from __future__ import annotations

import io
import os
from typing import TextIO, Union

from .config import FILE_ENCODING, PADDING_CHAR
from .errors import GridIOError
from .grid.character_grid import CharacterGrid
from .logging_utils import get_logger

logger = get_logger()

PathLike = Union[str, os.PathLike]


def persist(grid: CharacterGrid, sink: TextIO) -> None:
    """
    Write the items of ``grid`` to ``sink``, with ``"\\n"`` after every
    ``column_count``-th character.

    The last partial row is not padded.
    """
    columns = grid.column_count
    for i, ch in enumerate(grid.items, start=1):
        sink.write(ch)
        if i % columns == 0:
            sink.write("\n")


def save_grid(grid: CharacterGrid, path: PathLike) -> None:
    """
    Write ``grid`` to ``path`` (see :func:`persist`).

    The content is encoded in full before the target is opened, so the
    file is only touched once there is something complete to write.

    Raises
    ------
    GridIOError
        If the file cannot be created or written.
    """
    buf = io.StringIO()
    persist(grid, buf)
    # every item is a single byte, see grid.parser
    data = buf.getvalue().encode(FILE_ENCODING)

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        logger.error("Cannot create file '%s': %s", path, e)
        raise GridIOError(f"Cannot create file '{path}'", path=path) from e

    logger.info("Saved %d items to '%s'.", grid.total_items(), path)


def load_grid(
    path: PathLike,
    column_count: int,
    padding_char: str = PADDING_CHAR,
) -> CharacterGrid:
    """Build a grid from a file; shorthand for :meth:`CharacterGrid.from_file`."""
    return CharacterGrid.from_file(path, column_count, padding_char=padding_char)
