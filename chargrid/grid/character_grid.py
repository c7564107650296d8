# -*- coding: utf-8 -*-
"""
The character grid itself.

A grid is an immutable, whitespace-free sequence of characters laid out
row-major with a fixed column count. Every lookup is pure arithmetic on
that sequence; out-of-range arguments make a lookup return ``None``
instead of raising.
"""

from __future__ import annotations

import os
from typing import List, Optional, TextIO, Tuple, Union

import numpy as np
import pandas as pd

from ..config import MAX_LINEAR_INDEX, PADDING_CHAR, READ_CHUNK_SIZE
from ..logging_utils import get_logger
from ..postprocess.render_result import GridRows, build_frame, build_padded_array
from ..types import CellCoord, GridInfo
from .parser import Source, collect_items, read_file_bytes

logger = get_logger()


class CharacterGrid:
    """
    Row-major grid over a sequence of non-whitespace characters.

    Parameters
    ----------
    source : str, bytes or iterable of bytes
        Input text. Whitespace is removed before the grid is built.
    column_count : int
        Number of columns. Values <= 0 are clamped to 1 with a warning.
    padding_char : str
        Shown for in-bounds cells past the last character.
    """

    # Upper bound for indices handed out by coordinates_to_index.
    max_index: int = MAX_LINEAR_INDEX

    def __init__(
        self,
        source: Source,
        column_count: int,
        padding_char: str = PADDING_CHAR,
    ) -> None:
        if column_count <= 0:
            logger.warning(
                "Number of columns must be positive (got %d). Defaulting to 1.",
                column_count,
            )
            column_count = 1

        self._columns = int(column_count)
        self._padding_char = padding_char
        self._items: Tuple[str, ...] = tuple(collect_items(source))

        if not self._items:
            logger.warning("Input contained no non-whitespace characters. Grid will be empty.")
        else:
            logger.debug(
                "Grid built: %d items, %d columns, %d rows.",
                len(self._items), self._columns, self.total_rows(),
            )

    @classmethod
    def from_file(
        cls,
        path: Union[str, os.PathLike],
        column_count: int,
        padding_char: str = PADDING_CHAR,
        chunk_size: int = READ_CHUNK_SIZE,
    ) -> "CharacterGrid":
        """
        Build a grid from the contents of ``path``.

        The file is read once, in chunks of ``chunk_size`` bytes.
        :class:`~chargrid.errors.GridIOError` is raised if it cannot be read.
        """
        data = read_file_bytes(path, chunk_size)
        return cls(data, column_count, padding_char)

    # ------------------------------------------------------------------
    # attributes
    # ------------------------------------------------------------------

    @property
    def items(self) -> Tuple[str, ...]:
        return self._items

    @property
    def column_count(self) -> int:
        return self._columns

    @property
    def padding_char(self) -> str:
        return self._padding_char

    @property
    def row_count(self) -> int:
        return self.total_rows()

    def total_items(self) -> int:
        return len(self._items)

    def total_rows(self) -> int:
        """Number of rows needed to hold every item (ceiling division)."""
        if self._columns <= 0 or not self._items:
            return 0
        return (len(self._items) + self._columns - 1) // self._columns

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (
            f"CharacterGrid(items={len(self._items)}, "
            f"columns={self._columns}, rows={self.total_rows()})"
        )

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.total_rows() and 0 <= col < self._columns

    def get_element_at(self, row: int, col: int) -> Optional[str]:
        """
        Return the character at ``(row, col)``.

        Cells of the last row that lie past the final character are
        valid and yield ``padding_char``. ``None`` means the coordinates
        are outside the grid.
        """
        if not self._in_bounds(row, col):
            return None

        index = row * self._columns + col
        if index < len(self._items):
            return self._items[index]
        return self._padding_char

    def get_element_at_index(self, index: int) -> Optional[str]:
        """Return the character at linear ``index``, or ``None`` if out of range."""
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def index_to_coordinates(self, index: int) -> Optional[CellCoord]:
        """Map a linear index to ``(row, col)``; ``None`` if out of range."""
        if index < 0 or index >= len(self._items):
            return None
        return divmod(index, self._columns)

    def coordinates_to_index(self, row: int, col: int) -> Optional[int]:
        """
        Map ``(row, col)`` to a linear index.

        ``None`` is returned for coordinates outside the grid, and also
        when the resulting index would not fit in :attr:`max_index`.
        """
        if not self._in_bounds(row, col):
            return None

        index = row * self._columns + col
        if index > self.max_index:
            logger.debug(
                "Index for (%d, %d) exceeds %d; rejected.", row, col, self.max_index
            )
            return None
        return index

    # ------------------------------------------------------------------
    # output
    # ------------------------------------------------------------------

    def render(self) -> GridRows:
        """Lazy display rows: a header of column indices, then one line per row."""
        return GridRows(self)

    def info(self) -> GridInfo:
        return GridInfo(
            total_items=len(self._items),
            columns=self._columns,
            rows=self.total_rows(),
            padding_char=self._padding_char,
        )

    def format_info(self) -> List[str]:
        return self.info().lines()

    def persist(self, sink: TextIO) -> None:
        """
        Write the items to ``sink``, breaking the line after every
        ``column_count`` characters.

        The last partial row is written as-is, without padding.
        """
        from ..persistence import persist

        persist(self, sink)

    def to_array(self) -> np.ndarray:
        """Padded ``(rows, columns)`` object array of the grid."""
        return build_padded_array(self)

    def to_frame(self) -> pd.DataFrame:
        """The padded grid as a DataFrame indexed by row and column number."""
        return build_frame(self)
