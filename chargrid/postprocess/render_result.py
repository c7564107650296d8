# -*- coding: utf-8 -*-
"""
Builds display output for a grid.

- GridRows: the text lines shown by "display grid"
- padded numpy / pandas views of the grid
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

import numpy as np
import pandas as pd

from ..config import CELL_WIDTH

if TYPE_CHECKING:
    from ..grid.character_grid import CharacterGrid


def format_header(column_count: int, width: int = CELL_WIDTH) -> str:
    """Column index header, with a blank label column matching the row labels."""
    cells = "".join(str(c).rjust(width) for c in range(column_count))
    return " " * (width + 1) + cells


def format_row(grid: "CharacterGrid", row: int, width: int = CELL_WIDTH) -> str:
    """One display line: right-justified row label, then every cell of ``row``."""
    cells = []
    for col in range(grid.column_count):
        ch = grid.get_element_at(row, col)
        cells.append(ch.rjust(width))
    return str(row).rjust(width) + " " + "".join(cells)


class GridRows:
    """
    Display lines of a grid, produced lazily.

    Each ``iter()`` starts over from the header, so the same object can be
    printed any number of times. The number of lines is ``rows + 1``.
    """

    def __init__(self, grid: "CharacterGrid", width: int = CELL_WIDTH) -> None:
        self._grid = grid
        self._width = width

    def __iter__(self) -> Iterator[str]:
        yield format_header(self._grid.column_count, self._width)
        for row in range(self._grid.total_rows()):
            yield format_row(self._grid, row, self._width)

    def __len__(self) -> int:
        return self._grid.total_rows() + 1

    def to_text(self) -> str:
        return "\n".join(self)


def build_padded_array(grid: "CharacterGrid") -> np.ndarray:
    """
    Lay the items out as a ``(rows, columns)`` object array.

    Cells past the last item hold the padding character, like the
    rendered grid.
    """
    rows, cols = grid.total_rows(), grid.column_count
    cells = np.full(rows * cols, grid.padding_char, dtype=object)
    cells[: len(grid.items)] = grid.items
    return cells.reshape(rows, cols)


def build_frame(grid: "CharacterGrid") -> pd.DataFrame:
    arr = build_padded_array(grid)
    return pd.DataFrame(
        arr,
        index=pd.RangeIndex(arr.shape[0], name="row"),
        columns=pd.RangeIndex(arr.shape[1], name="col"),
    )
