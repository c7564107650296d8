# -*- coding: utf-8 -*-
"""
Data structures shared by the chargrid modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

# A cell position on the grid: (row, col)
CellCoord = Tuple[int, int]


@dataclass(frozen=True)
class GridInfo:
    """
    Summary of a grid, as shown by the "show grid information" command.

    Attributes
    ----------
    total_items : int
        Number of characters left after whitespace was stripped.
    columns : int
        Column count (always >= 1).
    rows : int
        Row count; 0 for an empty grid.
    padding_char : str
        Sentinel shown for cells past the last character.
    """

    total_items: int
    columns: int
    rows: int
    padding_char: str

    def lines(self) -> List[str]:
        return [
            "Grid Information:",
            f"  Total items: {self.total_items}",
            f"  Columns: {self.columns}",
            f"  Rows: {self.rows}",
            f"  Padding character: '{self.padding_char}'",
        ]
