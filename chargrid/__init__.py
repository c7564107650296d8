# chargrid/__init__.py
# -*- coding: utf-8 -*-
"""
Entry point of the chargrid package.

Typical use::

    from chargrid import CharacterGrid

    grid = CharacterGrid("abc def", column_count=2)
    grid.get_element_at(1, 0)        # -> "c"
    grid.index_to_coordinates(3)     # -> (1, 1)
    for line in grid.render():
        print(line)

Files are read with :func:`load_grid` and written with :func:`save_grid`.
"""

from __future__ import annotations

from .errors import GridIOError
from .grid.character_grid import CharacterGrid
from .persistence import load_grid, save_grid
from .types import CellCoord, GridInfo

__all__ = [
    "CellCoord",
    "CharacterGrid",
    "GridInfo",
    "GridIOError",
    "load_grid",
    "save_grid",
]

__version__ = "1.0.0"
