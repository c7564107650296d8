# -*- coding: utf-8 -*-
"""
Settings shared across the chargrid package.

Edit the values here to change
- the sentinel shown for cells past the end of the input
- the display width of one cell
- the size of the chunks read from a file
- the largest index coordinates_to_index will hand out
"""

from __future__ import annotations

import numpy as np

# ==== Display ==============================================================

# Shown for in-bounds cells beyond the last character (display/query only).
PADDING_CHAR: str = "-"

# Each cell (and the row label) is right-justified to this width.
CELL_WIDTH: int = 3

# ==== Input ================================================================

# Stripped from every source. Same set as C isspace in the "C" locale.
WHITESPACE: str = " \t\n\v\f\r"

# Files are read once, in chunks of at most this many bytes.
READ_CHUNK_SIZE: int = 8192

# Typed strings are turned into bytes with this codec before stripping.
SOURCE_ENCODING: str = "utf-8"

# One byte <-> one character.
FILE_ENCODING: str = "latin-1"

# ==== Index arithmetic =====================================================

# Largest linear index coordinates_to_index may return (signed 32-bit int).
MAX_LINEAR_INDEX: int = int(np.iinfo(np.int32).max)

# ==== Logging ==============================================================

LOGGER_NAME: str = "chargrid"
DEFAULT_LOG_LEVEL: str = "INFO"
