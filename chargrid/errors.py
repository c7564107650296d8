# -*- coding: utf-8 -*-
"""
Exceptions raised by chargrid.

Lookups on a grid never raise; they return ``None`` instead. Only file
access can fail loudly.
"""

from __future__ import annotations

import os
from typing import Optional, Union


class GridIOError(OSError):
    """A grid file could not be read or written."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, os.PathLike]] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
