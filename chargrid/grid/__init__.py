# -*- coding: utf-8 -*-
"""
chargrid.grid package

- parser.py : whitespace stripping and chunked file reading
- character_grid.py : the CharacterGrid class
"""
