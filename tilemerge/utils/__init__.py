# -*- coding: utf-8 -*-
"""
Helpers around the game engine: swipe classification and tile presentation metadata.
"""

from .gesture import classify_swipe
from .style import TileStyle, tile_style

__all__ = ["classify_swipe", "TileStyle", "tile_style"]
