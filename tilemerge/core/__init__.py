# -*- coding: utf-8 -*-
"""
Grid engine of the merge puzzle.

It includes functions for compacting and merging lines, moving a grid in any direction,
spawning random tiles, detecting terminal grids and finding the moves that change a grid.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    LineResult,
    MoveResult,
    apply_move,
    check_grid,
    compact_and_merge,
    empty_grid,
    freeze,
    is_terminal,
    spawn_random_tile,
)
from .gamemove import Direction, InvalidDirectionError, can_move, legal_moves, legal_moves_mask

__all__ = [
    "TILE_SPAWN_PROBS",
    "Direction",
    "InvalidDirectionError",
    "LineResult",
    "MoveResult",
    "apply_move",
    "can_move",
    "check_grid",
    "compact_and_merge",
    "empty_grid",
    "freeze",
    "is_terminal",
    "legal_moves",
    "legal_moves_mask",
    "spawn_random_tile",
]
