# -*- coding: utf-8 -*-
"""
Rule engine for the 2048 sliding-tile merge puzzle.
"""

from .core import Direction, InvalidDirectionError, apply_move, is_terminal, spawn_random_tile
from .session import GameConfig, GameSession, GameStatus, SessionState

__all__ = [
    "Direction",
    "InvalidDirectionError",
    "apply_move",
    "is_terminal",
    "spawn_random_tile",
    "GameConfig",
    "GameSession",
    "GameStatus",
    "SessionState",
]
