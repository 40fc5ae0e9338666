# -*- coding: utf-8 -*-
"""
Game session of the merge puzzle.

This module provides the `GameSession` class, which owns the grid, the score, the win and game-over flags,
the best score and the undo history, together with its configuration and best-score stores.
"""

from .config import GameConfig
from .game import GameSession
from .storage import BestScoreStore, JsonScoreStore, MemoryScoreStore
from .types import GameStatus, SessionState, UndoEntry

__all__ = [
    "GameConfig",
    "GameSession",
    "GameStatus",
    "SessionState",
    "UndoEntry",
    "BestScoreStore",
    "JsonScoreStore",
    "MemoryScoreStore",
]
