# -*- coding: utf-8 -*-
"""
Types describing a game session.
"""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from numpy import ndarray


class GameStatus(Enum):
    """
    Status of a session, derived from its flags.
    """

    PLAYING = 'playing'
    WON = 'won'
    GAME_OVER = 'game_over'


class UndoEntry(NamedTuple):
    """
    Snapshot taken before a move. The grid is read-only.
    """

    grid: ndarray
    score: int


@dataclass(frozen=True)
class SessionState:
    """
    Read-only view of a session for the presentation layer.

    Attributes
    ----------
    grid : ndarray
        Read-only copy of the current grid.
    score : int
        Current score.
    best_score : int
        Best score known to the session.
    game_over : bool
        Whether the last move left no legal move.
    won : bool
        Whether the target tile was created during this game.
    undo_depth : int
        Number of snapshots available to undo.
    """

    grid: ndarray
    score: int
    best_score: int
    game_over: bool
    won: bool
    undo_depth: int

    @property
    def status(self) -> GameStatus:
        """Status of the game, game over taking precedence over a win."""
        if self.game_over:
            return GameStatus.GAME_OVER
        if self.won:
            return GameStatus.WON
        return GameStatus.PLAYING
