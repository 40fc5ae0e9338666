# -*- coding: utf-8 -*-
"""
Set of config for a game session.
"""
from dataclasses import dataclass, field

from tilemerge.core.gameboard import TILE_SPAWN_PROBS


@dataclass
class GameConfig:
    """
    Configuration of a game session.

    Attributes
    ----------
    size : int
        Side length of the square grid.
    target_tile : int
        Tile value whose first creation wins the game.
    initial_tiles : int
        Number of tiles spawned by a new game.
    spawn_probs : dict[int, float]
        Probability of each value for a spawned tile.
    record_noop_moves : bool
        Whether a move that changes nothing still pushes an undo snapshot.
    recompute_flags_on_undo : bool
        Whether undo recomputes the game-over flag from the restored grid.
    """

    size: int = 4
    target_tile: int = 2048
    initial_tiles: int = 2
    spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))
    record_noop_moves: bool = True
    recompute_flags_on_undo: bool = False

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if self.target_tile < 4 or self.target_tile & (self.target_tile - 1):
            raise ValueError(f'target_tile must be a power of two >= 4, got {self.target_tile}')
        if not 0 <= self.initial_tiles <= self.size**2:
            raise ValueError(f'initial_tiles must be between 0 and {self.size**2}, got {self.initial_tiles}')
        for value, probability in self.spawn_probs.items():
            if not isinstance(value, int) or value < 2 or value & (value - 1):
                raise ValueError(f'spawn_probs keys must be powers of two >= 2, got {value!r}')
            if probability < 0:
                raise ValueError(f'spawn_probs values must be non-negative, got {probability} for {value}')
        if abs(sum(self.spawn_probs.values()) - 1.0) > 1e-9:
            raise ValueError(f'spawn_probs must sum to 1, got {self.spawn_probs}')
