"""
Grid transitions for the merge puzzle: compaction and merging of lines, directional moves,
random tile spawning and terminal-state detection.

A grid is a square ``int64`` array where ``0`` marks an empty cell and every other cell holds
a power of two greater than or equal to 2.
"""

from typing import NamedTuple

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, asarray, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.core.gamemove import Direction

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator, used when the caller provides neither a generator nor a seed.
_GENERATOR = default_rng(PCG64DXSM())


class LineResult(NamedTuple):
    """
    Outcome of compacting and merging a single line.
    """

    line: ndarray
    changed: bool
    score: int
    merged: tuple[int, ...]


class MoveResult(NamedTuple):
    """
    Outcome of moving a whole grid in one direction.
    """

    grid: ndarray
    changed: bool
    score: int
    merged: tuple[int, ...]


def _collapse(values: ndarray) -> tuple[list[int], list[int]]:
    """
    Merge adjacent equal values of a line, ignoring empty cells.

    Returns the dense merged values and the values created by merges, in order.
    """
    non_zero = [int(value) for value in values if value != 0]
    result: list[int] = []
    created: list[int] = []

    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result.append(merged)
            created.append(merged)
            # ##: Skip the consumed neighbour, a fresh tile never merges again this move.
            i += 2
        else:
            result.append(non_zero[i])
            i += 1
    return result, created


def compact_and_merge(line: ndarray) -> LineResult:
    """
    Slide a line towards index 0, merge equal neighbours and pad it back to full length.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row or column, oriented so the move points towards index 0.

    Returns
    -------
    LineResult
        - line: the new line, with empty cells at the far end
        - changed: whether the new line differs from the input
        - score: sum of the values created by merges
        - merged: the values created by merges, in order

    Examples
    --------
    >>> compact_and_merge(array([2, 0, 2, 2])).line
    array([4, 2, 0, 0])
    """
    line = asarray(line, dtype=int64)
    dense, created = _collapse(line)

    result = zeros(len(line), dtype=int64)
    result[: len(dense)] = dense

    changed = bool((result != line).any())
    return LineResult(result, changed, sum(created), tuple(created))


def apply_move(grid: ndarray, direction: Direction | int | str) -> MoveResult:
    """
    Move every tile of the grid in one direction, merging equal neighbours.

    Parameters
    ----------
    grid : ndarray
        The game grid. It is never modified.
    direction : Direction | int | str
        The direction of the move.

    Returns
    -------
    MoveResult
        - grid: a new grid after the move, without a spawned tile
        - changed: whether any line changed
        - score: sum of the values created by merges
        - merged: the values created by merges

    Notes
    -----
    The grid is rotated so that the move points left, each row is processed with
    ``compact_and_merge``, and the result is rotated back. All four directions share
    the same line algorithm.
    """
    direction = Direction.parse(direction)
    rotated = rot90(asarray(grid, dtype=int64), k=direction)

    result = zeros_like(rotated)
    changed = False
    score = 0
    merged: list[int] = []

    for i, row in enumerate(rotated):
        outcome = compact_and_merge(row)
        result[i] = outcome.line
        changed = changed or outcome.changed
        score += outcome.score
        merged.extend(outcome.merged)

    return MoveResult(rot90(result, k=-direction).copy(), changed, score, tuple(merged))


def spawn_random_tile(
    grid: ndarray,
    rng: Generator | None = None,
    seed: int | None = None,
    probabilities: dict[int, float] | None = None,
) -> ndarray:
    """
    Place a new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    grid : ndarray
        The game grid. **Modified in-place.**
    rng : Generator, optional
        Random generator to draw from.
    seed : int, optional
        Seed for a fresh generator, used when ``rng`` is not given.
    probabilities : dict[int, float], optional
        Spawn probability per tile value, by default ``TILE_SPAWN_PROBS``.

    Returns
    -------
    ndarray
        The same array reference, with one more tile unless it was full.

    Notes
    -----
    - The cell is chosen uniformly among empty cells.
    - A full grid is returned untouched.
    """
    if rng is None:
        rng = default_rng(seed) if seed is not None else _GENERATOR
    probabilities = probabilities or TILE_SPAWN_PROBS

    empty_cells = argwhere(grid == 0)
    if len(empty_cells) == 0:
        return grid

    row, col = empty_cells[rng.integers(len(empty_cells))]
    grid[row, col] = rng.choice(list(probabilities), p=list(probabilities.values()))
    return grid


def is_terminal(grid: ndarray) -> bool:
    """
    Check whether no move can change the grid anymore.

    Parameters
    ----------
    grid : ndarray
        The game grid.

    Returns
    -------
    bool
        True if the grid has no empty cell and no two adjacent cells hold the same value.
    """
    return bool(
        np_all(grid != 0) and not np_any(grid[:-1] == grid[1:]) and not np_any(grid[:, :-1] == grid[:, 1:])
    )


def empty_grid(size: int = 4) -> ndarray:
    """Create a grid with no tile."""
    return zeros((size, size), dtype=int64)


def freeze(grid: ndarray) -> ndarray:
    """
    Copy a grid into a read-only array.

    Parameters
    ----------
    grid : ndarray
        The grid to copy.

    Returns
    -------
    ndarray
        An independent copy that raises on any write.
    """
    frozen = array(grid, dtype=int64, copy=True)
    frozen.flags.writeable = False
    return frozen


def check_grid(grid: ndarray, size: int | None = None) -> ndarray:
    """
    Validate the shape and values of a grid.

    Parameters
    ----------
    grid : ndarray
        Grid to validate, any array-like of integers.
    size : int, optional
        Expected side length.

    Returns
    -------
    ndarray
        The grid as an ``int64`` array.

    Raises
    ------
    ValueError
        If the grid is not a square 2D array of the expected size, or holds a value that is
        neither 0 nor a power of two greater than or equal to 2.
    """
    grid = asarray(grid, dtype=int64)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError(f'Grid must be a square 2D array, got shape {grid.shape}')
    if size is not None and grid.shape[0] != size:
        raise ValueError(f'Grid must be {size}x{size}, got {grid.shape[0]}x{grid.shape[1]}')

    tiles = grid[grid != 0]
    if np_any(tiles < 2) or np_any(tiles & (tiles - 1)):
        raise ValueError(f'Grid values must be 0 or powers of two >= 2, got {sorted(set(tiles.tolist()))}')
    return grid
