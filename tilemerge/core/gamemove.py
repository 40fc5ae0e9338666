"""
Move directions for the merge puzzle, and helpers to tell which directions would change a grid.
"""

from enum import IntEnum

from numpy import integer, ndarray


class InvalidDirectionError(ValueError):
    """Raised when a value cannot be interpreted as one of the four move directions."""


class Direction(IntEnum):
    """
    The four move directions.

    The integer value is the number of counter-clockwise quarter turns that bring the
    direction onto ``LEFT``, so ``numpy.rot90(grid, k=direction)`` orients any move leftward.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: 'Direction | int | str') -> 'Direction':
        """
        Interpret a direction given as a member, its integer value or its name.

        Parameters
        ----------
        value : Direction | int | str
            Direction to parse. Names are case-insensitive ('left', 'Up', ...).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        InvalidDirectionError
            If the value matches none of the four directions.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidDirectionError(f'Unknown direction: {value!r}') from None
        if isinstance(value, (int, integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidDirectionError(f'Unknown direction: {value!r}') from None
        raise InvalidDirectionError(f'Unknown direction: {value!r}')


def legal_moves_mask(grid: ndarray) -> dict[Direction, bool]:
    """
    Tell for each direction whether its move would change the grid.

    Parameters
    ----------
    grid : ndarray
        The game grid, ``0`` marking empty cells.

    Returns
    -------
    dict[Direction, bool]
        True for every direction whose move slides or merges at least one tile, keyed in
        (left, up, right, down) order.
    """
    horizontal = (grid[:, :-1], grid[:, 1:])
    vertical = (grid[:-1, :], grid[1:, :])
    neighbours = {
        Direction.LEFT: horizontal,
        Direction.UP: vertical,
        Direction.RIGHT: horizontal[::-1],
        Direction.DOWN: vertical[::-1],
    }

    mask = {}
    for direction, (target, source) in neighbours.items():
        # ##>: The source tile moves into the target cell: it slides into a hole or merges with a twin.
        slides = (target == 0) & (source != 0)
        merges = (target != 0) & (target == source)
        mask[direction] = bool(slides.any() or merges.any())
    return mask


def legal_moves(grid: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the grid.

    Parameters
    ----------
    grid : ndarray
        The game grid.

    Returns
    -------
    list[Direction]
        Directions whose move slides or merges at least one tile, in (left, up, right, down) order.
    """
    return [direction for direction, legal in legal_moves_mask(grid).items() if legal]


def can_move(grid: ndarray, direction: Direction | int | str) -> bool:
    """
    Check whether a move in the given direction would change the grid.

    Parameters
    ----------
    grid : ndarray
        The game grid.
    direction : Direction | int | str
        Direction to check.

    Returns
    -------
    bool
        True if the move slides or merges at least one tile.
    """
    return legal_moves_mask(grid)[Direction.parse(direction)]
