"""Classify a swipe displacement into a move direction."""

from tilemerge.core.gamemove import Direction


def classify_swipe(dx: float, dy: float, threshold: float = 0.0) -> Direction | None:
    """
    Turn the displacement of a swipe into a move direction.

    Parameters
    ----------
    dx : float
        Horizontal displacement, positive to the right.
    dy : float
        Vertical displacement in screen coordinates, positive downwards.
    threshold : float, optional
        Distance the dominant axis must exceed to count as a swipe (default is 0).

    Returns
    -------
    Direction | None
        The direction of the dominant axis, or None for a displacement within the threshold.

    Notes
    -----
    The horizontal axis wins only when strictly larger, so a perfect diagonal counts as vertical.
    """
    if max(abs(dx), abs(dy)) <= threshold:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
