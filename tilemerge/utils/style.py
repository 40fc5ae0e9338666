"""
Presentation metadata for tiles.

The grid engine only deals with numbers; this maps a tile value to the colours and font size a
presentation layer may use to draw it.
"""

from typing import NamedTuple

# ##: Background colour per tile value.
TILE_COLORS: dict[int, str] = {
    2: '#eee4da',
    4: '#ede0c8',
    8: '#f2b179',
    16: '#f59563',
    32: '#f67c5f',
    64: '#f65e3b',
    128: '#edcf72',
    256: '#edcc61',
    512: '#edc850',
    1024: '#edc53f',
    2048: '#edc22e',
}

EMPTY_COLOR = '#cdc1b4'
SUPER_COLOR = '#3c3a32'
DARK_TEXT = '#776e65'
LIGHT_TEXT = '#f9f6f2'


class TileStyle(NamedTuple):
    """
    How to draw a tile.
    """

    background: str
    foreground: str
    font_size: int


def tile_style(value: int) -> TileStyle:
    """
    Get the presentation metadata of a tile value.

    Parameters
    ----------
    value : int
        Tile value, 0 for an empty cell.

    Returns
    -------
    TileStyle
        Background and text colours, and a font size shrinking as the value gets longer.
    """
    if value == 0:
        return TileStyle(EMPTY_COLOR, DARK_TEXT, 32)

    background = TILE_COLORS.get(value, SUPER_COLOR)
    foreground = DARK_TEXT if value <= 4 else LIGHT_TEXT
    if value < 100:
        font_size = 32
    elif value < 1000:
        font_size = 28
    else:
        font_size = 24
    return TileStyle(background, foreground, font_size)
