from unittest import TestCase, main

from tilemerge.core.gamemove import Direction
from tilemerge.utils import classify_swipe, tile_style


class TestClassifySwipe(TestCase):
    def test_horizontal(self):
        """
        Test if a mostly horizontal swipe gives left or right.
        """
        self.assertIs(classify_swipe(40, 5), Direction.RIGHT)
        self.assertIs(classify_swipe(-40, -5), Direction.LEFT)

    def test_vertical(self):
        """
        Test if a mostly vertical swipe gives up or down, with y growing downwards.
        """
        self.assertIs(classify_swipe(3, 50), Direction.DOWN)
        self.assertIs(classify_swipe(-3, -50), Direction.UP)

    def test_diagonal(self):
        """
        Test if a perfect diagonal counts as vertical.
        """
        self.assertIs(classify_swipe(10, 10), Direction.DOWN)
        self.assertIs(classify_swipe(10, -10), Direction.UP)

    def test_threshold(self):
        """
        Test if short displacements are ignored.
        """
        self.assertIsNone(classify_swipe(0, 0))
        self.assertIsNone(classify_swipe(5, -8, threshold=10))
        self.assertIs(classify_swipe(5, -12, threshold=10), Direction.UP)


class TestTileStyle(TestCase):
    def test_small_tiles(self):
        """
        Test if 2 and 4 use dark text.
        """
        style = tile_style(2)
        self.assertEqual(style.background, '#eee4da')
        self.assertEqual(style.foreground, '#776e65')
        self.assertEqual(style.font_size, 32)

    def test_large_tiles(self):
        """
        Test if larger tiles use light text and smaller fonts.
        """
        self.assertEqual(tile_style(128).foreground, '#f9f6f2')
        self.assertEqual(tile_style(128).font_size, 28)
        self.assertEqual(tile_style(2048).background, '#edc22e')
        self.assertEqual(tile_style(2048).font_size, 24)

    def test_fallbacks(self):
        """
        Test if empty cells and tiles past 2048 get fallback colours.
        """
        self.assertEqual(tile_style(0).background, '#cdc1b4')
        self.assertEqual(tile_style(4096).background, '#3c3a32')


if __name__ == '__main__':
    main()
