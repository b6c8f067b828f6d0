# -*-  coding: utf-8 -*-
"""
Set of test for Board and game-over detection.
"""
from unittest import TestCase, main

import numpy as np

from tilt2048.core.gameboard import Board, is_game_over, is_power_of_two


class TestBoard(TestCase):
    """
    Test for the Board class.
    This class tests reads, writes and the occupancy count.
    """

    def setUp(self):
        """Initialize a new empty board before each test."""
        self.board = Board(size=4)

    def test_init(self):
        """Test if the board starts empty."""
        self.assertEqual(self.board.size, 4)
        self.assertEqual(self.board.tiles.shape, (4, 4))
        self.assertEqual(self.board.occupied_count(), 0)
        self.assertFalse(self.board.is_full())

    def test_too_small(self):
        """Test if a board smaller than 2x2 is rejected."""
        with self.assertRaises(ValueError):
            Board(size=1)

    def test_set_and_get(self):
        """Test if written values are read back and counted."""
        self.board.set(1, 2, 8)
        self.assertEqual(self.board.get(1, 2), 8)
        self.assertEqual(self.board.occupied_count(), 1)

        # ##>: Overwriting a tile does not change the count.
        self.board.set(1, 2, 16)
        self.assertEqual(self.board.occupied_count(), 1)

        # ##>: Emptying a cell does.
        self.board.set(1, 2, 0)
        self.assertEqual(self.board.occupied_count(), 0)

    def test_out_of_range(self):
        """Test if coordinates outside the board raise IndexError, including negative ones."""
        for row, col in [(4, 0), (0, 4), (-1, 0), (0, -1)]:
            with self.assertRaises(IndexError):
                self.board.get(row, col)
            with self.assertRaises(IndexError):
                self.board.set(row, col, 2)

    def test_invalid_value(self):
        """Test if values that are not powers of two are rejected."""
        for value in [1, 3, 6, -2]:
            with self.assertRaises(ValueError):
                self.board.set(0, 0, value)
        self.assertEqual(self.board.occupied_count(), 0)

    def test_is_full(self):
        """Test if the board reports full after every cell is written."""
        for row in range(4):
            for col in range(4):
                self.board.set(row, col, 2 ** (1 + (row + col) % 3))
        self.assertTrue(self.board.is_full())
        self.assertEqual(self.board.occupied_count(), 16)

    def test_clear(self):
        """Test if clearing empties every cell."""
        self.board.set(0, 0, 2)
        self.board.set(3, 3, 4)
        self.board.clear()
        self.assertEqual(self.board.occupied_count(), 0)
        np.testing.assert_array_equal(self.board.tiles, np.zeros((4, 4)))

    def test_tiles_is_a_copy(self):
        """Test if changing the returned grid leaves the board alone."""
        tiles = self.board.tiles
        tiles[0, 0] = 2
        self.assertEqual(self.board.get(0, 0), 0)

    def test_apply(self):
        """Test if applying a grid updates the cells and the count."""
        self.board.set(0, 0, 2)
        self.board.set(0, 1, 2)
        self.board.apply(np.array([[4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2], [0, 0, 0, 0]]))
        self.assertEqual(self.board.get(0, 0), 4)
        self.assertEqual(self.board.get(0, 1), 0)
        self.assertEqual(self.board.get(2, 3), 2)
        self.assertEqual(self.board.occupied_count(), 2)

    def test_apply_wrong_shape(self):
        """Test if a grid of the wrong shape is rejected."""
        with self.assertRaises(ValueError):
            self.board.apply(np.zeros((3, 3), dtype=int))


class TestGameOver(TestCase):
    """
    Test for the game-over predicate.
    """

    def test_is_finished(self):
        """Test if a full board without equal neighbours is over."""
        board = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertTrue(is_game_over(board))

    def test_alternating(self):
        """Test if a checkerboard of two values is over."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertTrue(is_game_over(board))

    def test_empty_cell(self):
        """Test if a single empty cell keeps the game going."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 0]])
        self.assertFalse(is_game_over(board))

    def test_horizontal_pair(self):
        """Test if two equal tiles side by side keep the game going."""
        board = np.array([[2, 2, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertFalse(is_game_over(board))

    def test_vertical_pair(self):
        """Test if two equal tiles one above the other keep the game going."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 8], [4, 2, 4, 8]])
        self.assertFalse(is_game_over(board))

    def test_board_method(self):
        """Test if Board.is_game_over agrees with the predicate."""
        board = Board(size=2)
        for (row, col), value in zip([(0, 0), (0, 1), (1, 0), (1, 1)], [2, 4, 4, 2]):
            board.set(row, col, value)
        self.assertTrue(board.is_game_over())
        board.set(1, 1, 4)
        self.assertFalse(board.is_game_over())


class TestPowerOfTwo(TestCase):
    def test_values(self):
        """
        Test if only powers of two from 2 upward are accepted.
        """
        self.assertTrue(all(is_power_of_two(2**k) for k in range(1, 20)))
        self.assertFalse(any(is_power_of_two(v) for v in [0, 1, 3, 12, -4]))


if __name__ == "__main__":
    main()
