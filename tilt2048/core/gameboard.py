"""
Board model for the 2048 game: a square grid of tile values with an incrementally tracked occupancy count.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import int64, ndarray, zeros

# ##>: Default board size and goal tile.
SIZE = 4
GOAL = 2048


def is_power_of_two(value: int) -> bool:
    """
    Check whether a value is a legal tile value (a power of two, at least 2).

    Parameters
    ----------
    value : int
        The value to check.

    Returns
    -------
    bool
        True if the value is 2, 4, 8, ...
    """
    value = int(value)
    return value >= 2 and value & (value - 1) == 0


class Board:
    """
    Fixed-size grid of tile values.

    Each cell holds 0 (empty) or a power of two. The number of occupied cells is maintained on every write,
    so checking for a full board is O(1).
    """

    def __init__(self, size: int = SIZE):
        """
        Initialize an empty board.

        Parameters
        ----------
        size : int, optional
            The number of rows and of columns (default is 4).
        """
        if size < 2:
            raise ValueError(f'Board size must be at least 2, got {size}')
        self.size = size
        self._tiles = zeros((size, size), dtype=int64)
        self._count = 0

    def __repr__(self) -> str:
        return f'Board(size={self.size}, tiles={self._tiles.tolist()})'

    def _check(self, row: int, col: int):
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f'Cell ({row}, {col}) is outside a {self.size}x{self.size} board')

    @property
    def tiles(self) -> ndarray:
        """
        Get a copy of the grid.

        Returns
        -------
        ndarray
            The tile values as a 2D array; changing it does not affect the board.
        """
        return self._tiles.copy()

    def get(self, row: int, col: int) -> int:
        """Return the tile value at (row, col), 0 when empty."""
        self._check(row, col)
        return int(self._tiles[row, col])

    def set(self, row: int, col: int, value: int):
        """
        Write a tile value, keeping the occupancy count in step.

        Parameters
        ----------
        row, col : int
            Coordinates of the cell.
        value : int
            The new value: 0 to empty the cell, or a power of two.

        Raises
        ------
        IndexError
            If the coordinates are outside the board.
        ValueError
            If the value is not 0 and not a power of two.
        """
        self._check(row, col)
        if value != 0 and not is_power_of_two(value):
            raise ValueError(f'Tile value must be 0 or a power of two, got {value}')

        old = int(self._tiles[row, col])
        self._count += int(value != 0) - int(old != 0)
        self._tiles[row, col] = value

    def apply(self, tiles: ndarray):
        """
        Overwrite the board with a new grid, such as the result of a tilt.

        Parameters
        ----------
        tiles : ndarray
            A grid of the same shape as the board.
        """
        if tiles.shape != self._tiles.shape:
            raise ValueError(f'Expected a grid of shape {self._tiles.shape}, got {tiles.shape}')

        # ##: Write only the cells that differ.
        for row, col in zip(*(tiles != self._tiles).nonzero()):
            self.set(int(row), int(col), int(tiles[row, col]))

    def clear(self):
        """Reset every cell to empty."""
        self._tiles.fill(0)
        self._count = 0

    def occupied_count(self) -> int:
        """Return the number of non-empty cells."""
        return self._count

    def is_full(self) -> bool:
        """Return True if no cell is empty."""
        return self._count == self.size * self.size

    def is_game_over(self) -> bool:
        """Return True if no move can change the board."""
        return is_game_over(self._tiles)


def is_game_over(state: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    A stuck board is full, and no tile equals the one below it or the one to its right. No tilt can then slide
    or merge anything, whatever the side.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
