"""
Tilt engine for the 2048 game: slides every tile toward one side of the board and merges equal neighbours.

All four directions share one algorithm. The board is turned so that the requested side faces north, each column
is resolved from the north edge outward, and the result is turned back.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from numpy import ndarray, rot90

from tilt2048.core.gameboard import GOAL


class Side(Enum):
    """
    The four sides of a board.

    The value of each member is the number of counter-clockwise quarter turns that brings that side to the top.
    """

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


# ##: Commands that tilt the board.
KEY_TO_SIDE = {'Up': Side.NORTH, 'Down': Side.SOUTH, 'Left': Side.WEST, 'Right': Side.EAST}


def key_to_side(key: str) -> Side:
    """
    Return the side indicated by a directional command.

    Parameters
    ----------
    key : str
        One of "Up", "Down", "Left" or "Right".

    Returns
    -------
    Side
        The side the tiles travel toward.

    Raises
    ------
    ValueError
        If the key is not a directional command.
    """
    try:
        return KEY_TO_SIDE[key]
    except KeyError:
        raise ValueError(f'Unknown key designation: {key!r}') from None


def tilt_coordinates(side: Side, row: int, col: int, size: int) -> tuple[int, int]:
    """
    Map a cell of the turned board back to the playing board.

    Parameters
    ----------
    side : Side
        The side that faces north on the turned board.
    row, col : int
        Coordinates on the turned board.
    size : int
        The size of the board.

    Returns
    -------
    tuple[int, int]
        The (row, col) of the same cell on the playing board.

    Notes
    -----
    This is the scalar form of ``rot90(board, k=side.value)``: for WEST, row ``r`` and column ``c`` of the turned
    board is row ``size - 1 - c`` and column ``r`` of the playing board.
    """
    last = size - 1
    if side is Side.NORTH:
        return row, col
    if side is Side.EAST:
        return col, last - row
    if side is Side.SOUTH:
        return last - row, last - col
    if side is Side.WEST:
        return last - col, row
    raise ValueError(f'Unknown direction: {side!r}')


@dataclass(frozen=True)
class MoveEvent:
    """A tile slid to an empty cell without merging."""

    value: int
    from_row: int
    from_col: int
    to_row: int
    to_col: int


@dataclass(frozen=True)
class MergeEvent:
    """A tile slid onto an equal tile, which now holds twice the value."""

    old_value: int
    new_value: int
    from_row: int
    from_col: int
    to_row: int
    to_col: int


TiltEvent = Union[MoveEvent, MergeEvent]


@dataclass
class TiltResult:
    """
    Outcome of tilting a board.

    Attributes
    ----------
    tiles : ndarray
        The board after the tilt.
    changed : bool
        True if at least one tile moved or merged.
    score_delta : int
        The sum of the values created by merges.
    events : list
        Moves and merges in the order they were resolved, in playing-board coordinates.
    reached_goal : bool
        True if some merge created the goal tile.
    """

    tiles: ndarray
    changed: bool = False
    score_delta: int = 0
    events: list[TiltEvent] = field(default_factory=list)
    reached_goal: bool = False


def find_destination(column: ndarray, row: int, stop: int) -> tuple[int, bool]:
    """
    Find where the tile at ``row`` of a turned column ends up.

    Parameters
    ----------
    column : ndarray
        One column of the turned board, north edge first. Cells above ``row`` are already resolved.
    row : int
        Index of the tile to place; the cell must not be empty.
    stop : int
        The merge barrier: no tile may move above this row, since the cell just above it was created by a merge
        during the current tilt.

    Returns
    -------
    tuple[int, bool]
        The destination row, and True if the tile merges with the tile already there.

    Notes
    -----
    The walk goes north one cell at a time and ends at the barrier, at the first occupied cell, or at the edge.
    A tile only merges with the nearest tile in its way, and never skips past it.
    """
    value = column[row]
    target = row
    while target - 1 >= stop:
        above = column[target - 1]
        if above == value:
            return target - 1, True
        if above != 0:
            break
        target -= 1
    return target, False


def tilt(state: ndarray, side: Side, goal: int = GOAL) -> TiltResult:
    """
    Tilt the board toward a side.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. It is not modified.
    side : Side
        The side the tiles travel toward.
    goal : int, optional
        The tile value that wins the game (default is 2048).

    Returns
    -------
    TiltResult
        The new board, whether it changed, the score gained, the move and merge events, and whether the goal
        tile was created.

    Notes
    -----
    - Columns are resolved independently, each from the edge outward.
    - A cell that absorbed a merge cannot absorb another one in the same tilt.
    - The whole board is processed even once the goal is reached.
    """
    size = state.shape[0]
    board = rot90(state, k=side.value).copy()
    result = TiltResult(tiles=board)

    for col in range(size):
        stop = 0
        for row in range(size):
            value = int(board[row, col])
            if value == 0:
                continue

            target, merges = find_destination(board[:, col], row, stop)
            source = tilt_coordinates(side, row, col, size)
            destination = tilt_coordinates(side, target, col, size)

            if merges:
                # ##: Double the tile in place and raise the barrier past it.
                new_value = value * 2
                board[target, col] = new_value
                board[row, col] = 0
                stop = target + 1
                result.score_delta += new_value
                result.events.append(MergeEvent(value, new_value, *source, *destination))
                result.changed = True
                if new_value == goal:
                    result.reached_goal = True
            elif target != row:
                board[target, col] = value
                board[row, col] = 0
                result.events.append(MoveEvent(value, *source, *destination))
                result.changed = True

    result.tiles = rot90(board, k=-side.value).copy()
    return result
