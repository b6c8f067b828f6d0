"""
Random tile placement: asks an input source for a tile until it names an empty cell.
"""

import logging
from typing import TYPE_CHECKING, Optional

from tilt2048.core.gameboard import Board

if TYPE_CHECKING:
    from tilt2048.utils.sources import InputSource

logger = logging.getLogger(__name__)


def place_random_tile(board: Board, source: "InputSource") -> Optional[tuple[int, int, int]]:
    """
    Add a tile to an empty cell chosen by the input source.

    Parameters
    ----------
    board : Board
        The board to fill. **Modified in-place.**
    source : InputSource
        Supplies candidate ``(value, row, col)`` triples through ``next_random_tile()``.

    Returns
    -------
    tuple[int, int, int] or None
        The placed ``(value, row, col)``, or None if the board was already full.

    Notes
    -----
    - Candidates that land on an occupied cell are discarded and a new one is requested.
    - The full-board check happens first, so the retry loop always has an empty cell to find.
    """
    if board.is_full():
        return None

    while True:
        value, row, col = source.next_random_tile()
        if board.get(row, col) == 0:
            board.set(row, col, value)
            logger.debug('Placed %d at (%d, %d)', value, row, col)
            return value, row, col
        logger.debug('Cell (%d, %d) is occupied, requesting another tile', row, col)
