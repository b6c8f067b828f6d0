"""
Display sinks: receivers of score updates and tile events from a game session.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from numpy import int64, zeros

from tilt2048.utils.sources import read_stdin_command

logger = logging.getLogger(__name__)


class DisplaySink(ABC):
    """
    Receiver of game notifications.

    Every method is a notification; return values are ignored.
    """

    @abstractmethod
    def set_score(self, score: int, max_score: int):
        """Show the current score and the best score of the session."""

    @abstractmethod
    def add_tile(self, value: int, row: int, col: int):
        """Show a new tile."""

    @abstractmethod
    def move_tile(self, value: int, from_row: int, from_col: int, to_row: int, to_col: int):
        """Slide a tile to an empty cell."""

    @abstractmethod
    def merge_tile(self, old_value: int, new_value: int, from_row: int, from_col: int, to_row: int, to_col: int):
        """Slide a tile onto an equal one, which becomes ``new_value``."""

    @abstractmethod
    def end_game(self):
        """Signal that the current game is over."""

    @abstractmethod
    def clear(self):
        """Remove every tile."""


class NullDisplay(DisplaySink):
    """Sink for headless runs; notifications are only logged."""

    def set_score(self, score: int, max_score: int):
        logger.debug('Score %d (best %d)', score, max_score)

    def add_tile(self, value: int, row: int, col: int):
        logger.debug('Add %d at (%d, %d)', value, row, col)

    def move_tile(self, value: int, from_row: int, from_col: int, to_row: int, to_col: int):
        logger.debug('Move %d from (%d, %d) to (%d, %d)', value, from_row, from_col, to_row, to_col)

    def merge_tile(self, old_value: int, new_value: int, from_row: int, from_col: int, to_row: int, to_col: int):
        logger.debug(
            'Merge %d from (%d, %d) into %d at (%d, %d)', old_value, from_row, from_col, new_value, to_row, to_col
        )

    def end_game(self):
        logger.debug('Game over')

    def clear(self):
        logger.debug('Clear')


class BoardMirror(DisplaySink):
    """
    Sink that keeps its own copy of the board up to date from the notifications.

    Subclasses draw the mirrored grid; ``board``, ``score``, ``max_score`` and ``finished`` describe what to show.
    """

    def __init__(self, size: int):
        self.size = size
        self.board = zeros((size, size), dtype=int64)
        self.score = 0
        self.max_score = 0
        self.finished = False

    def set_score(self, score: int, max_score: int):
        self.score, self.max_score = score, max_score

    def add_tile(self, value: int, row: int, col: int):
        self.board[row, col] = value

    def move_tile(self, value: int, from_row: int, from_col: int, to_row: int, to_col: int):
        self.board[from_row, from_col] = 0
        self.board[to_row, to_col] = value

    def merge_tile(self, old_value: int, new_value: int, from_row: int, from_col: int, to_row: int, to_col: int):
        self.board[from_row, from_col] = 0
        self.board[to_row, to_col] = new_value

    def end_game(self):
        self.finished = True

    def clear(self):
        self.board.fill(0)
        self.finished = False


class ConsoleDisplay(BoardMirror):
    """
    Text display for playing from a terminal.

    Parameters
    ----------
    size : int
        The size of the board.
    stream : TextIO, optional
        Where to print (default is standard output).
    """

    def __init__(self, size: int, stream: Optional[TextIO] = None):
        super().__init__(size)
        self._stream = stream if stream is not None else sys.stdout

    def render(self):
        """Print the score and the board."""
        print(f'Score: {self.score}  Best: {self.max_score}', file=self._stream)
        for row in self.board.tolist():
            print(' \t'.join(str(value) if value else '.' for value in row), file=self._stream)
        if self.finished:
            print('Game over! Type "New Game" or "Quit".', file=self._stream)

    def read_command(self) -> str:
        """Show the board, then read the next command from standard input."""
        self.render()
        return read_stdin_command()
