# -*- coding: utf-8 -*-
"""
Input sources for a game session.

A source supplies two streams: candidate random tiles and player commands. Interactive play draws tiles from a
seeded random generator and reads commands from the keyboard; testing replays both from a script, in the same
format that ``RecordingSource`` writes, so a logged game can be replayed exactly.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO

from numpy.random import default_rng

logger = logging.getLogger(__name__)

# ##: Tile spawn probabilities (90% for 2, 10% for 4).
_TILE_VALUES = [2, 4]
_TILE_PROBS = [0.9, 0.1]


class InputExhausted(EOFError):
    """The source has no more tiles or commands to give."""


class InputSource(ABC):
    """Supplier of random tiles and commands."""

    @abstractmethod
    def next_random_tile(self) -> tuple[int, int, int]:
        """Return a candidate tile as ``(value, row, col)``; the cell may be occupied."""

    @abstractmethod
    def next_command(self) -> str:
        """Return the next command, blocking until one is available."""


class TileGenerator:
    """
    Seeded generator of candidate tiles.

    Values are 2 with probability 0.9 and 4 otherwise; positions are uniform over the whole board.
    """

    def __init__(self, size: int, seed: Optional[int] = None):
        """
        Parameters
        ----------
        size : int
            The size of the board.
        seed : int, optional
            Random number generator seed for reproducibility.
        """
        self.size = size
        self._rng = default_rng(seed)

    def __call__(self) -> tuple[int, int, int]:
        value = int(self._rng.choice(_TILE_VALUES, p=_TILE_PROBS))
        row, col = (int(index) for index in self._rng.integers(0, self.size, size=2))
        return value, row, col


class InteractiveSource(InputSource):
    """
    Source for live play: random tiles from a ``TileGenerator`` and commands from a callable.

    Parameters
    ----------
    read_command : Callable[[], str]
        Blocking function returning the next command, such as ``WindowBoard.read_key``.
    size : int
        The size of the board.
    seed : int, optional
        Random number generator seed.
    """

    def __init__(self, read_command: Callable[[], str], size: int, seed: Optional[int] = None):
        self._read_command = read_command
        self._tiles = TileGenerator(size, seed)

    def next_random_tile(self) -> tuple[int, int, int]:
        return self._tiles()

    def next_command(self) -> str:
        return self._read_command()


class ScriptedSource(InputSource):
    """
    Source that replays tiles and commands from a text stream.

    Each line holds either a tile, written as three integers ``value row col``, or a command such as ``Up`` or
    ``New Game``. Blank lines and lines starting with ``#`` are skipped.

    Parameters
    ----------
    stream : TextIO
        The script to read.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.line_number = 0

    def _next_line(self) -> str:
        for line in self._stream:
            self.line_number += 1
            line = line.strip()
            if line and not line.startswith('#'):
                return line
        raise InputExhausted(f'Script ended after line {self.line_number}')

    def next_random_tile(self) -> tuple[int, int, int]:
        line = self._next_line()
        fields = line.split()
        if len(fields) != 3 or not all(item.lstrip('-').isdigit() for item in fields):
            raise ValueError(f'Line {self.line_number}: expected a tile "value row col", got {line!r}')
        value, row, col = (int(item) for item in fields)
        return value, row, col

    def next_command(self) -> str:
        line = self._next_line()
        if line.split()[0].lstrip('-').isdigit():
            raise ValueError(f'Line {self.line_number}: expected a command, got a tile {line!r}')
        return line


class RecordingSource(InputSource):
    """
    Wrapper that writes every tile and command it forwards to a log.

    The log uses the ``ScriptedSource`` format.

    Parameters
    ----------
    source : InputSource
        The source being recorded.
    stream : TextIO
        Where to write the log.
    """

    def __init__(self, source: InputSource, stream: TextIO):
        self._source = source
        self._stream = stream

    def _record(self, line: str):
        self._stream.write(line + '\n')
        self._stream.flush()

    def next_random_tile(self) -> tuple[int, int, int]:
        value, row, col = self._source.next_random_tile()
        self._record(f'{value} {row} {col}')
        return value, row, col

    def next_command(self) -> str:
        command = self._source.next_command()
        self._record(command)
        return command


def read_stdin_command() -> str:
    """
    Read one command line from standard input.

    Raises
    ------
    InputExhausted
        At end of input.
    """
    line = sys.stdin.readline()
    if not line:
        raise InputExhausted('Standard input closed')
    return line.strip()
