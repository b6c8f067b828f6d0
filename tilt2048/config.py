"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass
from typing import Optional

from tilt2048.core.gameboard import GOAL, SIZE, is_power_of_two


@dataclass
class GameConfig:
    """
    Options chosen on the command line and consumed when the session is built.
    """

    # ##>: Board and rules.
    size: int = SIZE  # Rows and columns of the board
    goal: int = GOAL  # Tile value that wins the game

    # ##>: Input and output.
    seed: Optional[int] = None  # Random tile seed, None for a fresh one
    testing: bool = False  # Read tiles and commands from standard input
    log: bool = False  # Record tiles and commands to standard output
    display: bool = True  # Open the Matplotlib window

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'Board size must be at least 2, got {self.size}')
        if self.goal < 4 or not is_power_of_two(self.goal):
            raise ValueError(f'Goal must be a power of two of at least 4, got {self.goal}')
        if self.seed is not None and self.seed < 0:
            raise ValueError(f'Seed must be non-negative, got {self.seed}')
