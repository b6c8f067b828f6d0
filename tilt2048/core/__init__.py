# -*- coding: utf-8 -*-
"""
Core logic of the 2048 game: the board, the tilt engine, game-over detection and random tile placement.
"""

from .gameboard import GOAL, SIZE, Board, is_game_over, is_power_of_two
from .gamemove import (
    KEY_TO_SIDE,
    MergeEvent,
    MoveEvent,
    Side,
    TiltResult,
    find_destination,
    key_to_side,
    tilt,
    tilt_coordinates,
)
from .placement import place_random_tile

__all__ = [
    "GOAL",
    "SIZE",
    "Board",
    "is_game_over",
    "is_power_of_two",
    "KEY_TO_SIDE",
    "MergeEvent",
    "MoveEvent",
    "Side",
    "TiltResult",
    "find_destination",
    "key_to_side",
    "tilt",
    "tilt_coordinates",
    "place_random_tile",
]
