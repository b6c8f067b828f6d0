"""
The 2048 tile-sliding game: board model, tilt engine and game sessions.
"""

from tilt2048.config import GameConfig
from tilt2048.core import Board, Side, TiltResult, is_game_over, tilt
from tilt2048.envs import SessionController, SessionState

__all__ = ["GameConfig", "Board", "Side", "TiltResult", "is_game_over", "tilt", "SessionController", "SessionState"]
