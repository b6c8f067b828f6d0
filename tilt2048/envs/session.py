"""Game session: runs successive games of 2048 against an input source and a display."""

import logging
from enum import Enum

from tilt2048.core.gameboard import GOAL, SIZE, Board
from tilt2048.core.gamemove import KEY_TO_SIDE, MergeEvent, Side, key_to_side, tilt
from tilt2048.core.placement import place_random_tile
from tilt2048.utils.display import DisplaySink
from tilt2048.utils.sources import InputExhausted, InputSource

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Stages of a session."""

    IDLE = 'idle'
    AWAITING_MOVE = 'awaiting_move'
    GAME_OVER = 'game_over'
    TERMINATED = 'terminated'


class SessionController:
    """
    Controller for a session of 2048 games.

    The controller owns the board and the scores. It places random tiles, reads commands, applies tilts and
    reports every change to the display. The best score survives from one game to the next.
    """

    # ##: Non-directional commands.
    NEW_GAME = 'New Game'
    QUIT = 'Quit'

    def __init__(self, source: InputSource, display: DisplaySink, size: int = SIZE, goal: int = GOAL):
        """
        Initialize an idle session.

        Parameters
        ----------
        source : InputSource
            Supplies random tiles and commands.
        display : DisplaySink
            Receives score updates and tile events.
        size : int, optional
            The size of the square grid (default is 4).
        goal : int, optional
            The tile value that wins a game (default is 2048).
        """
        self.source = source
        self.display = display
        self.goal = goal
        self.board = Board(size)
        self.score = 0
        self.max_score = 0
        self.games_played = 0
        self.state = SessionState.IDLE

    @property
    def is_finished(self) -> bool:
        """True if the current game no longer accepts moves."""
        return self.state in (SessionState.GAME_OVER, SessionState.TERMINATED)

    def _update_max_score(self):
        if self.max_score < self.score:
            self.max_score = self.score
            self.display.set_score(self.score, self.max_score)

    def _place_tile(self):
        placed = place_random_tile(self.board, self.source)
        if placed is not None:
            self.display.add_tile(*placed)

    def _end_game(self):
        self._update_max_score()
        self.display.end_game()
        self.state = SessionState.GAME_OVER
        logger.info('Game %d over with score %d (best %d)', self.games_played, self.score, self.max_score)

    def _next_turn(self):
        """Add the tile for the coming turn, then wait for a move unless the board is stuck."""
        self.display.set_score(self.score, self.max_score)
        self._place_tile()
        if self.board.is_game_over():
            self._end_game()
        else:
            self.state = SessionState.AWAITING_MOVE

    def new_game(self):
        """
        Start a new game.

        The board and the current score are cleared, the best score is kept, and the opening tiles are placed.
        """
        self.score = 0
        self.board.clear()
        self.display.clear()
        self.state = SessionState.IDLE
        self.games_played += 1
        logger.info('Starting game %d', self.games_played)

        self._place_tile()
        self._next_turn()

    def move(self, side: Side) -> bool:
        """
        Tilt the board toward a side and report the result to the display.

        Parameters
        ----------
        side : Side
            The side the tiles travel toward.

        Returns
        -------
        bool
            True if the board changed.
        """
        result = tilt(self.board.tiles, side, self.goal)
        if not result.changed:
            logger.debug('Tilt %s changes nothing', side.name)
            return False

        for event in result.events:
            if isinstance(event, MergeEvent):
                self.score += event.new_value
                self.display.set_score(self.score, self.max_score)
                self.display.merge_tile(
                    event.old_value, event.new_value, event.from_row, event.from_col, event.to_row, event.to_col
                )
            else:
                self.display.move_tile(event.value, event.from_row, event.from_col, event.to_row, event.to_col)
        self.board.apply(result.tiles)
        logger.debug('Tilt %s scores %d', side.name, result.score_delta)

        if result.reached_goal:
            logger.info('Reached %d', self.goal)
            self._end_game()
        else:
            self._next_turn()
        return True

    def handle(self, command: str) -> SessionState:
        """
        Apply one command.

        Parameters
        ----------
        command : str
            "Up", "Down", "Left", "Right", "New Game" or "Quit"; anything else is ignored.

        Returns
        -------
        SessionState
            The state after the command.

        Notes
        -----
        Moves are only accepted while a move is awaited and the board is not stuck. Once a game is over, only
        "New Game" and "Quit" have an effect.
        """
        if command in KEY_TO_SIDE:
            if self.state is SessionState.AWAITING_MOVE and not self.board.is_game_over():
                self.move(key_to_side(command))
            else:
                logger.debug('Ignoring %r in state %s', command, self.state.name)
        elif command == self.NEW_GAME:
            self._update_max_score()
            self.new_game()
        elif command == self.QUIT:
            self._update_max_score()
            self.state = SessionState.TERMINATED
            logger.info('Quit after %d game(s), best score %d', self.games_played, self.max_score)
        else:
            logger.debug('Ignoring unknown command %r', command)
        return self.state

    def play(self) -> int:
        """
        Play games until the player quits or the source runs dry.

        Returns
        -------
        int
            The best score of the session.
        """
        try:
            self.new_game()
            while self.state is not SessionState.TERMINATED:
                self.handle(self.source.next_command())
        except InputExhausted as error:
            logger.info('Input exhausted: %s', error)
            self._update_max_score()
            self.state = SessionState.TERMINATED
        return self.max_score
