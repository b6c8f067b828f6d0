# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 Game

This module provides a Matplotlib window that displays a game session and captures its keyboard input. The window
mirrors the board from the session's tile notifications and turns key presses into game commands.
"""
from collections import deque
from typing import Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from tilt2048.utils.display import BoardMirror

# ##: Keys understood by the window, mapped to game commands.
KEY_COMMANDS = {
    "up": "Up",
    "down": "Down",
    "left": "Left",
    "right": "Right",
    "n": "New Game",
    "q": "Quit",
    "escape": "Quit",
}


class WindowBoard(BoardMirror):
    """
    Display sink and keyboard for a game session, drawn with Matplotlib.

    Methods
    -------
    read_key() -> str
        Block until a key is pressed and return the matching command.
    refresh()
        Redraw the board and the score.
    close()
        Close the game window.

    Notes
    -----
    - Unknown keys are returned unchanged; the session ignores them.
    - Closing the window is read as a "Quit" command.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
        8192: "#9ED682",
    }

    def __init__(self, title: str, size: int, pause: float = 0.001):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        pause : float, optional
            Seconds the event loop runs after each change so it shows up (default is 0.001; 0 only redraws).
        """
        super().__init__(size)
        self.title = title
        self.pause = pause
        self.fig, self.axe = plt.subplots()
        self._setup_axes(size)
        self.closed = False
        self._keys: deque[str] = deque()
        self.fig.canvas.mpl_connect("close_event", self._close_handler)
        self.fig.canvas.mpl_connect("key_press_event", self._key_handler)
        self.refresh()

    def _setup_axes(self, size: int):
        """
        Set up the axes for the game board, one subplot per cell.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")

        # ##: Remove all ticks and labels for a cleaner game board appearance.
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """Mark the window closed."""
        self.closed = True

    def _key_handler(self, event: Event):
        """Queue the command for a key press."""
        if event.key is not None:
            self._keys.append(KEY_COMMANDS.get(event.key, event.key))

    def refresh(self):
        """
        Redraw the board and the score.

        Notes
        -----
        The score is shown in the window title; a finished game is flagged there as well.
        """
        for ax, text, value in zip(self.axes, self.texts, self.board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, "#3C3A32"))

        status = " - Game over (n: new game, q: quit)" if self.finished else ""
        manager = self.fig.canvas.manager
        if manager is not None:
            manager.set_window_title(f"{self.title} - Score: {self.score} Best: {self.max_score}{status}")

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def _show(self):
        """Redraw, then let the event loop paint the window."""
        self.refresh()
        if self.pause > 0 and not self.closed:
            plt.pause(self.pause)

    def set_score(self, score: int, max_score: int):
        super().set_score(score, max_score)
        self._show()

    def add_tile(self, value: int, row: int, col: int):
        super().add_tile(value, row, col)
        self._show()

    def move_tile(self, value: int, from_row: int, from_col: int, to_row: int, to_col: int):
        super().move_tile(value, from_row, from_col, to_row, to_col)
        self._show()

    def merge_tile(self, old_value: int, new_value: int, from_row: int, from_col: int, to_row: int, to_col: int):
        super().merge_tile(old_value, new_value, from_row, from_col, to_row, to_col)
        self._show()

    def end_game(self):
        super().end_game()
        self._show()

    def clear(self):
        super().clear()
        self._show()

    def read_key(self, interval: float = 0.05) -> str:
        """
        Wait for the next key press.

        Parameters
        ----------
        interval : float, optional
            Seconds between polls of the Matplotlib event loop (default is 0.05).

        Returns
        -------
        str
            The command for the key, or "Quit" once the window is closed.
        """
        self.refresh()
        while not self._keys and not self.closed:
            plt.pause(interval)
        if self._keys:
            return self._keys.popleft()
        return "Quit"

    def close(self):
        """
        Close the window.

        This method closes the game window and sets the closed flag to True.
        """
        plt.close(self.fig)
        self.closed = True
