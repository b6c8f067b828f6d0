# -*- coding: utf-8 -*-
"""
Collaborators of a game session: input sources and display sinks.

The Matplotlib window lives in ``tilt2048.utils.windows`` and is imported only when a display is wanted.
"""

from .display import BoardMirror, ConsoleDisplay, DisplaySink, NullDisplay
from .sources import (
    InputExhausted,
    InputSource,
    InteractiveSource,
    RecordingSource,
    ScriptedSource,
    TileGenerator,
    read_stdin_command,
)

__all__ = [
    "BoardMirror",
    "ConsoleDisplay",
    "DisplaySink",
    "NullDisplay",
    "InputExhausted",
    "InputSource",
    "InteractiveSource",
    "RecordingSource",
    "ScriptedSource",
    "TileGenerator",
    "read_stdin_command",
]
