# -*- coding: utf-8 -*-
"""
Python implementation of a 2048 game session.

This module provides the `SessionController` class, which runs games of 2048 against an input source and a display.
"""

from .session import SessionController, SessionState

__all__ = ["SessionController", "SessionState"]
