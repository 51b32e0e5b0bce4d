# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `GridEngine` class, which holds a game session and applies the rules of 2048 to it.
"""

from .engine import GridEngine

__all__ = ["GridEngine"]
