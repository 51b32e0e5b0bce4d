# -*- coding: utf-8 -*-
"""
This module provides the pure functions of the 2048 game.

It includes functions for sliding and merging lines, orienting the board for each direction,
spawning tiles, checking which moves are legal and detecting the end of the game.
"""

from .gameboard import (
    empty_cells,
    has_available_moves,
    has_changed,
    is_done,
    latent_state,
    merge_column,
    orient,
    reached,
    restore,
    slide,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import Direction, can_move, illegal_directions, legal_directions, parse_direction
from .status import GameStatus

__all__ = [
    "Direction",
    "GameStatus",
    "parse_direction",
    "can_move",
    "legal_directions",
    "illegal_directions",
    "merge_column",
    "slide",
    "slide_and_merge",
    "orient",
    "restore",
    "latent_state",
    "has_changed",
    "empty_cells",
    "spawn_tile",
    "has_available_moves",
    "is_done",
    "reached",
]
