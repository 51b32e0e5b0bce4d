# -*- coding: utf-8 -*-
"""
Core logic of the 2048 sliding-tile puzzle.
"""

from game2048.config import EngineConfig
from game2048.core import Direction, GameStatus
from game2048.envs import GridEngine

__all__ = ["GridEngine", "EngineConfig", "Direction", "GameStatus"]
