# -*- coding: utf-8 -*-
"""
Playable 2048 game built on the rules model.

This module provides the `GameSession` class, which drives a model with random tile spawning, and the
`TileSpawner` class it uses.
"""

from .session import GameSession
from .spawn import TileSpawner

__all__ = ["GameSession", "TileSpawner"]
