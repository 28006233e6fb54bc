# -*- coding: utf-8 -*-
"""
This module provides the rules of a 2048-like game.

It includes the board sides and their coordinate mappings, the immutable tile record, the board with its
viewing perspective, the game-over predicates and the model that tilts the board and keeps the score.
"""

from .board import Board
from .gamemove import (
    MAX_PIECE,
    at_least_one_move_exists,
    empty_space_exists,
    is_game_over,
    legal_sides,
    legal_sides_mask,
    max_tile_exists,
)
from .model import Model
from .side import Side, to_logical, to_native
from .tile import Tile

__all__ = [
    "MAX_PIECE",
    "Board",
    "Model",
    "Side",
    "Tile",
    "to_native",
    "to_logical",
    "max_tile_exists",
    "empty_space_exists",
    "at_least_one_move_exists",
    "is_game_over",
    "legal_sides",
    "legal_sides_mask",
]
