"""Rules engine of the 2048 sliding-tile puzzle."""

from .config import GameConfig
from .core import Board, Model, Side, Tile
from .envs import GameSession, TileSpawner

__all__ = ["GameConfig", "Board", "Model", "Side", "Tile", "GameSession", "TileSpawner"]
