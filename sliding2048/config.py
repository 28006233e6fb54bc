"""
Configuration of a 2048 game: board size, winning tile and spawning policy.
"""

from dataclasses import dataclass, field

from sliding2048.core.gamemove import MAX_PIECE
from sliding2048.core.tile import is_tile_value


@dataclass
class GameConfig:
    """
    Settings shared by the model, the tile spawner and the game session.
    """

    # ##>: Board.
    size: int = 4  # Cells on one side
    max_piece: int = MAX_PIECE  # Reaching this value ends the game

    # ##>: Spawning policy.
    start_tiles: int = 2  # Tiles placed on reset
    tile_probabilities: dict[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if not is_tile_value(self.max_piece) or self.max_piece < 4:
            raise ValueError(f'max_piece must be a power of two >= 4, got {self.max_piece}')
        if self.start_tiles < 0:
            raise ValueError(f'start_tiles must be >= 0, got {self.start_tiles}')
        if not self.tile_probabilities:
            raise ValueError('tile_probabilities must not be empty')
        for value in self.tile_probabilities:
            if not is_tile_value(value):
                raise ValueError(f'spawned tile values must be powers of two >= 2, got {value!r}')
        total = sum(self.tile_probabilities.values())
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f'tile_probabilities must sum to 1, got {total}')
