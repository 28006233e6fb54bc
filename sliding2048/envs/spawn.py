"""
Random tile spawning, kept outside the model: the spawner only ever calls ``Model.add_tile``.
"""

import logging

from numpy.random import PCG64DXSM, Generator, default_rng

from sliding2048.config import GameConfig
from sliding2048.core.model import Model
from sliding2048.core.tile import Tile

_logger = logging.getLogger(__name__)


class TileSpawner:
    """
    Place new tiles on random empty cells.

    Parameters
    ----------
    config : GameConfig, optional
        Supplies the tile value probabilities and the number of starting tiles.
    seed : int, optional
        Random number generator seed for reproducibility.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None):
        self.config = config or GameConfig()
        self._values = list(self.config.tile_probabilities)
        self._probs = [self.config.tile_probabilities[value] for value in self._values]
        self._rng: Generator = self._make_generator(seed)

    @staticmethod
    def _make_generator(seed: int | None) -> Generator:
        return default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    def reseed(self, seed: int | None) -> None:
        """Restart the random stream from ``seed``."""
        self._rng = self._make_generator(seed)

    def choose(self, model: Model) -> Tile | None:
        """
        Draw the next tile without placing it.

        Parameters
        ----------
        model : Model
            The game to draw an empty cell from.

        Returns
        -------
        Tile or None
            A tile on a uniformly chosen empty cell, or None if the board is full.

        Notes
        -----
        With the default configuration, the value is 2 with probability 0.9 and 4 with probability 0.1.
        """
        empty_cells = model.empty_cells()
        if not empty_cells:
            return None

        col, row = empty_cells[self._rng.integers(len(empty_cells))]
        value = self._values[self._rng.choice(len(self._values), p=self._probs)]
        return Tile(int(value), int(col), int(row))

    def spawn(self, model: Model) -> Tile | None:
        """Add one random tile to ``model``; None if the board is full."""
        tile = self.choose(model)
        if tile is not None:
            model.add_tile(tile)
            _logger.debug('Spawned %s', tile)
        return tile

    def populate(self, model: Model, count: int | None = None) -> list[Tile]:
        """
        Add several random tiles to ``model``.

        Parameters
        ----------
        model : Model
            The game to fill.
        count : int, optional
            Number of tiles to add (default is ``config.start_tiles``). Stops early on a full board.

        Returns
        -------
        list[Tile]
            The tiles actually added.
        """
        count = self.config.start_tiles if count is None else count
        added = []
        for _ in range(count):
            tile = self.spawn(model)
            if tile is None:
                break
            added.append(tile)
        return added
