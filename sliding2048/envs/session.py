"""2048 game loop: a model driven by random tile spawning."""

import logging

from numpy import ndarray

from sliding2048.config import GameConfig
from sliding2048.core.model import Listener, Model
from sliding2048.core.side import Side
from sliding2048.envs.spawn import TileSpawner

_logger = logging.getLogger(__name__)


class GameSession:
    """
    A playable 2048 game.

    This class couples a :class:`Model` with a :class:`TileSpawner`: every tilt that changes the board is
    followed by one random tile, as in the usual game.
    """

    # ##: All Actions.
    ACTIONS = {'left': Side.LEFT, 'up': Side.UP, 'right': Side.RIGHT, 'down': Side.DOWN}

    def __init__(self, config: GameConfig | None = None, seed: int | None = None, on_change: Listener | None = None):
        """
        Initialize the game and place the starting tiles.

        Parameters
        ----------
        config : GameConfig, optional
            Board size, winning tile and spawning policy (default is ``GameConfig()``).
        seed : int, optional
            Random number generator seed for reproducibility.
        on_change : Callable[[Model], None], optional
            Called after every state change of the underlying model.
        """
        self.config = config or GameConfig()
        self.model = Model.from_config(self.config, on_change=on_change)
        self._spawner = TileSpawner(self.config, seed=seed)
        self._reward = 0

        self._spawner.populate(self.model)

    @property
    def is_finished(self) -> bool:
        """True if the game is over."""
        return self.model.game_over

    @property
    def observation(self) -> ndarray:
        """Current tile values, indexed ``[row, col]`` with row 0 at the bottom."""
        return self.model.values()

    @property
    def reward(self) -> int:
        """Score gained by the last step."""
        return self._reward

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game.

        Parameters
        ----------
        seed : int, optional
            Restart the random stream from this seed.

        Returns
        -------
        ndarray
            The new board values.

        Notes
        -----
        The best score of the previous games is kept.
        """
        if seed is not None:
            self._spawner.reseed(seed)
        self.model.clear()
        self._spawner.populate(self.model)
        self._reward = 0
        return self.observation

    def step(self, side: Side) -> tuple[ndarray, int, bool]:
        """
        Tilt the board and, if anything moved, spawn a new tile.

        Parameters
        ----------
        side : Side
            Direction to tilt towards.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The board values after the step (ndarray)
            - The score gained by the tilt (int)
            - Whether the game has finished (bool)
        """
        score_before = self.model.score
        if self.model.tilt(side):
            self._spawner.spawn(self.model)
        self._reward = self.model.score - score_before
        return self.observation, self._reward, self.is_finished

    def render(self) -> None:
        """Log the current board."""
        _logger.info('%s', self.model)
