"""
Tests for tile spawning, the game configuration and the game session.
"""

from unittest import TestCase, main

import numpy as np

from sliding2048.config import GameConfig
from sliding2048.core.model import Model
from sliding2048.core.side import Side
from sliding2048.core.tile import Tile
from sliding2048.envs.session import GameSession
from sliding2048.envs.spawn import TileSpawner


class TestGameConfig(TestCase):
    """Test configuration validation."""

    def test_defaults(self):
        """Defaults describe the classic game."""
        config = GameConfig()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.max_piece, 2048)
        self.assertEqual(config.start_tiles, 2)
        self.assertEqual(config.tile_probabilities, {2: 0.9, 4: 0.1})

    def test_invalid(self):
        """Inconsistent settings are rejected."""
        with self.assertRaises(ValueError):
            GameConfig(size=1)
        with self.assertRaises(ValueError):
            GameConfig(max_piece=1000)
        with self.assertRaises(ValueError):
            GameConfig(start_tiles=-1)
        with self.assertRaises(ValueError):
            GameConfig(tile_probabilities={})
        with self.assertRaises(ValueError):
            GameConfig(tile_probabilities={3: 1.0})
        with self.assertRaises(ValueError):
            GameConfig(tile_probabilities={2: 0.5, 4: 0.1})


class TestTileSpawner(TestCase):
    """Test random tile placement."""

    def test_spawned_values(self):
        """Spawned tiles are 2 or 4 on previously empty cells."""
        model = Model(4)
        spawner = TileSpawner(seed=42)
        tiles = spawner.populate(model, count=10)
        self.assertEqual(len(tiles), 10)
        self.assertEqual(np.count_nonzero(model.values()), 10)
        for tile in tiles:
            self.assertIn(tile.value, (2, 4))
            self.assertEqual(model.tile(tile.col, tile.row), tile)

    def test_seed_reproducibility(self):
        """Same seed produces identical boards."""
        first, second = Model(4), Model(4)
        TileSpawner(seed=7).populate(first, count=5)
        TileSpawner(seed=7).populate(second, count=5)
        np.testing.assert_array_equal(first.values(), second.values())

    def test_reseed(self):
        """Reseeding restarts the random stream."""
        spawner = TileSpawner(seed=3)
        first = spawner.choose(Model(4))
        spawner.reseed(3)
        self.assertEqual(spawner.choose(Model(4)), first)

    def test_full_board(self):
        """Nothing is spawned on a full board."""
        model = Model.from_values([[2, 4], [4, 2]])
        spawner = TileSpawner(GameConfig(size=2), seed=0)
        self.assertIsNone(spawner.spawn(model))
        self.assertEqual(spawner.populate(model), [])

    def test_populate_stops_when_full(self):
        """Populating more tiles than cells fills the board and stops."""
        model = Model(2)
        tiles = TileSpawner(GameConfig(size=2), seed=0).populate(model, count=10)
        self.assertEqual(len(tiles), 4)
        self.assertEqual(model.empty_cells(), [])

    def test_custom_probabilities(self):
        """The configured values are the only ones drawn."""
        model = Model(4)
        TileSpawner(GameConfig(tile_probabilities={8: 1.0}), seed=1).populate(model, count=6)
        values = model.values()
        self.assertTrue(np.all(values[values != 0] == 8))


class TestGameSession(TestCase):
    """Test the reset / step loop."""

    def setUp(self):
        self.session = GameSession(seed=42)

    def test_start(self):
        """A new session holds the starting tiles and no score."""
        self.assertEqual(np.count_nonzero(self.session.observation), 2)
        self.assertEqual(self.session.reward, 0)
        self.assertFalse(self.session.is_finished)

    def test_reset_seed_reproducibility(self):
        """Same seed produces the same starting board."""
        board1 = self.session.reset(seed=5)
        board2 = self.session.reset(seed=5)
        np.testing.assert_array_equal(board1, board2)
        self.assertEqual(self.session.model.score, 0)

    def test_step_merges_and_spawns(self):
        """A changing step reports the score gained and adds one tile."""
        model = self.session.model
        model.clear()
        model.add_tile(Tile(2, 0, 0))
        model.add_tile(Tile(2, 1, 0))

        board, reward, done = self.session.step(GameSession.ACTIONS['left'])
        self.assertEqual(reward, 4)
        self.assertEqual(board[0, 0], 4)
        self.assertEqual(np.count_nonzero(board), 2)
        self.assertFalse(done)

    def test_step_without_change(self):
        """A step that moves nothing spawns nothing."""
        model = self.session.model
        model.clear()
        model.add_tile(Tile(2, 0, 0))

        board, reward, done = self.session.step(Side.LEFT)
        self.assertEqual(reward, 0)
        self.assertEqual(np.count_nonzero(board), 1)
        self.assertFalse(done)

    def test_play_until_finished(self):
        """Random play ends with a finished game and a max score."""
        generator = np.random.default_rng(0)
        sides = list(Side)
        done = self.session.is_finished
        for _ in range(5000):
            if done:
                break
            _, reward, done = self.session.step(sides[generator.integers(4)])
            self.assertGreaterEqual(reward, 0)
        self.assertTrue(done)
        self.assertEqual(self.session.model.max_score, self.session.model.score)

    def test_render(self):
        """Rendering logs the board."""
        with self.assertLogs('sliding2048.envs.session', level='INFO') as logs:
            self.session.render()
        self.assertIn('(game is not over)', logs.output[0])


if __name__ == '__main__':
    main()
