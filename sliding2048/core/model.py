"""
State of a game of 2048: the board, the score and the tilt rules.
"""

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from numpy import ndarray

from sliding2048.core.board import Board
from sliding2048.core.gamemove import MAX_PIECE, is_game_over
from sliding2048.core.side import Side
from sliding2048.core.tile import Tile, is_tile_value

if TYPE_CHECKING:
    from sliding2048.config import GameConfig

# ##>: Module logger.
_logger = logging.getLogger(__name__)

Listener = Callable[['Model'], None]


class Model:
    """
    The state of a game of 2048.

    Coordinates are ``(col, row)`` like ``(x, y)``: column 0, row 0 is the lower-left corner of the board.

    Listeners registered through ``on_change`` or :meth:`subscribe` are called with the model after
    :meth:`clear`, :meth:`add_tile` and every :meth:`tilt` that changes the board.
    """

    def __init__(self, size: int = 4, max_piece: int = MAX_PIECE, on_change: Listener | None = None):
        """
        Initialize an empty game.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        max_piece : int, optional
            The tile value that ends the game (default is 2048).
        on_change : Callable[[Model], None], optional
            Called after every state change.

        Raises
        ------
        ValueError
            If ``max_piece`` is not a power of two of at least 4.
        """
        self._board = Board(size)
        if not is_tile_value(max_piece) or max_piece < 4:
            raise ValueError(f'max_piece must be a power of two >= 4, got {max_piece!r}')
        self._max_piece = max_piece
        self._score = 0
        self._max_score = 0
        self._game_over = False
        self._listeners: list[Listener] = [on_change] if on_change is not None else []

    @classmethod
    def from_values(
        cls,
        raw_values: Sequence[Sequence[int]],
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
        max_piece: int = MAX_PIECE,
        on_change: Listener | None = None,
    ) -> 'Model':
        """
        Build a game from explicit tile values, mostly for tests.

        Parameters
        ----------
        raw_values : Sequence[Sequence[int]]
            Values indexed ``[row][col]``, ``(0, 0)`` being the bottom-left corner; 0 for an empty cell.
        score : int, optional
            Current score.
        max_score : int, optional
            Best score so far.
        game_over : bool, optional
            Stored game-over flag. It is recomputed on the next query.
        max_piece : int, optional
            The tile value that ends the game.
        on_change : Callable[[Model], None], optional
            Called after every state change.

        Returns
        -------
        Model
            The populated game.
        """
        model = cls(len(raw_values), max_piece=max_piece, on_change=on_change)
        model._board = Board.from_values(raw_values)
        model._score = score
        model._max_score = max_score
        model._game_over = game_over
        return model

    @classmethod
    def from_config(cls, config: 'GameConfig', on_change: Listener | None = None) -> 'Model':
        """Empty game sized and bounded by ``config``."""
        return cls(config.size, max_piece=config.max_piece, on_change=on_change)

    @property
    def size(self) -> int:
        """Number of squares on one side of the board."""
        return self._board.size

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def max_score(self) -> int:
        """Best score so far, updated when the game is seen to be over."""
        return self._max_score

    @property
    def max_piece(self) -> int:
        """Tile value that ends the game."""
        return self._max_piece

    @property
    def game_over(self) -> bool:
        """
        Whether the game is over: no move is left, or the winning tile is on the board.

        Every query re-examines the board and, when the game is over, raises ``max_score`` to the current score.
        """
        self._check_game_over()
        if self._game_over:
            self._max_score = max(self._score, self._max_score)
        return self._game_over

    def tile(self, col: int, row: int) -> Tile | None:
        """Tile at native ``(col, row)``, or None."""
        return self._board.tile(col, row)

    def values(self) -> ndarray:
        """Tile values indexed ``[row, col]``, row 0 at the bottom, 0 for empty cells."""
        return self._board.values()

    def empty_cells(self) -> list[tuple[int, int]]:
        """Native ``(col, row)`` of every empty cell."""
        return self._board.empty_cells()

    def snapshot(self) -> tuple:
        """Structural identity of the game: values, score, max score and game-over flag."""
        values = tuple(tuple(int(value) for value in row) for row in self.values().tolist())
        over = self.game_over
        return values, self._score, self._max_score, over

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` after every state change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Stop notifying ``listener``."""
        self._listeners.remove(listener)

    def clear(self) -> None:
        """Empty the board and reset the score."""
        self._score = 0
        self._game_over = False
        self._board.clear()
        _logger.debug('Board cleared')
        self._notify()

    def add_tile(self, tile: Tile) -> None:
        """
        Add ``tile`` to the board.

        Raises
        ------
        ValueError
            If a tile already occupies the same position.
        """
        self._board.add_tile(tile)
        _logger.debug('Added %s', tile)
        self._check_game_over()
        self._notify()

    def tilt(self, side: Side) -> bool:
        """
        Tilt the board towards ``side``.

        Parameters
        ----------
        side : Side
            Direction every tile slides to.

        Returns
        -------
        bool
            True if the tilt moved or merged at least one tile.

        Notes
        -----
        - Two equal tiles adjacent in the direction of motion merge into one tile of twice the value, and the
          new value is added to the score.
        - A tile produced by a merge does not merge again in the same tilt.
        - When three adjacent tiles in the direction of motion are equal, the leading two merge and the
          trailing one does not.
        """
        side = Side(side)
        score_before = self._score
        changed = False

        # ##: View the board so that the tilt side is the logical top.
        self._board.set_perspective(side)
        try:
            for col in range(self._board.size):
                changed |= self._tilt_column(col)
        finally:
            self._board.set_perspective(Side.UP)

        self._check_game_over()
        _logger.debug('Tilt %s: changed=%s, gained=%d', side.value, changed, self._score - score_before)
        if changed:
            self._notify()
        return changed

    def _tilt_column(self, col: int) -> bool:
        """Slide and merge one logical column towards the logical top row."""
        board = self._board
        changed = False

        top = board.size - 1
        prev: Tile | None = None
        prev_row = top
        mergeable = False

        for row in range(board.size - 1, -1, -1):
            tile = board.tile(col, row)
            if tile is None:
                continue

            if prev is not None and mergeable and tile.value == prev.value:
                # ##: Merge into the previous tile, which then stays put for the rest of this tilt.
                board.move(col, prev_row, tile)
                self._score += 2 * tile.value
                prev = board.tile(col, prev_row)
                mergeable = False
                changed = True
            else:
                changed |= board.move(col, top, tile)
                prev = board.tile(col, top)
                prev_row = top
                mergeable = True
                top -= 1

        return changed

    def _check_game_over(self) -> None:
        self._game_over = is_game_over(self._board.values(), self._max_piece)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def __str__(self) -> str:
        lines = ['', '[']
        for row in range(self.size - 1, -1, -1):
            cells = []
            for col in range(self.size):
                tile = self.tile(col, row)
                cells.append('    ' if tile is None else f'{tile.value:4d}')
            lines.append('|' + '|'.join(cells) + '|')
        over = 'over' if self.game_over else 'not over'
        lines.append(f'] {self.score} (max: {self.max_score}) (game is {over}) ')
        return '\n'.join(lines) + '\n'

    def __repr__(self) -> str:
        return f'Model(size={self.size}, score={self._score}, max_score={self._max_score})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
