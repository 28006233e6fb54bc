"""
Square board of tiles with a switchable viewing perspective.
"""

from typing import Sequence

from numpy import int64, ndarray, zeros

from sliding2048.core.side import Side, to_logical, to_native
from sliding2048.core.tile import Tile


class Board:
    """
    An N×N grid of optional tiles.

    Cells are stored in native coordinates, ``(0, 0)`` being the lower-left corner. :meth:`tile` and
    :meth:`move` work in the logical coordinates of the current perspective, so that "slide towards the
    logical top row" implements a tilt towards whichever side the board is viewed from.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f'board size must be positive, got {size}')
        self._size = size
        self._cells: list[list[Tile | None]] = [[None] * size for _ in range(size)]
        self._perspective = Side.UP

    @classmethod
    def from_values(cls, raw_values: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from tile values.

        Parameters
        ----------
        raw_values : Sequence[Sequence[int]]
            Values indexed ``[row][col]``, row 0 being the bottom row. Zero means an empty cell.

        Returns
        -------
        Board
            A board holding one tile per non-zero value.
        """
        size = len(raw_values)
        board = cls(size)
        for row, line in enumerate(raw_values):
            if len(line) != size:
                raise ValueError(f'expected {size} values in row {row}, got {len(line)}')
            for col, value in enumerate(line):
                if value:
                    board.add_tile(Tile(int(value), col, row))
        return board

    @property
    def size(self) -> int:
        """Number of cells on one side of the board."""
        return self._size

    @property
    def perspective(self) -> Side:
        """Side the board is currently viewed from."""
        return self._perspective

    def set_perspective(self, side: Side) -> None:
        """View the board from ``side``. Stored tiles are left untouched."""
        self._perspective = Side(side)

    def _check_bounds(self, col: int, row: int) -> None:
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise ValueError(f'({col}, {row}) lies outside a {self._size}x{self._size} board')

    def tile(self, col: int, row: int) -> Tile | None:
        """Tile at logical ``(col, row)`` in the current perspective, or None."""
        self._check_bounds(col, row)
        native_col, native_row = to_native(col, row, self._perspective, self._size)
        return self._cells[native_col][native_row]

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """
        Move ``tile`` to logical ``(col, row)``.

        Parameters
        ----------
        col : int
            Logical destination column.
        row : int
            Logical destination row.
        tile : Tile
            A tile currently on the board.

        Returns
        -------
        bool
            False if ``tile`` already sits at the destination, True once it has been moved.

        Raises
        ------
        ValueError
            If the destination holds a tile of a different value, or lies off the board.

        Notes
        -----
        Moving onto an occupied cell is a merge: the occupant is replaced by a single tile of twice the value.
        The caller is responsible for only merging tiles that are allowed to merge.
        """
        self._check_bounds(col, row)
        if to_logical(tile.col, tile.row, self._perspective, self._size) == (col, row):
            return False

        occupant = self.tile(col, row)
        value = tile.value
        if occupant is not None:
            if occupant.value != tile.value:
                raise ValueError(f'cannot merge {tile} into {occupant}: values differ')
            value = tile.value * 2

        native_col, native_row = to_native(col, row, self._perspective, self._size)
        self._cells[tile.col][tile.row] = None
        self._cells[native_col][native_row] = tile.at(native_col, native_row, value)
        return True

    def add_tile(self, tile: Tile) -> None:
        """
        Place ``tile`` at its native position.

        Raises
        ------
        ValueError
            If the position is off the board or already occupied.
        """
        if not (0 <= tile.col < self._size and 0 <= tile.row < self._size):
            raise ValueError(f'{tile} lies outside a {self._size}x{self._size} board')
        if self._cells[tile.col][tile.row] is not None:
            raise ValueError(f'cannot add {tile}: cell is occupied by {self._cells[tile.col][tile.row]}')
        self._cells[tile.col][tile.row] = tile

    def clear(self) -> None:
        """Remove every tile."""
        for column in self._cells:
            for row in range(self._size):
                column[row] = None

    def empty_cells(self) -> list[tuple[int, int]]:
        """Native ``(col, row)`` of every empty cell."""
        return [
            (col, row) for col in range(self._size) for row in range(self._size) if self._cells[col][row] is None
        ]

    def values(self) -> ndarray:
        """
        Tile values as an array.

        Returns
        -------
        ndarray
            ``(size, size)`` array indexed ``[row, col]`` in native coordinates, row 0 being the bottom row.
            Empty cells hold 0.
        """
        values = zeros((self._size, self._size), dtype=int64)
        for column in self._cells:
            for tile in column:
                if tile is not None:
                    values[tile.row, tile.col] = tile.value
        return values
