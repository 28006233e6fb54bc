"""
Move and game-over predicates over a board's value array.

All functions take the array produced by :meth:`Board.values`: indexed ``[row, col]`` in native coordinates,
row 0 at the bottom, 0 for an empty cell.
"""

from numpy import ndarray

from sliding2048.core.side import Side

# ##: Value whose appearance ends the game.
MAX_PIECE = 2048


def max_tile_exists(values: ndarray, max_piece: int = MAX_PIECE) -> bool:
    """True if any tile holds ``max_piece``."""
    return bool((values == max_piece).any())


def empty_space_exists(values: ndarray) -> bool:
    """True if at least one cell is empty."""
    return bool((values == 0).any())


def at_least_one_move_exists(values: ndarray) -> bool:
    """
    Check whether any tilt could still change the board.

    Parameters
    ----------
    values : ndarray
        The board values.

    Returns
    -------
    bool
        True if a cell is empty or two adjacent occupied cells hold the same value.

    Notes
    -----
    Empty cells are never compared as values: two neighbouring zeros do not count as a merge.
    """
    if empty_space_exists(values):
        return True

    # ##>: Horizontal neighbours (same row, adjacent columns).
    left, right = values[:, :-1], values[:, 1:]
    if ((left != 0) & (left == right)).any():
        return True

    # ##>: Vertical neighbours (same column, adjacent rows).
    lower, upper = values[:-1, :], values[1:, :]
    return bool(((lower != 0) & (lower == upper)).any())


def is_game_over(values: ndarray, max_piece: int = MAX_PIECE) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    values : ndarray
        The board values.
    max_piece : int, optional
        The winning tile value (default is 2048).

    Returns
    -------
    bool
        True if the winning tile is on the board or no move is left.
    """
    return max_tile_exists(values, max_piece) or not at_least_one_move_exists(values)


def legal_sides_mask(values: ndarray) -> dict[Side, bool]:
    """
    Tell, for every side, whether tilting towards it would change the board.

    Parameters
    ----------
    values : ndarray
        The board values.

    Returns
    -------
    dict[Side, bool]
        True for the sides whose tilt slides or merges at least one tile.

    Notes
    -----
    Row 0 is the bottom row, so "up" means towards higher row indices.
    """
    # ##>: Compute merge candidates once per axis.
    left, right = values[:, :-1], values[:, 1:]
    h_can_merge = (left != 0) & (left == right)

    lower, upper = values[:-1, :], values[1:, :]
    v_can_merge = (lower != 0) & (lower == upper)

    # ##>: A tile can slide when the neighbour on the tilt side is empty.
    slide_left = (left == 0) & (right != 0)
    slide_right = (right == 0) & (left != 0)
    slide_up = (upper == 0) & (lower != 0)
    slide_down = (lower == 0) & (upper != 0)

    return {
        Side.UP: bool(slide_up.any() or v_can_merge.any()),
        Side.DOWN: bool(slide_down.any() or v_can_merge.any()),
        Side.LEFT: bool(slide_left.any() or h_can_merge.any()),
        Side.RIGHT: bool(slide_right.any() or h_can_merge.any()),
    }


def legal_sides(values: ndarray) -> list[Side]:
    """Sides whose tilt would change the board."""
    return [side for side, legal in legal_sides_mask(values).items() if legal]
