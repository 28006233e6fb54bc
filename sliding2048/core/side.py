"""
Board sides and the coordinate mappings that let one sliding routine serve all four tilt directions.
"""

from enum import Enum


class Side(str, Enum):
    """
    The four sides a board can be tilted towards.

    Sides are board-relative: ``UP`` is the edge holding the highest row, ``RIGHT`` the edge holding the
    highest column.
    """

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


def to_native(col: int, row: int, side: Side, size: int) -> tuple[int, int]:
    """
    Map a logical coordinate, as seen from ``side``, to the board's native coordinate.

    Parameters
    ----------
    col : int
        Logical column.
    row : int
        Logical row. Logical row ``size - 1`` always lies along ``side``.
    side : Side
        Perspective the board is viewed from.
    size : int
        Number of cells on one side of the board.

    Returns
    -------
    tuple[int, int]
        The native ``(col, row)``, with ``(0, 0)`` the lower-left corner.

    Notes
    -----
    The four mappings are the identity, the 180° rotation and the two 90° rotations of the square.
    """
    side = Side(side)
    last = size - 1
    if side is Side.UP:
        return col, row
    if side is Side.DOWN:
        return last - col, last - row
    if side is Side.RIGHT:
        return row, last - col
    return last - row, col


def to_logical(col: int, row: int, side: Side, size: int) -> tuple[int, int]:
    """
    Inverse of :func:`to_native`: map a native coordinate into ``side``'s logical space.

    Parameters
    ----------
    col : int
        Native column.
    row : int
        Native row.
    side : Side
        Perspective the board is viewed from.
    size : int
        Number of cells on one side of the board.

    Returns
    -------
    tuple[int, int]
        The logical ``(col, row)``.
    """
    side = Side(side)
    last = size - 1
    if side is Side.UP:
        return col, row
    if side is Side.DOWN:
        return last - col, last - row
    if side is Side.RIGHT:
        return last - row, col
    return row, last - col
