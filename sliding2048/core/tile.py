"""Immutable tile record."""

from dataclasses import dataclass, replace


def is_tile_value(value: int) -> bool:
    """True if ``value`` is a power of two no smaller than 2."""
    return isinstance(value, int) and value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class Tile:
    """
    A numbered tile sitting at a native board position.

    Tiles never move: relocating one means building a new ``Tile`` (see :meth:`at`).
    """

    value: int
    col: int
    row: int

    def __post_init__(self):
        if not is_tile_value(self.value):
            raise ValueError(f'tile value must be a power of two >= 2, got {self.value!r}')

    def at(self, col: int, row: int, value: int | None = None) -> 'Tile':
        """Copy of this tile at ``(col, row)``, optionally holding ``value``."""
        return replace(self, col=col, row=row, value=self.value if value is None else value)
