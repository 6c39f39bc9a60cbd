"""Board, tiles and players of the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

HEIGHT = 3
WIDTH = 3
PLAYER_NUM = 2


@dataclass(frozen=True)
class Player:
    """A participant in the game."""


@dataclass(frozen=True)
class Tile:
    """A piece placed on the board, optionally owned by a player."""

    owner: Optional[Player] = None


def _empty_grid() -> list[list[Optional[Tile]]]:
    return [[None] * WIDTH for _ in range(HEIGHT)]


@dataclass
class Board:
    """A HEIGHT x WIDTH grid whose cells are empty or hold a tile."""

    cells: list[list[Optional[Tile]]] = field(default_factory=_empty_grid)

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> Optional[Tile]:
        row, col = self._check(key)
        return self.cells[row][col]

    def __setitem__(self, key: tuple[int, int], tile: Optional[Tile]) -> None:
        row, col = self._check(key)
        self.cells[row][col] = tile