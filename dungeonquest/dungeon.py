"""Dungeon maps: the main level grid and the boss room."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .boss import Boss
from .enemy import Enemy

OUT_OF_BOUNDS = "0"
EMPTY = "-"
BLANK = "\0"

_HIGHLIGHT = "\033[1;4;92m"
_DIM = "\033[0;90m"
_RESET = "\033[0m"


class Direction(Enum):
    """The four directions the player can face."""

    UP = "arriba"
    DOWN = "abajo"
    LEFT = "izquierda"
    RIGHT = "derecha"

    def delta(self) -> tuple[int, int]:
        """Return the ``(dx, dy)`` step for this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass
class Grid:
    """A rectangular map of one-character tiles."""

    rows: int = 0
    cols: int = 0
    tiles: list[list[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.tiles:
            self.tiles = [list(row) for row in self.tiles]
        else:
            self.tiles = [[BLANK] * self.cols for _ in range(self.rows)]

    def render(self) -> str:
        """Return the map as text, with the player and walls coloured."""
        lines = []
        for row in self.tiles[: self.rows]:
            cells = []
            for tile in row[: self.cols]:
                if tile in ("L", "Z"):
                    cells.append(f"{_HIGHLIGHT}{tile}{_RESET} ")
                elif tile == "X":
                    cells.append(f"{_DIM}{tile}{_RESET} ")
                else:
                    cells.append(f"{tile} ")
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def show(self) -> None:
        """Write the map to standard output, one row per line."""
        out = sys.stdout
        for line in self.render().splitlines(keepends=True):
            out.write(line)
        out.flush()

    def element_at(self, x: int, y: int) -> str:
        """Return the tile at column ``x``, row ``y``, or ``OUT_OF_BOUNDS``."""
        if 0 <= y < self.rows and 0 <= x < self.cols:
            return self.tiles[y][x]
        return OUT_OF_BOUNDS

    def set_element(self, row: int, col: int, value: str) -> None:
        """Replace the tile at ``row``, ``col``; positions off the map are ignored."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            self.tiles[row][col] = value

    def target_of(self, player: Any) -> tuple[int, int]:
        """Return the ``(x, y)`` square the player faces."""
        try:
            direction = Direction(player.direction)
        except ValueError:
            print("Dirección no válida.")
            return player.x, player.y
        dx, dy = direction.delta()
        return player.x + dx, player.y + dy

    def player_start(self) -> tuple[int, int]:
        """Return ``(row, col)`` of the first 'L' tile, or ``(0, 0)``."""
        for i, row in enumerate(self.tiles[: self.rows]):
            for j, tile in enumerate(row[: self.cols]):
                if tile == "L":
                    return i, j
        return 0, 0


@dataclass
class Dungeon(Grid):
    """A dungeon level with its enemies."""

    enemies: list[Enemy] = field(default_factory=list)


@dataclass
class BossRoom(Grid):
    """The room where the boss waits."""

    enemies: list[Enemy] = field(default_factory=list)
    boss: Boss = field(default_factory=Boss)
    boss_entrance: tuple[int, int] = (0, 0)

    def resize(self, rows: int, cols: int) -> None:
        """Change the size of the room, keeping tiles that still fit."""
        self.rows = rows
        self.cols = cols
        resized = []
        for row in self.tiles[:rows]:
            row = row[:cols]
            row.extend(BLANK * (cols - len(row)))
            resized.append(row)
        resized.extend([BLANK] * cols for _ in range(rows - len(resized)))
        self.tiles = resized