"""Game state: the player's moves over a validated map."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from .maps import find_player
from .output import cprintf

ESCAPE_KEY = 65307

_WALL = "1"
_EXIT = "E"
_PLAYER = "P"
_COLLECTIBLE = "C"
_FLOOR = "0"


class Direction(Enum):
    """A step on the grid, bound to its movement key."""

    DOWN = ("s", 1, 0)
    UP = ("w", -1, 0)
    RIGHT = ("d", 0, 1)
    LEFT = ("a", 0, -1)

    def __init__(self, key: str, d_row: int, d_col: int) -> None:
        self.key = key
        self.d_row = d_row
        self.d_col = d_col


_KEYS = {direction.key: direction for direction in Direction}


class MoveResult(Enum):
    """What a key press or move did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


@dataclass
class Game:
    """A level in play: the tile grid, the player's place and the counters."""

    grid: list[list[str]]
    row: int
    col: int
    collectibles: int
    moves: int = 0
    finished: bool = False
    stream: TextIO | None = field(default=None, repr=False)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Game:
        """Start a game on map rows, with or without trailing newlines."""
        lines = [row.split("\n", 1)[0] for row in rows]
        row, col = find_player(lines)
        collectibles = sum(line[1:].count(_COLLECTIBLE) for line in lines[1:])
        return cls([list(line) for line in lines], row, col, collectibles)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def tile(self, row: int, col: int) -> str:
        """The tile at row and column."""
        if not (0 <= row < self.height and 0 <= col < len(self.grid[row])):
            raise IndexError(f"no tile at ({row}, {col})")
        return self.grid[row][col]

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield (row, column, tile) for every tile, row by row."""
        for r, line in enumerate(self.grid):
            for c, tile in enumerate(line):
                yield r, c, tile

    def _target(self, row: int, col: int) -> str:
        try:
            return self.tile(row, col)
        except IndexError:
            return _WALL

    def _report(self) -> None:
        cprintf("move count = %d\n", self.moves, stream=self.stream)

    def move(self, direction: Direction) -> MoveResult:
        """Step the player one tile; the exit opens once every collectible is taken."""
        if self.finished:
            raise RuntimeError("the game is over")
        new_row = self.row + direction.d_row
        new_col = self.col + direction.d_col
        target = self._target(new_row, new_col)
        if target == _WALL or (target == _EXIT and self.collectibles > 0):
            return MoveResult.BLOCKED
        if target == _EXIT:
            self.moves += 1
            self._report()
            self.finished = True
            return MoveResult.WON
        if target == _COLLECTIBLE:
            self.collectibles -= 1
        self.grid[self.row][self.col] = _FLOOR
        self.grid[new_row][new_col] = _PLAYER
        self.row, self.col = new_row, new_col
        self.moves += 1
        self._report()
        return MoveResult.MOVED

    def handle_key(self, key: str | int) -> MoveResult | None:
        """Act on a key given as a character or a key code; None for other keys."""
        if isinstance(key, int):
            if key == ESCAPE_KEY:
                self.finished = True
                return MoveResult.QUIT
            if not 0 <= key < 0x110000:
                return None
            key = chr(key)
        direction = _KEYS.get(key)
        if direction is None:
            return None
        return self.move(direction)