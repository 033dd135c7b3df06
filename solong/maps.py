"""Loading and validating level maps stored in ``.ber`` files."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Sequence
from os import PathLike

from .lines import read_lines

MIN_ROWS = 3
MIN_WIDTH = 4
MAP_SUFFIX = ".ber"
COMPONENTS = frozenset("01CEP\n")

_WALL = "1"
_EXIT = "E"
_PLAYER = "P"
_COLLECTIBLE = "C"


class MapError(ValueError):
    """Raised when a map file is missing or does not describe a valid level."""


def _content(row: str) -> str:
    """The part of a row before its newline."""
    return row.split("\n", 1)[0]


def check_filename(file_name: str) -> bool:
    """True when the name has a stem and ends with the map suffix."""
    return len(file_name) > len(MAP_SUFFIX) and file_name.endswith(MAP_SUFFIX)


def count_lines(path: str | PathLike[str]) -> int:
    """Number of lines in the file at path."""
    try:
        return len(read_lines(path))
    except OSError as exc:
        raise MapError("File open failure") from exc


def read_rows(path: str | PathLike[str]) -> list[str]:
    """Return the rows of the map file, newlines kept; at least three are needed."""
    try:
        rows = read_lines(path)
    except OSError as exc:
        raise MapError("File open failure") from exc
    if len(rows) < MIN_ROWS:
        raise MapError("Invalid row")
    return rows


def check_components(rows: Sequence[str]) -> None:
    """Require known tiles only, no blank lines, one exit, one player, some collectibles."""
    for row in rows:
        if row.startswith("\n"):
            raise MapError("Over newline")
        if any(ch not in COMPONENTS for ch in row):
            raise MapError("Invalid component")
    counts = Counter("".join(rows))
    if counts[_COLLECTIBLE] < 1 or counts[_EXIT] != 1 or counts[_PLAYER] != 1:
        raise MapError("Bad component cnt")


def check_rectangle(rows: Sequence[str]) -> None:
    """Require every row to have the length of the first, and enough columns."""
    if not rows:
        raise MapError("Map creation failed")
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise MapError("Not rectangle map")
    if width < MIN_WIDTH:
        raise MapError("Not enough column")


def check_walls(rows: Sequence[str]) -> None:
    """Require the map to be enclosed by walls."""
    if not rows:
        raise MapError("Map creation failed")
    if any(ch != _WALL for ch in _content(rows[0])):
        raise MapError("Invalid walls")
    last = len(rows[0]) - 2
    for row in rows[1:]:
        if not row or row[0] != _WALL or not 0 <= last < len(row) or row[last] != _WALL:
            raise MapError("Invalid walls")
    if any(ch != _WALL for ch in _content(rows[-1])):
        raise MapError("Invalid walls")


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """Row and column of the player inside the border."""
    for r, row in enumerate(rows[1:], start=1):
        col = _content(row).find(_PLAYER, 1)
        if col >= 0:
            return r, col
    raise MapError("No player")


def validate_paths(rows: Sequence[str]) -> None:
    """Require the exit and every collectible to be reachable from the player.

    The exit blocks movement through it. The rows are not modified.
    """
    grid = [list(_content(row)) for row in rows]
    start = find_player(rows)
    reached_exit = False
    stack = [start]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        tile = grid[r][c]
        if tile == _EXIT:
            reached_exit = True
        if tile in (_WALL, _EXIT, "V"):
            continue
        grid[r][c] = "V"
        stack.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    if any(_COLLECTIBLE in line[1:] for line in grid[1:]):
        raise MapError("Invalid collectible location")
    if not reached_exit:
        raise MapError("Incorrect exit location")


def load_map(path: str | PathLike[str]) -> list[str]:
    """Read and fully validate the map at path; return its rows."""
    if not check_filename(os.fspath(path)):
        raise MapError("Invalid file name")
    rows = read_rows(path)
    check_components(rows)
    check_rectangle(rows)
    check_walls(rows)
    validate_paths(rows)
    return rows