"""Loading and validating maze maps from ``.ber`` files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

WALL = "1"
FLOOR = "0"
EXIT = "E"
COLLECTIBLE = "C"
PLAYER = "P"
VALID_TILES = frozenset(EXIT + COLLECTIBLE + PLAYER + FLOOR + WALL)
MAP_EXTENSION = ".ber"


class MapError(ValueError):
    """Raised when a map file cannot be read or describes an invalid map."""


@dataclass(frozen=True)
class Position:
    """A cell on the map: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


@dataclass
class GameMap:
    """A validated map: a mutable grid of tiles plus the state read from it."""

    grid: list[list[str]]
    collectibles: int
    player_position: Position

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def _check(self, position: Position) -> None:
        if not (0 <= position.x < self.width and 0 <= position.y < self.height):
            raise IndexError(f"{position} lies outside the {self.width}x{self.height} map")

    def tile(self, position: Position) -> str:
        """Return the tile character at ``position``."""
        self._check(position)
        return self.grid[position.y][position.x]

    def set_tile(self, position: Position, tile: str) -> None:
        """Replace the tile at ``position`` with ``tile``."""
        self._check(position)
        if len(tile) != 1:
            raise ValueError(f"a tile is a single character, got {tile!r}")
        self.grid[position.y][position.x] = tile


def trim_chars(text: str, chars: str) -> str:
    """Strip characters in ``chars`` from the start, then from the end of ``text``.

    Trailing characters are only removed while the remaining length exceeds
    the number of leading characters that were removed.
    """
    stripped = text.lstrip(chars)
    begin = len(text) - len(stripped)
    end = len(stripped)
    while end > begin and stripped[end - 1] in chars:
        end -= 1
    return stripped[:end]


def has_ber_extension(path: str | PathLike[str]) -> bool:
    """Tell whether ``path`` ends in ``.ber``."""
    return str(path).endswith(MAP_EXTENSION)


def read_map_rows(path: str | PathLike[str]) -> list[str]:
    """Read the rows of a map file.

    Every row but the last has its surrounding newlines trimmed; the last row
    is kept as read.
    """
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("ERROR Failed to open map file") from exc
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    if not lines:
        raise MapError("Error Empty file")
    return [trim_chars(line, "\n") for line in lines[:-1]] + [lines[-1]]


def check_rectangular(rows: list[str]) -> bool:
    """Tell whether every row is as long as the first."""
    if not rows:
        return False
    width = len(rows[0])
    return all(len(row) == width for row in rows)


def check_border(rows: list[str]) -> bool:
    """Tell whether the map is enclosed by walls."""
    if not rows or not rows[0]:
        return False
    width = len(rows[0])
    sides = all(row[0] == WALL and row[width - 1] == WALL for row in rows)
    caps = all(rows[0][i] == WALL and rows[-1][i] == WALL for i in range(width))
    return sides and caps


def count_elements(rows: list[str]) -> tuple[int, Position]:
    """Check the tiles and their counts; return the collectibles and the start.

    The map must hold only known tiles, exactly one exit, exactly one start
    and at least one collectible.
    """
    width = len(rows[0])
    exits = players = collectibles = 0
    start = Position(0, 0)
    for y, row in enumerate(rows):
        for x, tile in enumerate(row[:width]):
            if tile not in VALID_TILES:
                raise MapError("Error : Invalid entity on map")
            if tile == EXIT:
                exits += 1
            elif tile == COLLECTIBLE:
                collectibles += 1
            elif tile == PLAYER:
                players += 1
                start = Position(x, y)
    if exits != 1:
        raise MapError("Error : Invalid number of exit block")
    if players != 1:
        raise MapError("Error : Invalid number of start block")
    if collectibles == 0:
        raise MapError("Error : Invalid number of collectibles block")
    return collectibles, start


def path_is_valid(rows: list[str], start: Position, collectibles: int) -> bool:
    """Tell whether every collectible and the exit can be reached from ``start``."""
    seen: set[tuple[int, int]] = set()
    stack = [(start.x, start.y)]
    found = 0
    reached_exit = False
    while stack:
        x, y = stack.pop()
        if (x, y) in seen or not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
            continue
        seen.add((x, y))
        tile = rows[y][x]
        if tile == WALL:
            continue
        if tile == EXIT:
            reached_exit = True
        elif tile == COLLECTIBLE:
            found += 1
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return found == collectibles and reached_exit


def validate_map(rows: list[str]) -> GameMap:
    """Run every map check in turn and build the resulting map."""
    if not check_rectangular(rows):
        raise MapError("Error : Invalid map shape")
    collectibles, start = count_elements(rows)
    if not check_border(rows):
        raise MapError("Error : Invalid map borders")
    if not path_is_valid(rows, start, collectibles):
        raise MapError("Error : Invalid path")
    return GameMap([list(row) for row in rows], collectibles, start)


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read and validate the map stored at ``path``."""
    if not has_ber_extension(path):
        raise MapError("Error invalid map file")
    return validate_map(read_map_rows(path))