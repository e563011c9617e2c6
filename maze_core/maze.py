from __future__ import annotations
from typing import AbstractSet, Iterable, Iterator, List, Optional, Tuple

from .position import DIRECTIONS, Position
from .tile import Tile

__all__ = [
    "Maze",
    "OutOfBoundsError",
    "as_obstacle_set",
]


class OutOfBoundsError(IndexError):
    """A position outside the grid was passed where a valid one is required."""

    def __init__(self, pos: Position) -> None:
        super().__init__(f"position {tuple(pos)} is outside the maze")
        self.pos = pos


def as_obstacle_set(obstacles: Iterable[Position]) -> AbstractSet[Position]:
    """Dynamic obstacles (typically current crate cells) as a hashed set."""
    if isinstance(obstacles, (set, frozenset)):
        return obstacles
    return frozenset(Position(*p) for p in obstacles)


class Maze:
    """Jagged grid of tiles plus the named positions of a level.

    Built row by row with add_row (top to bottom), then the player start,
    crate starts and crate targets are registered. After that only the
    distance annotations on tiles are expected to change.
    Cell addressing: Position(x, y) -> tiles[y][x].
    """

    def __init__(self) -> None:
        self._tiles: List[List[Tile]] = []
        self._player_start: Optional[Position] = None
        self._crate_starts: List[Position] = []
        self._crate_targets: List[Position] = []

    # ---- construction
    def add_row(self, length: int) -> None:
        if length < 0:
            raise ValueError(f"row length must be non-negative, got {length}")
        self._tiles.append([Tile() for _ in range(length)])

    def set_player_start(self, pos: Position) -> None:
        self._player_start = Position(*pos)

    def add_crate_start(self, pos: Position) -> None:
        self._crate_starts.append(Position(*pos))

    def add_crate_target(self, pos: Position) -> None:
        self._crate_targets.append(Position(*pos))

    @property
    def player_start(self) -> Optional[Position]:
        return self._player_start

    @property
    def crate_starts(self) -> Tuple[Position, ...]:
        return tuple(self._crate_starts)

    @property
    def crate_targets(self) -> Tuple[Position, ...]:
        return tuple(self._crate_targets)

    # ---- geometry
    def height(self) -> int:
        return len(self._tiles)

    def width(self, row: int) -> int:
        if not 0 <= row < len(self._tiles):
            raise OutOfBoundsError(Position(0, row))
        return len(self._tiles[row])

    def max_width(self) -> int:
        return max((len(row) for row in self._tiles), default=0)

    def valid(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= y < len(self._tiles) and 0 <= x < len(self._tiles[y])

    def positions(self) -> Iterator[Position]:
        """All valid positions, row by row."""
        for y, row in enumerate(self._tiles):
            for x in range(len(row)):
                yield Position(x, y)

    # ---- tile access
    def at(self, pos: Position) -> Tile:
        """Tile at pos. Raises OutOfBoundsError for positions outside the grid."""
        if not self.valid(pos):
            raise OutOfBoundsError(Position(*pos))
        return self._tiles[pos[1]][pos[0]]

    def get(self, pos: Position) -> Optional[Tile]:
        """Checked access: None instead of raising."""
        if not self.valid(pos):
            return None
        return self._tiles[pos[1]][pos[0]]

    def __getitem__(self, pos: Position) -> Tile:
        return self.at(pos)

    # ---- walkability
    def is_walkable(self, pos: Position, obstacles: Iterable[Position] = ()) -> bool:
        """Static tile walkability and not occupied by a dynamic obstacle."""
        if not self.at(pos).is_walkable():
            return False
        return Position(*pos) not in as_obstacle_set(obstacles)

    def neighbors(self, pos: Position, obstacles: Iterable[Position] = ()) -> List[Position]:
        """Valid, walkable cardinal neighbors in the order up, right, down, left."""
        blocked = as_obstacle_set(obstacles)
        out: List[Position] = []
        for step in DIRECTIONS:
            nb = step(Position(*pos))
            if self.valid(nb) and self.is_walkable(nb, blocked):
                out.append(nb)
        return out
