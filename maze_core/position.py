from typing import Callable, NamedTuple, Optional, Tuple

__all__ = [
    "Position",
    "UNREACHED",
    "up",
    "down",
    "left",
    "right",
    "DIRECTIONS",
]

# distance value for tiles a pass never touched
UNREACHED: Optional[int] = None


class Position(NamedTuple):
    """Grid coordinate (column, row).

    Ordered and hashable, so it works as a key in visited sets and parent maps.
    Coordinates may go negative after a step off the top/left edge; such
    positions are simply invalid for any maze.
    """

    x: int
    y: int


def up(p: Position) -> Position:
    return Position(p.x, p.y - 1)


def down(p: Position) -> Position:
    return Position(p.x, p.y + 1)


def left(p: Position) -> Position:
    return Position(p.x - 1, p.y)


def right(p: Position) -> Position:
    return Position(p.x + 1, p.y)


# neighbor order used by every traversal: up, right, down, left
DIRECTIONS: Tuple[Callable[[Position], Position], ...] = (up, right, down, left)
