from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from search.bfs import breadth_first, reconstruct
from .maze import Maze, OutOfBoundsError, as_obstacle_set
from .position import Position

MOVE_LETTERS = {
    (0, -1): "u",
    (0, 1): "d",
    (-1, 0): "l",
    (1, 0): "r",
}


def _require_valid(maze: Maze, *positions: Position) -> None:
    for p in positions:
        if not maze.valid(p):
            raise OutOfBoundsError(Position(*p))


def reachable(maze: Maze, source: Position, target: Position,
              obstacles: Iterable[Position] = ()) -> bool:
    """Can the player walk from source to target without stepping on obstacles?

    obstacles are the dynamic ones (usually the crates), on top of the static
    OBSTACLE tiles. source == target is reachable in zero steps.
    """
    source, target = Position(*source), Position(*target)
    _require_valid(maze, source, target)
    blocked = as_obstacle_set(obstacles)
    res = breadth_first([source], lambda p: maze.neighbors(p, blocked), goal=target)
    return res.found


def find_path(maze: Maze, source: Position, target: Position,
              obstacles: Iterable[Position] = ()) -> Optional[List[Position]]:
    """Shortest walk from source to target.

    Returns the positions from target back to source, both included
    (reverse it for walking order). [] when source == target, None when the
    target cannot be reached.
    """
    source, target = Position(*source), Position(*target)
    _require_valid(maze, source, target)
    if source == target:
        return []
    blocked = as_obstacle_set(obstacles)
    res = breadth_first([source], lambda p: maze.neighbors(p, blocked),
                        goal=target, track_parents=True)
    if not res.found:
        return None
    return reconstruct(res.parent, target, source)


def path_moves(path: Sequence[Position]) -> str:
    """Move letters (u/d/l/r) for walking a find_path result from source to target."""
    walk = list(reversed(path))
    moves = []
    for a, b in zip(walk, walk[1:]):
        step = (b[0] - a[0], b[1] - a[1])
        if step not in MOVE_LETTERS:
            raise ValueError(f"positions {tuple(a)} and {tuple(b)} are not adjacent")
        moves.append(MOVE_LETTERS[step])
    return "".join(moves)
