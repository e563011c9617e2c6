from __future__ import annotations
from typing import Iterator, List

import numpy as np

from search.bfs import breadth_first
from .maze import Maze
from .position import DIRECTIONS, UNREACHED, Position, down, left, right, up

FIELDS = ("source", "target")


def _clear(maze: Maze, p: Position) -> bool:
    """Inside the grid and not an obstacle. Off-grid counts as blocked."""
    tile = maze.get(p)
    return tile is not None and not tile.is_obstacle()


def _not_obstacle(maze: Maze, p: Position) -> bool:
    """False only for an in-grid OBSTACLE tile."""
    tile = maze.get(p)
    return tile is None or not tile.is_obstacle()


def _axis_pairs(maze: Maze, cur: Position) -> Iterator[Position]:
    """Source pass: an axis opens unless an obstacle sits on either side of it.

    The edge of the board does not close an axis; only the in-grid cells of an
    open pair are yielded.
    """
    for a, b in ((up, down), (left, right)):
        na, nb = a(cur), b(cur)
        if _not_obstacle(maze, na) and _not_obstacle(maze, nb):
            for p in (na, nb):
                if maze.valid(p):
                    yield p


def _two_ahead(maze: Maze, cur: Position) -> Iterator[Position]:
    """Target pass: step in d only if one and two cells in d are clear."""
    for step in DIRECTIONS:
        nb = step(cur)
        if _clear(maze, nb) and _clear(maze, step(nb)):
            yield nb


def compute_distance_fields(maze: Maze) -> None:
    """Fill source_distance / target_distance on every tile.

    source_distance: BFS distance from the nearest crate start under the
    axis-pair rule. target_distance: BFS distance from the nearest crate target
    under the two-ahead rule. Only the static grid is considered. Tiles a pass
    never reaches are left UNREACHED.
    """
    for p in maze.positions():
        tile = maze.at(p)
        tile.source_distance = UNREACHED
        tile.target_distance = UNREACHED

    # seeds must lie on the grid
    for p in maze.crate_starts + maze.crate_targets:
        maze.at(p)

    src = breadth_first(maze.crate_starts, lambda p: _axis_pairs(maze, p))
    for p, d in src.dist.items():
        maze.at(p).source_distance = d

    dst = breadth_first(maze.crate_targets, lambda p: _two_ahead(maze, p))
    for p, d in dst.dist.items():
        maze.at(p).target_distance = d


def distance_array(maze: Maze, field: str) -> np.ndarray:
    """Dense (height, max_width) int32 copy of a field; -1 = unreached or no cell."""
    if field not in FIELDS:
        raise ValueError(f"unknown field: {field}")
    attr = f"{field}_distance"
    arr = np.full((maze.height(), maze.max_width()), -1, dtype=np.int32)
    for p in maze.positions():
        d = getattr(maze.at(p), attr)
        if d is not UNREACHED:
            arr[p.y, p.x] = d
    return arr


def reached_count(maze: Maze, field: str) -> int:
    return int((distance_array(maze, field) >= 0).sum())


def field_values(maze: Maze, field: str) -> List[int]:
    arr = distance_array(maze, field)
    return [int(v) for v in arr[arr >= 0]]
