import string

from .maze import Maze
from .position import UNREACHED
from .tile import TileType

_DIGITS = string.digits + string.ascii_lowercase


def render_ascii(maze: Maze) -> str:
    """ASCII visualization of the level as it was loaded."""
    starts = set(maze.crate_starts)
    player = maze.player_start
    out_lines = []
    for y in range(maze.height()):
        row_chars = []
        for x in range(maze.width(y)):
            pos = (x, y)
            tile = maze.at(pos)
            if tile.type is TileType.OBSTACLE:
                row_chars.append('#')
                continue
            on_goal = tile.type is TileType.GOAL
            if pos == player:
                row_chars.append('+' if on_goal else '@')
            elif pos in starts:
                row_chars.append('*' if on_goal else '$')
            else:
                row_chars.append('.' if on_goal else ' ')
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)


def render_field(maze: Maze, field: str, unreached: str = "-") -> str:
    """One glyph per tile: distance in base 36, '+' past 35, '#' for obstacles."""
    if field not in ("source", "target"):
        raise ValueError(f"unknown field: {field}")
    attr = f"{field}_distance"
    out_lines = []
    for y in range(maze.height()):
        row_chars = []
        for x in range(maze.width(y)):
            tile = maze.at((x, y))
            d = getattr(tile, attr)
            if tile.is_obstacle():
                row_chars.append('#')
            elif d is UNREACHED:
                row_chars.append(unreached)
            elif d < len(_DIGITS):
                row_chars.append(_DIGITS[d])
            else:
                row_chars.append('+')
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)
