from typing import List

from .maze import Maze
from .position import Position
from .tile import TileType

TOK_WALL = "#"
TOK_GOAL = "."
TOK_BOX = "$"
TOK_BOX_ON_GOAL = "*"
TOK_PLAYER = "@"
TOK_PLAYER_ON_GOAL = "+"


def parse_level_str(level_str: str) -> Maze:
    """Parses ASCII level into a Maze.

    Supported characters:
      '#': obstacle
      '.': goal tile, crate target
      '$': crate start
      '*': crate start on a goal tile (also a crate target)
      '@': player start
      '+': player start on a goal tile
    Other characters (including spaces) are floor.
    Rows keep their own width, so the maze may be jagged.
    """
    lines = [line.rstrip() for line in level_str.splitlines() if line.strip() != ""]
    if not lines:
        raise ValueError("Empty level")

    maze = Maze()
    starts: List[Position] = []
    targets: List[Position] = []
    player = None

    # rows first, named positions afterwards
    for y, line in enumerate(lines):
        maze.add_row(len(line))
        for x, ch in enumerate(line):
            pos = Position(x, y)
            tile = maze.at(pos)
            if ch == TOK_WALL:
                tile.set_type(TileType.OBSTACLE)
            elif ch in (TOK_GOAL, TOK_BOX_ON_GOAL, TOK_PLAYER_ON_GOAL):
                tile.set_type(TileType.GOAL)
                targets.append(pos)
            if ch in (TOK_BOX, TOK_BOX_ON_GOAL):
                starts.append(pos)
            elif ch in (TOK_PLAYER, TOK_PLAYER_ON_GOAL):
                player = pos

    if player is None:
        raise ValueError("No player '@' or '+' found in level")

    maze.set_player_start(player)
    for p in starts:
        maze.add_crate_start(p)
    for p in targets:
        maze.add_crate_target(p)
    return maze


def parse_level_file(path: str) -> Maze:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read())

