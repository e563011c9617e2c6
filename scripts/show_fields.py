from __future__ import annotations
import argparse

from maze_core.parser import parse_level_file, parse_level_str
from maze_core.position import Position
from maze_core.render import render_ascii, render_field
from maze_core.displacement import compute_distance_fields
from maze_core.queries import find_path, path_moves

LVL = """
#######
#     #
# $$  #
#   ..#
#  @  #
#######
"""


def parse_xy(text: str) -> Position:
    x, y = text.split(",")
    return Position(int(x), int(y))


def main(argv=None):
    p = argparse.ArgumentParser(description="Print the crate distance fields of a level.")
    p.add_argument("--level", type=str, default="inline", help="path to .txt level or 'inline'")
    p.add_argument("--unreached", type=str, default="-", help="glyph for unreached tiles")
    p.add_argument("--path", nargs=2, metavar="X,Y", type=parse_xy, default=None,
                   help="also print the player path between two positions (crates block)")
    args = p.parse_args(argv)

    if args.level == "inline":
        maze = parse_level_str(LVL)
    else:
        maze = parse_level_file(args.level)

    compute_distance_fields(maze)

    print(render_ascii(maze))
    print("\n-- source distance (axis pairs) --")
    print(render_field(maze, "source", args.unreached))
    print("\n-- target distance (two ahead) --")
    print(render_field(maze, "target", args.unreached))

    if args.path is not None:
        src, dst = args.path
        path = find_path(maze, src, dst, maze.crate_starts)
        if path is None:
            print(f"\nno path from {tuple(src)} to {tuple(dst)}")
        else:
            print(f"\npath {tuple(src)} -> {tuple(dst)}: {len(path) - 1 if path else 0} steps, moves '{path_moves(path)}'")

if __name__ == "__main__":
    main()
