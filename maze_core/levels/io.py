"""Level packs: plain-text files holding one or more ASCII mazes.

Levels are separated by blank lines. Lines starting with ';' are comments and
lines without a wall character (pack titles such as "Level 12") are dropped,
so a block is exactly the rows of one maze.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from maze_core.maze import Maze
from maze_core.parser import TOK_WALL, parse_level_str

COMMENT = ";"


@dataclass(frozen=True)
class LevelRef:
    path: str
    index: int  # position of the maze inside its pack file

    @property
    def level_id(self) -> str:
        return f"{self.path}#{self.index}"

    @classmethod
    def from_id(cls, level_id: str) -> "LevelRef":
        """"pack.txt#3" -> LevelRef("pack.txt", 3); a bare path means the first maze."""
        path, sep, idx = level_id.rpartition("#")
        if not sep:
            return cls(level_id, 0)
        if not idx.isdigit():
            raise ValueError(f"bad level index in {level_id!r}")
        return cls(path, int(idx))


def maze_blocks(text: str) -> List[str]:
    blocks: List[str] = []
    rows: List[str] = []
    for line in text.splitlines():
        if line.strip() == "" or line.lstrip().startswith(COMMENT):
            if rows:
                blocks.append("\n".join(rows))
                rows = []
        elif TOK_WALL in line:
            rows.append(line.rstrip())
    if rows:
        blocks.append("\n".join(rows))
    return blocks


def iterate_packs(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[LevelRef, str]]:
    """(reference, level text) for every maze of every .txt pack in the given subfolders."""
    for rel in rel_dirs:
        pack_dir = Path(root_dir) / rel
        if not pack_dir.is_dir():
            continue
        for pack in sorted(pack_dir.glob("*.txt")):
            for i, block in enumerate(maze_blocks(pack.read_text(encoding="utf-8"))):
                yield LevelRef(str(pack), i), block


def load_level(level_id: str) -> Maze:
    ref = LevelRef.from_id(level_id)
    blocks = maze_blocks(Path(ref.path).read_text(encoding="utf-8"))
    if not blocks:
        raise ValueError(f"No levels found in {ref.path}")
    if ref.index >= len(blocks):
        raise IndexError(f"Index {ref.index} out of range for {ref.path} (total {len(blocks)})")
    return parse_level_str(blocks[ref.index])


def accept(maze: Maze, *, max_w: Optional[int] = None, max_h: Optional[int] = None,
           min_crates: Optional[int] = None, max_crates: Optional[int] = None,
           matched: bool = False) -> bool:
    """Size and crate filters on a parsed maze.

    Width is the widest row of a jagged maze. matched asks for as many
    targets as crates.
    """
    crates = len(maze.crate_starts)
    if max_w is not None and maze.max_width() > max_w: return False
    if max_h is not None and maze.height() > max_h: return False
    if min_crates is not None and crates < min_crates: return False
    if max_crates is not None and crates > max_crates: return False
    if matched and crates != len(maze.crate_targets): return False
    return True
