"""Compute the crate distance fields for every level listed in a config.

Writes one JSON line per level with summary numbers of both fields.

Usage:
  python -m scripts.compute_fields --config configs/fields.yaml
"""
from __future__ import annotations
import argparse, json, os
from typing import Dict, List, Tuple

import yaml
from tqdm import tqdm

from maze_core.maze import Maze
from maze_core.parser import parse_level_str
from maze_core.displacement import compute_distance_fields, field_values
from maze_core.levels.io import iterate_packs, accept


def summarize(level_id: str, maze: Maze) -> Dict:
    compute_distance_fields(maze)
    rec: Dict = {
        "level_id": level_id,
        "height": maze.height(),
        "width": maze.max_width(),
        "crates": len(maze.crate_starts),
        "targets": len(maze.crate_targets),
    }
    for field in ("source", "target"):
        vals = field_values(maze, field)
        rec[f"{field}_reached"] = len(vals)
        rec[f"{field}_max"] = max(vals) if vals else None
    return rec


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/fields.yaml")
    p.add_argument("--out", type=str, default=None, help="output JSONL (overrides config)")
    args = p.parse_args(argv)

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    root = cfg["levels"]["root_dir"]
    rels = cfg["levels"]["sources"]
    flt = cfg.get("filters") or {}
    out_path = args.out or cfg.get("output", "tmp/fields.jsonl")

    levels: List[Tuple[str, Maze]] = []
    for ref, text in iterate_packs(root, rels):
        try:
            maze = parse_level_str(text)
        except ValueError as e:
            print(f"skipping {ref.level_id}: {e}")
            continue
        if accept(maze,
                  max_w=flt.get("max_width"),
                  max_h=flt.get("max_height"),
                  min_crates=flt.get("min_crates"),
                  max_crates=flt.get("max_crates"),
                  matched=bool(flt.get("matched", False))):
            levels.append((ref.level_id, maze))

    records: List[Dict] = []
    for level_id, maze in tqdm(levels, desc="Computing fields", unit="level"):
        rec = summarize(level_id, maze)
        if rec["source_reached"] == rec["crates"]:
            tqdm.write(f"{level_id}: no crate can be pushed from its start")
        records.append(rec)

    if os.path.dirname(out_path):
        os.makedirs(os.path.dirname(out_path), exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as out:
        for rec in records:
            out.write(json.dumps(rec) + "\n")

    print(f"wrote {len(records)} levels → {out_path}")


if __name__ == "__main__":
    main()
