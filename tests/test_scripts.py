import json
import os

import yaml
from maze_core.parser import parse_level_str
from scripts import compute_fields, show_fields
from scripts.compute_fields import summarize

LVL = """
#####
#.@ #
# $ #
# . #
#####
"""

LEVELS = os.path.join(os.path.dirname(__file__), "..", "maze_core", "levels")


def test_summarize_level():
    rec = summarize("inline#0", parse_level_str(LVL))
    assert rec["crates"] == 1 and rec["targets"] == 2
    assert rec["height"] == 5 and rec["width"] == 5
    # every inner cell of the 3x3 room can take the crate
    assert rec["source_reached"] == 9
    assert rec["source_max"] == 2
    assert rec["target_reached"] >= 2


def test_compute_fields_writes_one_line_per_level(tmp_path):
    cfg = {
        "levels": {"root_dir": LEVELS, "sources": ["examples"]},
        "filters": {"min_crates": 1},
        "output": str(tmp_path / "fields.jsonl"),
    }
    cfg_path = tmp_path / "fields.yaml"
    cfg_path.write_text(yaml.safe_dump(cfg), encoding="utf-8")

    compute_fields.main(["--config", str(cfg_path)])

    lines = (tmp_path / "fields.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    recs = [json.loads(ln) for ln in lines]
    assert all(r["crates"] >= 1 for r in recs)


def test_show_fields_prints_fields_and_path(capsys):
    show_fields.main(["--path", "3,4", "1,1"])
    out = capsys.readouterr().out
    assert "-- source distance (axis pairs) --" in out
    assert "-- target distance (two ahead) --" in out
    assert "path (3, 4) -> (1, 1): 5 steps" in out


def test_show_fields_reports_missing_path(capsys):
    show_fields.main(["--path", "3,4", "0,0"])
    out = capsys.readouterr().out
    assert "no path from (3, 4) to (0, 0)" in out
