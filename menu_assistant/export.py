from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterable

from .bootstrap import load_index
from .config import DEFAULT_MENU_PATH
from .inspect import categories_rows, items_rows, summary


def _write_json(path: Path, obj: Any) -> None:
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2, default=str) + "\n", encoding="utf-8")


def _write_jsonl(path: Path, rows: Iterable[dict]) -> None:
    with path.open("w", encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row, ensure_ascii=False, default=str))
            f.write("\n")


def _write_csv(path: Path, rows: list[dict]) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        if not rows:
            # Write an empty file with no header.
            return
        fieldnames = list(rows[0].keys())
        w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        w.writeheader()
        for r in rows:
            w.writerow(r)


def export_all(inp: str = DEFAULT_MENU_PATH, out_dir: str = "out") -> Path:
    idx = load_index(inp)
    outp = Path(out_dir)
    outp.mkdir(parents=True, exist_ok=True)

    items = items_rows(idx)
    cats = categories_rows(idx)

    _write_csv(outp / "items.csv", items)
    _write_csv(outp / "categories.csv", cats)
    _write_jsonl(outp / "items.jsonl", items)
    _write_jsonl(outp / "categories.jsonl", cats)
    _write_json(outp / "summary.json", summary(idx))
    return outp
