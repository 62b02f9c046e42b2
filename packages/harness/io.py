"""
CSV output for benchmark runs: one row per (word-list size, pool length) case.

Timings are rounded to microseconds; the pool itself is written last so the
numeric columns line up when the file is viewed as plain text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv

FIELDS = [
    "size", "pool_length", "mode", "repeats", "matches",
    "mean_ms", "median_ms", "std_ms", "min_ms", "pool",
]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of benchmark results (dicts from harness.run_batch) to CSV.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS, extrasaction="ignore")
        w.writeheader()
        for r in results:
            row = dict(r)
            for k in ("mean_ms", "median_ms", "std_ms", "min_ms"):
                row[k] = round(float(r[k]), 3)
            w.writerow(row)

    return str(p)
