# apps/cli/bench.py
"""
Benchmark the word-list filter across word-list sizes and pool lengths.

Reads pre-generated fixtures named benchmark_<size>_words.txt (shipped in
benches/, rebuilt with script/make_bench_fixtures.py), times every
(size x pool length) case, and writes:
  - CSV:  one row per case (timings in ms, match count, pool used)
  - JSON: manifest with config, fixture hashes, git commit, etc.

Usage:
    python -m apps.cli.bench --sizes 100 1000 --lengths 4 8 12
"""

from __future__ import annotations

import argparse
import datetime as dt
import json
import subprocess
import sys
import time
from pathlib import Path
from typing import Dict

from tqdm import tqdm

from packages.datasets import inspect_wordlist, pretty_summary, read_words
from packages.harness import run_batch, write_csv
from packages.harness.core import DEFAULT_LENGTHS, DEFAULT_SIZES
from packages.letters.filtering import MODES

# benches/ at the top of the checkout, independent of the working directory
FIXTURES_DIR = Path(__file__).resolve().parents[2] / "benches"


def fixture_path(fixtures_dir: str | Path, size: int) -> Path:
    return Path(fixtures_dir) / f"benchmark_{size}_words.txt"


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_id() -> str:
    """UTC timestamp used in output file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _git_commit() -> str:
    """Short HEAD hash of the checkout being benchmarked, or 'unknown' outside git."""
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=FIXTURES_DIR.parent, capture_output=True, text=True, check=False,
        )
    except OSError:  # git not installed
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="find-words — benchmark the word-list filter")
    ap.add_argument("--fixtures", default=str(FIXTURES_DIR),
                    help="directory holding benchmark_<n>_words.txt (default: benches/ of the checkout)")
    ap.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    ap.add_argument("--lengths", type=int, nargs="+", default=list(DEFAULT_LENGTHS))
    ap.add_argument("--repeats", type=int, default=10, help="timed runs per case")
    ap.add_argument("--mode", choices=MODES, default="serial")
    ap.add_argument("--workers", type=int)
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed for the pools")
    ap.add_argument("--outdir", default="reports/bench")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    args = ap.parse_args(argv)

    # 1) inspect + load every fixture up front (fail before timing anything)
    reports: Dict[int, Dict] = {}
    fixtures = {}
    for size in args.sizes:
        path = fixture_path(args.fixtures, size)
        reports[size] = inspect_wordlist(path)
        print(pretty_summary(reports[size]))
        try:
            fixtures[size] = read_words(path)
        except OSError as e:
            raise SystemExit(
                f"Cannot read fixture {path}: {e}\n"
                f"Generate it with: python -m script.make_bench_fixtures --out {args.fixtures}") from e

    total = len(fixtures) * len(args.lengths)
    mode = _progress_mode(args.progress)
    bar = tqdm(total=total, ncols=80, desc="Benchmark", unit="case") if mode == "bar" else None
    start = time.time()
    done = 0

    def on_case(r: Dict) -> None:
        nonlocal done
        done += 1
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            elapsed = time.time() - start
            sys.stderr.write(
                f"\r[{done}/{total}] size={r['size']} len={r['pool_length']} "
                f"| mean {r['mean_ms']:8.3f}ms | elapsed {elapsed:6.1f}s"
            )
            sys.stderr.flush()

    # 2) run all cases
    try:
        results = run_batch(
            fixtures, args.lengths, repeats=args.repeats, mode=args.mode,
            workers=args.workers, seed=args.seed, on_case=on_case,
        )
    except ValueError as e:
        ap.error(str(e))
    finally:
        if bar is not None:
            bar.close()
    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 3) console table
    for r in results:
        print(f"bench find words in {r['pool_length']} letter string from {r['size']} words: "
              f"{r['mean_ms']:.3f} ms (median {r['median_ms']:.3f}, {r['matches']} matches)")

    # 4) write outputs (CSV + manifest)
    run_id = _run_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"bench_{run_id}.csv"
    manifest_path = outdir / f"bench_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    # fixture sha256s tie these timings to the exact word lists measured
    manifest = {
        "run_id": run_id,
        "git_commit": _git_commit(),
        "config": vars(args),
        "fixtures": {str(k): v for k, v in reports.items()},
        "num_cases": len(results),
    }
    manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
