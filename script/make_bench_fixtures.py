"""
Build benchmark fixtures from a source word list.

What it does:
- Reads a word list (one entry per line).
- For each requested size n, draws n entries with a seeded RNG (without
  replacement while the source is large enough, with replacement otherwise,
  which repeats entries and is reported on stderr).
- Writes <out>/benchmark_<n>_words.txt, keeping the drawn entries in source
  order so fixtures look like ordinary dictionary slices.

benches/benchmark_10000_words.txt is the largest shipped fixture (10,000
distinct words) and the default source for rebuilding the smaller ones.

Usage:
    python -m script.make_bench_fixtures --sizes 100 1000
    python -m script.make_bench_fixtures --src /usr/share/dict/words --sizes 100 1000 10000
"""

import argparse
import random
import sys
from pathlib import Path

from packages.datasets import read_lines, write_lines

BENCHES = Path(__file__).resolve().parents[1] / "benches"


def sample_words(words: list[str], n: int, rng: random.Random) -> list[str]:
    if not words:
        raise ValueError("source word list is empty")
    if n <= len(words):
        picked = sorted(rng.sample(range(len(words)), n))
    else:
        picked = sorted(rng.choices(range(len(words)), k=n))
    return [words[i] for i in picked]


def main():
    ap = argparse.ArgumentParser(description="Write benchmark_<n>_words.txt fixtures.")
    ap.add_argument("--src", default=str(BENCHES / "benchmark_10000_words.txt"), help="source word list")
    ap.add_argument("--out", default=str(BENCHES), help="output directory")
    ap.add_argument("--sizes", type=int, nargs="+", default=[100, 1000])
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--strip-blanks", action="store_true", help="drop empty/whitespace-only lines")
    args = ap.parse_args()

    words = read_lines(args.src)
    if args.strip_blanks:
        words = [s for s in words if s.strip()]

    rng = random.Random(args.seed)
    for n in args.sizes:
        if n > len(words):
            sys.stderr.write(f"warning: {args.src} has only {len(words)} lines; "
                             f"benchmark_{n}_words.txt will repeat entries\n")
        path = write_lines(sample_words(words, n, rng), Path(args.out) / f"benchmark_{n}_words.txt")
        print(f"Source: {args.src} ({len(words)} lines) → {path} ({n} words)")


if __name__ == "__main__":
    main()
