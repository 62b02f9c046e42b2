# apps/cli/find_words.py
"""
CLI entry point: list dictionary words that can be built from a pool of letters.

This script:
  1) Loads the word list (aborts with a non-zero exit if it can't be read).
  2) Uses the letters given with --letters, or generates a random pool.
  3) Prints the pool, then every constructible word on its own line,
     in word-list order.
"""

from __future__ import annotations

import argparse

from packages.datasets import DEFAULT_WORDS, read_words
from packages.letters import count_letters, filter_constructible
from packages.letters.filtering import MODES
from packages.pools import PoolGenerator

DEFAULT_LENGTH = 20


def main(argv: list[str] | None = None) -> None:
    """
    Parse CLI args, load the word list, and print the constructible words.
    """
    ap = argparse.ArgumentParser(description="find-words — words that can be built from a pool of letters")
    ap.add_argument("--words", default=str(DEFAULT_WORDS),
                    help="path to word list (one word per line; default: bundled demo list)")
    ap.add_argument("--letters", help="pool of letters to use instead of a random one")
    ap.add_argument("--length", type=int, default=DEFAULT_LENGTH,
                    help="length of the random pool (1-200; ignored with --letters)")
    ap.add_argument("--seed", type=int, help="RNG seed for the random pool (for reproducibility)")
    ap.add_argument("--mode", choices=MODES, default="auto", help="filter execution mode")
    ap.add_argument("--workers", type=int, help="worker count for thread/process modes")
    args = ap.parse_args(argv)

    # 1) Load first: a read failure must not leave partial output behind
    try:
        words = read_words(args.words)
    except OSError as e:
        raise SystemExit(f"Cannot read word list {args.words}: {e}") from e

    # 2) Pool of letters
    if args.letters is not None:
        letters = args.letters
    else:
        try:
            letters = PoolGenerator(args.seed).generate(args.length)
        except ValueError as e:
            ap.error(str(e))

    # 3) Filter and print
    found = filter_constructible(words, count_letters(letters), mode=args.mode, workers=args.workers)
    print(f"List of letters: {letters}")
    print("Words that can be constructed")
    for w in found:
        print(w)


if __name__ == "__main__":
    main()
