"""
Benchmark harness core primitives.

- run_case:  time the word-list filter for one (word list, pool length) pair.
- run_batch: run every combination of word-list fixtures and pool lengths.
- Pools are random but reproducible: each case derives its own seed.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or a test without changes.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, Iterable, List, Mapping, Sequence

import numpy as np

from packages.letters import Word, count_letters, filter_constructible
from packages.pools import PoolGenerator

DEFAULT_SIZES = (100, 1_000, 10_000)
DEFAULT_LENGTHS = (4, 8, 12, 50, 100, 200)


def _assert_repeats(repeats: int) -> None:
    """Guardrail: statistics need at least one timed run."""
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1; got {repeats}")


def run_case(
        words: Sequence[Word],
        pool_length: int,
        *,
        repeats: int = 10,
        mode: str = "serial",
        workers: int | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Time filter_constructible on one random pool.

    The pool is generated and counted once, outside the timed region; only the
    filter itself is measured, `repeats` times.

    Returns:
        dict with keys:
            words (int), pool_length (int), pool (str), mode (str),
            matches (int), repeats (int),
            mean_ms, median_ms, std_ms, min_ms (float)
    """
    _assert_repeats(repeats)

    pool = PoolGenerator(seed).generate(pool_length)
    letters = count_letters(pool)

    timings_ms: List[float] = []
    matches: List[str] = []
    for _ in range(repeats):
        t0 = time.perf_counter_ns()
        matches = filter_constructible(words, letters, mode=mode, workers=workers)
        t1 = time.perf_counter_ns()
        timings_ms.append((t1 - t0) / 1_000_000.0)

    t = np.asarray(timings_ms, dtype=float)
    return {
        "words": len(words),
        "pool_length": pool_length,
        "pool": pool,
        "mode": mode,
        "matches": len(matches),
        "repeats": repeats,
        "mean_ms": float(t.mean()),
        "median_ms": float(np.median(t)),
        "std_ms": float(t.std()),
        "min_ms": float(t.min()),
    }


def run_batch(
        fixtures: Mapping[int, Sequence[Word]],
        pool_lengths: Iterable[int],
        *,
        repeats: int = 10,
        mode: str = "serial",
        workers: int | None = None,
        seed: int | None = None,
        on_case: Callable[[Dict], None] | None = None,
) -> List[Dict]:
    """
    Run every (fixture size x pool length) combination, sizes in ascending order.

    `fixtures` maps a word-list size label (e.g. 1000) to its loaded Words.
    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but pools differ between cases. `on_case` is called after
    every case (used by the CLI for progress).
    """
    _assert_repeats(repeats)
    lengths = list(pool_lengths)

    out: List[Dict] = []
    idx = 0
    for size in sorted(fixtures):
        for length in lengths:
            idx += 1
            case_seed = None if seed is None else (seed + idx)
            r = run_case(
                fixtures[size], length, repeats=repeats, mode=mode,
                workers=workers, seed=case_seed,
            )
            r["size"] = size
            out.append(r)
            if on_case is not None:
                on_case(r)
    return out
