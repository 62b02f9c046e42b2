"""
Word-list filtering against one pool of letters.

Given:
  - a sequence of Word entries (value + precomputed frequency map)
  - one pool frequency map (read-only, shared by every test)

Return:
  - the values of the constructible words, in the same order as the input.

Every per-word test is independent, so the list can be split into contiguous
chunks and evaluated on a worker pool. Executor.map yields chunk results in
submission order, so concatenating them reproduces the serial result exactly,
for any worker count and any chunk size.

Modes:
  - "serial"  : plain loop in the calling thread
  - "thread"  : ThreadPoolExecutor
  - "process" : ProcessPoolExecutor (Words and the pool are pickled per chunk)
  - "auto"    : serial below PARALLEL_MIN_WORDS words, process pool above
"""

from __future__ import annotations
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from itertools import repeat
from typing import List, Sequence

from .counting import FrequencyMap
from .predicate import is_constructible
from .word import Word

MODES = ("auto", "serial", "thread", "process")

# Below this many words, dispatch overhead outweighs the work itself.
PARALLEL_MIN_WORDS = 50_000

# Words per task submitted to a worker pool.
DEFAULT_CHUNK_SIZE = 2_048


def _filter_chunk(words: Sequence[Word], pool: FrequencyMap) -> List[str]:
    """Serial filter over one chunk. Module-level so process pools can pickle it."""
    return [w.value for w in words if is_constructible(w.letters, pool)]


def _chunks(words: Sequence[Word], size: int) -> List[Sequence[Word]]:
    return [words[i:i + size] for i in range(0, len(words), size)]


def _make_executor(mode: str, workers: int | None) -> Executor:
    if mode == "thread":
        return ThreadPoolExecutor(max_workers=workers)
    return ProcessPoolExecutor(max_workers=workers)


def filter_constructible(
        words: Sequence[Word],
        pool: FrequencyMap,
        *,
        mode: str = "auto",
        workers: int | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> List[str]:
    """
    Return the values of all words that can be built from `pool`, input order preserved.

    Args:
      words      : Word entries to test (not modified)
      pool       : available letters, e.g. count_letters("wartsmrf")
      mode       : one of MODES (see module docstring)
      workers    : worker count for parallel modes (None = executor default)
      chunk_size : words per submitted task in parallel modes

    Raises:
      ValueError on an unknown mode or a non-positive workers/chunk_size.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}. Available: {list(MODES)}")
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1; got {chunk_size}")

    words = list(words)
    if not words:
        return []

    if mode == "auto":
        mode = "serial" if len(words) < PARALLEL_MIN_WORDS else "process"
    if mode == "serial":
        return _filter_chunk(words, pool)

    out: List[str] = []
    with _make_executor(mode, workers) as ex:
        # map() yields in submission order regardless of which chunk finishes first
        for part in ex.map(_filter_chunk, _chunks(words, chunk_size), repeat(pool)):
            out.extend(part)
    return out
