"""
Word-list inspector.

What this module does:
- Read a word list (one entry per line) and count entries, blank lines,
  entries with characters other than a–z/A–Z, and unique entries.
- Compute the SHA-256 of the raw file so a benchmark run can be tied to the
  exact fixture it measured.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Nothing here rejects a list: blank or noisy lines are legal input for the
filter (they simply never match). The counts are diagnostics only.

Typical use:
    from packages.datasets import inspect_wordlist, pretty_summary
    rep = inspect_wordlist("benches/benchmark_1000_words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import read_lines


@dataclass
class WordListReport:
    """Per-file diagnostics and metadata."""
    path: str             # file path (as given)
    exists: bool          # did the file exist on disk?
    count: int            # number of lines (entries)
    unique_count: int     # distinct entries
    blank_lines: int      # empty/whitespace-only lines
    noisy_lines: int      # non-blank lines with non-letter characters
    sha256: str           # SHA-256 of raw file bytes (empty string if missing)
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_plain_word(s: str) -> bool:
    return s.isascii() and s.isalpha()


def inspect_wordlist(path: str | Path) -> Dict:
    """
    Inspect one word list.

    Returns a JSON-serializable dict (see WordListReport). A missing file gives
    exists=False and zero counts; undecodable content raises OSError like
    read_lines does.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, 0, 0, 0, 0, "", [f"word list not found: {path}"])
        return asdict(rep)

    lines = read_lines(p)
    blank = sum(1 for s in lines if not s.strip())
    noisy = sum(1 for s in lines if s.strip() and not _is_plain_word(s))

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(lines),
        unique_count=len(set(lines)),
        blank_lines=blank,
        noisy_lines=noisy,
        sha256=_sha256_file(p),
    )

    if rep.count == 0:
        rep.issues.append("word list is empty")
    if blank:
        rep.issues.append(f"{blank} blank line(s) (never constructible)")
    if noisy:
        rep.issues.append(f"{noisy} line(s) with non-letter characters")
    if rep.count != rep.unique_count:
        rep.issues.append("word list contains duplicate lines")

    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        benches/benchmark_100_words.txt | words=100 (uniq=98, blank=0, noisy=1, sha=abc123...) | WARN
    """
    if not report["exists"]:
        return f"{report['path']} | MISSING"
    sha = (report.get("sha256") or "")[:12]
    status = "OK" if not report["issues"] else "WARN"
    return (
        f"{report['path']} | words={report['count']} (uniq={report['unique_count']}, "
        f"blank={report['blank_lines']}, noisy={report['noisy_lines']}, sha={sha}) | {status}"
    )
