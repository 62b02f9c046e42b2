from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.letters import Word

# Demo dictionary shipped with the package (found regardless of working directory)
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDS = DATA_DIR / "words.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping the LF / CRLF terminator.

    Only '\\n' ends a line; any other content (leading/trailing spaces, a lone
    '\\r' in the middle, form feeds) stays part of the value.

    Raises FileNotFoundError if the path doesn't exist, and OSError if the
    content is not valid UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)

    out: List[str] = []
    try:
        with p.open("r", encoding="utf-8", newline="\n") as f:
            for ln in f:
                if ln.endswith("\n"):
                    ln = ln[:-1]
                    if ln.endswith("\r"):
                        ln = ln[:-1]
                out.append(ln)
    except UnicodeDecodeError as e:
        raise OSError(f"{p}: not valid UTF-8 text ({e.reason} at byte {e.start})") from e
    return out


def read_words(p: Path | str) -> List[Word]:
    """Load a word list, one Word per line (letter counts computed here, once)."""
    return [Word.from_text(ln) for ln in read_lines(p)]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
