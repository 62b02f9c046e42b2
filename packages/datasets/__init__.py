from .validator import inspect_wordlist, pretty_summary
from .io import DEFAULT_WORDS, read_lines, read_words, write_lines

__all__ = ["DEFAULT_WORDS", "inspect_wordlist", "pretty_summary", "read_lines", "read_words", "write_lines"]
