"""
Letter-frequency counting.

A frequency map is a plain dict from a lowercase ASCII letter to the number of
times it occurs. Only the 26 English letters are counted:
  - upper/lower case fold together ('D' and 'd' are the same letter)
  - digits, punctuation, whitespace and non-ASCII letters are ignored
  - letters that never occur have no entry (there are no zero counts)

Examples:
  count_letters("dodge")     -> {'d': 2, 'o': 1, 'g': 1, 'e': 1}
  count_letters("do,dg!#e")  -> {'d': 2, 'o': 1, 'g': 1, 'e': 1}
  count_letters("123 !?")    -> {}
"""

from __future__ import annotations
from collections import Counter
from string import ascii_letters
from typing import Dict

# Type alias for clarity; keys are single characters 'a'..'z'
FrequencyMap = Dict[str, int]

_LETTERS = frozenset(ascii_letters)


def count_letters(text: str) -> FrequencyMap:
    """
    Build the frequency map of `text`.

    Filtering happens BEFORE lowercasing: str.lower() maps a few non-ASCII
    characters (e.g. the Kelvin sign) onto ASCII letters, and those must not
    be counted.
    """
    return dict(Counter(ch.lower() for ch in text if ch in _LETTERS))
