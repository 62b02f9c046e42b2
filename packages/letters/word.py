from __future__ import annotations
from dataclasses import dataclass

from .counting import FrequencyMap, count_letters


@dataclass(frozen=True)
class Word:
    """A dictionary entry and its letter counts (computed once, at load time)."""
    value: str             # original line, verbatim
    letters: FrequencyMap  # count_letters(value)

    @classmethod
    def from_text(cls, value: str) -> "Word":
        return cls(value=value, letters=count_letters(value))
