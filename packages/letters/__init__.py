from .counting import FrequencyMap, count_letters
from .predicate import is_constructible
from .word import Word
from .filtering import filter_constructible

__all__ = ["FrequencyMap", "count_letters", "is_constructible", "Word", "filter_constructible"]
