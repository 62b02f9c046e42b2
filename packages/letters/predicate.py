"""
Constructability test: can a word be spelled from a pool of letters?

A word is constructible when its frequency map is dominated by the pool's:
every letter the word needs is in the pool at least as many times.

  is_constructible(count_letters("dog"),   count_letters("dodge")) -> True
  is_constructible(count_letters("dodgy"), count_letters("dodge")) -> False  (no 'y')
  is_constructible(count_letters("deed"),  count_letters("bde"))   -> False  (one 'e')

A word with no letters at all is NOT constructible, whatever the pool. Blank
or symbol-only dictionary lines would otherwise match every pool.
"""

from .counting import FrequencyMap


def is_constructible(word: FrequencyMap, pool: FrequencyMap) -> bool:
    if not word:
        return False
    return all(pool.get(letter, 0) >= need for letter, need in word.items())
