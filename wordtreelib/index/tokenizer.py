"""Line tokenization for the word index.

Words are runs of ASCII letters. Every other character (digits,
punctuation, apostrophes, accented letters) separates words, and words are
lowercased before they reach the tree.
"""

import re
from typing import Tuple

from cachetools import LRUCache

_NON_LETTER = re.compile(r"[^a-zA-Z]+")


def tokenize_line(line: str) -> Tuple[str, ...]:
    """Split a raw line into normalized words.

    Example:
        >>> tokenize_line("The Cat's hat, 2 times!")
        ('the', 'cat', 's', 'hat', 'times')
    """
    return tuple(_NON_LETTER.sub(" ", line).lower().split())


class LineTokenizer:
    """tokenize_line with an LRU cache keyed by raw line text.

    Text files repeat lines (blank lines, separators, headers, boilerplate)
    often enough that remembering recent results pays off.
    """

    def __init__(self, max_size: int = 4096):
        """
        Args:
            max_size: Maximum number of distinct lines remembered
        """
        self._cache = LRUCache(maxsize=max_size)
        self.cache_hits = 0
        self.cache_misses = 0

    def __call__(self, line: str) -> Tuple[str, ...]:
        tokens = self._cache.get(line)
        if tokens is not None:
            self.cache_hits += 1
            return tokens

        self.cache_misses += 1
        tokens = tokenize_line(line)
        self._cache[line] = tokens
        return tokens

    def clear(self) -> None:
        self._cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0

    def __len__(self) -> int:
        return len(self._cache)
