"""
seeded sample inputs for the lazyseq test modules.

words and text come from faker, numbers and lengths from a numpy generator,
so a given seed always produces the same inputs.
"""
import numpy as np
from faker import Faker
from typing import Any, List, Optional, Tuple


class Samples:
    """reproducible sample data."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _length(self, length: Any) -> int:
        # an int is used as is, a (low, high) pair picks a length inclusively
        if isinstance(length, (list, tuple)) and len(length) == 2:
            low, high = length
            return int(self._rng.integers(low, high, endpoint=True))
        return int(length)

    def ints(self, length: Any = (0, 10), low: int = -50, high: int = 50) -> List[int]:
        return [int(x) for x in self._rng.integers(low, high, size=self._length(length), endpoint=True)]

    def bools(self, length: Any = (0, 10)) -> List[bool]:
        return [bool(x) for x in self._rng.integers(0, 1, size=self._length(length), endpoint=True)]

    def words(self, length: Any = (0, 10)) -> List[str]:
        return [self._fake.word() for _ in range(self._length(length))]

    def text(self, max_chars: int = 60) -> str:
        """a sentence, cut at max_chars; may be empty"""
        return self._fake.sentence()[:self._length((0, max_chars))]

    def int_lists(self, count: int, length: Any = (0, 8)) -> List[List[int]]:
        return [self.ints(length) for _ in range(count)]

    def window_case(self) -> Tuple[List[int], int]:
        """an input list and a positive window size"""
        return self.ints((0, 20)), self._length((1, 6))


def samples(seed: Optional[int] = None) -> Samples:
    return Samples(seed)
