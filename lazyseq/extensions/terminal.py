from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class TerminalAccessor(Generic[T]):
    """
    consuming operations. every method drains the sequence, so use them on
    finite sequences only; bound infinite ones with take() first.
    """
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence)

    def text(self, separator: str = "") -> str:
        """join string items, e.g. the characters of a cycle or the windows of a tee"""
        return separator.join(self._sequence)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._sequence))

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._sequence))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._sequence)
        return sum(1 for x in self._sequence if predicate(x))

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, consuming only up to it"""
        for item in self._sequence:
            if predicate is None or predicate(item): return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def last(self) -> T:
        """get last element"""
        sentinel = object()
        last = sentinel
        for item in self._sequence:
            last = item
        if last is sentinel: raise ValueError("sequence contains no elements")
        return last

    def failures(self) -> List[Any]:
        """drain the sequence and keep only its failure items"""
        return [item for item in self._sequence if is_failure(item)]
