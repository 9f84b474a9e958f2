from __future__ import annotations

from .types import *

# --- lazy operators ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor


class Sequence(_CoreOperations[T]):
    """
    a pull-based, single-consumer sequence of values.
    values are computed only as they are pulled. a sequence is consumed once;
    call the producer again for an independent replay.
    """

    def __init__(self, source: Iterable[T], upstream: Optional['Sequence[Any]'] = None,
                 upstreams: Iterable['Sequence[Any]'] = ()):
        self._iterator: Iterator[T] = iter(source)
        self._upstreams: List['Sequence[Any]'] = list(upstreams)
        if upstream is not None:
            self._upstreams.insert(0, upstream)
        self._closed = False
        self._released = False
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @property
    def closed(self) -> bool:
        return self._closed

    def pull(self) -> Union[T, Any]:
        """the next value, or END once the sequence is exhausted or closed"""
        if self._closed:
            return END
        try:
            return next(self._iterator)
        except StopIteration:
            self._closed = True
            return END
        except SequenceError:
            self._closed = True
            raise

    def close(self) -> None:
        """
        release the production side, and the sequences this one pulls from.
        pulling afterwards returns END.
        """
        self._closed = True
        if self._released:
            return
        self._released = True
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()
        for upstream in self._upstreams:
            upstream.close()

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self.pull()
        if item is END:
            raise StopIteration
        return item

    def __enter__(self) -> 'Sequence[T]':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Sequence(closed={self._closed})"


def pull(sequence: Sequence[T]) -> Union[T, Any]:
    """pull the next value, or END once the sequence is exhausted"""
    return sequence.pull()
