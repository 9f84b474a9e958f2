"""
threaded production with a single-slot blocking handoff.

the producer thread blocks until the consumer has taken the previous value,
the consumer blocks until a value or the end marker is available. closing
the consumer side sets a stop event and drains the slot, which releases a
producer blocked on an infinite source.
"""
from __future__ import annotations
import typing
import logging
import threading
from queue import Queue, Empty
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence

logger = logging.getLogger(__name__)

# end-of-stream marker, compared with "is"
SENTINEL = object()


class _Raised:
    """carries an exception from the producer thread to the consumer"""

    def __init__(self, error: BaseException):
        self.error = error


class RendezvousIterator(Generic[T]):
    """iterator whose values are produced on a background thread"""

    def __init__(self, source: Iterable[T], name: Optional[str] = None):
        self._source = source
        self._slot: Queue = Queue(maxsize=1)
        self._stop_event = threading.Event()
        self._finished = False
        self._thread = threading.Thread(target=self._produce, name=name or "lazyseq-producer", daemon=True)
        self._thread.start()

    @property
    def producer_alive(self) -> bool:
        return self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        """wait for the producer thread, true once it has stopped"""
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _put(self, item: Any) -> bool:
        # at most one put can be in flight after close() drained the slot
        if self._stop_event.is_set():
            return False
        self._slot.put(item)
        return True

    def _produce(self) -> None:
        logger.debug(f"{self._thread.name} started")
        try:
            for item in self._source:
                if not self._put(item):
                    break
            else:
                self._put(SENTINEL)
        except Exception as e:
            logger.debug(f"{self._thread.name} raised {type(e).__name__}: {e}")
            self._put(_Raised(e))
        finally:
            close = getattr(self._source, "close", None)
            if close is not None:
                close()
            logger.debug(f"{self._thread.name} stopped")

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._finished:
            raise StopIteration
        item = self._slot.get()
        if item is SENTINEL:
            self._finished = True
            raise StopIteration
        if isinstance(item, _Raised):
            self._finished = True
            raise item.error
        return item

    def close(self) -> None:
        """stop the producer and release it if it is blocked on the slot"""
        if self._stop_event.is_set():
            return
        self._finished = True
        self._stop_event.set()
        try:
            self._slot.get_nowait()
        except Empty:
            pass


def spawn(iterable: Iterable[T], name: Optional[str] = None) -> 'Sequence[T]':
    """create a sequence whose values are produced on a background thread"""
    from .sequence import Sequence
    return Sequence(RendezvousIterator(iterable, name=name))
