from __future__ import annotations
import typing
from itertools import islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class _CoreOperations(Generic[T]):
    def where(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """filter elements based on a predicate"""
        from ..sequence import Sequence
        return Sequence((x for x in self if predicate(x)), upstream=self)

    def select(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..sequence import Sequence
        return Sequence((selector(x) for x in self), upstream=self)

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """
        take the first 'count' elements.
        never pulls more than count, so it is the way to bound an infinite sequence.
        """
        from ..sequence import Sequence
        # islice stops without pulling the element after the last one it yields
        return Sequence(islice(self, max(count, 0)), upstream=self)

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """skip the first 'count' elements"""
        from ..sequence import Sequence
        return Sequence(islice(self, max(count, 0), None), upstream=self)

    def take_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """take elements while predicate is true"""
        from ..sequence import Sequence
        return Sequence(takewhile(predicate, self), upstream=self)

    def skip_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """skip elements while predicate is true"""
        from ..sequence import Sequence
        return Sequence(dropwhile(predicate, self), upstream=self)

    def tagged(self: 'Sequence[T]') -> 'Sequence[Union[Value[T], Failure]]':
        """
        wrap regular items in Value so every item carries its tag.
        failures, including inline failure messages, come through as Failure.
        """
        from ..sequence import Sequence
        def tag_data():
            for item in self:
                if isinstance(item, Failure):
                    yield item
                elif is_failure(item):
                    yield Failure(item)
                else:
                    yield Value(item)
        return Sequence(tag_data(), upstream=self)

    def background(self: 'Sequence[T]', name: Optional[str] = None) -> 'Sequence[T]':
        """
        produce this sequence on a background thread, handing values over one at a time.
        close the returned sequence to stop the thread.
        """
        from ..rendezvous import spawn
        return spawn(self, name=name)
