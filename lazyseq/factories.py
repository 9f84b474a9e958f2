import typing
import math
import logging
from itertools import batched, compress as itertools_compress
from .types import *
from .checks import ensure_same_length
from .config import get_config, resolve_error_mode

if typing.TYPE_CHECKING:
    from .sequence import Sequence

logger = logging.getLogger(__name__)


def _failure(message: str, error_mode: str, log_failures: bool) -> Any:
    """build the failure item for the given mode, or raise in 'raise' mode"""
    if log_failures:
        logger.warning(f"sequence failure: {message}")
    failure = Failure(message)
    if error_mode == 'raise':
        raise SequenceError(failure)
    if error_mode == 'inline':
        return message
    return failure


def _upstream(source: Any) -> Optional['Sequence[Any]']:
    """the source to close along with a derived sequence, when it is one"""
    from .sequence import Sequence
    return source if isinstance(source, Sequence) else None


def _materialize(iterable: Iterable[T]) -> Union[Sized, List[T]]:
    """keep sized inputs as they are, drain everything else into a list"""
    if isinstance(iterable, (str, bytes, list, tuple, range)):
        return iterable
    return list(iterable)


def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """create sequence from iterable"""
    from .sequence import Sequence
    def iter_data():
        yield from data
    return Sequence(iter_data())


def empty() -> 'Sequence[Any]':
    """create an already exhausted sequence"""
    return from_iterable(())


def repeat(item: T, count: Optional[int] = None) -> 'Sequence[T]':
    """
    create sequence with item repeated count times.
    negative counts yield nothing, a count of None repeats forever.
    """
    from .sequence import Sequence
    def repeat_data():
        if count is None:
            while True:
                yield item
        for _ in range(max(count, 0)):
            yield item
    return Sequence(repeat_data())


def chain(*iterables: Iterable[T]) -> 'Sequence[T]':
    """iterate over several iterables one after the other"""
    from .sequence import Sequence
    def chain_data():
        for iterable in iterables:
            yield from iterable
    return Sequence(chain_data())


def compress(data: Iterable[T], selector: Iterable[Any]) -> 'Sequence[T]':
    """
    keep the elements of data whose selector entry is truthy.
    elements past the end of the selector are dropped.
    """
    from .sequence import Sequence
    upstreams = [source for source in (data, selector) if _upstream(source) is not None]
    # itertools.compress stops at the shorter input, which is exactly the truncation rule
    return Sequence(itertools_compress(data, selector), upstreams=upstreams)


def zip_(*iterables: Iterable[Any], error_mode: Optional[str] = None) -> 'Sequence[Tuple[Any, ...]]':
    """
    iterate over several equally long iterables in sync, yielding one tuple per index.
    inputs of different lengths yield a single failure instead of any tuple.
    """
    from .sequence import Sequence
    mode = resolve_error_mode(error_mode)
    log_failures = get_config().log_failures

    def zip_data():
        if not iterables:
            logger.warning("zip_ called without inputs, yielding nothing")
            return
        collections = [_materialize(iterable) for iterable in iterables]
        if not ensure_same_length(collections):
            yield _failure(LENGTH_MISMATCH, mode, log_failures)
            return
        for index in range(len(collections[0])):
            yield tuple(collection[index] for collection in collections)

    return Sequence(zip_data())


def count(start: Union[int, float] = 0, step: Union[int, float] = 1) -> 'Sequence[Union[int, float]]':
    """count up from start in increments of step, forever"""
    from .sequence import Sequence
    def count_data():
        current = start
        while True:
            yield current
            # repeated addition, so float steps drift the same way every time
            current = current + step
    return Sequence(count_data())


def cycle(iterable: Iterable[T]) -> 'Sequence[T]':
    """
    repeat the elements of a finite iterable forever.
    text cycles over its characters. an empty base yields nothing.
    """
    from .sequence import Sequence
    def cycle_data():
        base = list(iterable)
        if not base:
            logger.warning("cycle over an empty base, yielding nothing")
            return
        while True:
            yield from base
    return Sequence(cycle_data(), upstream=_upstream(iterable))


def accumulate(items: Iterable[int], operator: str = "add", start: int = 0,
               error_mode: Optional[str] = None) -> 'Sequence[int]':
    """
    running reduction of items with add, multiply or power.
    a non-zero start is yielded first on its own and then added to every running value.
    an unknown operator is rejected before any output, so the start is not yielded either.
    a power that leaves the float range ends the sequence with a failure.
    """
    from .sequence import Sequence
    mode = resolve_error_mode(error_mode)
    log_failures = get_config().log_failures

    def accumulate_data():
        if operator not in OPERATORS:
            yield _failure(INVALID_OPERATOR, mode, log_failures)
            return
        iterator = iter(items)
        try:
            running = next(iterator)
        except StopIteration:
            logger.warning("accumulate over empty input, yielding nothing")
            return
        if start != 0:
            yield start
        yield running + start
        for element in iterator:
            if operator == "multiply":
                running = running * element
            elif operator == "power":
                # float power then truncation toward zero
                try:
                    running = int(math.pow(running, element))
                except (OverflowError, ValueError):
                    yield _failure(POWER_OUT_OF_RANGE, mode, log_failures)
                    return
            else:
                running = running + element
            yield running + start

    return Sequence(accumulate_data(), upstream=_upstream(items))


def tee(iterable: Union[str, Iterable[T]], n: int) -> 'Sequence[Any]':
    """
    cut the input into non-overlapping windows of n elements from the front.
    the last window holds the remainder and may be shorter than n.
    text yields substrings, lists and tuples yield slices, anything else yields lists.
    """
    from .sequence import Sequence
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"window size must be an int, got {type(n).__name__}")

    def slice_data():
        for offset in range(0, len(iterable), n):
            yield iterable[offset:offset + n]

    def batch_data():
        for window in batched(iterable, n):
            yield list(window)

    def tee_data():
        if n <= 0:
            logger.warning(f"tee with window size {n}, yielding nothing")
            return
        if isinstance(iterable, (str, bytes, list, tuple)):
            yield from slice_data()
        else:
            yield from batch_data()

    return Sequence(tee_data(), upstream=_upstream(iterable))


def pairwise(iterable: Union[str, Iterable[T]]) -> 'Sequence[Any]':
    """
    non-overlapping windows of two: "abc" gives "ab" then "c".
    unlike the classical pairwise, consecutive windows do not share elements.
    """
    from .sequence import Sequence
    def pairwise_data():
        with tee(iterable, 2) as windows:
            for window in windows:
                yield window
    return Sequence(pairwise_data())


# --- aliases ---
iter_ = from_iterable
S = from_iterable
