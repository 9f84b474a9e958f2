from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sized
)

T = TypeVar('T')
U = TypeVar('U')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
SourceFactory = Callable[[], Iterator[T]]

# accumulate operators; "" is an alias of "add"
OPERATORS: Tuple[str, ...] = ("add", "", "multiply", "power")

ERROR_MODES: Tuple[str, ...] = ("tagged", "inline", "raise")

LENGTH_MISMATCH = "all parameters must be of the same length"
INVALID_OPERATOR = "not valid operator"
POWER_OUT_OF_RANGE = "power result out of range"


class _End:
    """end-of-sequence marker returned by pull(), never a value"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "END"


END = _End()


class Value(Generic[T]):
    """a regular item in a tagged stream"""

    def __init__(self, item: T):
        self.item = item

    @property
    def is_failure(self) -> bool: return False

    def __eq__(self, other) -> bool:
        return isinstance(other, Value) and self.item == other.item

    def __hash__(self) -> int: return hash(("value", self.item))

    def __repr__(self) -> str:
        return f"Value({self.item!r})"


class Failure:
    """a failure delivered on the data channel in place of regular output"""

    def __init__(self, message: str):
        self.message = message

    @property
    def is_failure(self) -> bool: return True

    def __eq__(self, other) -> bool:
        return isinstance(other, Failure) and self.message == other.message

    def __hash__(self) -> int: return hash(("failure", self.message))

    def __str__(self) -> str: return self.message

    def __repr__(self) -> str:
        return f"Failure({self.message!r})"


class SequenceError(Exception):
    """raised in place of a failure item when error_mode is 'raise'"""

    def __init__(self, failure: Failure):
        super().__init__(failure.message)
        self.failure = failure


def is_failure(item: Any) -> bool:
    """true for failure items in either tagged or inline form"""
    if isinstance(item, Failure):
        return True
    return isinstance(item, str) and item in (LENGTH_MISMATCH, INVALID_OPERATOR, POWER_OUT_OF_RANGE)
