from .types import *


def ensure_same_length(iterables: List[Sized]) -> bool:
    """ensures that all nested collections are the same length"""
    if not iterables:
        return True
    first_length = len(iterables[0])
    return all(len(nested) == first_length for nested in iterables[1:])
