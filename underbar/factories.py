from .types import *
from .enumerable import Enumerable


def from_iterable(data: Iterable[T]) -> Enumerable[T]:
    """create enumerable from a copy of a sequence or any other iterable"""
    if data is None or isinstance(data, (str, bytes, bytearray)) or not isinstance(data, Iterable):
        raise TypeMismatch(f"expected an iterable collection, got {type(data).__name__}")
    if is_mapping(data):
        return from_mapping(data)
    return Enumerable(list(data))


def from_mapping(data: Mapping[K, V]) -> Enumerable[V]:
    """create enumerable over a copy of a mapping; traversal sees values keyed by their keys"""
    if not is_mapping(data):
        raise TypeMismatch(f"expected a mapping, got {type(data).__name__}")
    return Enumerable(dict(data))


def empty() -> Enumerable[Any]:
    """create empty enumerable"""
    return Enumerable([])


# --- aliases ---
bar = from_iterable
