from collections.abc import Mapping, MutableSequence, Sequence
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[..., Any]
Selector = Callable[..., U]
Accumulator = Callable[[U, T], U]
Collection = Union[Sequence, Mapping, Iterable]


class _Missing:
    """marks an absent element: zip padding, missing sort keys, absent fields"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


# --- errors ---

class UnderbarError(Exception):
    """base class for every error raised by underbar itself"""


class InvalidArgument(UnderbarError, ValueError):
    """an argument has the right type but an unusable value"""


class TypeMismatch(UnderbarError, TypeError):
    """a combinator received something that is not a collection"""


class UnsupportedKey(UnderbarError, TypeError):
    """memoize was called with arguments it cannot key a cache on"""


# --- key selection ---

class Projection(Generic[T, K]):
    """key derived by calling a function on the element"""

    def __init__(self, func: Callable[[T], K]):
        self.func = func

    def __call__(self, item: T) -> K:
        return self.func(item)

    def __repr__(self) -> str:
        return f"Projection({getattr(self.func, '__name__', self.func)!r})"


class FieldSelector(Generic[T]):
    """key read from a named field: mapping key first, then attribute"""

    def __init__(self, name: str):
        self.name = name

    def __call__(self, item: T) -> Any:
        if isinstance(item, Mapping):
            return item.get(self.name, MISSING)
        return getattr(item, self.name, MISSING)

    def __repr__(self) -> str:
        return f"FieldSelector({self.name!r})"


def to_key_selector(key: Union[str, Callable[[T], K], Projection, FieldSelector]) -> Callable[[T], Any]:
    """resolve a function-or-field-name argument into a key selector"""
    if isinstance(key, (Projection, FieldSelector)):
        return key
    if callable(key):
        return Projection(key)
    if isinstance(key, str):
        return FieldSelector(key)
    raise TypeMismatch(f"expected a callable or a field name, got {type(key).__name__}")


# --- collection classification ---

def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_mutable_sequence(value: Any) -> bool:
    return isinstance(value, MutableSequence) and not isinstance(value, bytearray)


def as_sequence(value: Any, operation: str) -> Sequence:
    """return value as an indexable sequence or raise TypeMismatch"""
    if is_sequence(value):
        return value
    if isinstance(value, (str, bytes, bytearray)) or is_mapping(value) or not isinstance(value, Iterable):
        raise TypeMismatch(f"{operation} expects a sequence, got {type(value).__name__}")
    return list(value)


_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


def is_primitive(value: Any) -> bool:
    return isinstance(value, _PRIMITIVES)


def coerce_key(value: Any) -> Any:
    """
    the identity used by uniq and the set operations.
    primitives collapse onto their string form, so 1, 1.0 and "1" are the
    same value. booleans use lowercase names and integral floats drop their
    fraction. other hashable values key on themselves, unhashable ones on repr.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if is_primitive(value):
        return str(value)
    try:
        hash(value)
    except TypeError:
        return ('repr', repr(value))
    return ('obj', value)
