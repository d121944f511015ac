"""
traversal engine.

every combinator here is built on `each` or `reduce`; nothing else walks a
collection directly. callbacks are called as (value, index_or_key, collection),
trimmed to however many positional parameters the callback accepts.
"""
from __future__ import annotations

import inspect
from .types import *

_NO_SEED = object()


# --- callback arity ---

def _positional_arity(func: Callable) -> int:
    """how many of (value, key, collection) a callback should receive"""
    if isinstance(func, type):
        # classes such as str or int are used as one-argument conversions
        return 1
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without a signature (str, int, ...) take the value only
        return 1
    count = 0
    for param in sig.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return 3
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return min(max(count, 1), 3)


def _bind_iterator(func: Callable) -> Callable[[Any, Any, Any], Any]:
    if not callable(func):
        raise TypeMismatch(f"iterator must be callable, got {type(func).__name__}")
    arity = _positional_arity(func)
    if arity == 1: return lambda value, key, collection: func(value)
    if arity == 2: return lambda value, key, collection: func(value, key)
    return func


# --- traversal ---

def _items(collection: Collection) -> Iterable[Tuple[Any, Any]]:
    """pick the key/value source once: indexed for sequences, keyed for mappings"""
    if is_mapping(collection):
        return ((collection[key], key) for key in collection)
    if is_sequence(collection):
        return ((collection[index], index) for index in range(len(collection)))
    raise TypeMismatch(f"expected a sequence or mapping, got {type(collection).__name__}")


def _materialize(collection: Any) -> Collection:
    """turn sets, generators and other plain iterables into lists"""
    if is_mapping(collection) or is_sequence(collection):
        return collection
    if collection is None or isinstance(collection, (str, bytes, bytearray)) or not isinstance(collection, Iterable):
        raise TypeMismatch(f"expected a sequence or mapping, got {type(collection).__name__}")
    return list(collection)


def each(collection: Collection, iterator: Callable) -> None:
    """call iterator(value, index_or_key, collection) for every element"""
    collection = _materialize(collection)
    call = _bind_iterator(iterator)
    for value, key in _items(collection):
        call(value, key, collection)


def identity(value: T) -> T:
    return value


def _same(a: Any, b: Any) -> bool:
    """strict equality: a bool only ever equals another bool"""
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def index_of(sequence: Sequence[T], target: T) -> int:
    """position of the first element strictly equal to target, or -1"""
    if is_mapping(sequence):
        raise TypeMismatch("index_of expects a sequence, got a mapping")
    result = -1

    def visit(item, index):
        nonlocal result
        if result == -1 and _same(item, target):
            result = index

    each(sequence, visit)
    return result


def map(collection: Collection, iterator: Callable) -> List[Any]:
    """project each element to a new form, preserving order"""
    result = []
    call = _bind_iterator(iterator)
    each(collection, lambda value, key, source: result.append(call(value, key, source)))
    return result


def filter(collection: Collection, predicate: Predicate) -> List[Any]:
    """
    elements for which predicate is truthy, in original order.
    truthiness is python's, so empty lists and dicts count as false.
    """
    result = []
    call = _bind_iterator(predicate)

    def visit(value, key, source):
        if call(value, key, source):
            result.append(value)

    each(collection, visit)
    return result


def reject(collection: Collection, predicate: Predicate) -> List[Any]:
    """elements for which predicate is falsy"""
    call = _bind_iterator(predicate)
    return filter(collection, lambda value, key, source: not call(value, key, source))


def uniq(sequence: Sequence[T]) -> List[T]:
    """
    each distinct value once.

    values are compared through `coerce_key`, so 1, 1.0 and "1" count as the
    same value and the first one seen is kept. callers should not rely on the
    output order.
    """
    seen: Dict[Any, T] = {}

    def visit(value):
        key = coerce_key(value)
        if key not in seen:
            seen[key] = value

    each(sequence, visit)
    return list(seen.values())


def reduce(collection: Collection, iterator: Accumulator, initial: Any = _NO_SEED) -> Any:
    """
    fold the collection into a single value with acc = iterator(acc, value).
    without an initial value the first element seeds the accumulator.
    """
    state = {'acc': initial, 'seeded': initial is not _NO_SEED}

    def step(value):
        if not state['seeded']:
            state['acc'] = value
            state['seeded'] = True
        else:
            state['acc'] = iterator(state['acc'], value)

    each(collection, step)
    if not state['seeded']:
        raise InvalidArgument("cannot reduce an empty collection without an initial value")
    return state['acc']


def contains(collection: Collection, target: Any) -> bool:
    """true if some element strictly equals target"""
    return reduce(collection, lambda was_found, item: was_found or _same(item, target), False)


def every(collection: Collection, predicate: Optional[Predicate] = None) -> bool:
    """true if predicate holds for every element; true for an empty collection"""
    test = _bind_iterator(predicate if predicate is not None else identity)
    passed = True

    def visit(value, key, source):
        nonlocal passed
        # once one element fails, the predicate is not consulted again
        if passed and not test(value, key, source):
            passed = False

    each(collection, visit)
    return passed


def some(collection: Collection, predicate: Optional[Predicate] = None) -> bool:
    """true if predicate holds for at least one element"""
    test = _bind_iterator(predicate if predicate is not None else identity)
    return not every(collection, lambda value, key, source: not test(value, key, source))


# --- thin delegations ---

def first(sequence: Sequence[T], n: Optional[int] = None) -> Union[T, List[T], None]:
    """first element (None when empty), or a list of the first n"""
    sequence = as_sequence(sequence, "first")
    if n is None:
        return sequence[0] if len(sequence) else None
    if n < 0:
        raise InvalidArgument(f"n must be non-negative, got {n}")
    return list(sequence[:n])


def last(sequence: Sequence[T], n: Optional[int] = None) -> Union[T, List[T], None]:
    """last element (None when empty), or a list of the last n"""
    sequence = as_sequence(sequence, "last")
    if n is None:
        return sequence[-1] if len(sequence) else None
    if n < 0:
        raise InvalidArgument(f"n must be non-negative, got {n}")
    if n == 0:
        return []
    return list(sequence[-n:])


def pluck(collection: Collection, name: str) -> List[Any]:
    """the named field of every element; MISSING where it is absent"""
    select = FieldSelector(name)
    return map(collection, select)


def invoke(collection: Collection, method_or_name: Union[str, Callable], *args: Any) -> List[Any]:
    """
    call a function or a named method on every element.
    a callable is applied as fn(element, *args); a name as element.name(*args).
    """
    if callable(method_or_name):
        func = method_or_name
        return map(collection, lambda value: func(value, *args))
    if not isinstance(method_or_name, str):
        raise TypeMismatch(f"expected a callable or a method name, got {type(method_or_name).__name__}")
    name = method_or_name
    return map(collection, lambda value: getattr(value, name)(*args))
