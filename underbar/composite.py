from __future__ import annotations

import random
from .types import *
from .engine import each, map, filter, reduce

# --- ordering ---

def _key_less(left: Any, right: Any) -> bool:
    """ascending comparison where missing keys come before everything"""
    left_missing = left is MISSING or left is None
    right_missing = right is MISSING or right is None
    if left_missing or right_missing:
        return left_missing and not right_missing
    return left < right


def sort_by(sequence: List[T], key: Union[str, Callable[[T], Any]]) -> List[T]:
    """
    sorts the sequence in place by a projected key and returns it.

    key is either a function of the element or the name of a field. elements
    whose key is missing (or None) sort first. this is a selection sort that
    reorders the caller's list; copy first to keep the original order.
    """
    if not is_mutable_sequence(sequence):
        raise TypeMismatch(f"sort_by expects a mutable sequence, got {type(sequence).__name__}")
    select = to_key_selector(key)
    keys = map(sequence, select)

    for left in range(len(sequence) - 1):
        lowest = left
        for right in range(left + 1, len(sequence)):
            if _key_less(keys[right], keys[lowest]):
                lowest = right
        if lowest != left:
            sequence[left], sequence[lowest] = sequence[lowest], sequence[left]
            keys[left], keys[lowest] = keys[lowest], keys[left]

    return sequence


# --- combining ---

def zip(*sequences: Sequence[Any], fillvalue: Any = MISSING) -> List[Tuple[Any, ...]]:
    """
    group the i-th elements of every sequence into tuples.
    shorter sequences are padded with fillvalue up to the longest one.
    """
    columns = [as_sequence(sequence, "zip") for sequence in sequences]
    longest = reduce(columns, lambda size, column: max(size, len(column)), 0)

    def row(index):
        return tuple(map(columns, lambda column: column[index] if index < len(column) else fillvalue))

    return [row(index) for index in range(longest)]


def flatten(nested: Optional[Sequence[Any]]) -> List[Any]:
    """flatten arbitrarily nested lists and tuples, depth first, left to right"""
    if nested is None:
        return []
    nested = as_sequence(nested, "flatten")

    result = []
    stack = list(reversed(nested))
    while stack:
        item = stack.pop()
        if isinstance(item, (list, tuple)):
            stack.extend(reversed(item))
        else:
            result.append(item)
    return result


# --- set algebra ---

def _key_set(sequence: Sequence[Any]) -> Dict[Any, Any]:
    """coerced key -> first value, one entry per distinct value"""
    keys: Dict[Any, Any] = {}

    def visit(value):
        keys.setdefault(coerce_key(value), value)

    each(as_sequence(sequence, "set operation"), visit)
    return keys


def intersection(*sequences: Sequence[Any]) -> List[Any]:
    """
    values present in every sequence, each returned once.

    each input is de-duplicated before counting, so a value repeated inside
    one sequence is still counted once for that sequence.
    """
    if not sequences:
        return []
    key_sets = map(sequences, _key_set)

    counts: Dict[Any, int] = {}

    def tally(key):
        counts[key] = counts.get(key, 0) + 1

    for key_set in key_sets:
        each(list(key_set), tally)

    required = len(key_sets)
    return [value for key, value in key_sets[0].items() if counts[key] == required]


def difference(sequence: Sequence[Any], *others: Sequence[Any]) -> List[Any]:
    """elements of sequence found in none of the others, order and repeats kept"""
    sequence = as_sequence(sequence, "difference")
    excluded = reduce(others, lambda keys, other: keys | _key_set(other).keys(), set())
    return filter(sequence, lambda value: coerce_key(value) not in excluded)


# --- randomness ---

def shuffle(sequence: Sequence[T], random_state: Optional[int] = None) -> List[T]:
    """a shuffled copy of the sequence; the input is left untouched"""
    result = list(as_sequence(sequence, "shuffle"))
    rng = random.Random(random_state)
    for index in range(len(result) - 1, 0, -1):
        swap = rng.randrange(index + 1)
        result[index], result[swap] = result[swap], result[index]
    return result
