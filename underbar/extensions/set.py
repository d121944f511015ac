from __future__ import annotations
import typing
from ..types import *
from .. import engine, composite

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class SetAccessor(Generic[T]):
    """
    set algebra over the enumerable's values.
    membership uses the same coerced identity as uniq, so 1 and "1" match.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def intersection(self, *others: Iterable[Any]) -> 'Enumerable[T]':
        """values present in this sequence and in every other one"""
        from ..enumerable import Enumerable
        return Enumerable(composite.intersection(self._enumerable._values(), *map(list, others)))

    def difference(self, *others: Iterable[Any]) -> 'Enumerable[T]':
        """values of this sequence found in none of the others"""
        from ..enumerable import Enumerable
        return Enumerable(composite.difference(self._enumerable._values(), *map(list, others)))

    def contains(self, target: Any) -> bool:
        """true if some element equals target"""
        return engine.contains(self._enumerable._get_data(), target)
