from __future__ import annotations
import typing
from ..types import *
from .. import engine, composite

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _CoreOperations(Generic[T]):
    def each(self: 'Enumerable[T]', iterator: Callable) -> 'Enumerable[T]':
        """run iterator over every element for its side effects; returns self"""
        engine.each(self._get_data(), iterator)
        return self

    def map(self: 'Enumerable[T]', iterator: Callable) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(engine.map(self._get_data(), iterator))

    def filter(self: 'Enumerable[T]', predicate: Predicate) -> 'Enumerable[T]':
        """keep elements that pass the predicate"""
        from ..enumerable import Enumerable
        return Enumerable(engine.filter(self._get_data(), predicate))

    def reject(self: 'Enumerable[T]', predicate: Predicate) -> 'Enumerable[T]':
        """drop elements that pass the predicate"""
        from ..enumerable import Enumerable
        return Enumerable(engine.reject(self._get_data(), predicate))

    def uniq(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """distinct values, compared the way engine.uniq compares them"""
        from ..enumerable import Enumerable
        return Enumerable(engine.uniq(self._get_data()))

    def sort_by(self: 'Enumerable[T]', key: Union[str, Callable[[T], Any]]) -> 'Enumerable[T]':
        """
        sort by a projected key or field name.
        the enumerable owns a copy of its source, so callers' lists are not reordered.
        """
        from ..enumerable import Enumerable
        return Enumerable(composite.sort_by(list(self._values()), key))

    def pluck(self: 'Enumerable[T]', name: str) -> 'Enumerable[Any]':
        """read a named field from every element"""
        from ..enumerable import Enumerable
        return Enumerable(engine.pluck(self._get_data(), name))

    def invoke(self: 'Enumerable[T]', method_or_name: Union[str, Callable], *args: Any) -> 'Enumerable[Any]':
        """call a function or named method on every element"""
        from ..enumerable import Enumerable
        return Enumerable(engine.invoke(self._get_data(), method_or_name, *args))
