from __future__ import annotations
import typing
from ..types import *
from .. import engine

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list (the values, for a wrapped mapping)"""
        return list(self._enumerable._values())

    def dict(self) -> Dict[Any, T]:
        """convert to dict: keys of a wrapped mapping, indices of a sequence"""
        data = self._enumerable._get_data()
        if is_mapping(data):
            return dict(data)
        return dict(enumerate(data))

    def count(self, predicate: Optional[Predicate] = None) -> int:
        """count elements, or the ones passing predicate"""
        data = self._enumerable._get_data()
        if predicate is None: return len(data)
        return len(engine.filter(data, predicate))

    def reduce(self, iterator: Accumulator, *initial: Any) -> Any:
        """fold into one value; without an initial value the first element seeds"""
        if len(initial) > 1:
            raise InvalidArgument("reduce takes at most one initial value")
        return engine.reduce(self._enumerable._get_data(), iterator, *initial)

    def every(self, predicate: Optional[Predicate] = None) -> bool:
        return engine.every(self._enumerable._get_data(), predicate)

    def some(self, predicate: Optional[Predicate] = None) -> bool:
        return engine.some(self._enumerable._get_data(), predicate)

    def index_of(self, target: T) -> int:
        return engine.index_of(self._enumerable._values(), target)

    def first(self, n: Optional[int] = None) -> Union[T, List[T], None]:
        return engine.first(self._enumerable._values(), n)

    def last(self, n: Optional[int] = None) -> Union[T, List[T], None]:
        return engine.last(self._enumerable._values(), n)
