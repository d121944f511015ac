from __future__ import annotations
import typing
from ..types import *
from .. import composite

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class ZipAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def zip_with(self, *others: Iterable[Any], fillvalue: Any = MISSING) -> 'Enumerable[Tuple[Any, ...]]':
        """zip with other sequences, padding the shorter ones with fillvalue"""
        from ..enumerable import Enumerable
        return Enumerable(composite.zip(self._enumerable._values(), *map(list, others), fillvalue=fillvalue))
