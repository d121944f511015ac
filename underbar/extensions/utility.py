from __future__ import annotations
import typing
from ..types import *
from .. import composite

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def flatten(self) -> 'Enumerable[Any]':
        """flatten nested lists and tuples all the way down"""
        from ..enumerable import Enumerable
        return Enumerable(composite.flatten(self._enumerable._values()))

    def shuffle(self, random_state: Optional[int] = None) -> 'Enumerable[T]':
        """random reordering; pass random_state for a reproducible order"""
        from ..enumerable import Enumerable
        return Enumerable(composite.shuffle(self._enumerable._values(), random_state))
