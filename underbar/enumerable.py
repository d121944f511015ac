from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Union[List[T], Dict[Any, T]]:
        """get the underlying collection"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data: Union[List[T], Dict[Any, T]]):
        """init with an owned list or dict; operations run eagerly"""
        self._data = data

    def _get_data(self) -> Union[List[T], Dict[Any, T]]:
        return self._data

    def _values(self) -> List[T]:
        """the elements as a list, whether a sequence or a mapping is wrapped"""
        data = self._data
        return list(data.values()) if is_mapping(data) else data

    def __iter__(self) -> Iterator[T]:
        return iter(self._values())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        return f"Enumerable({self._data!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """an eager, chainable wrapper around the underbar combinators."""
    def __init__(self, data: Union[List[T], Dict[Any, T]]):
        super().__init__(data)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.zip = ZipAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)
