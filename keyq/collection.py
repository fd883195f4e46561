from __future__ import annotations

import logging
import numpy as np
import pandas as pd
from abc import ABC, abstractmethod
from . import config
from .equality import strict_equals
from .types import *

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.set import _SetOperations
from .extensions.grouping import _GroupingOperations
from .extensions.tree import _TreeOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


# --- abstract base class ---

class ICollection(ABC, Generic[T]):
    @abstractmethod
    def _get_entries(self) -> Dict[Key, T]:
        """get the underlying ordered key -> element mapping"""
        pass


# --- base collection implementation ---

class _BaseCollection(ICollection[T]):
    def __init__(self, entries: Dict[Key, T]):
        """init with an ordered mapping the collection takes ownership of"""
        self._entries = entries
        self.to = TerminalAccessor(self)

    def _get_entries(self) -> Dict[Key, T]:
        return self._entries

    def _get_data(self) -> List[T]:
        """the elements in collection order"""
        return list(self._entries.values())

    @classmethod
    def _from_values(cls, values: Iterable[T]) -> 'Collection[T]':
        """new collection with dense keys 0..n-1"""
        return cls(dict(enumerate(values)))

    @classmethod
    def _from_entries(cls, entries: Iterable[Tuple[Key, T]]) -> 'Collection[T]':
        """new collection keeping the given keys"""
        return cls(dict(entries))

    def _try_numpy_optimization(self, data: List[T], operation: str) -> Optional[List[T]]:
        """try to optimize operations using numpy/pandas when possible."""
        if not config.settings.numpy_fast_path or len(data) < 2:
            return None
        # homogeneous ints or floats only, so converting back keeps every value's type
        first_type = type(data[0])
        if first_type not in (int, float) or not all(type(x) is first_type for x in data):
            return None
        try:
            arr = np.asarray(data)
            if operation == 'uniq':
                if first_type is float and np.isnan(arr).any():
                    return None
                logger.debug(f"numpy fast path for {operation} on {len(data)} values")
                return pd.unique(arr).tolist()
            return None
        except (TypeError, ValueError, OverflowError):
            return None

    # --- structural introspection ---

    def count(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return self.count() == 0

    def is_list(self) -> bool:
        """whether the keys are exactly the dense range 0..n-1"""
        return all(type(key) is int and key == i for i, key in enumerate(self._entries))

    def contains_key(self, key: Key) -> bool:
        return key in self._entries

    def keys(self) -> List[Key]:
        return list(self._entries.keys())

    def items(self):
        """a restartable view of (key, element) pairs in collection order"""
        return self._entries.items()

    def get(self, key: Key, default: Optional[T] = None) -> Optional[T]:
        return self._entries.get(key, default)

    def to_array(self) -> Union[List[T], Dict[Key, T]]:
        """a list in list mode, otherwise an ordered dict copy"""
        if self.is_list():
            return self._get_data()
        return dict(self._entries)

    def equals(self, other: 'Collection[Any]') -> bool:
        """
        structural equality: same length and strictly equal elements pairwise.
        keys are compared too, so {'a': 1} does not equal [1] even though the
        elements match.
        """
        if self is other:
            return True
        if not isinstance(other, _BaseCollection):
            return False
        if self.count() != other.count():
            return False
        return all(strict_equals(lk, rk) and strict_equals(lv, rv)
                   for (lk, lv), (rk, rv) in zip(self.items(), other.items()))

    # --- python protocols ---

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, key: Key) -> T:
        return self._entries[key]

    def __contains__(self, value: Any) -> bool:
        return self.includes(value)

    def __eq__(self, other):
        if not isinstance(other, _BaseCollection):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self) -> str:
        return self.to.json()

    def __repr__(self) -> str:
        return f"Collection({self.to_array()!r})"


# --- main collection class ---

class Collection(
    _BaseCollection[T],
    _CoreOperations[T],
    _SetOperations[T],
    _GroupingOperations[T],
    _TreeOperations[T]
):
    """an ordered, key-addressable collection with lodash-style combinators."""
    pass
