from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Mapping, MutableMapping, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Key = Hashable
Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], Union[int, bool]]
Visitor = Callable[[T, Key], Any]

# anything the adapter layer can turn into a callable
SelectorLike = Union[str, Callable[..., Any]]
PredicateLike = Union[str, Mapping[str, Any], Callable[..., Any]]


class Maybe(Generic[T]):
    """an explicit present-or-absent value, returned where a lookup may find nothing"""

    __slots__ = ('_value', '_present')

    def __init__(self, value: Optional[T], present: bool):
        self._value = value
        self._present = present

    @classmethod
    def of(cls, value: T) -> 'Maybe[T]':
        return cls(value, True)

    @classmethod
    def empty(cls) -> 'Maybe[Any]':
        return cls(None, False)

    @property
    def is_present(self) -> bool: return self._present

    @property
    def is_empty(self) -> bool: return not self._present

    def get(self) -> T:
        """the wrapped value; raises EmptyCollectionAccess when absent"""
        if not self._present:
            from .errors import EmptyCollectionAccess
            raise EmptyCollectionAccess("no value present")
        return self._value

    def or_else(self, default: U) -> Union[T, U]:
        return self._value if self._present else default

    def map(self, func: Callable[[T], U]) -> 'Maybe[U]':
        if not self._present:
            return self
        return Maybe.of(func(self._value))

    def __bool__(self) -> bool:
        return self._present

    def __eq__(self, other):
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._present == other._present and self._value == other._value

    def __repr__(self) -> str:
        return f"Maybe({self._value!r})" if self._present else "Maybe.empty()"
