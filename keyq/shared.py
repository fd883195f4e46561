from __future__ import annotations
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collection


class SharedCollection(Generic[T]):
    """
    an explicit, opt-in shared handle around one collection value.

    collections never alias the data they were built from. when several parts
    of a program must observe the same changing collection they share this
    handle instead: get() returns the current value, set() and update() replace
    it, walk() visits the current elements in place.
    """

    def __init__(self, collection: 'Collection[T]'):
        self._value = collection

    def get(self) -> 'Collection[T]':
        return self._value

    def set(self, collection: 'Collection[T]') -> 'SharedCollection[T]':
        from .factories import of
        self._value = of(collection)
        return self

    def update(self, transform: Callable[['Collection[T]'], 'Collection[T]']) -> 'Collection[T]':
        """replace the value by transform(value) and return the new value"""
        return self.set(transform(self._value)).get()

    def walk(self, visitor: Visitor[T]) -> 'SharedCollection[T]':
        self._value.walk(visitor)
        return self

    def __len__(self) -> int:
        return self._value.count()

    def __iter__(self) -> Iterator[T]:
        return iter(self._value)

    def __repr__(self) -> str:
        return f"SharedCollection({self._value!r})"
