from __future__ import annotations
import typing
from itertools import chain
from ..equality import loose_equals
from ..types import *
from .core import _is_spliceable

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _as_collection(other: Union['Collection[T]', Iterable[T]]) -> 'Collection[T]':
    from ..collection import Collection
    from ..factories import of
    return other if isinstance(other, Collection) else of(other)


def _comparator_says_equal(result: Union[int, bool]) -> bool:
    """boolean comparators return true for equal, three-way comparators return 0"""
    if isinstance(result, bool):
        return result
    return result == 0


class _SetOperations(Generic[T]):
    """
    set algebra under loose equality. membership tests are pairwise, so
    elements do not need to be hashable.
    """

    def intersection(self: 'Collection[T]', other: Union['Collection[T]', Iterable[T]]) -> 'Collection[T]':
        """elements also present in other, in this collection's order and with its keys"""
        other_data = _as_collection(other)._get_data()
        return self._from_entries(
            (key, element) for key, element in self.items()
            if any(loose_equals(element, candidate) for candidate in other_data))

    def difference(self: 'Collection[T]', other: Union['Collection[T]', Iterable[T]]) -> 'Collection[T]':
        """elements not present in other. keys are reset"""
        other_data = _as_collection(other)._get_data()
        return self._from_values(
            element for element in self._get_data()
            if not any(loose_equals(element, candidate) for candidate in other_data))

    def difference_with(self: 'Collection[T]', other: Union['Collection[T]', Iterable[T]],
                        comparator: Comparer[T]) -> 'Collection[T]':
        """difference where comparator(element, candidate) decides equality. keys are reset"""
        other_data = _as_collection(other)._get_data()
        return self._from_values(
            element for element in self._get_data()
            if not any(_comparator_says_equal(comparator(element, candidate)) for candidate in other_data))

    def concat(self: 'Collection[T]', *values: Any) -> 'Collection[Any]':
        """
        append values in order. collections and sequences are spliced in,
        anything else (records included) is appended as a single element.
        keys are reset to span the whole result.
        """
        parts = [value if _is_spliceable(value) else [value] for value in values]
        return self._from_values(chain(self._get_data(), *parts))

    def includes(self: 'Collection[T]', value: Any) -> bool:
        """whether any element is loosely equal to value"""
        return any(loose_equals(element, value) for element in self._entries.values())
