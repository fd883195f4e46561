from __future__ import annotations
import typing
from .. import adapters
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class _GroupingOperations(Generic[T]):
    def partition(self: 'Collection[T]',
                  predicate: PredicateLike) -> Tuple['Collection[T]', 'Collection[T]']:
        """split in one pass into (matching, non_matching), each with dense keys"""
        test = adapters.predicate(predicate)
        true_items, false_items = [], []
        for key, element in self.items():
            (true_items if test(element, key) else false_items).append(element)
        return self._from_values(true_items), self._from_values(false_items)

    def group_by(self: 'Collection[T]', selector: SelectorLike) -> 'Collection[Collection[T]]':
        """
        map each selector result to a collection of the elements producing it.
        groups are ordered by the first appearance of their key.
        """
        select = adapters.selector(selector)
        groups: Dict[Key, List[T]] = {}
        for element in self._get_data():
            groups.setdefault(select(element), []).append(element)
        return self._from_entries((key, self._from_values(items)) for key, items in groups.items())

    def key_by(self: 'Collection[T]', selector: SelectorLike) -> 'Collection[T]':
        """
        map each selector result to the last element producing it.
        a later duplicate replaces the earlier element but keeps its position.
        """
        select = adapters.selector(selector)
        keyed: Dict[Key, T] = {}
        for element in self._get_data():
            keyed[select(element)] = element
        return self._from_entries(keyed.items())
