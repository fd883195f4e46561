from __future__ import annotations
import typing
from functools import cmp_to_key
from .. import adapters
from ..equality import loose_equals, loose_compare
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _is_spliceable(value: Any) -> bool:
    """whether a value contributes its elements (rather than itself) when flattened or concatenated"""
    from ..collection import Collection
    if isinstance(value, Collection):
        return True
    # strings and records are single values
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)


class _CoreOperations(Generic[T]):
    def map(self: 'Collection[T]', selector: SelectorLike) -> 'Collection[U]':
        """project each element, called with (element, key). keys are reset to 0..n-1"""
        select = adapters.selector(selector)
        return self._from_values(select(element, key) for key, element in self.items())

    def map_values(self: 'Collection[T]', selector: SelectorLike) -> 'Collection[U]':
        """project each element, called with (element, key). keys are kept"""
        select = adapters.selector(selector)
        return self._from_entries((key, select(element, key)) for key, element in self.items())

    def flat_map(self: 'Collection[T]', selector: SelectorLike) -> 'Collection[U]':
        """
        project and flatten one level. sequences and collections are spliced in,
        none and an empty Maybe contribute nothing, a present Maybe contributes
        its value and any other result is appended as one element.
        """
        select = adapters.selector(selector)
        flattened = []
        for key, element in self.items():
            result = select(element, key)
            if isinstance(result, Maybe):
                if result.is_empty:
                    continue
                result = result.get()
            if result is None:
                continue
            if _is_spliceable(result):
                flattened.extend(result)
            else:
                flattened.append(result)
        return self._from_values(flattened)

    def walk(self: 'Collection[T]', visitor: Visitor[T]) -> 'Collection[T]':
        """
        calls visitor(element, key) on every element for its side effects.
        this is the one operation that may mutate elements in place.
        returns this same collection, not a copy, to allow chaining.
        """
        visit = adapters.fit_arity(visitor, 2)
        for key, element in self.items():
            visit(element, key)
        return self

    def filter(self: 'Collection[T]', predicate: PredicateLike) -> 'Collection[T]':
        """keep elements satisfying predicate. keys are reset so there are no gaps"""
        test = adapters.predicate(predicate)
        return self._from_values(element for key, element in self.items() if test(element, key))

    def uniq(self: 'Collection[T]') -> 'Collection[T]':
        """
        drop elements loosely equal to an earlier one, keeping first-seen order.
        pairwise comparison, o(n^2) outside the numeric fast path.
        """
        data = self._get_data()
        optimized = self._try_numpy_optimization(data, 'uniq')
        if optimized is not None: return self._from_values(optimized)
        kept: List[T] = []
        for element in data:
            if not any(loose_equals(element, seen) for seen in kept):
                kept.append(element)
        return self._from_values(kept)

    def uniq_by(self: 'Collection[T]', selector: SelectorLike) -> 'Collection[T]':
        """like uniq, comparing selector(element) instead of the element"""
        select = adapters.selector(selector)
        kept: List[T] = []
        seen_keys: List[Any] = []
        for element in self._get_data():
            derived = select(element)
            if not any(loose_equals(derived, seen) for seen in seen_keys):
                kept.append(element)
                seen_keys.append(derived)
        return self._from_values(kept)

    def sort_by(self: 'Collection[T]', *selectors: SelectorLike) -> 'Collection[T]':
        """
        stable multi-key sort. the first selector deciding an order wins, ties cascade
        to the next one and elements equal on every key keep their input order.
        with no selectors the elements themselves are compared.
        """
        resolved = [adapters.selector(s) for s in selectors] or [lambda element, key=None: element]

        def compare(left: T, right: T) -> int:
            for select in resolved:
                order = loose_compare(select(left), select(right))
                if order:
                    return order
            return 0

        # sorted() is stable, so ties keep their input order
        return self._from_values(sorted(self._get_data(), key=cmp_to_key(compare)))

    def head(self: 'Collection[T]') -> Maybe[T]:
        """the first element, or an empty Maybe"""
        for element in self._entries.values():
            return Maybe.of(element)
        return Maybe.empty()

    def find(self: 'Collection[T]', predicate: PredicateLike) -> Maybe[T]:
        """the first element satisfying predicate, or an empty Maybe"""
        test = adapters.predicate(predicate)
        for key, element in self.items():
            if test(element, key):
                return Maybe.of(element)
        return Maybe.empty()

    def some(self: 'Collection[T]', predicate: PredicateLike) -> bool:
        """whether any element satisfies predicate"""
        return self.find(predicate).is_present

    def join(self: 'Collection[T]', glue: str) -> str:
        """join the string form of each element"""
        return glue.join(str(element) for element in self._entries.values())

