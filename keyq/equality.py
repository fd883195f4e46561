"""
the two equality tiers.

loose equality is used by matches, uniq, includes and the set operations.
it compares values and coerces numeric strings to numbers ('1' == 1), and
compares records and sequences structurally with the same loose rule.

strict equality is used by Collection.equals. it requires the same type at
every level and never coerces.
"""
from __future__ import annotations
import math
import numpy as np
from numbers import Number
from . import config
from .types import *


def _as_number(value: Any) -> Optional[float]:
    """numeric view of a value for loose comparison, none if it has none"""
    if isinstance(value, bool):
        return None
    if isinstance(value, Number):
        return value
    if isinstance(value, str) and config.settings.coerce_numeric_strings:
        try:
            return float(value.strip()) if value.strip() else None
        except ValueError:
            return None
    return None


def _is_collection(value: Any) -> bool:
    from .collection import Collection
    return isinstance(value, Collection)


def _entries(value: Any) -> Optional[List[Tuple[Any, Any]]]:
    """ordered (key, value) pairs of a record, sequence or collection"""
    if _is_collection(value):
        return list(value.items())
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, (list, tuple)):
        return list(enumerate(value))
    return None


def loose_equals(left: Any, right: Any) -> bool:
    """coercive value comparison"""
    if left is right:
        return True
    if left is None or right is None:
        return False

    left_entries, right_entries = _entries(left), _entries(right)
    if left_entries is not None or right_entries is not None:
        if left_entries is None or right_entries is None:
            return False
        if len(left_entries) != len(right_entries):
            return False
        # records compare by key lookup, order does not matter
        if isinstance(left, Mapping) and isinstance(right, Mapping):
            return all(k in right and loose_equals(v, right[k]) for k, v in left_entries)
        return all(loose_equals(lk, rk) and loose_equals(lv, rv)
                   for (lk, lv), (rk, rv) in zip(left_entries, right_entries))

    if isinstance(left, str) and isinstance(right, str):
        return left == right

    left_number, right_number = _as_number(left), _as_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number

    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def strict_equals(left: Any, right: Any) -> bool:
    """exact value-and-type comparison. nan equals nan so every value equals itself"""
    if left is right:
        return True
    if type(left) is not type(right):
        return False

    if _is_collection(left):
        return left.equals(right)
    if isinstance(left, Mapping):
        if list(left.keys()) != list(right.keys()):
            return False
        return all(strict_equals(left[k], right[k]) for k in left)
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(strict_equals(l, r) for l, r in zip(left, right))
    if isinstance(left, np.ndarray):
        return (left.dtype == right.dtype and left.shape == right.shape
                and bool(np.array_equal(left, right, equal_nan=left.dtype.kind in "fc")))
    if isinstance(left, (float, np.floating)) and math.isnan(left) and math.isnan(right):
        return True

    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def loose_compare(left: Any, right: Any) -> int:
    """
    three-way ordering used by sort_by. none sorts before everything else,
    numeric strings are ordered as numbers and incomparable values tie.
    """
    if loose_equals(left, right):
        return 0
    if left is None:
        return -1
    if right is None:
        return 1

    left_number, right_number = _as_number(left), _as_number(right)
    if left_number is not None and right_number is not None and not (
            isinstance(left, str) and isinstance(right, str)):
        left, right = left_number, right_number

    try:
        if left > right: return 1
        if left < right: return -1
    except TypeError:
        pass
    return 0
