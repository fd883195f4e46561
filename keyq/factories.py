import typing
import numpy as np
import pandas as pd
from .errors import InvalidArgumentKind
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collection
    from .shared import SharedCollection


def of(data: Union['Collection[T]', Iterable[T], Mapping[Key, T]]) -> 'Collection[T]':
    """
    create a collection. sequences and iterables get dense keys, mappings and
    pandas series keep their keys, another collection has its entries copied.
    """
    from .collection import Collection
    if isinstance(data, Collection):
        return Collection(dict(data.items()))
    if isinstance(data, pd.DataFrame):
        return Collection(dict(zip(data.index, data.to_dict('records'))))
    if isinstance(data, pd.Series):
        return Collection(data.to_dict())
    if isinstance(data, np.ndarray):
        return Collection(dict(enumerate(data.tolist())))
    if isinstance(data, Mapping):
        return Collection(dict(data))
    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise InvalidArgumentKind(data, "sequence, mapping or collection")
    return Collection(dict(enumerate(data)))


def of_element(element: T) -> 'Collection[T]':
    """create a collection holding one element"""
    from .collection import Collection
    return Collection({0: element})


def of_empty() -> 'Collection[Any]':
    """create empty collection"""
    from .collection import Collection
    return Collection({})


def of_shared(data: Union['Collection[T]', Iterable[T], Mapping[Key, T]]) -> 'SharedCollection[T]':
    """create an explicit shared handle; every holder sees updates made through it"""
    from .shared import SharedCollection
    return SharedCollection(of(data))


# --- aliases ---
Q = of
empty = of_empty
