from __future__ import annotations
import json
import typing
import numpy as np
import pandas as pd
from .. import config
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _plain(value: Any) -> Any:
    """recursively replace collections by lists (list mode) or dicts (map mode)"""
    from ..collection import Collection
    if isinstance(value, Collection):
        if value.is_list():
            return [_plain(v) for v in value]
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _json_default(value: Any) -> Any:
    """json fallback for numpy scalars and arbitrary objects"""
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    if hasattr(value, '__dict__'):
        return vars(value)
    return str(value)


class TerminalAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def list(self) -> List[T]:
        """the elements as a list, keys dropped"""
        return self._collection._get_data()

    def dict(self) -> Dict[Key, T]:
        """the entries as a dict, keys kept"""
        return dict(self._collection._get_entries())

    def plain(self) -> Union[List[Any], Dict[Key, Any]]:
        """nested lists and dicts, with nested collections converted too"""
        return _plain(self._collection)

    def json(self, indent: Optional[int] = None) -> str:
        """
        json text. list mode becomes an array, map mode an object in insertion order.
        pretty-printed with the configured indent unless one is given.
        """
        indent = config.settings.json_indent if indent is None else indent
        return json.dumps(self.plain(), indent=indent or None, default=_json_default, ensure_ascii=False)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._collection._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series indexed by the keys"""
        dtype = object if self._collection.is_empty() else None
        return pd.Series(self._collection._get_data(), index=self._collection.keys(), dtype=dtype)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe, one row per record"""
        return pd.DataFrame(_plain(self._collection.to.list()), index=self._collection.keys())
