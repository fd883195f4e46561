import json
import numpy as np
import pandas as pd
import suite
from keyq import Q, of_shared, of_empty, config, Maybe, SharedCollection

test = suite.test
assert_that = suite.assert_that

records = Q([{'id': 1, 'name': 'ada'}, {'id': 2, 'name': 'bob'}])


# --- plain conversions ---

@test("to.list drops keys and to.dict keeps them")
def test_list_dict():
    c = Q({'a': 1, 'b': 2})
    assert_that(c.to.list() == [1, 2], "list of elements")
    assert_that(c.to.dict() == {'a': 1, 'b': 2}, "dict of entries")
    assert_that(c.to.dict() is not c.to.dict(), "a fresh dict each time")


@test("to_array follows the collection mode")
def test_to_array():
    assert_that(Q([1, 2]).to_array() == [1, 2], "list mode gives a list")
    assert_that(Q({'x': 1}).to_array() == {'x': 1}, "map mode gives a dict")
    assert_that(Q([1, 2, 3]).filter(lambda x: x > 1).to_array() == [2, 3], "filtered lists stay lists")


@test("to.plain converts nested collections")
def test_plain():
    nested = Q({'g': Q([1, Q({'k': 'v'})])})
    assert_that(nested.to.plain() == {'g': [1, {'k': 'v'}]}, f"got {nested.to.plain()}")


# --- json ---

@test("str gives pretty json")
def test_str_json():
    assert_that(str(Q([1, 2])) == json.dumps([1, 2], indent=4), "list mode is an array")
    assert_that(str(Q({'b': 1, 'a': 2})) == json.dumps({'b': 1, 'a': 2}, indent=4), "map mode is an object")


@test("json keeps insertion order in map mode")
def test_json_order():
    assert_that(Q({'b': 1, 'a': 2}).to.json(indent=0) == '{"b": 1, "a": 2}', "insertion order")


@test("json serialises grouped results")
def test_json_grouped():
    grouped = records.group_by('name').to.json(indent=0)
    assert_that(json.loads(grouped) == {'ada': [{'id': 1, 'name': 'ada'}], 'bob': [{'id': 2, 'name': 'bob'}]},
                f"got {grouped}")


@test("json indent follows the configuration")
def test_json_indent_config():
    try:
        config.configure(json_indent=2)
        assert_that(str(Q([1])) == json.dumps([1], indent=2), "indent 2")
    finally:
        config.reset()


@test("json handles numpy scalars")
def test_json_numpy():
    text = Q([np.int64(3), np.float64(1.5)]).to.json(indent=0)
    assert_that(json.loads(text) == [3, 1.5], f"got {text}")


# --- numpy / pandas ---

@test("to.array gives a numpy array")
def test_to_numpy():
    arr = Q([1, 2, 3]).to.array()
    assert_that(isinstance(arr, np.ndarray) and arr.tolist() == [1, 2, 3], "numpy array")


@test("to.pandas indexes the series by key")
def test_to_pandas():
    series = Q({'a': 1, 'b': 2}).to.pandas()
    assert_that(list(series.index) == ['a', 'b'], "keys become the index")
    assert_that(series.tolist() == [1, 2], "elements become the values")
    assert_that(of_empty().to.pandas().empty, "empty collection gives an empty series")


@test("to.df builds one row per record")
def test_to_df():
    frame = records.to.df()
    assert_that(list(frame.columns) == ['id', 'name'], "fields become columns")
    assert_that(frame['name'].tolist() == ['ada', 'bob'], "rows in order")


@test("of accepts numpy and pandas inputs")
def test_of_numpy_pandas():
    assert_that(Q(np.array([1, 2])).to.list() == [1, 2], "numpy arrays")
    assert_that(Q(pd.Series([1, 2], index=['a', 'b'])).keys() == ['a', 'b'], "series keep their index")
    frame = pd.DataFrame({'a': [1, 2], 'b': ['x', 'y']})
    assert_that(Q(frame).map('b').to.list() == ['x', 'y'], "frames become records")


# --- maybe ---

@test("maybe maps only present values")
def test_maybe():
    assert_that(Maybe.of(2).map(lambda x: x * 2) == Maybe.of(4), "present")
    assert_that(Maybe.empty().map(lambda x: x * 2) == Maybe.empty(), "absent stays absent")
    assert_that(not Maybe.empty() and Maybe.of(0), "truthiness means presence")


# --- shared handle ---

@test("a shared handle is seen by every holder")
def test_shared_update():
    handle = of_shared([1, 2])
    alias = handle
    handle.update(lambda c: c.concat(3))
    assert_that(alias.get().to.list() == [1, 2, 3], "holders see the update")
    assert_that(isinstance(handle, SharedCollection) and len(handle) == 3, "handle length")


@test("a shared handle never aliases the caller's data")
def test_shared_no_alias():
    data = [1, 2]
    handle = of_shared(data)
    handle.set([5])
    data.append(9)
    assert_that(data == [1, 2, 9] and list(handle) == [5], "source list and handle are independent")


@test("walk through a shared handle mutates the shared elements")
def test_shared_walk():
    handle = of_shared([{'n': 1}])
    handle.walk(lambda e: e.update(n=2))
    assert_that(handle.get()[0]['n'] == 2, "visitor changes are visible")


if __name__ == "__main__":
    suite.main("keyq terminal and shared test")
