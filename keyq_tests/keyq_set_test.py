import suite
from keyq import Q, of_empty

test = suite.test
assert_that = suite.assert_that


# --- intersection ---

@test("intersection keeps the left keys and order")
def test_intersection_keys():
    result = Q({'a': 1, 'b': 2, 'c': 3}).intersection(Q([3, 1]))
    assert_that(result.to.dict() == {'a': 1, 'c': 3}, f"got {result.to.dict()}")


@test("intersection keeps gaps in list keys")
def test_intersection_list_keys():
    result = Q([4, 2, 3, 1]).intersection([1, 3])
    assert_that(result.keys() == [2, 3], f"left keys should be kept, got {result.keys()}")
    assert_that(not result.is_list(), "gaps mean the result is no longer a list")


@test("intersection compares loosely and accepts plain sequences")
def test_intersection_loose():
    assert_that(Q([1, 2]).intersection(['2']).to.list() == [2], "'2' matches 2")
    records = Q([{'id': 1}, {'id': 2}]).intersection([{'id': 2}])
    assert_that(records.to.list() == [{'id': 2}], "records compare by value")
    assert_that(Q([1, 2]).intersection([]).is_empty(), "nothing in common with empty")


# --- difference ---

@test("difference removes elements present in other")
def test_difference_basic():
    result = Q([1, 2, 3, 4]).difference(Q([2, 4]))
    assert_that(result.to.list() == [1, 3], f"got {result.to.list()}")
    assert_that(result.keys() == [0, 1], "keys reset")


@test("difference resets map keys and keeps duplicates")
def test_difference_map():
    assert_that(Q({'a': 1, 'b': 2}).difference([1]).to_array() == [2], "map mode becomes list mode")
    assert_that(Q([1, 1, 2]).difference([2]).to.list() == [1, 1], "duplicates stay")
    assert_that(Q(['1', 2]).difference([1]).to.list() == [2], "loose comparison")
    assert_that(of_empty().difference([1]).is_empty(), "empty minus anything is empty")


# --- difference_with ---

@test("difference_with uses a boolean comparator")
def test_difference_with_bool():
    people = Q([{'id': 1, 'n': 'a'}, {'id': 2, 'n': 'b'}])
    result = people.difference_with([{'id': 2}], lambda a, b: a['id'] == b['id'])
    assert_that(result.to.list() == [{'id': 1, 'n': 'a'}], f"got {result.to.list()}")


@test("difference_with uses a three-way comparator")
def test_difference_with_three_way():
    compare = lambda a, b: (a > b) - (a < b)
    result = Q({'x': 5, 'y': 6, 'z': 7}).difference_with([6], compare)
    assert_that(result.to_array() == [5, 7], f"got {result.to_array()}")


# --- concat ---

@test("concat splices sequences and appends scalars")
def test_concat():
    result = Q([1]).concat(2, [3, 4], Q([5]), (6,), {'a': 1})
    assert_that(result.to.list() == [1, 2, 3, 4, 5, 6, {'a': 1}], f"got {result.to.list()}")
    assert_that(result.keys() == list(range(7)), "keys span the concatenation")


@test("concat resets map keys")
def test_concat_map():
    result = Q({'a': 1}).concat(Q({'b': 2}), 'str')
    assert_that(result.to_array() == [1, 2, 'str'], f"got {result.to_array()}")


@test("concat with nothing copies")
def test_concat_nothing():
    source = Q([1, 2])
    copy = source.concat()
    assert_that(copy.equals(source) and copy is not source, "same elements, new collection")


# --- includes ---

@test("includes compares loosely")
def test_includes():
    assert_that(Q([1, 2, 3]).includes('2'), "'2' is included")
    assert_that(not Q([1, 2, 3]).includes(5), "5 is not")
    assert_that(Q([{'a': 1}]).includes({'a': 1}), "records")
    assert_that('2' in Q([1, 2]) and 7 not in Q([1, 2]), "the in operator uses includes")
    assert_that(not of_empty().includes(None), "empty includes nothing")


if __name__ == "__main__":
    suite.main("keyq set operations test")
