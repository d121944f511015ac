import suite
from collections import Counter
from dgen import from_schema
import underbar as _
from underbar import MISSING, InvalidArgument, TypeMismatch

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# test data schemas
person_schema = {
    'id': {'_gen': 'int', 'low': 1, 'high': 1000},
    'name': 'first_name',
    'age': {'_gen': 'int', 'low': 18, 'high': 65},
    'city': {'_gen': 'choice', 'from': ['ny', 'la', 'chi']}
}

# helper data
numbers = list(range(1, 11))


# each() tests

@test("each visits sequence elements in index order")
def test_each_sequence():
    seen = []
    _.each(['a', 'b', 'c'], lambda value, index, collection: seen.append((value, index, collection)))
    assert_that([(v, i) for v, i, _c in seen] == [('a', 0), ('b', 1), ('c', 2)], f"got {seen}")
    assert_that(all(c == ['a', 'b', 'c'] for _v, _i, c in seen), "collection should be passed through")


@test("each visits every key of a mapping")
def test_each_mapping():
    seen = {}
    _.each({'x': 1, 'y': 2}, lambda value, key: seen.__setitem__(key, value))
    assert_that(seen == {'x': 1, 'y': 2}, f"got {seen}")


@test("each trims arguments to the callback's arity")
def test_each_arity():
    values = []
    _.each([3, 4], values.append)
    assert_that(values == [3, 4], "single-argument builtins should get the value only")

    pairs = []
    _.each([3, 4], lambda v, i: pairs.append((v, i)))
    assert_that(pairs == [(3, 0), (4, 1)], f"two-argument callbacks get value and index: {pairs}")

    collected = []
    _.each([3], lambda *args: collected.append(args))
    assert_that(collected == [(3, 0, [3])], f"varargs callbacks get everything: {collected}")


@test("each returns nothing and accepts plain iterables")
def test_each_iterables():
    seen = []
    result = _.each((x for x in range(3)), seen.append)
    assert_that(result is None, "each should return None")
    assert_that(seen == [0, 1, 2], "generators should be traversed")

    seen.clear()
    _.each({5, 6}, seen.append)
    assert_that(sorted(seen) == [5, 6], "sets should be traversed")


@test("each rejects non-collections")
def test_each_type_mismatch():
    assert_raises(TypeMismatch, _.each, None, print)
    assert_raises(TypeMismatch, _.each, "abc", print)
    assert_raises(TypeMismatch, _.each, 42, print)


# index_of() tests

@test("index_of finds the first match")
def test_index_of():
    assert_that(_.index_of([10, 20, 30, 20], 20) == 1, "should report the first position")
    assert_that(_.index_of([10, 20], 99) == -1, "missing values give -1")
    assert_that(_.index_of([], 1) == -1, "empty sequences give -1")


@test("index_of refuses mappings")
def test_index_of_mapping():
    assert_raises(TypeMismatch, _.index_of, {'a': 1}, 1)


@test("index_of keeps booleans and numbers apart")
def test_index_of_strict():
    assert_that(_.index_of([True, 1], 1) == 1, "True is not 1")
    assert_that(_.index_of([0, False], False) == 1, "0 is not False")
    assert_that(_.index_of([1.0, 2], 1) == 0, "1.0 and 1 are still equal")


# map() tests

@test("map projects every element in order")
def test_map_basic():
    assert_that(_.map([1, 2, 3], lambda x: x * 2) == [2, 4, 6], "should double each value")
    assert_that(_.map([], lambda x: x) == [], "empty in, empty out")


@test("map passes index and collection")
def test_map_index():
    result = _.map(['a', 'b'], lambda value, index, collection: f"{value}{index}{len(collection)}")
    assert_that(result == ['a02', 'b12'], f"got {result}")


@test("map over a mapping yields one result per key")
def test_map_mapping():
    result = _.map({'a': 1, 'b': 2}, lambda value, key: f"{key}={value}")
    assert_that(sorted(result) == ['a=1', 'b=2'], f"got {result}")


@test("map works with generated records")
def test_map_records():
    people = from_schema(person_schema, seed=7).take(25).to.list()
    ages = _.map(people, lambda p: p['age'])
    assert_that(len(ages) == 25, "length should be preserved")
    assert_that(all(18 <= a <= 65 for a in ages), "ages should come from the records")


# filter() / reject() tests

@test("filter keeps elements passing the predicate")
def test_filter_basic():
    evens = _.filter(numbers, lambda x: x % 2 == 0)
    assert_that(evens == [2, 4, 6, 8, 10], "should keep even numbers")


@test("reject drops elements passing the predicate")
def test_reject_basic():
    odds = _.reject(numbers, lambda x: x % 2 == 0)
    assert_that(odds == [1, 3, 5, 7, 9], "should drop even numbers")


@test("filter and reject partition the input")
def test_filter_reject_partition():
    people = from_schema(person_schema, seed=11).take(40).to.list()
    is_ny = lambda p: p['city'] == 'ny'
    kept, dropped = _.filter(people, is_ny), _.reject(people, is_ny)
    assert_that(len(kept) + len(dropped) == len(people), "no element should be lost or duplicated")
    assert_that(Counter(p['id'] for p in kept + dropped) == Counter(p['id'] for p in people),
                "filter + reject should be a permutation of the input")


@test("filter uses truthiness")
def test_filter_truthiness():
    result = _.filter([0, 1, '', 'a', None, [], [0]], lambda x: x)
    assert_that(result == [1, 'a', [0]], f"got {result}")


@test("filter over a mapping returns matching values")
def test_filter_mapping():
    result = _.filter({'a': 1, 'b': 5, 'c': 9}, lambda value: value > 3)
    assert_that(sorted(result) == [5, 9], f"got {result}")


# uniq() tests

@test("uniq returns every distinct value once")
def test_uniq_basic():
    result = _.uniq([1, 2, 2, 3, 1])
    assert_that(len(result) == 3 and set(result) == {1, 2, 3}, f"got {result}")


@test("uniq collapses values with the same string form")
def test_uniq_coercion():
    result = _.uniq([1, '1', 1.0, True, 'true'])
    assert_that(len(result) == 2, f"1, '1' and 1.0 collapse, True and 'true' collapse: {result}")
    assert_that(result[0] == 1 and type(result[0]) is int, "the first value seen is kept")


@test("uniq handles empty and unhashable values")
def test_uniq_edge_cases():
    assert_that(_.uniq([]) == [], "empty in, empty out")
    result = _.uniq([[1], [1], [2]])
    assert_that(result == [[1], [2]], f"lists should be compared by value: {result}")


# reduce() tests

@test("reduce folds with and without an initial value")
def test_reduce_basic():
    add = lambda a, b: a + b
    assert_that(_.reduce([1, 2, 3], add, 0) == 6, "sum with seed 0")
    assert_that(_.reduce([1, 2, 3], add) == 6, "sum seeded from the first element")
    assert_that(_.reduce([1, 2, 3], add, 10) == 16, "sum with seed 10")


@test("reduce without initial does not call the iterator for the seed")
def test_reduce_seed_calls():
    calls = []
    _.reduce([5, 6, 7], lambda acc, x: calls.append((acc, x)) or acc + x)
    assert_that(calls == [(5, 6), (11, 7)], f"got {calls}")


@test("reduce accepts None as an explicit initial value")
def test_reduce_none_seed():
    result = _.reduce([1, 2], lambda acc, x: [x] if acc is None else acc + [x], None)
    assert_that(result == [1, 2], f"got {result}")


@test("reduce of an empty collection needs an initial value")
def test_reduce_empty():
    assert_raises(InvalidArgument, _.reduce, [], lambda a, b: a + b)
    assert_that(_.reduce([], lambda a, b: a + b, 0) == 0, "the seed comes back untouched")


@test("reduce over a mapping folds its values")
def test_reduce_mapping():
    assert_that(_.reduce({'a': 2, 'b': 3}, lambda a, b: a * b, 1) == 6, "product of values")


@test("reduce with a pure callback is repeatable")
def test_reduce_idempotent():
    data = [4, 8, 15, 16, 23, 42]
    runs = [_.reduce(data, lambda a, b: a + b, 0) for _i in range(3)]
    assert_that(runs == [108, 108, 108], f"got {runs}")
    assert_that(_.map(data, str) == _.map(data, str), "map should be repeatable")
    assert_that(_.filter(data, lambda x: x > 10) == _.filter(data, lambda x: x > 10), "filter should be repeatable")


# contains() tests

@test("contains reports membership")
def test_contains():
    assert_that(_.contains([1, 2, 3], 2), "2 is present")
    assert_that(not _.contains([1, 2, 3], 4), "4 is absent")
    assert_that(not _.contains([], 1), "nothing is in an empty list")
    assert_that(_.contains({'a': 'x'}, 'x'), "mapping values are searched")


@test("contains keeps booleans and numbers apart")
def test_contains_strict():
    assert_that(_.contains([0], False) is False, "0 is not False")
    assert_that(_.contains([True], 1) is False, "True is not 1")
    assert_that(_.contains([False, 0], 0) is True, "the number 0 is still found")


# every() / some() tests

@test("every checks all elements")
def test_every():
    assert_that(_.every([2, 4, 6], lambda x: x % 2 == 0), "all even")
    assert_that(not _.every([2, 3, 6], lambda x: x % 2 == 0), "3 is odd")
    assert_that(_.every([], lambda x: False), "vacuously true")
    assert_that(_.every([1, 'a', True]), "default predicate is truthiness")
    assert_that(not _.every([1, 0, 2]), "0 is falsy")


@test("every stops consulting the predicate after a failure")
def test_every_short_circuit():
    calls = []
    _.every([1, 2, 3, 4], lambda x: calls.append(x) or x < 2)
    assert_that(calls == [1, 2], f"got {calls}")


@test("some checks any element")
def test_some():
    assert_that(_.some([1, 3, 4], lambda x: x % 2 == 0), "4 is even")
    assert_that(not _.some([1, 3, 5], lambda x: x % 2 == 0), "none is even")
    assert_that(not _.some([]), "empty has no truthy element")
    assert_that(_.some([0, None, 'x']), "default predicate is truthiness")


@test("every and some agree through negation")
def test_every_some_duality():
    people = from_schema(person_schema, seed=3).take(30).to.list()
    for limit in (20, 40, 70):
        p = lambda person: person['age'] < limit
        assert_that(_.every(people, p) == (not _.some(people, lambda person: not p(person))),
                    f"duality should hold for limit {limit}")


# first() / last() tests

@test("first and last pick from either end")
def test_first_last():
    data = [1, 2, 3, 4]
    assert_that(_.first(data) == 1 and _.last(data) == 4, "single elements")
    assert_that(_.first(data, 2) == [1, 2], "first two")
    assert_that(_.last(data, 2) == [3, 4], "last two")
    assert_that(_.last(data, 0) == [], "last zero is empty")
    assert_that(_.last(data, 10) == data and _.last(data, 10) is not data, "oversized n copies everything")
    assert_that(_.first([]) is None and _.last([]) is None, "empty sequences give None")


@test("first and last validate their arguments")
def test_first_last_errors():
    assert_raises(InvalidArgument, _.first, [1], -1)
    assert_raises(TypeMismatch, _.last, None)


# pluck() / invoke() tests

class _Point:
    def __init__(self, x, y):
        self.x, self.y = x, y

    def scaled(self, factor):
        return (self.x * factor, self.y * factor)


@test("pluck reads fields from dicts and objects")
def test_pluck():
    records = [{'name': 'ada'}, {'name': 'grace'}, {}]
    assert_that(_.pluck(records, 'name') == ['ada', 'grace', MISSING], "absent keys give MISSING")
    assert_that(_.pluck([_Point(1, 2), _Point(3, 4)], 'y') == [2, 4], "attributes are read")


@test("invoke calls a function or a named method")
def test_invoke():
    assert_that(_.invoke(['a', 'b'], 'upper') == ['A', 'B'], "method names are resolved")
    points = [_Point(1, 2), _Point(3, 4)]
    assert_that(_.invoke(points, 'scaled', 2) == [(2, 4), (6, 8)], "extra arguments are forwarded")
    assert_that(_.invoke([1, 2], lambda value, n: value + n, 10) == [11, 12], "callables get value first")
    assert_raises(TypeMismatch, _.invoke, [1], 5)


if __name__ == "__main__":
    suite.main(title="underbar traversal engine tests")
