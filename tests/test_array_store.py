import pytest
from hypothesis import given
from hypothesis import strategies as st

from roarkit.array_store import ArrayStore, ArrayStoreError, ErrorKind
from roarkit.bitmap_store import BitmapStore

values_strategy = st.sets(st.integers(min_value=0, max_value=0xFFFF), max_size=200)


def make(values):
    return ArrayStore.from_sorted(sorted(values))


@pytest.mark.parametrize(
    "values, kind, message",
    [
        ([1, 2, 2], ErrorKind.DUPLICATE, "Duplicate element found at index: 2"),
        ([1, 5, 3], ErrorKind.OUT_OF_ORDER, "An element was out of order at index: 2"),
    ],
)
def test_from_sorted_rejects_bad_input(values, kind, message):
    with pytest.raises(ArrayStoreError) as info:
        ArrayStore.from_sorted(values)
    assert info.value.kind is kind
    assert info.value.index == 2
    assert str(info.value) == message


def test_from_sorted_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        ArrayStore.from_sorted([1, 70000])


def test_insert_and_remove():
    store = ArrayStore()
    assert [store.insert(5), store.insert(5), store.insert(1)] == [True, False, True]
    assert list(store) == [1, 5]
    assert [store.remove(5), store.remove(5)] == [True, False]
    assert list(store) == [1]


@pytest.mark.parametrize(
    "start, end, added, expected",
    [
        (4, 5, 2, [1, 2, 4, 5, 8, 9]),
        (2, 5, 3, [1, 2, 3, 4, 5, 8, 9]),
        (4, 8, 4, [1, 2, 4, 5, 6, 7, 8, 9]),
        (1, 9, 5, list(range(1, 10))),
        (6, 1, 0, [1, 2, 8, 9]),
    ],
)
def test_insert_range_cases(start, end, added, expected):
    store = make([1, 2, 8, 9])
    assert store.insert_range(start, end) == added
    assert list(store) == expected


@pytest.mark.parametrize("start, end, removed, expected", [(2, 8, 2, [1, 9]), (3, 1, 0, [1, 2, 8, 9])])
def test_remove_range_counts_removed(start, end, removed, expected):
    store = make([1, 2, 8, 9])
    assert store.remove_range(start, end) == removed
    assert list(store) == expected


def test_push_only_appends_larger():
    store = ArrayStore()
    assert [store.push(v) for v in (1, 3, 3, 5)] == [True, True, False, True]
    assert list(store) == [1, 3, 5]


@pytest.mark.parametrize(
    "method, n, expected",
    [("remove_smallest", 3, [500]), ("remove_biggest", 2, [1, 2])],
)
def test_remove_smallest_and_biggest(method, n, expected):
    store = make([1, 2, 130, 500])
    getattr(store, method)(n)
    assert list(store) == expected


def test_remove_biggest_too_many_raises():
    with pytest.raises(ValueError):
        make([1]).remove_biggest(2)


@pytest.mark.parametrize(
    "values, start, end, expected",
    [
        ([], 0, 0, False),
        ([], 0, 1, False),
        ([], 1, 0xFFFF, False),
        ([0, 1, 2, 3, 4, 5, 100], 0, 0, True),
        ([0, 1, 2, 3, 4, 5, 100], 0, 5, True),
        ([0, 1, 2, 3, 4, 5, 100], 0, 6, False),
        ([0, 1, 2, 3, 4, 5, 100], 100, 100, True),
    ],
)
def test_contains_range(values, start, end, expected):
    assert make(values).contains_range(start, end) is expected


def test_contains_range_rejects_reversed():
    with pytest.raises(ValueError):
        make([1, 2]).contains_range(5, 1)


def test_min_max_rank_select():
    store = make([0, 10, 100])
    assert (store.min(), store.max()) == (0, 100)
    assert store.rank(10) == 2
    assert store.select(1) == 10
    assert store.select(3) is None
    assert (ArrayStore().min(), ArrayStore().max()) == (None, None)


def test_retain_keeps_matching():
    store = make([1, 2, 3, 4])
    store.retain(lambda value: value in (2, 4))
    assert list(store) == [2, 4]


def test_copy_is_independent():
    store = make([1, 2])
    other = store.copy()
    other.insert(3)
    assert list(store) == [1, 2]
    assert store != other


def test_reversed():
    assert list(reversed(make([1, 7, 9]))) == [9, 7, 1]


@given(values_strategy)
def test_bitmap_round_trip(values):
    store = make(values)
    bitmap = store.to_bitmap_store()
    assert len(bitmap) == len(values)
    assert ArrayStore.from_bitmap_store(bitmap) == store


@given(values_strategy, values_strategy)
def test_set_operations_match_sets(a, b):
    left, right = make(a), make(b)
    assert list(left.union(right)) == sorted(a | b)
    assert list(left.intersection(right)) == sorted(a & b)
    assert list(left.difference(right)) == sorted(a - b)
    assert list(left.symmetric_difference(right)) == sorted(a ^ b)
    assert left.intersection_len(right) == len(a & b)
    assert left.is_disjoint(right) == a.isdisjoint(b)
    assert left.is_subset(right) == a.issubset(b)


@given(values_strategy, values_strategy)
def test_in_place_updates_agree_with_operations(a, b):
    left, right = make(a), make(b)
    bitmap = right.to_bitmap_store()
    cases = [
        ("intersection_update", "intersection_update_bitmap", left.intersection(right)),
        ("difference_update", "difference_update_bitmap", left.difference(right)),
    ]
    for array_method, bitmap_method, expected in cases:
        with_array = left.copy()
        getattr(with_array, array_method)(right)
        with_bitmap = left.copy()
        getattr(with_bitmap, bitmap_method)(bitmap)
        assert with_array == expected == with_bitmap


@given(values_strategy, st.integers(0, 0xFFFF))
def test_rank_select_invariant(values, probe):
    store = make(values)
    rank = store.rank(probe)
    assert rank == sum(1 for value in values if value <= probe)
    if probe in values:
        assert store.select(rank - 1) == probe


def test_bitmap_store_type_from_to_bitmap():
    bitmap = make([3, 64, 65535]).to_bitmap_store()
    assert isinstance(bitmap, BitmapStore)
    assert list(bitmap) == [3, 64, 65535]