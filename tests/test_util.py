import pytest

from roarkit.util import (
    Bound,
    BoundKind,
    NonSortedIntegers,
    convert_range_to_inclusive,
    join,
    join64,
    range_bounds,
    split,
    split64,
)

U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


@pytest.mark.parametrize(
    "value, expected",
    [
        (0x0000_0000, (0x0000, 0x0000)),
        (0x0000_0001, (0x0000, 0x0001)),
        (0x0000_FFFE, (0x0000, 0xFFFE)),
        (0x0000_FFFF, (0x0000, 0xFFFF)),
        (0x0001_0000, (0x0001, 0x0000)),
        (0x0001_0001, (0x0001, 0x0001)),
        (0xFFFF_FFFE, (0xFFFF, 0xFFFE)),
        (0xFFFF_FFFF, (0xFFFF, 0xFFFF)),
    ],
)
def test_split_u32(value, expected):
    assert split(value) == expected
    assert join(*expected) == value


@pytest.mark.parametrize(
    "value, expected",
    [
        (0x0000_0000_0000_0000, (0x0000_0000, 0x0000_0000)),
        (0x0000_0000_0000_0001, (0x0000_0000, 0x0000_0001)),
        (0x0000_0000_FFFF_FFFE, (0x0000_0000, 0xFFFF_FFFE)),
        (0x0000_0000_FFFF_FFFF, (0x0000_0000, 0xFFFF_FFFF)),
        (0x0000_0001_0000_0000, (0x0000_0001, 0x0000_0000)),
        (0x0000_0001_0000_0001, (0x0000_0001, 0x0000_0001)),
        (0xFFFF_FFFF_FFFF_FFFE, (0xFFFF_FFFF, 0xFFFF_FFFE)),
        (0xFFFF_FFFF_FFFF_FFFF, (0xFFFF_FFFF, 0xFFFF_FFFF)),
    ],
)
def test_split_u64(value, expected):
    assert split64(value) == expected
    assert join64(*expected) == value


def _convert(values, max_value=U32_MAX):
    return convert_range_to_inclusive(*range_bounds(values), max_value)


def test_convert_range_to_inclusive_u32():
    assert _convert(range(1, 6)) == (1, 5)
    assert _convert(slice(1, None)) == (1, U32_MAX)
    assert _convert(slice(None, None)) == (0, U32_MAX)
    assert _convert((Bound.included(16), Bound.included(16))) == (16, 16)
    assert _convert((Bound.excluded(10), Bound.excluded(20))) == (11, 19)

    assert _convert(range(0, 0)) is None
    assert _convert(range(5, 5)) is None
    assert _convert(range(1, 0)) is None
    assert _convert(range(10, 5)) is None
    assert _convert((Bound.excluded(U32_MAX), Bound.included(U32_MAX))) is None
    assert _convert((Bound.excluded(0), Bound.included(0))) is None


def test_convert_range_to_inclusive_u64():
    assert _convert(range(1, 6), U64_MAX) == (1, 5)
    assert _convert(slice(1, None), U64_MAX) == (1, U64_MAX)
    assert _convert(slice(None, None), U64_MAX) == (0, U64_MAX)
    assert _convert(range(5, 5), U64_MAX) is None
    assert _convert((Bound.included(16), Bound.included(16)), U64_MAX) == (16, 16)


def test_excluded_end_may_reach_one_past_max():
    assert _convert(range(0, U32_MAX + 1)) == (0, U32_MAX)


def test_bound_above_max_is_rejected():
    with pytest.raises(ValueError):
        convert_range_to_inclusive(Bound.included(U32_MAX + 1), Bound.unbounded())
    with pytest.raises(ValueError):
        convert_range_to_inclusive(Bound.unbounded(), Bound.included(U32_MAX + 1))


def test_bound_constructors():
    assert Bound.included(3).kind is BoundKind.INCLUDED
    assert Bound.excluded(3).value == 3
    assert Bound.unbounded().value is None
    with pytest.raises(ValueError):
        Bound.included(-1)


def test_range_bounds_rejects_steps_and_garbage():
    with pytest.raises(ValueError):
        range_bounds(range(0, 10, 2))
    with pytest.raises(ValueError):
        range_bounds(slice(0, 10, 3))
    with pytest.raises(TypeError):
        range_bounds([1, 2])


def test_non_sorted_integers():
    err = NonSortedIntegers(3)
    assert err.valid_until == 3
    assert str(err) == "integers are ordered up to the 3th element"
    assert err == NonSortedIntegers(3)
    with pytest.raises(NonSortedIntegers):
        raise err