"""Key splitting helpers, range-bound handling and the unsorted-input error."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


class NonSortedIntegers(ValueError):
    """Raised when values that must be strictly increasing are not."""

    def __init__(self, valid_until: int) -> None:
        self.valid_until = valid_until
        super().__init__(f"integers are ordered up to the {valid_until}th element")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonSortedIntegers):
            return NotImplemented
        return self.valid_until == other.valid_until

    def __hash__(self) -> int:
        return hash(self.valid_until)


class BoundKind(enum.Enum):
    """How one end of a range is delimited."""

    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class Bound:
    """One end of a range: an included or excluded value, or no limit."""

    kind: BoundKind
    value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is BoundKind.UNBOUNDED:
            if self.value is not None:
                raise ValueError("an unbounded end carries no value")
            return
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"bound value must be an int, not {self.value!r}")
        if self.value < 0:
            raise ValueError(f"bound value must not be negative: {self.value}")

    @classmethod
    def included(cls, value: int) -> "Bound":
        return cls(BoundKind.INCLUDED, value)

    @classmethod
    def excluded(cls, value: int) -> "Bound":
        return cls(BoundKind.EXCLUDED, value)

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(BoundKind.UNBOUNDED)


def split(value: int) -> Tuple[int, int]:
    """Split a 32-bit value into its container key and in-container index."""
    return (value >> 16) & U16_MAX, value & U16_MAX


def join(high: int, low: int) -> int:
    """Rebuild a 32-bit value from its container key and index."""
    return ((high & U16_MAX) << 16) + (low & U16_MAX)


def split64(value: int) -> Tuple[int, int]:
    """Split a 64-bit value into its high and low 32-bit halves."""
    return (value >> 32) & U32_MAX, value & U32_MAX


def join64(high: int, low: int) -> int:
    """Rebuild a 64-bit value from its high and low 32-bit halves."""
    return ((high & U32_MAX) << 32) | (low & U32_MAX)


def convert_range_to_inclusive(
    start: Bound, end: Bound, max_value: int = U32_MAX
) -> Optional[Tuple[int, int]]:
    """Turn a pair of bounds into an inclusive ``(first, last)`` pair.

    Returns ``None`` when the range holds no value. An excluded end may be
    ``max_value + 1`` so that Python's half-open ranges reach the top value.
    """
    if start.kind is BoundKind.UNBOUNDED:
        first = 0
    else:
        if start.value > max_value:
            raise ValueError(f"range start {start.value} exceeds {max_value}")
        if start.kind is BoundKind.INCLUDED:
            first = start.value
        elif start.value == max_value:
            return None
        else:
            first = start.value + 1

    if end.kind is BoundKind.UNBOUNDED:
        last = max_value
    elif end.kind is BoundKind.INCLUDED:
        if end.value > max_value:
            raise ValueError(f"range end {end.value} exceeds {max_value}")
        last = end.value
    else:
        if end.value > max_value + 1:
            raise ValueError(f"range end {end.value} exceeds {max_value + 1}")
        if end.value == 0:
            return None
        last = end.value - 1

    if last < first:
        return None
    return first, last


RangeLike = Union[range, slice, Tuple[Bound, Bound]]


def range_bounds(values: RangeLike) -> Tuple[Bound, Bound]:
    """Describe a ``range``, a ``slice`` or a pair of bounds as two bounds."""
    if isinstance(values, range):
        if values.step != 1:
            raise ValueError("only ranges with a step of 1 are supported")
        return Bound.included(values.start), Bound.excluded(values.stop)
    if isinstance(values, slice):
        if values.step not in (None, 1):
            raise ValueError("only slices with a step of 1 are supported")
        start = Bound.unbounded() if values.start is None else Bound.included(values.start)
        stop = Bound.unbounded() if values.stop is None else Bound.excluded(values.stop)
        return start, stop
    if isinstance(values, tuple) and len(values) == 2 and all(
        isinstance(bound, Bound) for bound in values
    ):
        return values[0], values[1]
    raise TypeError(f"cannot read range bounds from {values!r}")