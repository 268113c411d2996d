"""A sorted-array container holding sparse sets of 16-bit values."""

from __future__ import annotations

import enum
from bisect import bisect_left, bisect_right
from typing import Callable, Iterable, Iterator, List, Optional

from roarkit import scalar
from roarkit.bitmap_store import BITMAP_LENGTH, BitmapStore, bit, key

_INDEX_MAX = 0xFFFF


def _check_index(index: int) -> None:
    if not 0 <= index <= _INDEX_MAX:
        raise ValueError(f"index {index} is outside 0..={_INDEX_MAX}")


class ErrorKind(enum.Enum):
    """Why a sequence cannot become an array store."""

    DUPLICATE = "duplicate"
    OUT_OF_ORDER = "out_of_order"


class ArrayStoreError(ValueError):
    """Raised when values handed to an array store are not strictly increasing."""

    def __init__(self, index: int, kind: ErrorKind) -> None:
        self.index = index
        self.kind = kind
        if kind is ErrorKind.DUPLICATE:
            message = f"Duplicate element found at index: {index}"
        else:
            message = f"An element was out of order at index: {index}"
        super().__init__(message)


class ArrayStore:
    """A set of values in ``0..=65535`` kept as a sorted list without duplicates."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: List[int] = []

    @classmethod
    def from_sorted(cls, values: Iterable[int]) -> "ArrayStore":
        """Build a store from strictly increasing values, checking that they are."""
        value_list = list(values)
        for index, value in enumerate(value_list):
            _check_index(value)
            if index:
                previous = value_list[index - 1]
                if value < previous:
                    raise ArrayStoreError(index, ErrorKind.OUT_OF_ORDER)
                if value == previous:
                    raise ArrayStoreError(index, ErrorKind.DUPLICATE)
        store = cls()
        store._values = value_list
        return store

    @classmethod
    def from_bitmap_store(cls, store: BitmapStore) -> "ArrayStore":
        result = cls()
        result._values = list(store)
        return result

    @classmethod
    def _from_trusted(cls, values: List[int]) -> "ArrayStore":
        store = cls()
        store._values = values
        return store

    @property
    def values(self) -> tuple:
        """The stored values in increasing order."""
        return tuple(self._values)

    def insert(self, index: int) -> bool:
        _check_index(index)
        pos = bisect_left(self._values, index)
        if pos < len(self._values) and self._values[pos] == index:
            return False
        self._values.insert(pos, index)
        return True

    def insert_range(self, start: int, end: int) -> int:
        """Insert every value in ``start..=end``; return how many were new."""
        if start > end:
            return 0
        _check_index(start)
        _check_index(end)
        pos_start = bisect_left(self._values, start)
        pos_end = bisect_right(self._values, end, lo=pos_start)
        dropped = pos_end - pos_start
        self._values[pos_start:pos_end] = range(start, end + 1)
        return end - start + 1 - dropped

    def push(self, index: int) -> bool:
        """Append ``index`` only if it is greater than the current maximum."""
        _check_index(index)
        if not self._values or self._values[-1] < index:
            self._values.append(index)
            return True
        return False

    def remove(self, index: int) -> bool:
        _check_index(index)
        pos = bisect_left(self._values, index)
        if pos < len(self._values) and self._values[pos] == index:
            del self._values[pos]
            return True
        return False

    def remove_range(self, start: int, end: int) -> int:
        """Remove every value in ``start..=end``; return how many were present."""
        if start > end:
            return 0
        _check_index(start)
        _check_index(end)
        pos_start = bisect_left(self._values, start)
        pos_end = bisect_right(self._values, end, lo=pos_start)
        del self._values[pos_start:pos_end]
        return pos_end - pos_start

    def _check_count(self, n: int) -> None:
        if not 0 <= n <= len(self._values):
            raise ValueError(f"cannot remove {n} values from a store of {len(self._values)}")

    def remove_smallest(self, n: int) -> None:
        """Remove the ``n`` smallest values."""
        self._check_count(n)
        del self._values[:n]

    def remove_biggest(self, n: int) -> None:
        """Remove the ``n`` largest values."""
        self._check_count(n)
        del self._values[len(self._values) - n :]

    def contains(self, index: int) -> bool:
        _check_index(index)
        pos = bisect_left(self._values, index)
        return pos < len(self._values) and self._values[pos] == index

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and 0 <= index <= _INDEX_MAX and self.contains(index)

    def contains_range(self, start: int, end: int) -> bool:
        """Return whether every value in ``start..=end`` is present."""
        if start > end:
            raise ValueError(f"range start {start} is after its end {end}")
        _check_index(start)
        _check_index(end)
        count = end - start + 1
        if len(self._values) < count:
            return False
        pos = bisect_left(self._values, start)
        if pos >= len(self._values) or self._values[pos] != start:
            return False
        last = pos + count - 1
        return last < len(self._values) and self._values[last] == end

    def is_disjoint(self, other: "ArrayStore") -> bool:
        counter = scalar.CardinalityCounter()
        scalar.intersection(self._values, other._values, counter)
        return counter.count == 0

    def is_subset(self, other: "ArrayStore") -> bool:
        mine, theirs = self._values, other._values
        j = 0
        for value in mine:
            while j < len(theirs) and theirs[j] < value:
                j += 1
            if j == len(theirs) or theirs[j] != value:
                return False
            j += 1
        return True

    def intersection_len(self, other: "ArrayStore") -> int:
        counter = scalar.CardinalityCounter()
        scalar.intersection(self._values, other._values, counter)
        return counter.count

    def to_bitmap_store(self) -> BitmapStore:
        words = [0] * BITMAP_LENGTH
        for value in self._values:
            words[key(value)] |= 1 << bit(value)
        return BitmapStore.from_words(len(self._values), words)

    def __len__(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        return not self._values

    def min(self) -> Optional[int]:
        return self._values[0] if self._values else None

    def max(self) -> Optional[int]:
        return self._values[-1] if self._values else None

    def rank(self, index: int) -> int:
        """Return how many values are less than or equal to ``index``."""
        _check_index(index)
        return bisect_right(self._values, index)

    def select(self, n: int) -> Optional[int]:
        """Return the ``n``-th smallest value, or ``None`` if there are not enough."""
        if n < 0:
            raise ValueError(f"select position must not be negative: {n}")
        return self._values[n] if n < len(self._values) else None

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayStore):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArrayStore({self._values!r})"

    def copy(self) -> "ArrayStore":
        return ArrayStore._from_trusted(list(self._values))

    def retain(self, predicate: Callable[[int], bool]) -> None:
        """Keep only the values for which ``predicate`` is true."""
        self._values = [value for value in self._values if predicate(value)]

    def _apply(self, other: "ArrayStore", operation) -> "ArrayStore":
        writer = scalar.VecWriter()
        operation(self._values, other._values, writer)
        return ArrayStore._from_trusted(writer.values)

    def union(self, other: "ArrayStore") -> "ArrayStore":
        return self._apply(other, scalar.union)

    def intersection(self, other: "ArrayStore") -> "ArrayStore":
        return self._apply(other, scalar.intersection)

    def difference(self, other: "ArrayStore") -> "ArrayStore":
        return self._apply(other, scalar.difference)

    def symmetric_difference(self, other: "ArrayStore") -> "ArrayStore":
        return self._apply(other, scalar.symmetric_difference)

    def intersection_update(self, other: "ArrayStore") -> None:
        self._values = self.intersection(other)._values

    def intersection_update_bitmap(self, other: BitmapStore) -> None:
        self.retain(other.contains)

    def difference_update(self, other: "ArrayStore") -> None:
        self._values = self.difference(other)._values

    def difference_update_bitmap(self, other: BitmapStore) -> None:
        self.retain(lambda value: not other.contains(value))