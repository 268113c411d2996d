"""A container that holds its 16-bit values either as a sorted array or as a bitset."""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

from roarkit.array_store import ArrayStore
from roarkit.bitmap_store import BitmapStore

_FULL_LEN = 1 << 16

Inner = Union[ArrayStore, BitmapStore]


class Store:
    """A set of values in ``0..=65535`` backed by an array or a bitmap store."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Optional[Inner] = None) -> None:
        if inner is None:
            inner = ArrayStore()
        if not isinstance(inner, (ArrayStore, BitmapStore)):
            raise TypeError(f"a store holds an ArrayStore or a BitmapStore, not {inner!r}")
        self._inner: Inner = inner

    @classmethod
    def full(cls) -> "Store":
        return cls(BitmapStore.full())

    @property
    def inner(self) -> Inner:
        """The array or bitmap store that holds the values."""
        return self._inner

    @property
    def is_array(self) -> bool:
        return isinstance(self._inner, ArrayStore)

    @property
    def is_bitmap(self) -> bool:
        return isinstance(self._inner, BitmapStore)

    def insert(self, index: int) -> bool:
        return self._inner.insert(index)

    def insert_range(self, start: int, end: int) -> int:
        """Insert every value in ``start..=end``; return how many were new."""
        if start > end:
            return 0
        return self._inner.insert_range(start, end)

    def push(self, index: int) -> bool:
        """Insert ``index`` only if it is the new maximum; return whether it was."""
        return self._inner.push(index)

    def remove(self, index: int) -> bool:
        return self._inner.remove(index)

    def remove_range(self, start: int, end: int) -> int:
        """Remove every value in ``start..=end``; return how many were present."""
        if start > end:
            return 0
        return self._inner.remove_range(start, end)

    def remove_smallest(self, n: int) -> None:
        self._inner.remove_smallest(n)

    def remove_biggest(self, n: int) -> None:
        self._inner.remove_biggest(n)

    def contains(self, index: int) -> bool:
        return self._inner.contains(index)

    def __contains__(self, index: object) -> bool:
        return index in self._inner

    def contains_range(self, start: int, end: int) -> bool:
        return self._inner.contains_range(start, end)

    def is_full(self) -> bool:
        return len(self) == _FULL_LEN

    def is_disjoint(self, other: "Store") -> bool:
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            return mine.is_disjoint(theirs)
        if isinstance(mine, BitmapStore) and isinstance(theirs, BitmapStore):
            return mine.is_disjoint(theirs)
        array, bitmap = (mine, theirs) if isinstance(mine, ArrayStore) else (theirs, mine)
        return not any(bitmap.contains(value) for value in array)

    def is_subset(self, other: "Store") -> bool:
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            return mine.is_subset(theirs)
        if isinstance(mine, BitmapStore) and isinstance(theirs, BitmapStore):
            return mine.is_subset(theirs)
        if isinstance(mine, ArrayStore):
            return all(theirs.contains(value) for value in mine)
        return False

    def intersection_len(self, other: "Store") -> int:
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            return mine.intersection_len(theirs)
        if isinstance(mine, BitmapStore) and isinstance(theirs, BitmapStore):
            return mine.intersection_len_bitmap(theirs)
        if isinstance(mine, BitmapStore):
            return mine.intersection_len_array(theirs)
        return theirs.intersection_len_array(mine)

    def __len__(self) -> int:
        return len(self._inner)

    def is_empty(self) -> bool:
        return self._inner.is_empty()

    def min(self) -> Optional[int]:
        return self._inner.min()

    def max(self) -> Optional[int]:
        return self._inner.max()

    def rank(self, index: int) -> int:
        return self._inner.rank(index)

    def select(self, n: int) -> Optional[int]:
        return self._inner.select(n)

    def to_bitmap(self) -> "Store":
        """Return a bitmap-backed copy of this store."""
        if isinstance(self._inner, ArrayStore):
            return Store(self._inner.to_bitmap_store())
        return Store(self._inner.copy())

    def to_list(self) -> List[int]:
        return list(self._inner)

    def copy(self) -> "Store":
        return Store(self._inner.copy())

    def __iter__(self) -> Iterator[int]:
        return iter(self._inner)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._inner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            return mine == theirs
        if isinstance(mine, BitmapStore) and isinstance(theirs, BitmapStore):
            return len(mine) == len(theirs) and all(a == b for a, b in zip(mine, theirs))
        return False

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Store({self._inner!r})"

    def __or__(self, other: object) -> "Store":
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            return Store(mine.union(theirs))
        if isinstance(mine, ArrayStore):
            result = other.copy()
            result |= self
            return result
        result = self.copy()
        result |= other
        return result

    def __ior__(self, other: object) -> "Store":
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            self._inner = mine.union(theirs)
        elif isinstance(mine, BitmapStore) and isinstance(theirs, ArrayStore):
            mine.union_update_array(list(theirs))
        elif isinstance(mine, BitmapStore):
            mine.union_update(theirs)
        else:
            bitmap = theirs.copy()
            bitmap.union_update_array(list(mine))
            self._inner = bitmap
        return self

    def __and__(self, other: object) -> "Store":
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            return Store(mine.intersection(theirs))
        if isinstance(mine, BitmapStore) and isinstance(theirs, ArrayStore):
            result = other.copy()
            result &= self
            return result
        result = self.copy()
        result &= other
        return result

    def __iand__(self, other: object) -> "Store":
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            mine.intersection_update(theirs)
        elif isinstance(mine, BitmapStore) and isinstance(theirs, BitmapStore):
            mine.intersection_update(theirs)
        elif isinstance(mine, ArrayStore):
            mine.intersection_update_bitmap(theirs)
        else:
            array = theirs.copy()
            array.intersection_update_bitmap(mine)
            self._inner = array
        return self

    def __sub__(self, other: object) -> "Store":
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            return Store(mine.difference(theirs))
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: object) -> "Store":
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            mine.difference_update(theirs)
        elif isinstance(mine, BitmapStore) and isinstance(theirs, ArrayStore):
            mine.difference_update_array(list(theirs))
        elif isinstance(mine, BitmapStore):
            mine.difference_update(theirs)
        else:
            mine.difference_update_bitmap(theirs)
        return self

    def __xor__(self, other: object) -> "Store":
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            return Store(mine.symmetric_difference(theirs))
        if isinstance(mine, ArrayStore):
            result = other.copy()
            result ^= self
            return result
        result = self.copy()
        result ^= other
        return result

    def __ixor__(self, other: object) -> "Store":
        if not isinstance(other, Store):
            return NotImplemented
        mine, theirs = self._inner, other._inner
        if isinstance(mine, ArrayStore) and isinstance(theirs, ArrayStore):
            self._inner = mine.symmetric_difference(theirs)
        elif isinstance(mine, BitmapStore) and isinstance(theirs, ArrayStore):
            mine.symmetric_difference_update_array(list(theirs))
        elif isinstance(mine, BitmapStore):
            mine.symmetric_difference_update(theirs)
        else:
            bitmap = theirs.copy()
            bitmap.symmetric_difference_update_array(list(mine))
            self._inner = bitmap
        return self