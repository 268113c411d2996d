"""A fixed-size bitset container holding 16-bit values in 1024 64-bit words."""

from __future__ import annotations

import operator
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

BITMAP_LENGTH = 1024
WORD_BITS = 64
_WORD_MASK = (1 << WORD_BITS) - 1
_INDEX_MAX = 0xFFFF
_CAPACITY = BITMAP_LENGTH * WORD_BITS


def key(index: int) -> int:
    """Return the word holding ``index``."""
    return index // WORD_BITS


def bit(index: int) -> int:
    """Return the position of ``index`` inside its word."""
    return index % WORD_BITS


def _check_index(index: int) -> None:
    if not 0 <= index <= _INDEX_MAX:
        raise ValueError(f"index {index} is outside 0..={_INDEX_MAX}")


def _low_mask(count: int) -> int:
    """A word with its ``count`` lowest bits set."""
    return (1 << count) - 1


def _lowest_bit(word: int) -> int:
    return (word & -word).bit_length() - 1


def _drop_lowest(word: int, n: int) -> int:
    for _ in range(n):
        word &= word - 1
    return word


def _drop_highest(word: int, n: int) -> int:
    for _ in range(n):
        word &= ~(1 << (word.bit_length() - 1))
    return word


def _range_masks(start: int, end: int) -> List[Tuple[int, int]]:
    """The words covered by ``start..=end``, each with the mask of bits in range."""
    _check_index(start)
    _check_index(end)
    start_key, end_key = key(start), key(end)
    start_mask = _WORD_MASK & ~_low_mask(bit(start))
    end_mask = _low_mask(bit(end) + 1)
    if start_key == end_key:
        return [(start_key, start_mask & end_mask)]
    middle = [(i, _WORD_MASK) for i in range(start_key + 1, end_key)]
    return [(start_key, start_mask), *middle, (end_key, end_mask)]


class CardinalityError(ValueError):
    """Raised when a stated length does not match the number of set bits."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected cardinality was {expected} but was {actual}")


class BitmapStore:
    """A dense set of values in ``0..=65535`` kept as a bitset."""

    __slots__ = ("_words", "_len")

    def __init__(self) -> None:
        self._words: List[int] = [0] * BITMAP_LENGTH
        self._len = 0

    @classmethod
    def full(cls) -> "BitmapStore":
        store = cls()
        store._words = [_WORD_MASK] * BITMAP_LENGTH
        store._len = _CAPACITY
        return store

    @classmethod
    def from_words(cls, length: int, words: Iterable[int]) -> "BitmapStore":
        """Build a store from its words, checking that ``length`` matches them."""
        word_list = list(words)
        if len(word_list) != BITMAP_LENGTH:
            raise ValueError(f"expected {BITMAP_LENGTH} words, got {len(word_list)}")
        for word in word_list:
            if not 0 <= word <= _WORD_MASK:
                raise ValueError(f"word {word} does not fit in 64 bits")
        actual = sum(word.bit_count() for word in word_list)
        if length != actual:
            raise CardinalityError(length, actual)
        store = cls()
        store._words = word_list
        store._len = length
        return store

    @property
    def words(self) -> Tuple[int, ...]:
        """The 1024 words of the bitset, lowest values first."""
        return tuple(self._words)

    def _set(self, index: int, present: bool) -> bool:
        """Set or clear one bit; return whether it changed."""
        _check_index(index)
        k, flag = key(index), 1 << bit(index)
        old = self._words[k]
        new = old | flag if present else old & ~flag
        if new == old:
            return False
        self._words[k] = new
        self._len += 1 if present else -1
        return True

    def insert(self, index: int) -> bool:
        return self._set(index, True)

    def remove(self, index: int) -> bool:
        return self._set(index, False)

    def insert_range(self, start: int, end: int) -> int:
        """Insert every value in ``start..=end``; return how many were new."""
        if start > end:
            return 0
        existed = 0
        for k, mask in _range_masks(start, end):
            existed += (self._words[k] & mask).bit_count()
            self._words[k] |= mask
        inserted = end - start + 1 - existed
        self._len += inserted
        return inserted

    def remove_range(self, start: int, end: int) -> int:
        """Remove every value in ``start..=end``; return how many were present."""
        if start > end:
            return 0
        removed = 0
        for k, mask in _range_masks(start, end):
            removed += (self._words[k] & mask).bit_count()
            self._words[k] &= ~mask
        self._len -= removed
        return removed

    def push(self, index: int) -> bool:
        """Insert ``index`` only if it is greater than the current maximum."""
        _check_index(index)
        current = self.max()
        if current is None or current < index:
            self.insert(index)
            return True
        return False

    def contains(self, index: int) -> bool:
        _check_index(index)
        return bool(self._words[key(index)] >> bit(index) & 1)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and 0 <= index <= _INDEX_MAX and self.contains(index)

    def contains_range(self, start: int, end: int) -> bool:
        """Return whether every value in ``start..=end`` is present."""
        if start > end:
            raise ValueError(f"range start {start} is after its end {end}")
        masks = _range_masks(start, end)
        if self._len < end - start + 1:
            return False
        return all(self._words[k] & mask == mask for k, mask in masks)

    def is_disjoint(self, other: "BitmapStore") -> bool:
        return all(a & b == 0 for a, b in zip(self._words, other._words))

    def is_subset(self, other: "BitmapStore") -> bool:
        return all(a & b == a for a, b in zip(self._words, other._words))

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def min(self) -> Optional[int]:
        return next(
            (i * WORD_BITS + _lowest_bit(w) for i, w in enumerate(self._words) if w),
            None,
        )

    def max(self) -> Optional[int]:
        return next(
            (
                i * WORD_BITS + w.bit_length() - 1
                for i, w in reversed(list(enumerate(self._words)))
                if w
            ),
            None,
        )

    def rank(self, index: int) -> int:
        """Return how many values are less than or equal to ``index``."""
        _check_index(index)
        k, b = key(index), bit(index)
        below = sum(word.bit_count() for word in self._words[:k])
        return below + (self._words[k] & _low_mask(b + 1)).bit_count()

    def select(self, n: int) -> Optional[int]:
        """Return the ``n``-th smallest value, or ``None`` if there are not enough."""
        if n < 0:
            raise ValueError(f"select position must not be negative: {n}")
        for index, word in enumerate(self._words):
            count = word.bit_count()
            if n < count:
                return index * WORD_BITS + _lowest_bit(_drop_lowest(word, n))
            n -= count
        return None

    def intersection_len_bitmap(self, other: "BitmapStore") -> int:
        return sum((a & b).bit_count() for a, b in zip(self._words, other._words))

    def intersection_len_array(self, values: Iterable[int]) -> int:
        return sum(1 for value in values if self._words[key(value)] >> bit(value) & 1)

    def __iter__(self) -> Iterator[int]:
        for index, word in enumerate(self._words):
            base = index * WORD_BITS
            while word:
                yield base + _lowest_bit(word)
                word &= word - 1

    def __reversed__(self) -> Iterator[int]:
        for index in range(BITMAP_LENGTH - 1, -1, -1):
            word = self._words[index]
            base = index * WORD_BITS
            while word:
                yield base + word.bit_length() - 1
                word = _drop_highest(word, 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitmapStore):
            return NotImplemented
        return self._len == other._len and self._words == other._words

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitmapStore(len={self._len}, min={self.min()}, max={self.max()})"

    def copy(self) -> "BitmapStore":
        store = BitmapStore()
        store._words = list(self._words)
        store._len = self._len
        return store

    def clear(self) -> None:
        self._words = [0] * BITMAP_LENGTH
        self._len = 0

    def _trim(self, n: int, indices: Iterable[int], drop: Callable[[int, int], int]) -> None:
        """Clear ``n`` set bits, visiting words in the order of ``indices``."""
        if self._len < n:
            self.clear()
            return
        self._len -= n
        for index in indices:
            if n == 0:
                return
            word = self._words[index]
            count = word.bit_count()
            if n < count:
                self._words[index] = drop(word, n)
                return
            self._words[index] = 0
            n -= count

    def remove_smallest(self, n: int) -> None:
        """Remove the ``n`` smallest values, or all of them if there are fewer."""
        self._trim(n, range(BITMAP_LENGTH), _drop_lowest)

    def remove_biggest(self, n: int) -> None:
        """Remove the ``n`` largest values, or all of them if there are fewer."""
        self._trim(n, range(BITMAP_LENGTH - 1, -1, -1), _drop_highest)

    def _combine(self, other: "BitmapStore", op: Callable[[int, int], int]) -> None:
        self._words = [op(a, b) for a, b in zip(self._words, other._words)]
        self._len = sum(word.bit_count() for word in self._words)

    def union_update(self, other: "BitmapStore") -> None:
        self._combine(other, operator.or_)

    def union_update_array(self, values: Sequence[int]) -> None:
        for value in values:
            self.insert(value)

    def intersection_update(self, other: "BitmapStore") -> None:
        self._combine(other, operator.and_)

    def difference_update(self, other: "BitmapStore") -> None:
        self._combine(other, lambda a, b: a & ~b)

    def difference_update_array(self, values: Sequence[int]) -> None:
        for value in values:
            self.remove(value)

    def symmetric_difference_update(self, other: "BitmapStore") -> None:
        self._combine(other, operator.xor)

    def symmetric_difference_update_array(self, values: Sequence[int]) -> None:
        for value in values:
            self._set(value, not self.contains(value))