# roarkit

`roarkit` provides the containers that a Roaring bitmap is built from. Each container
holds a set of 16-bit values (0 to 65535) in whichever form suits its size, together
with the merge algorithms and key-splitting helpers that go with them.

## Modules

- `roarkit.array_store` — `ArrayStore` keeps a sorted list of values without duplicates
  and suits sparse sets. `ArrayStore.from_sorted` checks its input and raises
  `ArrayStoreError` (with an `index` and an `ErrorKind`, `DUPLICATE` or `OUT_OF_ORDER`)
  when the values are not strictly increasing. It supports insertion and removal of
  single values and inclusive ranges, `rank`, `select`, `min`, `max`, subset and
  disjointness checks, and `union`, `intersection`, `difference` and
  `symmetric_difference`.
- `roarkit.bitmap_store` — `BitmapStore` keeps 1024 words of 64 bits each and suits
  dense sets. `BitmapStore.full()` holds every value; `BitmapStore.from_words` builds a
  store from its words and raises `CardinalityError` when the stated length does not
  match the number of set bits. `remove_smallest` and `remove_biggest` drop the lowest
  or highest values, and the `*_update` methods combine it in place with another bitmap
  store or with a sequence of values.
- `roarkit.store` — `Store` wraps either kind of container, picks the algorithm that
  fits each pair of operands, and supports `|`, `&`, `-` and `^`, both as new objects
  and in place. `to_bitmap` returns a bitmap-backed copy; `to_list` returns the values.
- `roarkit.scalar` — merge algorithms over sorted sequences (`union`, `intersection`,
  `difference`, `symmetric_difference`). Each passes its result to a visitor:
  `VecWriter` collects the values in `values`, `CardinalityCounter` only counts them in
  `count`.
- `roarkit.util` — `split` and `join` divide a 32-bit value into a 16-bit container key
  and a 16-bit index and put it back together; `split64` and `join64` do the same for
  64-bit values and 32-bit halves. `Bound`, `convert_range_to_inclusive` and
  `range_bounds` turn a `range`, a `slice` or a pair of bounds into an inclusive
  `(first, last)` pair, or `None` when the range is empty. `NonSortedIntegers` is an
  error type, carrying `valid_until`, for input that should have been strictly
  increasing; nothing in the package raises it itself.

## Installation

```
pip install roarkit
```

## Example

```python
from roarkit.array_store import ArrayStore
from roarkit.store import Store

sparse = Store(ArrayStore.from_sorted([1, 2, 8, 9]))
sparse.insert_range(4, 5)            # returns 2, the number of new values
print(sparse.to_list())              # [1, 2, 4, 5, 8, 9]

dense = Store.full()
print(dense.is_full(), len(dense))   # True 65536

print((dense & sparse).to_list())    # [1, 2, 4, 5, 8, 9]
print(len(dense - sparse))           # 65530
print(sparse.rank(5), sparse.select(0))  # 4 1
```

Splitting keys and reading ranges:

```python
from roarkit.util import Bound, convert_range_to_inclusive, join, range_bounds, split

split(0x0001_0002)                   # (1, 2)
join(1, 2)                           # 65538
convert_range_to_inclusive(Bound.excluded(10), Bound.excluded(20), 0xFFFF_FFFF)  # (11, 19)
convert_range_to_inclusive(*range_bounds(range(1, 6)))                           # (1, 5)
```

## What it does not do

`roarkit` stops at the level of single containers. It has no bitmap class that maps
container keys to stores across the whole 32-bit or 64-bit range, no combined
operations over many bitmaps, and no reading or writing of a serialized format. The
containers live in memory only.

## Running the tests

```
pip install -e ".[test]"
pytest
```