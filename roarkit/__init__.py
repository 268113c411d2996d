"""Roaring bitmap containers: array and bitmap stores, merge algorithms and range helpers."""

__version__ = "0.1.0"
__all__ = ["util", "scalar", "bitmap_store", "array_store", "store"]