"""Merge-based set operations over sorted, deduplicated integer sequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence


class Visitor(Protocol):
    """Receives the values produced by a set operation, in order."""

    def visit_scalar(self, value: int) -> None: ...

    def visit_slice(self, values: Sequence[int]) -> None: ...


@dataclass
class VecWriter:
    """Collects the produced values into a list."""

    values: List[int] = field(default_factory=list)

    def visit_scalar(self, value: int) -> None:
        self.values.append(value)

    def visit_slice(self, values: Sequence[int]) -> None:
        self.values.extend(values)


@dataclass
class CardinalityCounter:
    """Counts the produced values without storing them."""

    count: int = 0

    def visit_scalar(self, value: int) -> None:
        self.count += 1

    def visit_slice(self, values: Sequence[int]) -> None:
        self.count += len(values)


def _merge(
    lhs: Sequence[int],
    rhs: Sequence[int],
    visitor: Visitor,
    *,
    left_only: bool,
    right_only: bool,
    both: bool,
) -> None:
    """Walk both sequences in order, visiting the kinds of values that are asked for."""
    i = j = 0
    while i < len(lhs) and j < len(rhs):
        a, b = lhs[i], rhs[j]
        if a < b:
            if left_only:
                visitor.visit_scalar(a)
            i += 1
        elif a > b:
            if right_only:
                visitor.visit_scalar(b)
            j += 1
        else:
            if both:
                visitor.visit_scalar(a)
            i += 1
            j += 1
    if left_only:
        visitor.visit_slice(lhs[i:])
    if right_only:
        visitor.visit_slice(rhs[j:])


def union(lhs: Sequence[int], rhs: Sequence[int], visitor: Visitor) -> None:
    """Visit every value found in either sequence."""
    _merge(lhs, rhs, visitor, left_only=True, right_only=True, both=True)


def intersection(lhs: Sequence[int], rhs: Sequence[int], visitor: Visitor) -> None:
    """Visit every value found in both sequences."""
    _merge(lhs, rhs, visitor, left_only=False, right_only=False, both=True)


def difference(lhs: Sequence[int], rhs: Sequence[int], visitor: Visitor) -> None:
    """Visit every value of ``lhs`` that is not in ``rhs``."""
    _merge(lhs, rhs, visitor, left_only=True, right_only=False, both=False)


def symmetric_difference(lhs: Sequence[int], rhs: Sequence[int], visitor: Visitor) -> None:
    """Visit every value found in exactly one of the sequences."""
    _merge(lhs, rhs, visitor, left_only=True, right_only=True, both=False)