"""
contprob.events.range
=====================

Events over the real line, represented as a tree of open intervals.

- `EmptyRange`: no outcomes.
- `SimpleRange(lo, hi)`: the open interval ``(lo, hi)``.
- `UnionRange(left, right)`: outcomes of either child.

Trees are immutable: every operation builds a new tree. Use `interval()` (or
`Range.new`) to build intervals; it turns reversed bounds into `EmptyRange`.

Examples
--------
>>> from contprob.events.range import interval, EmptyRange
>>> interval(0.0, 1.0)
SimpleRange(lo=0.0, hi=1.0)
>>> interval(1.0, 0.0)
EmptyRange()
>>> a = interval(0.0, 1.0).union(interval(2.0, 3.0))
>>> a.contains_outcome(2.5), a.contains_outcome(1.5), a.contains_outcome(2.0)
(True, False, False)
>>> a.lebesgue_measure()
2.0
>>> print(a.intersection(interval(0.5, 2.5)))
(0.5, 1.0) ∪ (2.0, 2.5)
"""

from __future__ import annotations
import math
from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

from contprob.core.config import DEFAULT_CONFIG
from contprob.core.errors import InvalidArgument
from contprob.core.names import Outcome
from contprob.core.traits import Event

if TYPE_CHECKING:
    from contprob.events.algebra import RangeAlgebra


def _check_bounds(lo: float, hi: float) -> None:
    if math.isnan(lo) or math.isnan(hi):
        raise InvalidArgument(f"interval bounds must not be NaN, got lo={lo}, hi={hi}")


def _resolve(algebra: Optional["RangeAlgebra"]) -> "RangeAlgebra":
    if algebra is not None:
        return algebra
    from contprob.events.algebra import RangeAlgebra

    return RangeAlgebra.from_config(DEFAULT_CONFIG)


class Range(Event):
    """
    Base class of the interval-set variants.

    Every set operation accepts an optional `RangeAlgebra`; without one, the
    algebra configured by `DEFAULT_CONFIG` is used.
    """

    @staticmethod
    def new(lo: float, hi: float) -> "Range":
        """Build the open interval ``(lo, hi)``, or `EmptyRange` when ``lo > hi``."""
        return interval(lo, hi)

    def contains_outcome(
        self, x: Outcome, algebra: Optional["RangeAlgebra"] = None
    ) -> bool:
        return _resolve(algebra).contains(self, x)

    def intersection(
        self, other: "Range", algebra: Optional["RangeAlgebra"] = None
    ) -> "Range":
        return _resolve(algebra).intersection(self, other)

    def union(self, other: "Range", algebra: Optional["RangeAlgebra"] = None) -> "Range":
        return _resolve(algebra).union(self, other)

    def lebesgue_measure(self, algebra: Optional["RangeAlgebra"] = None) -> float:
        return _resolve(algebra).measure(self)

    def translate(self, delta: float) -> "Range":
        return _resolve(None).translate(self, delta)

    def is_unmeasurable(self) -> bool:
        """True for a zero-length simple interval."""
        return False

    def intervals(self) -> Iterator["SimpleRange"]:
        """Yield the simple intervals at the leaves of the tree, left to right."""
        stack: list[Range] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, SimpleRange):
                yield node
            elif isinstance(node, UnionRange):
                stack.append(node.right)
                stack.append(node.left)

    def __and__(self, other: "Range") -> "Range":
        return self.intersection(other)

    def __or__(self, other: "Range") -> "Range":
        return self.union(other)

    @abstractmethod
    def __str__(self) -> str:
        """Set-builder form used in reports and log lines."""


@dataclass(frozen=True)
class EmptyRange(Range):
    """The event that contains no outcomes."""

    def __str__(self) -> str:
        return "∅"


@dataclass(frozen=True)
class SimpleRange(Range):
    """The open interval ``(lo, hi)`` with ``lo <= hi``."""

    lo: float
    hi: float

    def __post_init__(self) -> None:
        _check_bounds(self.lo, self.hi)
        if self.lo > self.hi:
            raise InvalidArgument(
                f"SimpleRange requires lo <= hi, got lo={self.lo}, hi={self.hi}; "
                "use interval() to get an empty range instead"
            )

    def is_unmeasurable(self) -> bool:
        return self.lo == self.hi

    def __str__(self) -> str:
        return f"({self.lo}, {self.hi})"


@dataclass(frozen=True)
class UnionRange(Range):
    """The union of two sub-events. Not flattened or deduplicated."""

    left: Range
    right: Range

    def __str__(self) -> str:
        return f"{self.left} ∪ {self.right}"


def interval(lo: float, hi: float) -> Range:
    """
    Build the open interval ``(lo, hi)``.

    Reversed bounds yield `EmptyRange`; equal bounds yield a zero-length
    interval that contains no outcomes.

    Raises
    ------
    InvalidArgument
        If either bound is NaN.
    """
    lo, hi = float(lo), float(hi)
    _check_bounds(lo, hi)
    if lo > hi:
        return EmptyRange()
    return SimpleRange(lo, hi)
