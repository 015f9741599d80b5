"""
contprob.events.algebra
=======================

Set algebra over interval trees.

`RangeAlgebra` implements membership, intersection, union, Lebesgue measure
and translation for the `Range` variants. The `BranchMode` it carries decides
how intersection and union distribute over a `UnionRange`:

- ``SYMMETRIC`` combines both children with the other operand.
- ``REFERENCE`` combines the *left* child twice and drops the right one, and
  measures unions with the literal recursive inclusion–exclusion formula.
  It reproduces the results of the first implementation and is kept only for
  comparison; recursion on nested unions can exceed the interpreter's limit.

Examples
--------
>>> from contprob.events.algebra import RangeAlgebra
>>> from contprob.events.range import interval
>>> two = interval(0.0, 1.0).union(interval(2.0, 4.0))
>>> RangeAlgebra("symmetric").measure(RangeAlgebra("symmetric").intersection(two, interval(0.0, 10.0)))
3.0
>>> RangeAlgebra("reference").measure(RangeAlgebra("reference").intersection(two, interval(0.0, 10.0)))
1.0
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from contprob.core.config import AlgebraConfig, coerce_enum, resolve_config
from contprob.core.names import BranchMode, Outcome
from contprob.events.range import EmptyRange, Range, SimpleRange, UnionRange


def _unsupported(event: object) -> TypeError:
    return TypeError(f"Unsupported event type: {type(event).__name__}")


def _disjoint(a: SimpleRange, b: SimpleRange) -> bool:
    return a.lo > b.hi or a.hi < b.lo


@dataclass(frozen=True)
class RangeAlgebra:
    """
    Operations on `Range` trees under a fixed `BranchMode`.

    Attributes
    ----------
    branch_mode : BranchMode or str, default="symmetric"
        Distribution rule for union nodes.
    """

    branch_mode: Union[BranchMode, str] = BranchMode.SYMMETRIC

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "branch_mode", coerce_enum("branch_mode", self.branch_mode, BranchMode)
        )

    @classmethod
    def from_config(cls, config: Optional[AlgebraConfig] = None) -> "RangeAlgebra":
        """Build the algebra selected by `config` (or the default config)."""
        return cls(resolve_config(config).branch_mode)

    @property
    def is_reference(self) -> bool:
        return self.branch_mode is BranchMode.REFERENCE

    # ---- membership ----

    def contains(self, event: Range, x: Outcome) -> bool:
        """Return True if `x` lies strictly inside one of the intervals of `event`."""
        if isinstance(event, EmptyRange):
            return False
        if isinstance(event, SimpleRange):
            return event.lo < x and x < event.hi
        if isinstance(event, UnionRange):
            return self.contains(event.left, x) or self.contains(event.right, x)
        raise _unsupported(event)

    # ---- set operations ----

    def intersection(self, event: Range, other: Range) -> Range:
        """Return the outcomes in both `event` and `other`."""
        if isinstance(event, EmptyRange):
            return EmptyRange()
        if isinstance(event, UnionRange):
            second = event.left if self.is_reference else event.right
            return UnionRange(
                self.intersection(event.left, other),
                self.intersection(second, other),
            )
        if not isinstance(event, SimpleRange):
            raise _unsupported(event)

        if isinstance(other, EmptyRange):
            return EmptyRange()
        if isinstance(other, UnionRange):
            return UnionRange(
                self.intersection(other.left, event),
                self.intersection(other.right, event),
            )
        if not isinstance(other, SimpleRange):
            raise _unsupported(other)

        if _disjoint(event, other):
            return EmptyRange()
        return SimpleRange(max(event.lo, other.lo), min(event.hi, other.hi))

    def union(self, event: Range, other: Range) -> Range:
        """Return the outcomes in `event` or `other`.

        Only two overlapping (or touching) simple intervals are merged; every
        other combination keeps the tree structure.
        """
        if isinstance(event, EmptyRange):
            return other
        if isinstance(event, UnionRange):
            second = event.left if self.is_reference else event.right
            return UnionRange(self.union(event.left, other), self.union(second, other))
        if not isinstance(event, SimpleRange):
            raise _unsupported(event)

        if isinstance(other, EmptyRange):
            return event
        if isinstance(other, UnionRange):
            return UnionRange(
                self.union(other.left, event), self.union(other.right, event)
            )
        if not isinstance(other, SimpleRange):
            raise _unsupported(other)

        if _disjoint(event, other):
            return UnionRange(event, other)
        return SimpleRange(min(event.lo, other.lo), max(event.hi, other.hi))

    # ---- measure ----

    def measure(self, event: Range) -> float:
        """
        Return the Lebesgue measure (total length) of `event`.

        For a union this is ``m(l) + m(r) - m(l & r)``. The symmetric algebra
        obtains that value by merging the sorted leaf intervals and summing
        the merged lengths, which works for trees of any depth.
        """
        if isinstance(event, EmptyRange):
            return 0.0
        if isinstance(event, SimpleRange):
            return event.hi - event.lo
        if not isinstance(event, UnionRange):
            raise _unsupported(event)

        if self.is_reference:
            return (
                self.measure(event.left)
                + self.measure(event.right)
                - self.measure(self.intersection(event.left, event.right))
            )
        return _merged_length(event)

    # ---- translation ----

    def translate(self, event: Range, delta: float) -> Range:
        """Return `event` moved by `delta`, keeping its tree structure."""
        if isinstance(event, EmptyRange):
            return EmptyRange()
        if isinstance(event, SimpleRange):
            return SimpleRange(event.lo + delta, event.hi + delta)
        if isinstance(event, UnionRange):
            return UnionRange(
                self.translate(event.left, delta), self.translate(event.right, delta)
            )
        raise _unsupported(event)

    def scale(self, event: Range, factor: float) -> Range:
        """Return `event` with both bounds of every leaf multiplied by a positive `factor`."""
        if factor <= 0.0:
            raise ValueError(f"scale factor must be positive, got {factor}")
        if isinstance(event, EmptyRange):
            return EmptyRange()
        if isinstance(event, SimpleRange):
            return SimpleRange(event.lo * factor, event.hi * factor)
        if isinstance(event, UnionRange):
            return UnionRange(
                self.scale(event.left, factor), self.scale(event.right, factor)
            )
        raise _unsupported(event)


def _merged_length(event: Range) -> float:
    spans = sorted((leaf.lo, leaf.hi) for leaf in event.intervals() if leaf.hi > leaf.lo)
    if not spans:
        return 0.0

    total = 0.0
    cur_lo, cur_hi = spans[0]
    for lo, hi in spans[1:]:
        if lo <= cur_hi:
            cur_hi = max(cur_hi, hi)
            continue
        total += cur_hi - cur_lo
        cur_lo, cur_hi = lo, hi
    return total + (cur_hi - cur_lo)
