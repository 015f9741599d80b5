"""
contprob.core.traits
====================

Capabilities implemented by the concrete types of the package.

- `Event`: a set of outcomes with set algebra and a measure.
- `RandomVariable`: maps events of one type to probabilities.
- `AddConstant`: a trait (mixin) that lets any random variable build
  ``X + k`` through `add_constant()`.

The outcome type is fixed to `Outcome` (a float), so the event type is the only
generic parameter a random variable needs.

Examples
--------
>>> from contprob.core.traits import RandomVariable, AddConstant
>>> from contprob.events.range import Range, interval
>>> class Always(RandomVariable[Range], AddConstant):
...     def probability_of(self, event):
...         return 1.0
>>> y = Always().add_constant(3.0)
>>> y.probability_of(interval(0.0, 1.0))
1.0
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Generic, Optional, TypeVar, Union

from contprob.core.names import Outcome, ShiftMode

if TYPE_CHECKING:
    from contprob.stats.transform import AddedConstantVariable


E = TypeVar("E", bound="Event")


class Event(ABC):
    """A set of outcomes closed under intersection and union."""

    @abstractmethod
    def contains_outcome(self, x: Outcome) -> bool:
        """Return True if `x` belongs to the event."""

    @abstractmethod
    def intersection(self: E, other: E) -> E:
        """Return the outcomes shared by both events."""

    @abstractmethod
    def union(self: E, other: E) -> E:
        """Return the outcomes of either event."""

    @abstractmethod
    def lebesgue_measure(self) -> float:
        """Return the total length of the event."""

    @abstractmethod
    def translate(self: E, delta: float) -> E:
        """Return the event with every outcome moved by `delta`."""


class RandomVariable(ABC, Generic[E]):
    """
    Base class for random variables over real outcomes.

    Subclasses must implement `probability_of()`. Sampling is optional and
    raises `NotImplementedError` unless overridden.
    """

    @abstractmethod
    def probability_of(self, event: E) -> float:
        """Return the probability that the variable takes a value in `event`."""

    def sample(self, u: Callable[[], float]) -> Outcome:
        """Draw one outcome, using `u` as a source of standard uniform numbers."""
        raise NotImplementedError("Subclasses must implement sample()")


class AddConstant:
    """
    A trait that attaches ``add_constant()`` to a `RandomVariable`.

    The host must itself be a `RandomVariable`; the returned decorator wraps
    the host without copying it, which is safe because variables are immutable.
    """

    def add_constant(
        self,
        k: float,
        shift_mode: Optional[Union[ShiftMode, str]] = None,
    ) -> "AddedConstantVariable":
        """Return the variable ``self + k``.

        Parameters
        ----------
        k : float
            The additive constant.
        shift_mode : ShiftMode or str, optional
            Overrides the configured `ShiftMode` for the returned variable.
        """
        from contprob.stats.transform import AddedConstantVariable

        return AddedConstantVariable(
            self,  # type: ignore[arg-type]
            k,
            shift_mode=shift_mode,
            config=getattr(self, "config", None),
        )
