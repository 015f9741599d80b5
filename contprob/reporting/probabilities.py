"""
contprob.reporting.probabilities
================================

A reporter that evaluates a set of events against one random variable and
lays the results out as a polars DataFrame.

Examples
--------
>>> from contprob.stats.uniform import Uniform
>>> from contprob.events.range import interval
>>> from contprob.reporting.probabilities import ProbabilityReporter
>>> rep = ProbabilityReporter(Uniform(0.0, 80.0))
>>> df = rep.table({"low": interval(0.0, 20.0), "wide": interval(-10.0, 100.0)})
>>> df["probability"].to_list()
[0.25, 1.0]
>>> df.columns
['label', 'event', 'measure', 'probability']
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple, Union

import polars as pl

from contprob.core.traits import RandomVariable
from contprob.events.algebra import RangeAlgebra
from contprob.events.range import Range

EventsLike = Union[Mapping[str, Range], Iterable[Tuple[str, Range]]]


@dataclass
class ProbabilityReporter:
    """Probability table for a single random variable."""

    variable: RandomVariable[Range]

    def table(self, events: EventsLike) -> pl.DataFrame:
        """
        Return one row per event with columns ``label``, ``event``,
        ``measure`` and ``probability``.

        Parameters
        ----------
        events : mapping or iterable of (label, Range)
            Events to evaluate, in the order they should appear.
        """
        items = events.items() if isinstance(events, Mapping) else events
        algebra = RangeAlgebra.from_config(getattr(self.variable, "config", None))
        rows = [
            {
                "label": label,
                "event": str(event),
                "measure": algebra.measure(event),
                "probability": self.variable.probability_of(event),
            }
            for label, event in items
        ]
        return pl.DataFrame(
            rows,
            schema={
                "label": pl.Utf8,
                "event": pl.Utf8,
                "measure": pl.Float64,
                "probability": pl.Float64,
            },
        )

    def sweep(self, width: float, starts: Iterable[float]) -> pl.DataFrame:
        """Tabulate the probability of ``(s, s + width)`` for every start ``s``."""
        frame = self.table(
            (f"{s}", Range.new(s, s + width)) for s in starts
        )
        return frame.with_columns(
            pl.col("probability").cum_sum().alias("cumulative")
        )
