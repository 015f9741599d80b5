"""
contprob: a small algebra of events and probabilities over the real line.

An *event* is a set of real outcomes, represented as a tree of open intervals:
nothing at all, a single interval, or the union of two smaller events. Events
support membership, intersection, union, and a one-dimensional Lebesgue
measure. A *random variable* is anything that maps an event to a probability;
the uniform distribution computes that probability exactly as the ratio of the
measure of the event clipped to its support over the measure of the support.

Example
-------
>>> from contprob import Uniform, interval
>>> x = Uniform(0.0, 80.0)
>>> x.probability_of(interval(-20.0, 20.0))
0.25
>>> x.probability_of(interval(0.0, 20.0).union(interval(60.0, 100.0)))
0.5
"""

from contprob.__version__ import __version__
from contprob.core.config import AlgebraConfig, DEFAULT_CONFIG
from contprob.core.errors import ContprobError, DegenerateSupport, InvalidArgument
from contprob.core.names import BranchMode, DegeneratePolicy, Outcome, ShiftMode
from contprob.core.traits import AddConstant, Event, RandomVariable
from contprob.events.algebra import RangeAlgebra
from contprob.events.range import EmptyRange, Range, SimpleRange, UnionRange, interval
from contprob.stats.transform import AddedConstantVariable
from contprob.stats.uniform import Uniform

__all__ = [
    "__version__",
    "AddConstant",
    "AddedConstantVariable",
    "AlgebraConfig",
    "BranchMode",
    "ContprobError",
    "DEFAULT_CONFIG",
    "DegeneratePolicy",
    "DegenerateSupport",
    "EmptyRange",
    "Event",
    "InvalidArgument",
    "Outcome",
    "RandomVariable",
    "Range",
    "RangeAlgebra",
    "ShiftMode",
    "SimpleRange",
    "Uniform",
    "UnionRange",
    "interval",
]
