"""
contprob.stats.uniform
======================

The continuous uniform distribution on ``[a, b]``.

The probability of an event is the measure of the event clipped to the
support divided by the measure of the support. Events reaching past the
support are clipped, so any superset of ``[a, b]`` has probability 1.

Examples
--------
>>> from contprob.stats.uniform import Uniform
>>> from contprob.events.range import interval
>>> x = Uniform(0.0, 80.0)
>>> [x.probability_of(interval(lo, hi)) for lo, hi in [(0, 80), (-20, 20), (0, 20), (0, 100)]]
[1.0, 0.25, 0.25, 1.0]
>>> x.sample(lambda: 0.5)
40.0
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import numpy as np
from scipy.stats import uniform as scipy_uniform

from contprob.core.config import AlgebraConfig, resolve_config
from contprob.core.errors import DegenerateSupport, InvalidArgument
from contprob.core.names import DegeneratePolicy, Outcome
from contprob.core.traits import AddConstant, RandomVariable
from contprob.events.algebra import RangeAlgebra
from contprob.events.range import Range, SimpleRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Uniform(RandomVariable[Range], AddConstant):
    """
    Uniform random variable with support ``[a, b]``.

    Attributes
    ----------
    a, b : float
        Support bounds, ``a <= b``.
    config : AlgebraConfig, optional
        Algebra and degenerate-support behaviour; defaults to `DEFAULT_CONFIG`.

    Raises
    ------
    InvalidArgument
        If ``a > b`` or either bound is NaN.
    """

    a: float
    b: float
    config: Optional[AlgebraConfig] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if math.isnan(self.a) or math.isnan(self.b):
            raise InvalidArgument(f"Uniform bounds must not be NaN, got a={self.a}, b={self.b}")
        if self.a > self.b:
            raise InvalidArgument(
                f"Uniform requires a <= b, got a={self.a}, b={self.b}"
            )
        object.__setattr__(self, "a", float(self.a))
        object.__setattr__(self, "b", float(self.b))
        object.__setattr__(self, "config", resolve_config(self.config))

    @property
    def support(self) -> SimpleRange:
        return SimpleRange(self.a, self.b)

    @property
    def algebra(self) -> RangeAlgebra:
        return RangeAlgebra.from_config(self.config)

    @property
    def is_degenerate(self) -> bool:
        return self.a == self.b

    def probability_of(self, event: Range) -> float:
        """
        Return ``P(X in event)``.

        With a degenerate support (``a == b``) the ratio is 0/0; the configured
        `DegeneratePolicy` decides between returning 0 and raising
        `DegenerateSupport`.
        """
        algebra = self.algebra
        support = self.support
        width = algebra.measure(support)

        if width == 0.0:
            if self.config.degenerate_support is DegeneratePolicy.RAISE:
                raise DegenerateSupport(
                    f"Uniform support [{self.a}, {self.b}] has zero length; "
                    f"probability of {event} is undefined"
                )
            logger.warning(
                "Degenerate support [%s, %s]: probability of %s taken as 0",
                self.a,
                self.b,
                event,
            )
            return 0.0

        clipped = algebra.intersection(support, event)
        if math.isinf(width):
            # b - a overflows; both measures are taken at half scale
            support, clipped = algebra.scale(support, 0.5), algebra.scale(clipped, 0.5)
            width = algebra.measure(support)
        p = algebra.measure(clipped) / width
        logger.debug("P(%s) = %s for %r", event, p, self)
        return p

    # ---- sampling ----

    def sample(self, u: Callable[[], float]) -> Outcome:
        """Inverse-transform sample: ``a + u() * (b - a)``."""
        return self.a + u() * (self.b - self.a)

    def frozen(self) -> Any:
        """Return the equivalent frozen ``scipy.stats.uniform`` distribution."""
        return scipy_uniform(loc=self.a, scale=self.b - self.a)

    def rvs(self, size: Any = None, random_state: Any = None) -> Any:
        """Draw samples through scipy; a degenerate support always yields ``a``."""
        if self.is_degenerate:
            return self.a if size is None else np.full(size, self.a)
        return self.frozen().rvs(size=size, random_state=random_state)

    def cdf(self, x: Any) -> Any:
        """Cumulative distribution function; a step at ``a`` for a degenerate support."""
        if self.is_degenerate:
            return np.where(np.asarray(x) >= self.a, 1.0, 0.0)
        return self.frozen().cdf(x)
