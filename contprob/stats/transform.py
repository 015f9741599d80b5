"""
contprob.stats.transform
========================

Random variables derived from other random variables.

`AddedConstantVariable` represents ``Y = X + k``. By default its
`probability_of` hands the event to ``X`` unchanged, as the first
implementation did; with ``ShiftMode.APPLY`` the event is translated by
``-k`` first, giving ``P(Y in E) = P(X in E - k)``.

Examples
--------
>>> from contprob.stats.uniform import Uniform
>>> from contprob.events.range import interval
>>> x = Uniform(0.0, 10.0)
>>> x.add_constant(10.0).probability_of(interval(12.0, 14.0))
0.0
>>> x.add_constant(10.0, shift_mode="apply").probability_of(interval(12.0, 14.0))
0.2
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from contprob.core.config import AlgebraConfig, coerce_enum, resolve_config
from contprob.core.errors import InvalidArgument
from contprob.core.names import Outcome, ShiftMode
from contprob.core.traits import AddConstant, E, RandomVariable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddedConstantVariable(RandomVariable[E], AddConstant):
    """
    The random variable ``variable + k``.

    Attributes
    ----------
    variable : RandomVariable
        The wrapped variable ``X``.
    k : float
        The additive constant.
    shift_mode : ShiftMode or str, optional
        Whether queried events are translated; taken from `config` when omitted.
    config : AlgebraConfig, optional
        Defaults to `DEFAULT_CONFIG`.
    """

    variable: RandomVariable[E]
    k: float
    shift_mode: Optional[Union[ShiftMode, str]] = None
    config: Optional[AlgebraConfig] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if math.isnan(self.k):
            raise InvalidArgument("additive constant must not be NaN")
        config = resolve_config(self.config)
        object.__setattr__(self, "config", config)
        mode = (
            config.shift_mode
            if self.shift_mode is None
            else coerce_enum("shift_mode", self.shift_mode, ShiftMode)
        )
        object.__setattr__(self, "shift_mode", mode)

    def probability_of(self, event: E) -> float:
        if self.shift_mode is ShiftMode.APPLY:
            return self.variable.probability_of(event.translate(-self.k))
        logger.debug("k=%s not applied to %s (shift_mode=delegate)", self.k, event)
        return self.variable.probability_of(event)

    def sample(self, u: Callable[[], float]) -> Outcome:
        return self.variable.sample(u) + self.k
