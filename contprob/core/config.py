"""
contprob.core.config
====================

Behaviour switches for the algebra and the random variables built on it.

Examples
--------
>>> from contprob.core.config import AlgebraConfig
>>> cfg = AlgebraConfig(branch_mode="reference")
>>> cfg.validate()
>>> cfg.branch_mode
<BranchMode.REFERENCE: 'reference'>

>>> AlgebraConfig(degenerate_support="ignore")
Traceback (most recent call last):
...
contprob.core.errors.InvalidArgument: degenerate_support must be one of ['zero', 'raise'], got 'ignore'
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type, TypeVar, Union

from contprob.core.errors import InvalidArgument
from contprob.core.names import BranchMode, DegeneratePolicy, ShiftMode

_E = TypeVar("_E", bound=Enum)


def coerce_enum(name: str, value: Union[Enum, str], enum_type: Type[_E]) -> _E:
    """Convert `value` into a member of `enum_type` or raise `InvalidArgument`."""
    try:
        return enum_type(value)
    except ValueError:
        allowed = [member.value for member in enum_type]
        raise InvalidArgument(f"{name} must be one of {allowed}, got {value!r}") from None


_FIELDS = (
    ("branch_mode", BranchMode),
    ("degenerate_support", DegeneratePolicy),
    ("shift_mode", ShiftMode),
)


@dataclass(frozen=True)
class AlgebraConfig:
    """
    Configuration shared by the interval algebra and the random variables.

    Instances are immutable; plain strings are converted into enum members on
    construction.

    Attributes
    ----------
    branch_mode : BranchMode or str, default="symmetric"
        How intersection and union distribute over union nodes.
    degenerate_support : DegeneratePolicy or str, default="zero"
        Result of a probability query on a zero-length support.
    shift_mode : ShiftMode or str, default="delegate"
        Whether `add_constant` variables translate the queried event.
    """

    branch_mode: Union[BranchMode, str] = BranchMode.SYMMETRIC
    degenerate_support: Union[DegeneratePolicy, str] = DegeneratePolicy.ZERO
    shift_mode: Union[ShiftMode, str] = ShiftMode.DELEGATE

    def __post_init__(self) -> None:
        for name, enum_type in _FIELDS:
            object.__setattr__(self, name, coerce_enum(name, getattr(self, name), enum_type))

    def validate(self) -> None:
        """Validate the configuration."""
        for name, enum_type in _FIELDS:
            value = getattr(self, name)
            if not isinstance(value, enum_type):
                raise InvalidArgument(
                    f"{name} must be a {enum_type.__name__}, got {value!r}"
                )


DEFAULT_CONFIG = AlgebraConfig()


def resolve_config(config: Optional[AlgebraConfig]) -> AlgebraConfig:
    """Return a validated config, falling back to `DEFAULT_CONFIG`."""
    cfg = config if config is not None else DEFAULT_CONFIG
    cfg.validate()
    return cfg
