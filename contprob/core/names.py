"""
contprob.core.names
===================

Typed names shared across the package.

- `Outcome`: a single element of the sample space (a real number).
- `BranchMode`: how the interval algebra distributes over union nodes.
- `DegeneratePolicy`: what a probability query does on a zero-length support.
- `ShiftMode`: whether an additive-shift variable translates queried events.

Examples
--------
>>> from contprob.core.names import BranchMode, ShiftMode
>>> BranchMode.SYMMETRIC.value
'symmetric'
>>> ShiftMode("apply") is ShiftMode.APPLY
True
"""

from __future__ import annotations
from enum import Enum

# Outcomes are plain floats; the alias documents intent at call sites.
Outcome = float


class BranchMode(str, Enum):
    """Distribution of `intersection` / `union` over a union node.

    - SYMMETRIC: both branches are combined with the same external operand.
    - REFERENCE: the left branch is used for both arms and the right branch is
      dropped. Reproduces the historical numbers of the first implementation.
    """

    SYMMETRIC = "symmetric"
    REFERENCE = "reference"


class DegeneratePolicy(str, Enum):
    """Outcome of `probability_of` when the support has zero length.

    - ZERO: every event has probability 0.
    - RAISE: raise `DegenerateSupport`.
    """

    ZERO = "zero"
    RAISE = "raise"


class ShiftMode(str, Enum):
    """Behaviour of `AddedConstantVariable.probability_of`.

    - DELEGATE: pass the event to the wrapped variable untouched.
    - APPLY: translate the event by ``-k`` before delegating.
    """

    DELEGATE = "delegate"
    APPLY = "apply"
