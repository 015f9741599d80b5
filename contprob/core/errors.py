"""
contprob.core.errors
====================

Exceptions raised by the package.

`InvalidArgument` subclasses `ValueError` and `DegenerateSupport` subclasses
`ZeroDivisionError`, so callers that already guard against the built-in
conditions keep working.

Examples
--------
>>> from contprob.core.errors import InvalidArgument
>>> issubclass(InvalidArgument, ValueError)
True
"""

from __future__ import annotations


class ContprobError(Exception):
    """Base class for all errors raised by contprob."""


class InvalidArgument(ContprobError, ValueError):
    """A constructor or configuration received values it cannot represent."""


class DegenerateSupport(ContprobError, ZeroDivisionError):
    """A probability was requested from a distribution whose support has zero length."""
