"""
contprob.stats
==============

Random variables over interval events.

- `uniform`: the continuous uniform distribution, with exact probabilities.
- `transform`: derived variables such as ``X + k``.
"""
