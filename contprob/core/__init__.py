"""
contprob.core
=============

Shared vocabulary of the package: names and behaviour switches, errors,
configuration, and the `Event` / `RandomVariable` capabilities that the
concrete event and distribution types implement.
"""
