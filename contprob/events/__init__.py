"""
contprob.events
===============

Interval-set events (`range`) and the set algebra over them (`algebra`).
"""
