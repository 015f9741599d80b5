"""
contprob.reporting
==================

Tabular summaries of probability queries, returned as polars DataFrames.
"""
