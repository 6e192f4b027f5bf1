"""
Exception types for fatal conditions in the clustering run.
Author: Rowel Facunla
"""


class InvariantError(AssertionError):
    """An internal or data-contract violation. The run cannot continue."""


class LabelCheckError(InvariantError):
    """A header failed the alternating reverse-strand label check."""
