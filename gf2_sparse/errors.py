"""
errors.py
  - Caller contract violations raised by the GF(2) sparse matrix engine.
"""


class DimensionMismatch(ValueError):
    """Operand shapes are incompatible (concatenate, multiply, vector sum)."""


class OutOfRange(IndexError):
    """A row, column or vector index lies outside the declared shape."""
