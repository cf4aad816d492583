# geometry/errors.py
"""Exceptions raised by the vector types.

Each error also derives from the matching built-in exception so callers can
catch either ``ValueError``/``IndexError``/``ZeroDivisionError`` or the
specific class.
"""


class VectorError(Exception):
    """Base class for every vector error."""


class InvalidArgumentError(VectorError, ValueError):
    """Wrong-length input, bad character index or non-Vector comparison."""


class VectorIndexError(VectorError, IndexError):
    """Integer index outside {0, 1, 2}."""


class NormalizeZeroError(VectorError, ZeroDivisionError):
    """Normalising a vector whose magnitude is exactly zero."""


class InterpolationRangeError(VectorError, ValueError):
    """Interpolation control parameter outside [0, 1]."""

    def __init__(self, message: str, value: float) -> None:
        super().__init__(message)
        self.value = value
