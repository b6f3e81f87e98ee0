"""
This module defines the exceptions and warnings raised by math3.

Input that is the wrong type or shape raises the built in :exc:`TypeError` or :exc:`ValueError`.  The classes here
subclass those so that callers can catch either the specific condition or the general one.
"""

__all__ = ['CoercionError', 'ZeroLengthError', 'SingularMatrixWarning']


class CoercionError(ValueError):
    """
    Raised when a value cannot be converted into a real number by :func:`.as_real`.
    """


class ZeroLengthError(ValueError):
    """
    Raised when a zero length vector is normalized with the ``'raise'`` zero policy.
    """


class SingularMatrixWarning(UserWarning):
    """
    Issued when a matrix with a determinant of exactly 0 is inverted and the identity matrix is returned instead.
    """
