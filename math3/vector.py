r"""
This module provides the :class:`Vector3` value type and the pure functions that operate on it.

A :class:`Vector3` is an immutable triple of real numbers :math:`\mathbf{v}=\left[\begin{array}{ccc} x & y & z
\end{array}\right]` that can represent either a point or a direction in 3D space.  Every operation returns a new
vector; nothing is ever modified in place, so vectors can be shared freely (including between threads).

The free functions (:func:`add`, :func:`dot`, :func:`cross`, ...) are the canonical implementations.  The methods and
operators on :class:`Vector3` are conveniences that call them, so the following are equivalent::

    >>> from math3 import Vector3, add, cross
    >>> a, b = Vector3(1, 0, 0), Vector3(0, 1, 0)
    >>> add(a, b) == a + b
    True
    >>> cross(a, b)
    Vector3(x=0.0, y=0.0, z=1.0)

Components are validated strictly when a vector is constructed: anything that is not a real number raises a
:exc:`TypeError`.  Text that should be interpreted as a number must be converted explicitly with :func:`as_real` or
:meth:`Vector3.coerce`, which raise a :exc:`.CoercionError` when the text is not numeric.
"""

import logging
import math

from dataclasses import dataclass
from numbers import Real
from typing import Iterator

import numpy as np

from math3._helpers import _check_real, _check_vector_array_and_shape
from math3._typing import ARRAY_LIKE, DOUBLE_ARRAY, NUMERIC_TEXT, REAL, ZERO_POLICIES
from math3.exceptions import CoercionError, ZeroLengthError


__all__ = ['Vector3', 'as_real', 'zero', 'add', 'sub', 'neg', 'scale', 'length', 'unit', 'dot', 'cross',
           'isclose', 'format_vector']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting fallbacks and other information.
"""


def as_real(value: NUMERIC_TEXT) -> float:
    """
    Converts a real number or numeric text into a float.

    This is the only place in math3 where text is interpreted as a number.  Leading and trailing whitespace is ignored
    and anything python's :class:`float` understands is accepted (``"2.5"``, ``"1e3"``, ``"-inf"``, ``"nan"``), except
    for underscore digit grouping (``"1_000"``), which is rejected.

    :param value: The value to convert
    :return: The value as a float
    :raises CoercionError: If the value is a boolean, non-numeric text, or any other type
    """

    if isinstance(value, str):
        if '_' in value:
            raise CoercionError(f'{value!r} cannot be interpreted as a real number')

        try:
            return float(value.strip())
        except ValueError as err:
            raise CoercionError(f'{value!r} cannot be interpreted as a real number') from err

    if isinstance(value, bool) or not isinstance(value, Real):
        raise CoercionError(f'values of type {type(value).__name__} cannot be interpreted as a real number')

    try:
        return float(value)
    except OverflowError as err:
        raise CoercionError('the value is too large to be represented as a float') from err


@dataclass(frozen=True)
class Vector3:
    """
    An immutable 3 element vector of real numbers.

    The components are stored as python floats in :attr:`x`, :attr:`y`, and :attr:`z`.  The vector can also be
    iterated over and indexed (0, 1, 2) like a tuple, so ``x, y, z = vec`` works.

    Supported operators are ``+``, ``-``, unary ``-``, and ``*`` with a real scalar.  Equality is exact
    componentwise equality; use :meth:`isclose` for tolerance based comparison.
    """

    x: float
    """
    The first component of the vector.
    """

    y: float
    """
    The second component of the vector.
    """

    z: float
    """
    The third component of the vector.
    """

    # numpy binary operators defer to ours instead of treating the vector as a sequence
    __array_ufunc__ = None

    def __post_init__(self):

        object.__setattr__(self, 'x', _check_real(self.x, 'x'))
        object.__setattr__(self, 'y', _check_real(self.y, 'y'))
        object.__setattr__(self, 'z', _check_real(self.z, 'z'))

    @classmethod
    def coerce(cls, x: NUMERIC_TEXT, y: NUMERIC_TEXT, z: NUMERIC_TEXT) -> 'Vector3':
        """
        Creates a vector from numbers or numeric text, converting each component with :func:`as_real`.

        :param x: The first component
        :param y: The second component
        :param z: The third component
        :return: The new vector
        :raises CoercionError: If any component cannot be interpreted as a real number
        """

        return cls(as_real(x), as_real(y), as_real(z))

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> 'Vector3':
        """
        Creates a vector from a length 3 array like (list, tuple, numpy array).

        :param data: The components of the vector
        :return: The new vector
        :raises ValueError: If the data is not a flat length 3 sequence
        :raises TypeError: If the data contains anything other than real numbers (text, booleans, None)
        """

        array = _check_vector_array_and_shape(data)

        return cls(*array.tolist())

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the vector as a new numpy array of shape (3,).
        """

        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return sub(self, other)

    def __neg__(self) -> 'Vector3':
        return neg(self)

    def __mul__(self, other: REAL) -> 'Vector3':
        if isinstance(other, bool) or not isinstance(other, Real):
            return NotImplemented
        return scale(self, other)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return format_vector(self)

    def dot(self, other: 'Vector3') -> float:
        """
        Returns the dot product of this vector with other.  See :func:`dot`.
        """
        return dot(self, other)

    def cross(self, other: 'Vector3') -> 'Vector3':
        """
        Returns the cross product of this vector with other.  See :func:`cross`.
        """
        return cross(self, other)

    def length(self) -> float:
        """
        Returns the Euclidean length of this vector.  See :func:`length`.
        """
        return length(self)

    def unit(self, zero_policy: ZERO_POLICIES = 'raise') -> 'Vector3':
        """
        Returns this vector normalized to unit length.  See :func:`unit`.
        """
        return unit(self, zero_policy=zero_policy)

    def isclose(self, other: 'Vector3', rtol: float = 1e-9, atol: float = 0.0) -> bool:
        """
        Checks whether this vector is equal to other within tolerance.  See :func:`isclose`.
        """
        return isclose(self, other, rtol=rtol, atol=atol)


def zero() -> Vector3:
    """
    Returns the zero vector (0, 0, 0).
    """

    return Vector3(0.0, 0.0, 0.0)


def add(left: Vector3, right: Vector3) -> Vector3:
    """
    Adds two vectors componentwise.

    :param left: The left hand side vector
    :param right: The right hand side vector
    :return: The sum of the vectors
    """

    return Vector3(left.x + right.x, left.y + right.y, left.z + right.z)


def sub(left: Vector3, right: Vector3) -> Vector3:
    """
    Subtracts right from left componentwise.

    :param left: The vector to subtract from
    :param right: The vector to subtract
    :return: The difference left - right
    """

    return Vector3(left.x - right.x, left.y - right.y, left.z - right.z)


def neg(vector: Vector3) -> Vector3:
    """
    Returns the vector pointing in the opposite direction.
    """

    return scale(vector, -1.0)


def scale(vector: Vector3, scalar: REAL) -> Vector3:
    """
    Multiplies each component of vector by scalar.

    :param vector: The vector to scale
    :param scalar: The real number to scale by
    :return: The scaled vector
    :raises TypeError: If scalar is not a real number
    """

    scalar = _check_real(scalar, 'scalar')

    return Vector3(vector.x * scalar, vector.y * scalar, vector.z * scalar)


def dot(left: Vector3, right: Vector3) -> float:
    r"""
    Computes the dot (inner) product of two vectors.

    .. math::
        \mathbf{l}\cdot\mathbf{r}=l_xr_x+l_yr_y+l_zr_z

    :param left: The left hand side vector
    :param right: The right hand side vector
    :return: The dot product
    """

    return left.x * right.x + left.y * right.y + left.z * right.z


def cross(left: Vector3, right: Vector3) -> Vector3:
    r"""
    Computes the right handed cross product of two vectors.

    .. math::
        \mathbf{l}\times\mathbf{r}=\left[\begin{array}{c} l_yr_z-l_zr_y \\
        l_zr_x-l_xr_z \\
        l_xr_y-l_yr_x \end{array}\right]

    The result is orthogonal to both inputs and the operation is anticommutative, that is
    ``cross(l, r) == -cross(r, l)``.

    :param left: The left hand side vector
    :param right: The right hand side vector
    :return: The cross product
    """

    return Vector3(left.y * right.z - left.z * right.y,
                   left.z * right.x - left.x * right.z,
                   left.x * right.y - left.y * right.x)


def length(vector: Vector3) -> float:
    """
    Computes the Euclidean length (2-norm) of a vector.

    The length is never negative and is only 0 for the zero vector.  The components are scaled internally so that very
    small or very large vectors do not underflow to 0 or overflow to infinity.

    :param vector: The vector to get the length of
    :return: The length of the vector
    """

    return math.hypot(vector.x, vector.y, vector.z)


def unit(vector: Vector3, zero_policy: ZERO_POLICIES = 'raise') -> Vector3:
    r"""
    Normalizes a vector to unit length.

    .. math::
        \hat{\mathbf{v}}=\frac{\mathbf{v}}{\|\mathbf{v}\|}

    A zero length vector has no direction so it cannot be normalized.  What happens in that case is controlled by
    ``zero_policy``:

    * ``'raise'`` (the default) raises a :exc:`.ZeroLengthError`
    * ``'zero'`` returns the zero vector

    A vector with NaN components has a NaN length, is not considered zero length, and results in NaN components.

    :param vector: The vector to normalize
    :param zero_policy: What to do when the vector has zero length
    :return: The unit vector pointing in the same direction as vector
    :raises ZeroLengthError: If the vector has zero length and zero_policy is ``'raise'``
    :raises ValueError: If zero_policy is not one of the recognized values
    """

    if zero_policy not in ('raise', 'zero'):
        raise ValueError(f"zero_policy must be 'raise' or 'zero', not {zero_policy!r}")

    norm = length(vector)

    if norm == 0.0:
        if zero_policy == 'zero':
            _LOGGER.debug('Normalizing a zero length vector, returning the zero vector')
            return zero()

        raise ZeroLengthError('Cannot normalize a zero length vector')

    # divide rather than multiply by 1/norm, which overflows for subnormal lengths
    return Vector3(vector.x / norm, vector.y / norm, vector.z / norm)


def isclose(left: Vector3, right: Vector3, rtol: float = 1e-9, atol: float = 0.0) -> bool:
    """
    Checks whether two vectors are equal componentwise within a tolerance.

    This uses the same rule as :func:`numpy.allclose`, ``abs(l - r) <= atol + rtol * abs(r)``.

    :param left: The first vector
    :param right: The vector to compare against
    :param rtol: The relative tolerance
    :param atol: The absolute tolerance
    :return: True if every component is within tolerance
    """

    return bool(np.allclose(left.to_array(), right.to_array(), rtol=rtol, atol=atol))


def format_vector(vector: Vector3) -> str:
    """
    Formats a vector for display as ``"x, y, z"`` with each component rounded to 2 decimal places.
    """

    return '{0:.2f}, {1:.2f}, {2:.2f}'.format(vector.x, vector.y, vector.z)
