r"""
This module provides the :class:`Matrix3x3` value type and the pure functions that operate on it.

A :class:`Matrix3x3` is stored as three :class:`.Vector3` rows, :attr:`~Matrix3x3.x`, :attr:`~Matrix3x3.y`, and
:attr:`~Matrix3x3.z`, so that

.. math::
    \mathbf{M}=\left[\begin{array}{ccc} x_x & x_y & x_z \\
    y_x & y_y & y_z \\
    z_x & z_y & z_z \end{array}\right]

Everything here is built on the vector operations in :mod:`math3.vector`; matrix products and inverses are formed
from dot and cross products of the rows and columns.

Vectors are transformed by dotting them with each row of the matrix (:func:`transform_vector`), which means that
for matrices ``a`` and ``b``::

    transform_vector(v, multiply(a, b)) == transform_vector(transform_vector(v, b), a)

so the right most matrix of a product is applied first.  Swapping this convention changes the composition order of
chained rotations.

The inverse of a singular matrix (determinant of exactly 0) is not treated as an error.  Instead :func:`invert`
returns the identity matrix and issues a :class:`.SingularMatrixWarning`, which can be silenced or promoted to an
exception with the standard :mod:`warnings` filters.
"""

import warnings
import logging

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from math3._helpers import _check_matrix_array_and_shape, _check_real
from math3._typing import ARRAY_LIKE, DOUBLE_ARRAY, REAL
from math3.exceptions import SingularMatrixWarning
from math3.vector import Vector3, cross, dot, format_vector, scale


__all__ = ['Matrix3x3', 'identity', 'transpose', 'columns', 'determinant', 'invert', 'multiply', 'transform_vector',
           'euler_rotation', 'rot_x', 'rot_y', 'rot_z', 'skew', 'isclose', 'format_matrix']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting fallbacks and other information.
"""


@dataclass(frozen=True)
class Matrix3x3:
    """
    An immutable 3x3 matrix of real numbers stored as three :class:`.Vector3` rows.

    Use :meth:`from_values` to build a matrix from 9 numbers in row major order, or pass the three rows directly.
    Indexing with a single integer returns a row and indexing with a ``(row, column)`` tuple returns a component.

    The ``@`` operator performs matrix multiplication (see :func:`multiply`) and :attr:`T` is the transpose.
    """

    x: Vector3
    """
    The first row of the matrix.
    """

    y: Vector3
    """
    The second row of the matrix.
    """

    z: Vector3
    """
    The third row of the matrix.
    """

    __array_ufunc__ = None

    def __post_init__(self):

        for name in ('x', 'y', 'z'):
            row = getattr(self, name)
            if not isinstance(row, Vector3):
                raise TypeError(f'row {name} must be a Vector3, not {type(row).__name__}')

    @classmethod
    def from_values(cls, xx: REAL, xy: REAL, xz: REAL,
                    yx: REAL, yy: REAL, yz: REAL,
                    zx: REAL, zy: REAL, zz: REAL) -> 'Matrix3x3':
        """
        Creates a matrix from 9 real numbers given in row major order.

        :return: The matrix ``((xx, xy, xz), (yx, yy, yz), (zx, zy, zz))``
        :raises TypeError: If any value is not a real number
        """

        return cls(Vector3(xx, xy, xz), Vector3(yx, yy, yz), Vector3(zx, zy, zz))

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> 'Matrix3x3':
        """
        Creates a matrix from a 3x3 array like (nested lists/tuples or a numpy array).

        :param data: The matrix data where the first axis indexes the rows
        :return: The new matrix
        :raises ValueError: If the data is not 3x3
        :raises TypeError: If the data contains anything other than real numbers (text, booleans, None)
        """

        array = _check_matrix_array_and_shape(data)

        return cls.from_values(*array.ravel().tolist())

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the matrix as a new 3x3 numpy array where the first axis indexes the rows.
        """

        return np.array([list(self.x), list(self.y), list(self.z)], dtype=np.float64)

    def __iter__(self) -> Iterator[Vector3]:
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, column = index
            return (self.x, self.y, self.z)[row][column]
        return (self.x, self.y, self.z)[index]

    def __matmul__(self, other: 'Matrix3x3') -> 'Matrix3x3':
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return multiply(self, other)

    def __str__(self) -> str:
        return format_matrix(self)

    @property
    def T(self) -> 'Matrix3x3':
        """
        The transpose of this matrix.  See :func:`transpose`.
        """
        return transpose(self)

    def transform(self, vector: Vector3) -> Vector3:
        """
        Applies this matrix to vector.  See :func:`transform_vector`.
        """
        return transform_vector(vector, self)

    def inv(self) -> 'Matrix3x3':
        """
        Returns the inverse of this matrix.  See :func:`invert`.
        """
        return _invert(self)

    def det(self) -> float:
        """
        Returns the determinant of this matrix.  See :func:`determinant`.
        """
        return determinant(self)

    def isclose(self, other: 'Matrix3x3', rtol: float = 1e-9, atol: float = 0.0) -> bool:
        """
        Checks whether this matrix is equal to other within tolerance.  See :func:`isclose`.
        """
        return isclose(self, other, rtol=rtol, atol=atol)


def identity() -> Matrix3x3:
    """
    Returns the 3x3 identity matrix, which corresponds to no rotation.
    """

    return Matrix3x3.from_values(1.0, 0.0, 0.0,
                                 0.0, 1.0, 0.0,
                                 0.0, 0.0, 1.0)


def transpose(matrix: Matrix3x3) -> Matrix3x3:
    """
    Swaps the rows and columns of a matrix.

    Transposing twice returns the original matrix.

    :param matrix: The matrix to transpose
    :return: The transposed matrix
    """

    return Matrix3x3.from_values(matrix.x.x, matrix.y.x, matrix.z.x,
                                 matrix.x.y, matrix.y.y, matrix.z.y,
                                 matrix.x.z, matrix.y.z, matrix.z.z)


def columns(matrix: Matrix3x3) -> tuple[Vector3, Vector3, Vector3]:
    """
    Returns the columns of a matrix as vectors.
    """

    transposed = transpose(matrix)

    return transposed.x, transposed.y, transposed.z


def determinant(matrix: Matrix3x3) -> float:
    r"""
    Computes the determinant of a matrix.

    The cofactor expansion along the first row is computed as the scalar triple product of the rows

    .. math::
        \text{det}(\mathbf{M})=\mathbf{x}\cdot\left(\mathbf{y}\times\mathbf{z}\right)

    :param matrix: The matrix to compute the determinant of
    :return: The determinant
    """

    return dot(matrix.x, cross(matrix.y, matrix.z))


def invert(matrix: Matrix3x3) -> Matrix3x3:
    r"""
    Computes the inverse of a matrix using the adjugate.

    The columns of the adjugate are the cross products of pairs of rows, so the inverse is

    .. math::
        \mathbf{M}^{-1}=\frac{1}{\text{det}(\mathbf{M})}\left[\begin{array}{ccc}
        \mathbf{y}\times\mathbf{z} & \mathbf{z}\times\mathbf{x} & \mathbf{x}\times\mathbf{y}\end{array}\right]

    If the determinant is exactly 0 the matrix has no inverse.  In that case the identity matrix is returned and a
    :class:`.SingularMatrixWarning` is issued.  Nearly singular matrices are inverted normally, so the result may be
    poorly conditioned.

    :param matrix: The matrix to invert
    :return: The inverse of the matrix, or the identity matrix if it is singular
    """

    return _invert(matrix)


def _invert(matrix: Matrix3x3) -> Matrix3x3:
    """
    Shared by :func:`invert` and :meth:`Matrix3x3.inv` so the singular warning is attributed to their caller.
    """

    det = determinant(matrix)

    if det == 0.0:
        _LOGGER.debug('Singular matrix %r, returning the identity matrix', matrix)
        warnings.warn('The matrix is singular (determinant of 0).  Returning the identity matrix instead.',
                      SingularMatrixWarning, stacklevel=3)
        return identity()

    inv_det = 1.0 / det

    adjugate_columns = Matrix3x3(scale(cross(matrix.y, matrix.z), inv_det),
                                 scale(cross(matrix.z, matrix.x), inv_det),
                                 scale(cross(matrix.x, matrix.y), inv_det))

    return transpose(adjugate_columns)


def multiply(left: Matrix3x3, right: Matrix3x3) -> Matrix3x3:
    """
    Multiplies two matrices, ``left @ right``.

    Each element of the result is the dot product of a row of left with a column of right.  Matrix multiplication is
    not commutative so in general ``multiply(a, b) != multiply(b, a)``.  When combining rotations, the right matrix is
    the one applied first (see :func:`transform_vector`).

    :param left: The left hand side matrix
    :param right: The right hand side matrix
    :return: The matrix product
    """

    right_columns = columns(right)

    return Matrix3x3(*(Vector3(*(dot(row, column) for column in right_columns)) for row in left))


def transform_vector(vector: Vector3, matrix: Matrix3x3) -> Vector3:
    r"""
    Applies a matrix (typically a rotation) to a vector.

    The result is the dot product of the vector with each row of the matrix

    .. math::
        \mathbf{v}'=\left[\begin{array}{ccc}\mathbf{v}\cdot\mathbf{x} & \mathbf{v}\cdot\mathbf{y} &
        \mathbf{v}\cdot\mathbf{z}\end{array}\right]

    :param vector: The vector to transform
    :param matrix: The matrix to apply
    :return: The transformed vector
    """

    return Vector3(dot(vector, matrix.x), dot(vector, matrix.y), dot(vector, matrix.z))


def euler_rotation(head: REAL, pitch: REAL, roll: REAL) -> Matrix3x3:
    r"""
    Builds a rotation matrix from head, pitch, and roll angles in radians.

    The matrix is

    .. math::
        \left[\begin{array}{ccc}
        c_rc_h-s_rs_ps_h & -s_rc_p & c_rs_h+s_rs_pc_h \\
        s_rc_h+c_rs_ps_h & c_rc_p & s_rs_h-c_rs_pc_h \\
        -c_ps_h & s_p & c_pc_h \end{array}\right]

    where :math:`s` and :math:`c` are the sine and cosine of the head (:math:`h`), pitch (:math:`p`), and roll
    (:math:`r`) angles.  This is the same as ``rot_z(roll) @ rot_x(pitch) @ rot_y(head)``, so head is a rotation about
    the y axis, pitch about the x axis, and roll about the z axis.  All angles being 0 gives the identity matrix.

    :param head: The rotation about the y axis in radians
    :param pitch: The rotation about the x axis in radians
    :param roll: The rotation about the z axis in radians
    :return: The rotation matrix
    :raises TypeError: If any angle is not a real number
    """

    head, pitch, roll = _check_real(head, 'head'), _check_real(pitch, 'pitch'), _check_real(roll, 'roll')

    sinh, cosh = float(np.sin(head)), float(np.cos(head))
    sinp, cosp = float(np.sin(pitch)), float(np.cos(pitch))
    sinr, cosr = float(np.sin(roll)), float(np.cos(roll))

    return Matrix3x3.from_values(
        (cosr * cosh) - (sinr * sinp * sinh), -sinr * cosp, (cosr * sinh) + (sinr * sinp * cosh),
        (sinr * cosh) + (cosr * sinp * sinh), cosr * cosp, (sinr * sinh) - (cosr * sinp * cosh),
        -cosp * sinh, sinp, cosp * cosh
    )


def rot_x(theta: REAL) -> Matrix3x3:
    r"""
    Returns the right handed rotation about the x axis by angle theta in radians.

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]
    """

    theta = _check_real(theta, 'theta')

    ctheta, stheta = float(np.cos(theta)), float(np.sin(theta))

    return Matrix3x3.from_values(1.0, 0.0, 0.0,
                                 0.0, ctheta, -stheta,
                                 0.0, stheta, ctheta)


def rot_y(theta: REAL) -> Matrix3x3:
    r"""
    Returns the right handed rotation about the y axis by angle theta in radians.

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]
    """

    theta = _check_real(theta, 'theta')

    ctheta, stheta = float(np.cos(theta)), float(np.sin(theta))

    return Matrix3x3.from_values(ctheta, 0.0, stheta,
                                 0.0, 1.0, 0.0,
                                 -stheta, 0.0, ctheta)


def rot_z(theta: REAL) -> Matrix3x3:
    r"""
    Returns the right handed rotation about the z axis by angle theta in radians.

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]
    """

    theta = _check_real(theta, 'theta')

    ctheta, stheta = float(np.cos(theta)), float(np.sin(theta))

    return Matrix3x3.from_values(ctheta, -stheta, 0.0,
                                 stheta, ctheta, 0.0,
                                 0.0, 0.0, 1.0)


def skew(vector: Vector3) -> Matrix3x3:
    r"""
    Returns the skew symmetric cross product matrix for vector.

    The matrix is defined so that ``transform_vector(b, skew(a)) == cross(a, b)``

    .. math::
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_z & a_y \\
        a_z & 0 & -a_x \\
        -a_y & a_x & 0 \end{array}\right]

    :param vector: The vector to form the cross product matrix for
    :return: The skew symmetric matrix
    """

    return Matrix3x3.from_values(0.0, -vector.z, vector.y,
                                 vector.z, 0.0, -vector.x,
                                 -vector.y, vector.x, 0.0)


def isclose(left: Matrix3x3, right: Matrix3x3, rtol: float = 1e-9, atol: float = 0.0) -> bool:
    """
    Checks whether two matrices are equal elementwise within a tolerance (see :func:`numpy.allclose`).
    """

    return bool(np.allclose(left.to_array(), right.to_array(), rtol=rtol, atol=atol))


def format_matrix(matrix: Matrix3x3) -> str:
    """
    Formats a matrix for display as its three rows (see :func:`.format_vector`) on separate lines.
    """

    return '\n'.join(format_vector(row) for row in matrix)
