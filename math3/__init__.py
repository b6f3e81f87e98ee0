# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
A tiny linear algebra package for spatial computation with 3 element vectors and 3x3 matrices.

Description
-----------

math3 provides two immutable value types, :class:`.Vector3` and :class:`.Matrix3x3`, along with a set of pure
functions for working with them (arithmetic, normalization, dot and cross products, transposes, inverses, matrix
products, and rotation matrices from euler angles).  It is intended for code that needs rotations and transforms of
single points or directions, such as graphics, robotics, or simulation code, without pulling in a full array stack.
Values can be exchanged with numpy through :meth:`.Vector3.to_array`/:meth:`.Vector3.from_array` and the matching
:class:`.Matrix3x3` methods.

Nothing in math3 holds state, so every function is safe to call from multiple threads at once.

Use
---

.. code::

    >>> from math import pi
    >>> from math3 import Vector3, euler_rotation, transform_vector
    >>> rotation = euler_rotation(pi / 2, 0, 0)
    >>> print(transform_vector(Vector3(1, 0, 0), rotation))
    0.00, 0.00, -1.00
"""

import math3.vector
import math3.matrix

from math3.exceptions import CoercionError, ZeroLengthError, SingularMatrixWarning
from math3.vector import (Vector3, as_real, zero, add, sub, neg, scale, length, unit, dot, cross,
                          format_vector)
from math3.matrix import (Matrix3x3, identity, transpose, columns, determinant, invert, multiply, transform_vector,
                          euler_rotation, rot_x, rot_y, rot_z, skew, format_matrix)

__all__ = ['Vector3', 'as_real', 'zero', 'add', 'sub', 'neg', 'scale', 'length', 'unit', 'dot', 'cross',
           'format_vector',
           'Matrix3x3', 'identity', 'transpose', 'columns', 'determinant', 'invert', 'multiply', 'transform_vector',
           'euler_rotation', 'rot_x', 'rot_y', 'rot_z', 'skew', 'format_matrix',
           'CoercionError', 'ZeroLengthError', 'SingularMatrixWarning']
