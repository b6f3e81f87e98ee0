from numbers import Real

import numpy as np

from math3._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE,
                           first_axis_length: int | None = None,
                           last_axis_length: int | None = None,
                           ndim: int | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if ndim is not None and len(in_shape) != ndim:
        raise ValueError(f'The input must have {ndim} dimension(s)')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    if last_axis_length is not None and in_shape[-1] != last_axis_length:
        raise ValueError(f'The length of the last axis must be {last_axis_length}')

    # text, booleans, None and other objects must not be silently converted to floats
    if np.asarray(input).dtype.kind not in 'iuf':
        raise TypeError('The input must contain only real numbers')

    # always a new array so the caller can't mutate the source through it
    return np.array(input, dtype=np.float64)


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, first_axis_length=3, ndim=1)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, first_axis_length=3, last_axis_length=3, ndim=2)


def _check_real(value, name: str) -> float:
    """
    Returns value as a float, raising a TypeError if it is not a real number.

    Booleans are rejected even though they are technically integers.  Integers too large to be represented as a
    float raise a ValueError.
    """

    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f'{name} must be a real number, not {type(value).__name__}')

    try:
        return float(value)
    except OverflowError as err:
        raise ValueError(f'{name} is too large to be represented as a float') from err
