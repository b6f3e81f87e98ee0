from typing import Literal, Union
from numbers import Real

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike

REAL = Union[Real, float, int]

NUMERIC_TEXT = Union[REAL, str]

ZERO_POLICIES = Literal['raise', 'zero']
