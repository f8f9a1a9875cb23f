"""Groupings of numeric types and tools for working with them"""

from typing import *
import numpy as np

__all__ = ["FloatLike", "IntegerLike", "NumberLike", "is_number_like"]


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]


def is_number_like(obj: Any) -> bool:
    """Determine whether the given object is a real scalar that may serve as a vector component."""
    # bool is an int subtype, but True/False aren't coordinates.
    if isinstance(obj, (bool, np.bool_)):
        return False
    return isinstance(obj, (int, float, np.integer, np.floating))
