"""Three-dimensional vectors and points, with the usual geometric operations"""

from typing import *

from expression import Result, result

from math3d.exceptions import InvalidInputError, Math3dException
from math3d.vector import THRESHOLD, UNIT_X, UNIT_Y, UNIT_Z, ZERO, Vector3, distance, subtract_points

__all__ = [
    "THRESHOLD",
    "UNIT_X",
    "UNIT_Y",
    "UNIT_Z",
    "ZERO",
    "InvalidInputError",
    "Math3dException",
    "Vector3",
    "distance",
    "subtract_points",
    "unsafe_extract_result",
    ]


_E = TypeVar('_E', bound=BaseException)
_R = TypeVar('_R', covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            raise e
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")
