"""Three-dimensional vector type, usable for both displacements and points"""

import logging
import math
from typing import Any, Iterator, Mapping

import attrs
from expression import Result
import numpy as np

from math3d.exceptions import InvalidInputError
from math3d.numeric_types import NumberLike, is_number_like

__all__ = [
    "THRESHOLD",
    "UNIT_X",
    "UNIT_Y",
    "UNIT_Z",
    "ZERO",
    "Vector3",
    "distance",
    "subtract_points",
]

THRESHOLD: float = 0.00001

_COMPONENT_KEYS = ("x", "y", "z")


def _to_component(value: Any) -> float:
    if not is_number_like(value):
        raise TypeError(f"Vector component or scalar isn't number-like, but {type(value).__name__}")
    return float(value)


@attrs.define(frozen=True)
class Vector3:
    """
    Three floats representing X, Y, and Z in 3D (assumed Euclidean) space.

    The same type holds both vectors and points; which one a value means is up to the caller.
    Every operation builds a new instance, and no operation validates for NaN or infinity.

    Note that == is exact, field-by-field equality. For comparison within THRESHOLD,
    use equal / differ (or lesser_or_equal / greater_or_equal).
    """

    x = attrs.field(converter=_to_component) # type: float
    y = attrs.field(converter=_to_component) # type: float
    z = attrs.field(converter=_to_component) # type: float

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_mapping(cls, m: Mapping[str, Any]) -> Result["Vector3", InvalidInputError]:
        """Build a vector from a mapping with numeric values for keys 'x', 'y', and 'z'; other keys are ignored."""
        try:
            return Result.Ok(cls.unsafe_from_mapping(m))
        except InvalidInputError as e:
            logging.debug("Cannot build %s from mapping: %s", cls.__name__, e)
            return Result.Error(e)

    @classmethod
    def unsafe_from_mapping(cls, m: Mapping[str, Any]) -> "Vector3":
        if not isinstance(m, Mapping):
            raise InvalidInputError(f"Input to build {cls.__name__} isn't a mapping, but {type(m).__name__}")
        missing = [k for k in _COMPONENT_KEYS if k not in m]
        if missing:
            raise InvalidInputError(f"Missing key(s) to build {cls.__name__}: {', '.join(missing)}")
        non_numeric = [f"{k} ({type(m[k]).__name__})" for k in _COMPONENT_KEYS if not is_number_like(m[k])]
        if non_numeric:
            raise InvalidInputError(f"Non-numeric value(s) to build {cls.__name__}: {', '.join(non_numeric)}")
        return cls(**{k: m[k] for k in _COMPONENT_KEYS})

    def to_mapping(self) -> dict[str, float]:
        return attrs.asdict(self)

    @property
    def to_tuple(self) -> tuple[float, float, float]:
        return attrs.astuple(self)

    def magnitude(self) -> float:
        """Distance from the origin, i.e. Euclidean norm"""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vector3":
        """
        Scale this vector to unit length.

        The zero vector isn't special-cased: dividing by its zero magnitude gives NaN components.
        """
        return self.scalar_divide(self.magnitude())

    def scalar_divide(self, k: NumberLike) -> "Vector3":
        """
        Divide each component by k.

        Division follows IEEE-754 rather than Python's float semantics, so k == 0 gives
        infinite or NaN components instead of ZeroDivisionError.
        """
        divisor = np.float64(_to_component(k))
        with np.errstate(all="ignore"):
            x, y, z = np.array(self.to_tuple, dtype=np.float64) / divisor
        return Vector3(x, y, z)

    def scalar_multiply(self, k: NumberLike) -> "Vector3":
        # Widen numpy scalars first, so a float32 factor can't narrow the product.
        factor = _to_component(k)
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Right-handed cross product"""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Vector reflected off the surface with the given normal.

        Computed as (self - normal) * (2 * self.dot(normal)), which is not the textbook
        reflection self - 2 * self.dot(normal) * normal. Existing consumers depend on this form.
        """
        return self.subtract(normal).scalar_multiply(self.dot(normal) * 2)

    def equal(self, other: "Vector3") -> bool:
        """Whether the vectors are the same on every axis, to within THRESHOLD"""
        return abs(self.x - other.x) < THRESHOLD and \
            abs(self.y - other.y) < THRESHOLD and \
            abs(self.z - other.z) < THRESHOLD

    def differ(self, other: "Vector3") -> bool:
        return not self.equal(other)

    def lesser_or_equal(self, other: "Vector3") -> bool:
        """Whether this vector is no greater than the other (allowing THRESHOLD slack) on every axis"""
        return self.x - other.x <= THRESHOLD and \
            self.y - other.y <= THRESHOLD and \
            self.z - other.z <= THRESHOLD

    def greater_or_equal(self, other: "Vector3") -> bool:
        """Whether this vector is no less than the other (allowing THRESHOLD slack) on every axis"""
        return other.x - self.x <= THRESHOLD and \
            other.y - self.y <= THRESHOLD and \
            other.z - self.z <= THRESHOLD

    def to_text(self) -> str:
        return f"[{self.x:.3f}, {self.y:.3f}, {self.z:.3f}]"

    def print(self) -> None:
        """Write the text form to standard output, without a trailing newline."""
        print(self.to_text(), end="")

    def __str__(self) -> str:
        return self.to_text()

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple)

    def __abs__(self) -> float:
        return self.magnitude()

    def __neg__(self) -> "Vector3":
        return self.scalar_multiply(-1)

    def __add__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, k: object) -> "Vector3":
        if not is_number_like(k):
            return NotImplemented
        return self.scalar_multiply(k)

    def __rmul__(self, k: object) -> "Vector3":
        return self.__mul__(k)

    def __truediv__(self, k: object) -> "Vector3":
        if not is_number_like(k):
            return NotImplemented
        return self.scalar_divide(k)


UNIT_X = Vector3(1.0, 0.0, 0.0)
UNIT_Y = Vector3(0.0, 1.0, 0.0)
UNIT_Z = Vector3(0.0, 0.0, 1.0)
ZERO = Vector3.zero()


def subtract_points(point_a: Vector3, point_b: Vector3) -> Vector3:
    """Get the vector which goes from point_b to point_a (i.e., point_a - point_b)."""
    return Vector3(point_a.x - point_b.x, point_a.y - point_b.y, point_a.z - point_b.z)


def distance(point_a: Vector3, point_b: Vector3) -> float:
    """Get the (Euclidean) distance between the two points."""
    return subtract_points(point_a, point_b).magnitude()
