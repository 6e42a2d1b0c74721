"""
Vector3 class for 3D math operations.

This is the fundamental building block of the ray caster, used for:
- Points in 3D space
- Direction vectors
- RGB color values
"""

from __future__ import annotations
from typing import Union
import numpy as np


class ZeroLengthVectorError(ValueError):
    """Raised when a zero-length vector is normalized."""
    pass


class Vec3:
    """An immutable 3D vector.

    Uses numpy internally for storage while providing a clean,
    Pythonic operator API.
    """

    __slots__ = ('_data',)

    # Make numpy scalars defer to Vec3.__rmul__
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)
        self._data.flags.writeable = False

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array."""
        v = cls.__new__(cls)
        v._data = np.array(arr, dtype=np.float64)
        v._data.flags.writeable = False
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data + other._data)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data - other._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        return Vec3.from_array(self._data * other)

    def __rmul__(self, other: float) -> Vec3:
        return Vec3.from_array(other * self._data)

    def __truediv__(self, other: float) -> Vec3:
        if other == 0:
            raise ZeroDivisionError("Vec3 division by zero")
        return Vec3.from_array(self._data / other)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return (float(c) for c in self._data)

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return float(np.linalg.norm(self._data))

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def normalize(self) -> Vec3:
        """Return a unit vector in the same direction.

        Raises:
            ZeroLengthVectorError: If the vector has zero length
        """
        length = self.length()
        if length == 0:
            raise ZeroLengthVectorError(f"Cannot normalize zero-length vector {self!r}")
        return Vec3.from_array(self._data / length)

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        """Compute cross product with another vector."""
        return Vec3.from_array(np.cross(self._data, other._data))

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def dot(a: Vec3, b: Vec3) -> float:
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    return a.cross(b)


def unit_vector(v: Vec3) -> Vec3:
    return v.normalize()


# Convenience type aliases
Point3 = Vec3
Color = Vec3
