"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from dataclasses import dataclass

from .vec3 import Vec3, Point3


@dataclass(frozen=True)
class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    where t >= 0 represents points in front of the origin. The direction
    is not required to be normalized.
    """

    origin: Point3
    direction: Vec3

    def at(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized)

        Returns:
            The point at origin + t * direction
        """
        return self.origin + self.direction * t
