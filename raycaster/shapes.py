"""
Geometric surfaces for the ray caster.

Each surface implements the Hittable interface with a `hit` method.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional
import math

from .vec3 import Vec3, Point3
from .ray import Ray
from .interval import Interval


@dataclass
class HitRecord:
    """Stores information about a ray-surface intersection.

    Attributes:
        point: The intersection point in world space
        normal: The outward unit normal at the intersection
        t: The ray parameter at intersection
    """
    point: Point3
    normal: Vec3
    t: float


class Hittable(ABC):
    """Abstract base class for all surfaces that can be hit by rays."""

    @abstractmethod
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Test if ray intersects this surface.

        Args:
            ray: The ray to test
            ray_t: Open interval of acceptable ray parameters

        Returns:
            HitRecord for the nearest intersection strictly inside ray_t,
            None otherwise
        """
        pass


class Sphere(Hittable):
    """A sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float):
        if not radius > 0 or not math.isfinite(radius):
            raise ValueError(f"Sphere radius must be positive and finite, got {radius}")
        self.center = center
        self.radius = float(radius)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t)
        expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0
        which is solved with the half-b form of the quadratic formula.
        """
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)

        # Find the nearest root in the acceptable range
        root = (-half_b - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        point = ray.at(root)
        outward_normal = (point - self.center) / self.radius
        return HitRecord(point=point, normal=outward_normal, t=root)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class HittableList(Hittable):
    """An ordered collection of surfaces."""

    def __init__(self, objects: Optional[list[Hittable]] = None):
        self.objects: list[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable) -> None:
        """Add a surface to the list."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all surfaces."""
        self.objects.clear()

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Find the closest intersection among all surfaces."""
        closest_hit: Optional[HitRecord] = None
        closest_t = ray_t.max

        for obj in self.objects:
            hit_record = obj.hit(ray, ray_t.with_max(closest_t))
            if hit_record is not None:
                closest_hit = hit_record
                closest_t = hit_record.t

        return closest_hit

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def __repr__(self) -> str:
        return f"HittableList({len(self.objects)} objects)"
