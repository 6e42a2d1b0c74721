"""Tests for Ray class."""

import dataclasses

import pytest
from raycaster.vec3 import Vec3, Point3
from raycaster.ray import Ray


class TestRayCreation:
    """Test Ray construction."""

    def test_stores_origin(self):
        origin = Point3(1, 2, 3)
        ray = Ray(origin, Vec3(1, 0, 0))
        assert ray.origin == origin

    def test_stores_direction_unnormalized(self):
        direction = Vec3(1, 2, 3)
        ray = Ray(Point3(0, 0, 0), direction)
        assert ray.direction == direction

    def test_is_immutable(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            ray.origin = Point3(1, 1, 1)


class TestRayAt:
    """Test Ray.at() method."""

    def test_at_zero(self):
        origin = Point3(1, 2, 3)
        ray = Ray(origin, Vec3(1, 0, 0))
        assert ray.at(0) == origin

    def test_at_positive(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        assert ray.at(5) == Point3(5, 0, 0)

    def test_at_negative(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        assert ray.at(-5).x == -5

    def test_at_scales_direction(self):
        ray = Ray(Point3(1, 1, 1), Vec3(0, 2, -4))
        assert ray.at(0.5) == Point3(1, 2, -1)
