"""
Camera module for generating primary rays and running the render loop.

The camera sits at the origin looking down -Z with a fixed focal length
of 1.0 and a viewport 2.0 units tall. One ray is cast through the center
of every pixel.
"""

from __future__ import annotations
import logging
import math
from typing import Callable, Optional

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .interval import Interval
from .shapes import Hittable
from .image import ImageWriter

logger = logging.getLogger(__name__)

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


class Camera:
    """A pinhole camera at the origin with a fixed viewport."""

    def __init__(self, image_width: int = 400, aspect_ratio: float = 16.0 / 9.0):
        """Create a camera.

        Args:
            image_width: Output image width in pixels
            aspect_ratio: Nominal width / height ratio

        Raises:
            ValueError: If image_width or aspect_ratio is not positive, or the
                derived image height is not finite
        """
        if isinstance(image_width, bool) or not isinstance(image_width, int) or image_width <= 0:
            raise ValueError(f"image_width must be a positive integer, got {image_width!r}")
        if not aspect_ratio > 0 or not math.isfinite(aspect_ratio):
            raise ValueError(f"aspect_ratio must be a positive number, got {aspect_ratio!r}")
        # Subnormal ratios overflow the height
        if not math.isfinite(image_width / aspect_ratio):
            raise ValueError(f"aspect_ratio {aspect_ratio!r} is too small for width {image_width}")

        self.image_width = image_width
        self.aspect_ratio = float(aspect_ratio)
        self.image_height = max(1, int(image_width / aspect_ratio))

        self.focal_length = 1.0
        self.viewport_height = 2.0
        # Use the real pixel ratio, image_height was truncated
        self.viewport_width = self.viewport_height * image_width / self.image_height
        self.center = Point3(0, 0, 0)

        viewport_u = Vec3(self.viewport_width, 0, 0)
        viewport_v = Vec3(0, -self.viewport_height, 0)

        self.pixel_delta_u = viewport_u / image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self.center
            - Vec3(0, 0, self.focal_length)
            - viewport_u / 2
            - viewport_v / 2
        )
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        logger.debug(
            "Camera %dx%d, viewport %.4f x %.4f",
            self.image_width, self.image_height, self.viewport_width, self.viewport_height
        )

    def get_ray(self, i: int, j: int) -> Ray:
        """Generate the ray through the center of pixel (i, j).

        Args:
            i: Column, 0 is the left edge
            j: Row, 0 is the top edge

        Returns:
            A ray from the camera center; the direction is not normalized
        """
        pixel_center = self.pixel00_loc + self.pixel_delta_u * i + self.pixel_delta_v * j
        return Ray(self.center, pixel_center - self.center)

    @staticmethod
    def ray_color(ray: Ray, world: Hittable) -> Color:
        """Shade a ray against the world.

        Hits are colored by their normal mapped from [-1, 1] to [0, 1].
        Misses get a white to sky-blue vertical gradient.
        """
        hit_record = world.hit(ray, Interval(0.0, math.inf))
        if hit_record is not None:
            return 0.5 * (hit_record.normal + WHITE)

        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return (1.0 - a) * WHITE + a * SKY_BLUE

    def render(
        self,
        world: Hittable,
        sink: ImageWriter,
        progress: Optional[Callable[[float], None]] = None
    ) -> None:
        """Render the world into sink in row-major order, top row first.

        Args:
            world: The surfaces to render
            sink: Receives the header, then one color per pixel
            progress: Called once per finished row with the completed fraction
        """
        sink.write_header(self.image_width, self.image_height)

        for j in range(self.image_height):
            for i in range(self.image_width):
                sink.write_color(self.ray_color(self.get_ray(i, j), world))
            if progress is not None:
                progress((j + 1) / self.image_height)

    def __repr__(self) -> str:
        return f"Camera(image_width={self.image_width}, image_height={self.image_height})"
