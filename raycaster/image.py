"""
Image output sinks.

A sink receives the image dimensions once and then one color per pixel in
raster order. Two sinks are provided:
- PPMWriter streams the plain-text PPM (P3) format
- ImageBuffer collects pixels into a numpy array and saves it with Pillow
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO
import numpy as np

from .vec3 import Color

# Scale so that 1.0 maps to 255 under truncation
COLOR_SCALE = 255.999


def to_byte(component: float) -> int:
    """Scale a [0, 1] intensity to an integer byte value by truncation."""
    return int(COLOR_SCALE * component)


def format_color(color: Color) -> str:
    """Format a color as a PPM pixel line body, e.g. '255 128 0'."""
    return f"{to_byte(color.r)} {to_byte(color.g)} {to_byte(color.b)}"


class ImageWriter(ABC):
    """Abstract base class for anything that accepts rendered pixels."""

    @abstractmethod
    def write_header(self, width: int, height: int) -> None:
        """Begin an image of the given size."""
        pass

    @abstractmethod
    def write_color(self, color: Color) -> None:
        """Append the next pixel in row-major order."""
        pass


class PPMWriter(ImageWriter):
    """Writes a plain-text PPM image to a text stream.

    Write failures from the stream propagate to the caller.
    """

    MAGIC = "P3"
    MAX_VALUE = 255

    def __init__(self, out: TextIO):
        self.out = out

    def write_header(self, width: int, height: int) -> None:
        self.out.write(f"{self.MAGIC}\n{width} {height}\n{self.MAX_VALUE}\n")

    def write_color(self, color: Color) -> None:
        self.out.write(format_color(color) + "\n")


class ImageBuffer(ImageWriter):
    """Accumulates pixels into a (height, width, 3) float64 array."""

    def __init__(self):
        self.pixels: np.ndarray = np.zeros((0, 0, 3), dtype=np.float64)
        self._count = 0

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def write_header(self, width: int, height: int) -> None:
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)
        self._count = 0

    def write_color(self, color: Color) -> None:
        total = self.width * self.height
        if self._count >= total:
            raise ValueError(f"Image buffer is full ({total} pixels)")
        j, i = divmod(self._count, self.width)
        self.pixels[j, i] = color.to_array()
        self._count += 1

    def is_complete(self) -> bool:
        return self.width * self.height > 0 and self._count == self.width * self.height

    def to_ldr(self) -> np.ndarray:
        """Convert to an 8-bit image.

        Uses the same truncation as the PPM writer; values outside the byte
        range are clipped since they cannot be stored as uint8.
        """
        scaled = np.trunc(self.pixels * COLOR_SCALE)
        return np.clip(scaled, 0, 255).astype(np.uint8)

    @staticmethod
    def check_format(filename: str) -> None:
        """Raise ValueError unless Pillow can write a file with this extension."""
        from PIL import Image as PILImage

        suffix = Path(filename).suffix.lower()
        image_format = PILImage.registered_extensions().get(suffix)
        # Some registered formats can only be read
        if image_format is None or image_format not in PILImage.SAVE:
            raise ValueError(f"Unsupported image format '{suffix}' for {filename}")

    def save(self, filename: str) -> None:
        """Save the image with Pillow (format is chosen by file extension)."""
        from PIL import Image as PILImage

        pil_image = PILImage.fromarray(self.to_ldr(), 'RGB')
        pil_image.save(filename)
