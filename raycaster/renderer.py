"""
Renderer module - ties settings, camera and output sinks together.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .camera import Camera
from .shapes import HittableList
from .image import ImageWriter, PPMWriter, ImageBuffer

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0


class Renderer:
    """Renders a world through a camera built from RenderSettings."""

    def __init__(self, settings: Optional[RenderSettings] = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self.camera = Camera(self.settings.image_width, self.settings.aspect_ratio)
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Optional[Callable[[float], None]]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, world: HittableList, sink: ImageWriter) -> None:
        """Render the world into the given sink."""
        camera = self.camera
        logger.info(
            "Rendering %dx%d image (%d objects)",
            camera.image_width, camera.image_height, len(world)
        )
        start_time = time.perf_counter()

        camera.render(world, sink, self._progress_callback)

        elapsed = time.perf_counter() - start_time
        logger.info("Render completed in %.2f seconds", elapsed)

    def render_to_file(self, world: HittableList, filename: str) -> None:
        """Render the world and save it.

        Files ending in .ppm are streamed as plain-text PPM; anything else is
        buffered and written with Pillow.

        Raises:
            ValueError: If the extension is neither .ppm nor a Pillow format
        """
        path = Path(filename)
        is_ppm = path.suffix.lower() == '.ppm'
        if not is_ppm:
            ImageBuffer.check_format(filename)
        path.parent.mkdir(parents=True, exist_ok=True)

        if is_ppm:
            with open(path, 'w', encoding='ascii', newline='\n') as f:
                self.render(world, PPMWriter(f))
        else:
            buffer = ImageBuffer()
            self.render(world, buffer)
            buffer.save(str(path))

        logger.info("Saved image to %s", path)
