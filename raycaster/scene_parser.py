"""
Scene description parser.

Supports a YAML (or JSON) scene description format with:
- Render settings
- Objects (spheres)

Example scene file:
```yaml
render:
  image_width: 400
  aspect_ratio: "16:9"

objects:
  - type: sphere
    center: [0, 0, -1]
    radius: 0.5

  - type: sphere
    center: [0, -100.5, -1]
    radius: 100
```
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, Tuple
import json
import logging
import math

import yaml

from .vec3 import Vec3, Point3
from .shapes import Sphere, HittableList
from .renderer import RenderSettings

logger = logging.getLogger(__name__)


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


def create_default_scene() -> HittableList:
    """Create the default scene: a small sphere resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5))
    world.add(Sphere(Point3(0, -100.5, -1), 100))
    return world


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.objects: HittableList = HittableList()
        self.settings: RenderSettings = RenderSettings()

    def parse_file(self, filepath: str) -> Tuple[HittableList, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (scene, settings)
        """
        path = Path(filepath)
        if not path.is_file():
            raise SceneParseError(f"Scene file not found: {filepath}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e
        logger.debug("Parsing scene file %s", path)

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                # YAML is a superset of JSON
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[HittableList, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (scene, settings)
        """
        if not isinstance(data, dict):
            raise SceneParseError(f"Scene must be a mapping, got {type(data).__name__}")

        if 'objects' in data:
            self._parse_objects(data['objects'])

        if 'render' in data:
            self._parse_settings(data['render'])

        logger.info("Loaded scene with %d objects", len(self.objects))
        return self.objects, self.settings

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from a list or an {x, y, z} mapping."""
        try:
            if isinstance(data, (list, tuple)):
                if len(data) != 3:
                    raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
                return Vec3(float(data[0]), float(data[1]), float(data[2]))
            elif isinstance(data, dict):
                return Vec3(
                    float(data.get('x', 0)),
                    float(data.get('y', 0)),
                    float(data.get('z', 0))
                )
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}") from e
        raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_objects(self, objects_data: Any) -> None:
        """Parse objects section."""
        if not isinstance(objects_data, list):
            raise SceneParseError("'objects' must be a list")

        for obj_data in objects_data:
            if not isinstance(obj_data, dict):
                raise SceneParseError(f"Invalid object entry: {obj_data}")
            obj_type = str(obj_data.get('type', 'sphere')).lower()

            if obj_type == 'sphere':
                center = self._parse_vec3(obj_data.get('center', [0, 0, 0]))
                try:
                    self.objects.add(Sphere(center, float(obj_data.get('radius', 1.0))))
                except (TypeError, ValueError) as e:
                    raise SceneParseError(f"Invalid sphere: {e}") from e

            else:
                raise SceneParseError(f"Unknown object type: {obj_type}")

    @staticmethod
    def _parse_aspect_ratio(value: Any) -> float:
        """Parse an aspect ratio given as a number or as 'W:H' / 'W/H'."""
        if isinstance(value, str):
            for sep in (':', '/'):
                if sep in value:
                    width, _, height = value.partition(sep)
                    try:
                        return float(width) / float(height)
                    except (ValueError, ZeroDivisionError) as e:
                        raise SceneParseError(f"Invalid aspect ratio: {value}") from e
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Invalid aspect ratio: {value}") from e

    def _parse_settings(self, settings_data: Any) -> None:
        """Parse render settings section."""
        if not isinstance(settings_data, dict):
            raise SceneParseError("'render' must be a mapping")

        image_width = settings_data.get('image_width', RenderSettings.image_width)
        if isinstance(image_width, bool) or not isinstance(image_width, int) or image_width <= 0:
            raise SceneParseError(f"image_width must be a positive integer, got {image_width!r}")

        aspect_ratio = self._parse_aspect_ratio(
            settings_data.get('aspect_ratio', RenderSettings.aspect_ratio)
        )
        if not aspect_ratio > 0 or not math.isfinite(aspect_ratio):
            raise SceneParseError(f"aspect_ratio must be a positive finite number, got {aspect_ratio}")

        self.settings = RenderSettings(image_width=image_width, aspect_ratio=aspect_ratio)


def load_scene(filepath: str) -> Tuple[HittableList, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (scene, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[HittableList, RenderSettings]:
    """Convenience function to parse a scene from a dictionary."""
    parser = SceneParser()
    return parser.parse_dict(data)
