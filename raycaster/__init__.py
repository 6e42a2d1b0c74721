"""
Raycaster - A minimal Python ray casting renderer

Casts one ray per pixel through a fixed pinhole camera and shades hits by
their surface normal, with a sky gradient for misses. Output is plain-text
PPM or any format Pillow can write.
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point3, Color, ZeroLengthVectorError, dot, cross, unit_vector
from .ray import Ray
from .interval import Interval
from .shapes import Hittable, HitRecord, Sphere, HittableList
from .image import ImageWriter, PPMWriter, ImageBuffer, format_color
from .camera import Camera
from .renderer import Renderer, RenderSettings
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene, create_default_scene
