"""
Command line entry point for rendering scenes.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, Sequence

from .image import PPMWriter
from .logging_config import setup_logging
from .renderer import Renderer, RenderSettings
from .scene_parser import SceneParseError, create_default_scene, load_scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='raycaster',
        description='A minimal ray casting renderer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  raycaster > image.ppm
  raycaster --width 800 --aspect-ratio 2.0 --output render.png
  raycaster --scene scenes/spheres.yaml --output spheres.ppm
        '''
    )
    parser.add_argument('--width', type=int, default=None,
                        help='Image width (default: from scene, else 400)')
    parser.add_argument('--aspect-ratio', type=float, default=None,
                        help='Width / height ratio (default: from scene, else 16/9)')
    parser.add_argument('--scene', type=str, default=None,
                        help='YAML or JSON scene file (default: built-in scene)')
    parser.add_argument('--output', '-o', type=str, default='-',
                        help="Output file, '-' writes PPM to stdout (default: -)")
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Hide the progress bar and info messages')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write log messages to this file')
    return parser


def make_progress_bar(bar_len: int = 40):
    """Return a progress callback drawing a text bar on stderr."""
    def progress_callback(progress: float) -> None:
        filled = int(bar_len * progress)
        bar = '█' * filled + '░' * (bar_len - filled)
        print(f'\rRendering: [{bar}] {int(progress * 100)}%', end='', file=sys.stderr, flush=True)
        if progress >= 1.0:
            print(file=sys.stderr)

    return progress_callback


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    setup_logging(level, log_file=args.log_file)

    try:
        if args.scene:
            world, settings = load_scene(args.scene)
        else:
            world, settings = create_default_scene(), RenderSettings()

        if args.width is not None:
            settings.image_width = args.width
        if args.aspect_ratio is not None:
            settings.aspect_ratio = args.aspect_ratio

        renderer = Renderer(settings)
    except (SceneParseError, ValueError) as e:
        logger.error("%s", e)
        return 1

    if not args.quiet:
        renderer.set_progress_callback(make_progress_bar())

    try:
        if args.output == '-':
            renderer.render(world, PPMWriter(sys.stdout))
            sys.stdout.flush()
        else:
            renderer.render_to_file(world, args.output)
    except (OSError, ValueError) as e:
        logger.error("Failed to write image: %s", e)
        return 1

    return 0
