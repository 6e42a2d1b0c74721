#!/usr/bin/env python3
"""
Raycaster - A minimal Python ray casting renderer

Main entry point for rendering scenes.
"""

import sys

from raycaster.cli import main


if __name__ == '__main__':
    sys.exit(main())
