# -*- coding: utf-8 -*-
"""convexsect: boundary intersection tests for 2D convex polygons and
circles, with a headless scene model on top.

The predicates live in :mod:`convexsect.geom` (segments) and
:mod:`convexsect.poly` (polygons and circles); shape builders in
:mod:`convexsect.shapes`; scenes, YAML files and DXF rendering in
:mod:`convexsect.scene`.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("convexsect")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
