"""Exceptions raised by convexsect for invalid geometric input.

Every exception here derives from :class:`ValueError`, so callers that
already guard geometry calls with ``except ValueError`` keep working.
"""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for violated geometric preconditions."""


class DegenerateInputError(GeometryError):
    """Zero-length vectors or edges, coincident anchors, too few vertices."""


class NonConvexInputError(GeometryError):
    """A polygon passed where a convex one is required."""


class ParallelLinesError(GeometryError):
    """Two lines have no unique intersection point."""


class SceneError(ValueError):
    """A scene description could not be interpreted."""


__all__ = [
    'GeometryError',
    'DegenerateInputError',
    'NonConvexInputError',
    'ParallelLinesError',
    'SceneError',
]
