"""Construction helpers that turn compact shape descriptions into polygons.

Each helper is a pure function of its anchor points, so an editor can
re-derive the vertices after every drag of an anchor and hand the
result straight to the intersection predicates in :mod:`convexsect.poly`.
"""

from __future__ import annotations

from typing import List, Sequence

from convexsect.geom import Point, add, dist, midpoint, orthoXY, point, scale, sub, vclose
from convexsect.errors import DegenerateInputError


def makeRectangle(center: Sequence[float], u: Sequence[float], size: float) -> List[Point]:
    """Return the four-vertex circulation of a square.

    ``u`` is a unit vector from ``center`` towards the first vertex and
    ``size`` the extent along ``u``.  The second vertex lies along
    ``u`` rotated a quarter turn counter-clockwise, so the circulation
    is counter-clockwise: ::

        makeRectangle((0, 0), (1, 0), 4) == [(2, 0), (0, 2), (-2, 0), (0, -2)]
    """

    v = orthoXY(u)
    half = size / 2
    return [
        add(center, scale(u, half)),
        add(center, scale(v, half)),
        add(center, scale(u, -half)),
        add(center, scale(v, -half)),
    ]


def isosceles(basePoint: Sequence[float], oppositeVertex: Sequence[float]) -> List[Point]:
    """Return ``[apex, base1, base2]`` for the isosceles triangle whose
    base is centred on ``basePoint`` and whose apex is ``oppositeVertex``.

    The half-base equals the height, so each base vertex is ``basePoint``
    plus or minus the height vector turned a quarter turn.
    """

    if vclose(basePoint, oppositeVertex):
        raise DegenerateInputError(
            f'isosceles base point and apex coincide: {tuple(basePoint)}'
        )
    u = sub(basePoint, oppositeVertex)
    v = Point(-u[1], u[0])
    w = Point(u[1], -u[0])
    return [point(oppositeVertex), add(basePoint, v), add(basePoint, w)]


def midPoints(poly: Sequence[Sequence[float]]) -> List[Point]:
    """Midpoints of the edges of ``poly``, in edge order."""

    n = len(poly)
    return [midpoint(poly[i], poly[(i + 1) % n]) for i in range(n)]


def closestPolyPoint(p: Sequence[float], poly: Sequence[Sequence[float]]) -> Point:
    """Return the vertex of ``poly`` closest to ``p``; the first wins ties."""

    if not poly:
        raise DegenerateInputError('closestPolyPoint called with an empty polygon')
    closest = poly[0]
    best = dist(p, closest)
    for q in poly[1:]:
        d = dist(p, q)
        if d < best:
            best = d
            closest = q
    return point(closest)


__all__ = [
    'makeRectangle',
    'isosceles',
    'midPoints',
    'closestPolyPoint',
]
