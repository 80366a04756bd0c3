## convex polygon and circle intersection for convexsect
## Copyright (c) 2022 convexsect contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Convex Polygons and Circles
===========================

A polygon is a list of three or more points forming a convex, simply
wound circulation.  Edge ``i`` joins vertex ``i`` to vertex
``(i+1) % n``; the first vertex is *not* repeated at the end.  Either
winding is accepted, but a single polygon must be wound consistently.

A circle is a ``Circle(center, radius)`` named tuple.

The intersection predicates here answer whether two *boundaries*
touch or cross.  One shape lying entirely inside another, with no
boundary contact, is reported as not intersecting.

Convexity is a precondition of ``convexPolysIntersect()`` and
``convexPolyCircleIntersect()``.  It is not checked unless
``check=True`` is passed; ``checkConvexPoly()`` performs the same
validation on its own.
"""

from math import atan2, degrees
from typing import NamedTuple

from convexsect.geom import *
from convexsect.errors import DegenerateInputError, NonConvexInputError


## polygons
## --------

def poly(*args):
    """Make a polygon from a list of points, or from points passed as
    separate arguments"""
    if len(args) == 1 and isinstance(args[0],(list,tuple)) and \
       not ispoint(args[0]):
        args = args[0]
    if len(args) < 3:
        raise DegenerateInputError('polygon needs at least 3 vertices, got {}'.format(len(args)))
    return [point(p) for p in args]

def ispoly(a):
    return isinstance(a,(list,tuple)) and len(a) >= 3 and \
        all(ispoint(p) for p in a)

def polybbox(a):
    """axis-aligned bounding box ``[lower_left, upper_right]`` of a
    list of points"""
    xs = [p[0] for p in a]
    ys = [p[1] for p in a]
    return [Point(min(xs),min(ys)),Point(max(xs),max(ys))]

def bboxesOverlap(b1,b2):
    """do two bounding boxes touch or overlap?"""
    return b1[0][0] <= b2[1][0] and b2[0][0] <= b1[1][0] and \
        b1[0][1] <= b2[1][1] and b2[0][1] <= b1[1][1]

def polyedges(a):
    """generate the ``(start, end)`` pairs of the edges of polygon ``a``"""
    n = len(a)
    for i in range(n):
        yield a[i], a[(i+1) % n]

def checkConvexPoly(a):
    """Validate that ``a`` is a non-degenerate convex polygon.

    Returns the winding, +1 for counter-clockwise and -1 for
    clockwise.  Raises ``DegenerateInputError`` for fewer than three
    vertices, zero-length edges or all-collinear vertices, and
    ``NonConvexInputError`` for polygons that turn both ways or wind
    around more than once.
    """
    if not isinstance(a,(list,tuple)) or len(a) < 3:
        raise DegenerateInputError('polygon needs at least 3 vertices: {}'.format(a))
    for p in a:
        if not ispoint(p):
            raise ValueError('bad vertex in polygon: {}'.format(p))
    for p1, p2 in polyedges(a):
        if dist(p1,p2) < epsilon:
            raise DegenerateInputError('zero-length edge at {}'.format(p1))

    n = len(a)
    winding = 0
    turning = 0.0
    for i in range(n):
        p0 = a[i]
        p1 = a[(i+1) % n]
        p2 = a[(i+2) % n]
        o = orient(p0,p1,p2)
        if o != 0:
            if winding == 0:
                winding = o
            elif o != winding:
                raise NonConvexInputError('polygon turns both ways at vertex {}'.format((i+1) % n))
        e1 = sub(p1,p0)
        e2 = sub(p2,p1)
        turning += degrees(atan2(cross(e1,e2),dot(e1,e2)))

    if winding == 0:
        raise DegenerateInputError('all polygon vertices are collinear')
    ## a convex circulation turns through exactly one full revolution
    if abs(turning) > 360.0 + 1e-6:
        raise NonConvexInputError('polygon winds around {:.0f} degrees'.format(abs(turning)))
    return winding

def isConvexPoly(a):
    """boolean form of ``checkConvexPoly()``"""
    try:
        checkConvexPoly(a)
    except ValueError:
        return False
    return True


## circles
## -------

class Circle(NamedTuple):
    center: Point
    radius: float

def circle(center,radius):
    """Make a circle, checking that the radius is a non-negative number"""
    if not isgoodnum(radius) or radius < 0:
        raise ValueError('bad circle radius: {}'.format(radius))
    return Circle(point(center),float(radius))

def iscircle(c):
    return isinstance(c,(tuple,list)) and len(c) == 2 and \
        ispoint(c[0]) and isgoodnum(c[1]) and c[1] >= 0

def circlebbox(center,radius):
    return [Point(center[0]-radius,center[1]-radius),
            Point(center[0]+radius,center[1]+radius)]


## intersection predicates
## -----------------------

def convexPolysIntersect(a,b,check=False):
    """Returns ``True`` iff the boundaries of convex polygons ``a`` and
    ``b`` cross.

    Every edge of ``a`` is tested against every edge of ``b`` with
    ``segmentsIntersect()``.  A polygon nested inside the other, with
    no edge crossing, is *not* reported as intersecting.
    Coincident or collinear-overlapping edges are never reported as
    crossing.  The answer for a polygon tested against an exact copy of
    itself is therefore unspecified.
    """
    if check:
        checkConvexPoly(a)
        checkConvexPoly(b)

    if not bboxesOverlap(polybbox(a),polybbox(b)):
        return False

    for p1, p2 in polyedges(a):
        for p3, p4 in polyedges(b):
            if segmentsIntersect(p1,p2,p3,p4):
                return True
    return False

def convexPolyCircleIntersect(a,center,radius,check=False):
    """Returns ``True`` iff some edge of convex polygon ``a`` comes
    within ``radius`` of ``center``.

    A circle strictly inside the polygon and clear of every edge is
    not reported as intersecting.
    """
    if radius < 0:
        raise ValueError('negative circle radius: {}'.format(radius))
    if check:
        checkConvexPoly(a)

    if not bboxesOverlap(polybbox(a),circlebbox(center,radius)):
        return False

    for p1, p2 in polyedges(a):
        if segmentCircleIntersect(p1,p2,center,radius):
            return True
    return False

def circleCircleIntersect(center1,radius1,center2,radius2):
    """Returns ``True`` iff two circles' boundaries meet, which is when
    `|r1 - r2| <= d <= r1 + r2` for center distance ``d``.  Tangency
    counts; a circle nested inside the other does not.
    """
    if radius1 < 0 or radius2 < 0:
        raise ValueError('negative circle radius: {}, {}'.format(radius1,radius2))
    d = dist(center1,center2)
    if d > radius1 + radius2:
        return False
    if d < abs(radius1 - radius2):
        return False
    return True
