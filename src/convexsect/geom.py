## foundational 2D predicates for convexsect
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

"""foundational 2D geometry for **convexsect**

====================
OVERVIEW
====================

The convexsect.geom module provides the numeric primitives that every
intersection predicate in **convexsect** reduces to: a point type,
vector operations, the orientation test, segment crossing, line-line
intersection and point-to-segment distance.

constants
=========

convexsect.geom provides the "constant" ``epsilon``, used for
closeness comparisons and for deciding when two lines are parallel.
Redefine it at your peril.

points
======

Points are immutable ``Point`` named tuples of two floats, ``(x, y)``.
They index and unpack like ordinary tuples, so every function in this
module also accepts plain ``(x, y)`` tuples or ``[x, y]`` lists as
arguments.  Functions that compute points always return ``Point``
instances.  All of the following are points: ::

   p1 = point(0, 0)
   p2 = point((2.0, -2.0))
   p3 = Point(1.0, 3.0)

orientation
===========

``orient(a, b, c)`` returns +1 if ``c`` lies strictly to the left of
the directed line ``a -> b``, -1 if strictly to the right and 0 if the
three points are collinear.  It is the sign of the determinant ::

    | 1  ax  ay |
    | 1  bx  by |
    | 1  cx  cy |

and is the single primitive on which segment and polygon intersection
are built.  Pass ``exact=True`` to evaluate the determinant in exact
arithmetic (via ``mpmath``) when the points are nearly collinear.
``a == b`` is a precondition violation; ``orient`` returns 0 for it.

segments and lines
==================

A segment is just two points passed as two arguments.
``segmentsIntersect(a, b, c, d)`` is true when the segments cross.
Collinear overlaps and segments that only share an endpoint do *not*
count as crossing.  ``lineIntersection(a, b, c, d)`` solves the
intersection of the two infinite lines and raises
``ParallelLinesError`` if there is no unique solution.

"""

from math import sqrt, cos, sin, radians
from typing import NamedTuple
import mpmath as mpm

from convexsect.errors import DegenerateInputError, ParallelLinesError

## constants
epsilon=0.000005


## operations on scalars
## -----------------------

## booleans are ints to python, but True and False are not
## coordinates
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

def _sign(x):
    return (x > 0) - (x < 0)


## points
## ------

class Point(NamedTuple):
    """immutable 2D point"""
    x: float
    y: float

def point(x=0,y=0):
    """Point creation from a point, an (x, y) sequence, or two scalars"""
    if isinstance(x,Point):
        return x
    if isinstance(x,(tuple,list)):
        if len(x) == 2 and isgoodnum(x[0]) and isgoodnum(x[1]):
            return Point(float(x[0]),float(x[1]))
        raise ValueError('bad sequence passed to point(): {}'.format(x))
    if isgoodnum(x) and isgoodnum(y):
        return Point(float(x),float(y))
    raise ValueError('bad arguments passed to point(): {}, {}'.format(x,y))

def ispoint(x):
    """ is ``x`` something we can treat as a 2D point? """
    return isinstance(x,(tuple,list)) and len(x) == 2 and \
        isgoodnum(x[0]) and isgoodnum(x[1])

ORIGIN = Point(0.0,0.0)


## operations on vectors
## ---------------------

def add(a,b):
    """ `a + b`"""
    return Point(a[0]+b[0],a[1]+b[1])

def sub(a,b):
    """ `a - b`"""
    return Point(a[0]-b[0],a[1]-b[1])

def scale(a,c):
    """ vector ``a`` times scalar ``c``"""
    return Point(a[0]*c,a[1]*c)

def dot(a,b):
    return a[0]*b[0]+a[1]*b[1]

## z component of the 3D cross product of (a, 0) and (b, 0)
def cross(a,b):
    """ scalar 2D cross product `a x b`"""
    return a[0]*b[1]-a[1]*b[0]

def mag(a):
    """ magnitude of vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1])

def dist(a,b):
    """ euclidean distance between points ``a`` and ``b``"""
    return mag(sub(a,b))

def midpoint(a,b):
    return Point((a[0]+b[0])*0.5,(a[1]+b[1])*0.5)

def vclose(a,b):
    """ are two points the same within epsilon"""
    return close(dist(a,b),0)

def unit(a):
    """ unit vector in the direction of ``a``"""
    m = mag(a)
    if m < epsilon:
        raise DegenerateInputError('zero-length vector has no direction: {}'.format(a))
    return Point(a[0]/m,a[1]/m)

## rotate 90 degrees counter-clockwise, exactly
def orthoXY(a):
    """vector orthogonal to ``a``, rotated a quarter turn counter-clockwise"""
    return Point(-a[1],a[0])

def rotate(a,ang,cent=ORIGIN):
    """rotate point ``a`` by ``ang`` degrees counter-clockwise about ``cent``"""
    th = radians(ang)
    c = cos(th)
    s = sin(th)
    x = a[0]-cent[0]
    y = a[1]-cent[1]
    return Point(cent[0] + x*c - y*s, cent[1] + x*s + y*c)


## orientation
## -----------

def _orientExact(a,b,c):
    ## every float is exactly representable as an mpf, and exact=True
    ## keeps the differences and products from rounding
    dx1 = mpm.fsub(b[0],a[0],exact=True)
    dy1 = mpm.fsub(b[1],a[1],exact=True)
    dx2 = mpm.fsub(c[0],a[0],exact=True)
    dy2 = mpm.fsub(c[1],a[1],exact=True)
    det = mpm.fsub(mpm.fmul(dx1,dy2,exact=True),
                   mpm.fmul(dy1,dx2,exact=True),
                   exact=True)
    return int(mpm.sign(det))

def orient(a,b,c,exact=False):
    """Orientation of the triple ``a``, ``b``, ``c``: +1 if ``c`` lies
    left of the directed line ``a -> b``, -1 if right, 0 if collinear.

    This is the sign of `(b - a) x (c - a)`.  With ``exact=True`` the
    sign is computed without rounding error.
    """
    if exact:
        return _orientExact(a,b,c)
    return _sign((b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0]))


## segments and lines
## ------------------

def segmentsIntersect(a,b,c,d,exact=False):
    """Returns ``True`` iff segments ``a-b`` and ``c-d`` cross.

    The segments cross when ``c`` and ``d`` fall on different sides of
    line ``a-b`` and ``a`` and ``b`` fall on different sides of line
    ``c-d``.  An endpoint lying on the other segment counts as a
    crossing only if the other pair strictly straddles, so collinear
    overlaps and segments sharing an endpoint are not crossings.
    """
    o1 = orient(a,b,c,exact)
    o2 = orient(a,b,d,exact)
    if o1 == o2:
        return False
    o3 = orient(c,d,a,exact)
    o4 = orient(c,d,b,exact)
    if o3 == o4:
        return False
    ## each pair has an endpoint on the other line: shared endpoint
    if (o1 == 0 or o2 == 0) and (o3 == 0 or o4 == 0):
        return False
    return True

def lineIntersection(a,b,c,d):
    """Intersection point of the infinite lines through ``a-b`` and
    ``c-d``, by Cramer's rule.  Raises ``ParallelLinesError`` when the
    lines are parallel or coincident.
    """
    x1, y1 = a[0], a[1]
    x2, y2 = b[0], b[1]
    x3, y3 = c[0], c[1]
    x4, y4 = d[0], d[1]

    D = (x1-x2)*(y3-y4) - (y1-y2)*(x3-x4)
    if abs(D) < epsilon*epsilon:
        raise ParallelLinesError('no unique intersection for lines {}-{} and {}-{}'.format(a,b,c,d))

    p = x1*y2 - y1*x2
    q = x3*y4 - y3*x4
    return Point((p*(x3-x4) - (x1-x2)*q)/D,
                 (p*(y3-y4) - (y1-y2)*q)/D)

## closest point on the closed segment a-b to p.  A zero-length
## segment has only one point.
def segmentClosestPoint(a,b,p):
    """closest point to ``p`` on the segment ``a-b``"""
    ab = sub(b,a)
    ab2 = dot(ab,ab)
    if ab2 == 0:
        return point(a)
    t = dot(sub(p,a),ab)/ab2
    t = max(0.0,min(1.0,t))
    return add(a,scale(ab,t))

def segmentPointDist(a,b,p):
    """distance from point ``p`` to the segment ``a-b``"""
    return dist(p,segmentClosestPoint(a,b,p))

def segmentCircleIntersect(a,b,center,radius):
    """Returns ``True`` iff segment ``a-b`` comes within ``radius`` of
    ``center``."""
    return segmentPointDist(a,b,center) <= radius
