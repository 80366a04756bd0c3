"""Headless interactive scenes of convex shapes.

A :class:`Scene` owns the state an interactive intersection demo needs
(the shapes, their anchor points, the current selection, the previous
pointer position and each shape's colour) and exposes the
pick / move / release cycle of a pointer drag as plain method calls.
After every edit the affected vertices are re-derived from the anchors
and every pair of shapes is re-classified; shapes whose boundary meets
another shape's boundary are coloured ``red``, the rest ``black``.

Scenes can be described in YAML::

    schema: convexsect-scene-v0.1
    name: triangles
    pickRadius: 5.0
    shapes:
      - kind: isosceles
        basePoint: [270, 350]
        oppositeVertex: [300, 200]
      - kind: rectangle
        center: [100, 100]
        u: [1, 0]
        size: 100
      - kind: circle
        center: [50, 50]
        radius: 20
        rim: [0, 1]     # optional, direction of the rim anchor
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import sqrt
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from convexsect.errors import SceneError
from convexsect.geom import Point, add, dist, epsilon, mag, point, rotate, scale, sub, unit
from convexsect.poly import circleCircleIntersect, convexPolyCircleIntersect, convexPolysIntersect
from convexsect.shapes import isosceles, makeRectangle, midPoints

logger = logging.getLogger(__name__)

SCENE_SCHEMA = "convexsect-scene-v0.1"
DEFAULT_PICK_RADIUS = 5.0
IDLE_COLOR = "black"
HIT_COLOR = "red"


def _xy(p: Sequence[float]) -> List[float]:
    return [p[0], p[1]]


def _require(data: Dict[str, Any], key: str, kind: str) -> Any:
    if key not in data:
        raise SceneError(f"{kind} shape missing '{key}'")
    return data[key]


def _point_field(data: Dict[str, Any], key: str, kind: str) -> Point:
    value = _require(data, key, kind)
    try:
        return point(value)
    except ValueError as exc:
        raise SceneError(f"{kind} shape has bad '{key}': {value!r}") from exc


def _number_field(data: Dict[str, Any], key: str, kind: str) -> float:
    value = _require(data, key, kind)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneError(f"{kind} shape has bad '{key}': {value!r}")
    return float(value)


@dataclass
class IsoscelesShape:
    """Isosceles triangle anchored at its base midpoint and its apex."""

    basePoint: Point
    oppositeVertex: Point
    color: str = IDLE_COLOR
    poly: List[Point] = field(init=False, repr=False)
    anchors: List[Point] = field(init=False, repr=False)

    kind = "isosceles"

    def __post_init__(self) -> None:
        self.basePoint = point(self.basePoint)
        self.oppositeVertex = point(self.oppositeVertex)
        self.rebuild()

    def rebuild(self) -> None:
        self.poly = isosceles(self.basePoint, self.oppositeVertex)
        self.anchors = [self.basePoint, self.oppositeVertex]

    def drag(self, ianchor: int, delta: Sequence[float]) -> None:
        """Anchor 0 carries the whole triangle; anchor 1 moves the apex."""
        if ianchor == 0:
            base = add(self.basePoint, delta)
            apex = add(base, sub(self.oppositeVertex, self.basePoint))
        elif ianchor == 1:
            base = self.basePoint
            apex = add(self.oppositeVertex, delta)
        else:
            raise IndexError(f"isosceles shape has no anchor {ianchor}")
        poly = isosceles(base, apex)
        self.basePoint, self.oppositeVertex, self.poly = base, apex, poly
        self.anchors = [base, apex]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "basePoint": _xy(self.basePoint),
            "oppositeVertex": _xy(self.oppositeVertex),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IsoscelesShape":
        return cls(
            _point_field(data, "basePoint", cls.kind),
            _point_field(data, "oppositeVertex", cls.kind),
        )


@dataclass
class RectangleShape:
    """Square given by its center, a unit vector towards a vertex and a size.

    Anchors are the center followed by the four edge midpoints.
    """

    center: Point
    u: Point
    size: float
    color: str = IDLE_COLOR
    poly: List[Point] = field(init=False, repr=False)
    anchors: List[Point] = field(init=False, repr=False)

    kind = "rectangle"

    def __post_init__(self) -> None:
        self.center = point(self.center)
        self.u = unit(self.u)
        if self.size <= 0:
            raise SceneError(f"rectangle size must be positive, got {self.size}")
        self.size = float(self.size)
        self.rebuild()

    def rebuild(self) -> None:
        self.poly = makeRectangle(self.center, self.u, self.size)
        self.anchors = [self.center] + midPoints(self.poly)

    def drag(self, ianchor: int, delta: Sequence[float]) -> None:
        """Anchor 0 translates; a midpoint anchor rotates and resizes the
        square so that the midpoint follows the pointer."""
        if ianchor == 0:
            self.center = add(self.center, delta)
        elif 1 <= ianchor <= 4:
            w = sub(add(self.anchors[ianchor], delta), self.center)
            # midpoint k sits 45 + 90(k-1) degrees round from u
            u = rotate(unit(w), -(45.0 + 90.0 * (ianchor - 1)))
            self.u = unit(u)
            self.size = 2.0 * sqrt(2.0) * mag(w)
        else:
            raise IndexError(f"rectangle shape has no anchor {ianchor}")
        self.rebuild()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "center": _xy(self.center),
            "u": _xy(self.u),
            "size": self.size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RectangleShape":
        return cls(
            _point_field(data, "center", cls.kind),
            _point_field(data, "u", cls.kind),
            _number_field(data, "size", cls.kind),
        )


@dataclass
class CircleShape:
    """Circle anchored at its center and at one point of its rim."""

    center: Point
    radius: float
    color: str = IDLE_COLOR
    rim: Point = Point(1.0, 0.0)
    anchors: List[Point] = field(init=False, repr=False)

    kind = "circle"
    poly = None

    def __post_init__(self) -> None:
        self.center = point(self.center)
        if self.radius < 0:
            raise SceneError(f"circle radius must be non-negative, got {self.radius}")
        self.radius = float(self.radius)
        self.rim = unit(self.rim)
        self.rebuild()

    def rebuild(self) -> None:
        self.anchors = [self.center, add(self.center, scale(self.rim, self.radius))]

    def drag(self, ianchor: int, delta: Sequence[float]) -> None:
        """Anchor 0 translates; anchor 1 sets the radius to the pointer."""
        if ianchor == 0:
            self.center = add(self.center, delta)
        elif ianchor == 1:
            r = sub(add(self.anchors[1], delta), self.center)
            self.radius = mag(r)
            if self.radius > epsilon:
                self.rim = unit(r)
        else:
            raise IndexError(f"circle shape has no anchor {ianchor}")
        self.rebuild()

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "kind": self.kind,
            "center": _xy(self.center),
            "radius": self.radius,
        }
        # rim is optional, +x when absent
        if self.rim != Point(1.0, 0.0):
            data["rim"] = _xy(self.rim)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CircleShape":
        center = _point_field(data, "center", cls.kind)
        radius = _number_field(data, "radius", cls.kind)
        if "rim" not in data:
            return cls(center, radius)
        rim = _point_field(data, "rim", cls.kind)
        if mag(rim) < epsilon:
            raise SceneError(f"circle shape has zero-length rim: {data['rim']!r}")
        return cls(center, radius, rim=rim)


SHAPE_KINDS = {
    IsoscelesShape.kind: IsoscelesShape,
    RectangleShape.kind: RectangleShape,
    CircleShape.kind: CircleShape,
}


def shapes_intersect(s1, s2) -> bool:
    """Pick the boundary predicate that matches the two shapes."""
    c1 = isinstance(s1, CircleShape)
    c2 = isinstance(s2, CircleShape)
    if c1 and c2:
        return circleCircleIntersect(s1.center, s1.radius, s2.center, s2.radius)
    if c1:
        return convexPolyCircleIntersect(s2.poly, s1.center, s1.radius)
    if c2:
        return convexPolyCircleIntersect(s1.poly, s2.center, s2.radius)
    return convexPolysIntersect(s1.poly, s2.poly)


def shape_from_dict(data: Dict[str, Any]):
    if not isinstance(data, dict):
        raise SceneError(f"shape entry must be a mapping, got {data!r}")
    kind = data.get("kind")
    cls = SHAPE_KINDS.get(kind)
    if cls is None:
        raise SceneError(f"unknown shape kind: {kind!r}")
    return cls.from_dict(data)


class Scene:
    """A set of shapes edited by dragging their anchor points."""

    def __init__(self, shapes=None, pick_radius: float = DEFAULT_PICK_RADIUS,
                 name: Optional[str] = None):
        if pick_radius <= 0:
            raise SceneError(f"pick radius must be positive, got {pick_radius}")
        self.shapes = list(shapes or [])
        self.pick_radius = float(pick_radius)
        self.name = name
        self.selection: Optional[Tuple[int, int]] = None
        self.prev_pointer: Optional[Point] = None
        self.hits: List[Tuple[int, int]] = []
        self.classify()

    def __repr__(self):
        return f"Scene(name={self.name!r}, shapes={len(self.shapes)})"

    @property
    def selected(self):
        if self.selection is None:
            return None
        return self.shapes[self.selection[0]]

    def add(self, shape) -> int:
        self.shapes.append(shape)
        self.classify()
        return len(self.shapes) - 1

    def pick(self, p: Sequence[float]) -> bool:
        """Select the anchor under pointer position ``p``.

        When several anchors are within reach the last one in drawing
        order wins.
        """
        p = point(p)
        self.selection = None
        self.prev_pointer = p
        for ishape, shape in enumerate(self.shapes):
            for ianchor, a in enumerate(shape.anchors):
                if dist(p, a) <= self.pick_radius:
                    self.selection = (ishape, ianchor)
        logger.debug("pick at %s selected %s", tuple(p), self.selection)
        return self.selection is not None

    def move(self, p: Sequence[float]) -> bool:
        """Drag the selected anchor to ``p``; returns ``False`` when
        nothing is selected."""
        if self.selection is None:
            return False
        p = point(p)
        delta = sub(p, self.prev_pointer)
        ishape, ianchor = self.selection
        # a rejected drag leaves both the shape and the pointer baseline
        self.shapes[ishape].drag(ianchor, delta)
        self.prev_pointer = p
        logger.debug("dragged anchor %d of shape %d by %s", ianchor, ishape, tuple(delta))
        self.classify()
        return True

    def release(self) -> None:
        self.selection = None

    def classify(self) -> List[Tuple[int, int]]:
        """Recolour every shape and return the intersecting index pairs."""
        for shape in self.shapes:
            shape.color = IDLE_COLOR
        hits = []
        n = len(self.shapes)
        for i in range(n):
            for j in range(i + 1, n):
                if shapes_intersect(self.shapes[i], self.shapes[j]):
                    self.shapes[i].color = HIT_COLOR
                    self.shapes[j].color = HIT_COLOR
                    hits.append((i, j))
        self.hits = hits
        logger.debug("classified %d shapes, %d intersecting pairs", n, len(hits))
        return hits

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"schema": SCENE_SCHEMA}
        if self.name:
            data["name"] = self.name
        data["pickRadius"] = self.pick_radius
        data["shapes"] = [shape.to_dict() for shape in self.shapes]
        return data

    def save(self, path: Path | str) -> Path:
        import yaml

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as fp:
            yaml.safe_dump(self.to_dict(), fp, sort_keys=False)
        logger.info("saved scene %r to %s", self.name, target)
        return target


def scene_from_dict(data: Dict[str, Any]) -> Scene:
    if not isinstance(data, dict):
        raise SceneError("scene description must be a mapping")
    schema = data.get("schema", SCENE_SCHEMA)
    if schema != SCENE_SCHEMA:
        raise SceneError(f"unsupported scene schema: {schema!r}")
    shapes = data.get("shapes", []) or []
    if not isinstance(shapes, list):
        raise SceneError("scene 'shapes' must be a list")
    pick_radius = data.get("pickRadius", DEFAULT_PICK_RADIUS)
    if isinstance(pick_radius, bool) or not isinstance(pick_radius, (int, float)):
        raise SceneError(f"bad pickRadius: {pick_radius!r}")
    return Scene([shape_from_dict(entry) for entry in shapes],
                 pick_radius=pick_radius, name=data.get("name"))


def load_scene(path: Path | str) -> Scene:
    import yaml

    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"scene not found: {source}")
    with source.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise SceneError(f"could not parse {source}: {exc}") from exc
    scene = scene_from_dict(data)
    if scene.name is None:
        scene.name = source.stem
    logger.info("loaded scene %r with %d shapes from %s", scene.name, len(scene.shapes), source)
    return scene


## built-in demo layouts
DEMO_SCENES: Dict[str, Dict[str, Any]] = {
    "triangles": {
        "name": "triangles",
        "shapes": [
            {"kind": "isosceles", "basePoint": [270, 350], "oppositeVertex": [300, 200]},
            {"kind": "isosceles", "basePoint": [100, 50], "oppositeVertex": [50, 20]},
            {"kind": "isosceles", "basePoint": [250, 150], "oppositeVertex": [150, 100]},
        ],
    },
    "rectangles": {
        "name": "rectangles",
        "shapes": [
            {"kind": "rectangle", "center": [270, 350], "u": [1, 0], "size": 100},
            {"kind": "rectangle", "center": [100, 100], "u": [1, 0], "size": 100},
            {"kind": "rectangle", "center": [250, 150], "u": [1, 0], "size": 100},
        ],
    },
    "mixed": {
        "name": "mixed",
        "shapes": [
            {"kind": "rectangle", "center": [150, 150], "u": [1, 0], "size": 120},
            {"kind": "isosceles", "basePoint": [320, 200], "oppositeVertex": [320, 100]},
            {"kind": "circle", "center": [220, 150], "radius": 40},
            {"kind": "circle", "center": [420, 300], "radius": 30},
        ],
    },
}


def demo_scene(name: str) -> Scene:
    if name not in DEMO_SCENES:
        raise SceneError(f"unknown demo scene {name!r}; choose from {sorted(DEMO_SCENES)}")
    return scene_from_dict(DEMO_SCENES[name])


def render_scene(scene: Scene, filename: Path | str) -> Path:
    """Write ``scene`` to a DXF file, coloured by its classification."""
    from convexsect.ezdxf_drawable import ezdxfDraw  # ezdxf only needed when rendering

    dd = ezdxfDraw(filename)
    dd.draw_scene(scene)
    out = dd.display()
    logger.info("rendered scene %r to %s", scene.name, out)
    return out


__all__ = [
    "SCENE_SCHEMA",
    "DEFAULT_PICK_RADIUS",
    "IDLE_COLOR",
    "HIT_COLOR",
    "IsoscelesShape",
    "RectangleShape",
    "CircleShape",
    "SHAPE_KINDS",
    "Scene",
    "shapes_intersect",
    "shape_from_dict",
    "scene_from_dict",
    "load_scene",
    "demo_scene",
    "render_scene",
    "DEMO_SCENES",
]
