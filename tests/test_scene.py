from math import sqrt
from pathlib import Path

import pytest
import yaml

from convexsect.errors import DegenerateInputError, SceneError
from convexsect.geom import point, vclose
from convexsect.scene import (
    HIT_COLOR,
    IDLE_COLOR,
    SCENE_SCHEMA,
    CircleShape,
    IsoscelesShape,
    RectangleShape,
    Scene,
    demo_scene,
    load_scene,
    scene_from_dict,
    shapes_intersect,
)
from convexsect.shapes import isosceles


def test_drag_triangle_base_carries_apex():
    tri = IsoscelesShape((0, 0), (0, 10))
    scene = Scene([tri])
    assert scene.pick((1, 1))
    assert scene.selection == (0, 0)
    assert scene.move((11, 1))
    assert tri.basePoint == (10, 0)
    assert tri.oppositeVertex == (10, 10)
    assert tri.poly == isosceles((10, 0), (10, 10))
    assert tri.anchors == [(10, 0), (10, 10)]


def test_drag_triangle_apex():
    tri = IsoscelesShape((0, 0), (0, 10))
    scene = Scene([tri])
    assert scene.pick((0, 10))
    assert scene.selection == (0, 1)
    scene.move((5, 10))
    assert tri.basePoint == (0, 0)
    assert tri.oppositeVertex == (5, 10)


def test_drag_is_incremental():
    tri = IsoscelesShape((0, 0), (0, 10))
    scene = Scene([tri])
    scene.pick((0, 0))
    scene.move((1, 0))
    scene.move((3, 0))
    assert tri.basePoint == (3, 0)
    assert scene.prev_pointer == (3, 0)


def test_degenerate_drag_keeps_shape():
    tri = IsoscelesShape((0, 0), (0, 10))
    scene = Scene([tri])
    scene.pick((0, 10))
    with pytest.raises(DegenerateInputError):
        scene.move((0, 0))
    assert tri.oppositeVertex == (0, 10)
    assert tri.poly == isosceles((0, 0), (0, 10))
    # the apex keeps following the pointer after a rejected drag
    assert scene.prev_pointer == (0, 10)
    scene.move((0, 5))
    assert tri.oppositeVertex == (0, 5)


def test_pick_miss_and_release():
    scene = Scene([IsoscelesShape((0, 0), (0, 10))])
    assert not scene.pick((50, 50))
    assert scene.selection is None
    assert scene.selected is None
    assert not scene.move((60, 60))
    assert scene.pick((0, 0))
    assert scene.selected is scene.shapes[0]
    scene.release()
    assert scene.selection is None
    assert not scene.move((5, 5))


def test_pick_last_match_wins():
    a = CircleShape((0, 0), 10)
    b = CircleShape((3, 0), 10)
    scene = Scene([a, b])
    assert scene.pick((1, 0))
    assert scene.selection == (1, 0)


def test_pick_radius():
    scene = Scene([CircleShape((0, 0), 10)], pick_radius=1.0)
    assert not scene.pick((2, 0))
    assert scene.pick((0.5, 0.5))
    with pytest.raises(SceneError):
        Scene([], pick_radius=0)


def test_rectangle_center_drag():
    rect = RectangleShape((0, 0), (1, 0), 4)
    scene = Scene([rect], pick_radius=0.5)
    scene.pick((0, 0))
    scene.move((10, 5))
    assert rect.center == (10, 5)
    assert rect.poly == [(12, 5), (10, 7), (8, 5), (10, 3)]


def test_rectangle_midpoint_drag_rotates():
    rect = RectangleShape((0, 0), (1, 0), 4)
    assert rect.anchors == [(0, 0), (1, 1), (-1, 1), (-1, -1), (1, -1)]
    scene = Scene([rect], pick_radius=0.5)
    assert scene.pick((1, 1))
    assert scene.selection == (0, 1)
    scene.move((0, 2))
    assert vclose(rect.anchors[1], point(0, 2))
    assert rect.size == pytest.approx(4 * sqrt(2))
    expected = [(2, 2), (-2, 2), (-2, -2), (2, -2)]
    for p, q in zip(rect.poly, expected):
        assert vclose(p, q)


def test_rectangle_midpoint_drag_onto_center():
    rect = RectangleShape((0, 0), (1, 0), 4)
    scene = Scene([rect], pick_radius=0.5)
    scene.pick((1, 1))
    with pytest.raises(DegenerateInputError):
        scene.move((0, 0))
    assert rect.u == (1, 0)
    assert rect.size == 4
    scene.move((0, 2))
    assert vclose(rect.anchors[1], point(0, 2))


def test_rectangle_opposite_midpoint_drag():
    rect = RectangleShape((0, 0), (1, 0), 4)
    scene = Scene([rect], pick_radius=0.5)
    scene.pick((-1, -1))
    assert scene.selection == (0, 3)
    scene.move((-2, -2))
    assert vclose(rect.anchors[3], point(-2, -2))
    assert vclose(rect.u, point(1, 0))
    assert rect.size == pytest.approx(8)


def test_rectangle_normalizes_direction():
    rect = RectangleShape((0, 0), (3, 0), 4)
    assert rect.u == (1, 0)
    with pytest.raises(DegenerateInputError):
        RectangleShape((0, 0), (0, 0), 4)
    with pytest.raises(SceneError):
        RectangleShape((0, 0), (1, 0), 0)


def test_circle_drag():
    c = CircleShape((0, 0), 5)
    assert c.anchors == [(0, 0), (5, 0)]
    scene = Scene([c])
    scene.pick((5, 0))
    scene.move((0, 8))
    assert c.radius == pytest.approx(8)
    assert vclose(c.anchors[1], point(0, 8))
    scene.release()
    scene.pick((0, 0))
    scene.move((1, 1))
    assert c.center == (1, 1)
    assert vclose(c.anchors[1], point(1, 9))


def test_classify_colors():
    a = RectangleShape((0, 0), (1, 0), 10)
    b = RectangleShape((5, 0), (1, 0), 10)
    c = CircleShape((100, 100), 5)
    scene = Scene([a, b, c], pick_radius=1.0)
    assert scene.hits == [(0, 1)]
    assert a.color == HIT_COLOR
    assert b.color == HIT_COLOR
    assert c.color == IDLE_COLOR

    # drag the circle onto the first square's vertex
    scene.pick((100, 100))
    scene.move((5, 0))
    assert scene.hits == [(0, 1), (0, 2), (1, 2)]
    assert c.color == HIT_COLOR


def test_classify_nested_is_not_a_hit():
    outer = RectangleShape((0, 0), (1, 0), 100)
    inner = RectangleShape((0, 0), (1, 0), 10)
    dot = CircleShape((0, 0), 1)
    scene = Scene([outer, inner, dot])
    assert scene.classify() == []
    assert all(s.color == IDLE_COLOR for s in scene.shapes)


def test_shapes_intersect_dispatch():
    tri = IsoscelesShape((0, 0), (0, 10))
    circ = CircleShape((0, 12), 2)
    far = CircleShape((0, 100), 2)
    assert shapes_intersect(tri, circ)
    assert shapes_intersect(circ, tri)
    assert not shapes_intersect(tri, far)
    assert not shapes_intersect(circ, far)


def test_add_reclassifies():
    scene = Scene([CircleShape((0, 0), 5)])
    assert scene.hits == []
    idx = scene.add(CircleShape((8, 0), 5))
    assert idx == 1
    assert scene.hits == [(0, 1)]


def test_demo_rectangles():
    scene = demo_scene("rectangles")
    assert scene.name == "rectangles"
    assert scene.hits == []
    # bring the second square next to the third
    assert scene.pick((100, 100))
    scene.move((200, 150))
    assert scene.hits == [(1, 2)]


def test_demo_unknown():
    with pytest.raises(SceneError):
        demo_scene("robots")


def test_yaml_round_trip(tmp_path: Path):
    scene = demo_scene("mixed")
    path = scene.save(tmp_path / "mixed.yaml")
    with path.open("r", encoding="utf-8") as fp:
        raw = yaml.safe_load(fp)
    assert raw["schema"] == SCENE_SCHEMA
    assert raw["shapes"][0]["kind"] == "rectangle"

    loaded = load_scene(path)
    assert loaded.to_dict() == scene.to_dict()
    assert [s.anchors for s in loaded.shapes] == [s.anchors for s in scene.shapes]
    assert loaded.hits == scene.hits


def test_circle_rim_round_trip(tmp_path: Path):
    scene = Scene([CircleShape((0, 0), 5)])
    scene.pick((5, 0))
    scene.move((0, 5))
    assert scene.shapes[0].anchors == [(0, 0), (0, 5)]

    loaded = load_scene(scene.save(tmp_path / "rim.yaml"))
    assert loaded.shapes[0].anchors == [(0, 0), (0, 5)]
    assert scene_from_dict(scene.to_dict()).shapes[0].rim == (0, 1)

    # an undragged rim is left out of the file
    assert "rim" not in CircleShape((0, 0), 5).to_dict()


def test_yaml_color_is_recomputed():
    scene = scene_from_dict({"shapes": [{"kind": "circle", "center": [0, 0], "radius": 3, "color": "blue"}]})
    assert scene.shapes[0].color == IDLE_COLOR


def test_load_names_scene_after_file(tmp_path: Path):
    path = tmp_path / "lonely.yaml"
    path.write_text("shapes:\n  - kind: circle\n    center: [0, 0]\n    radius: 3\n")
    scene = load_scene(path)
    assert scene.name == "lonely"
    assert scene.pick_radius == 5.0
    assert isinstance(scene.shapes[0], CircleShape)


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_scene(tmp_path / "nope.yaml")


def test_load_bad_yaml(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("shapes: [unclosed\n")
    with pytest.raises(SceneError):
        load_scene(path)


@pytest.mark.parametrize(
    "data",
    [
        {"shapes": [{"kind": "hexagon"}]},
        {"shapes": [{"kind": "circle", "center": [0, 0]}]},
        {"shapes": [{"kind": "circle", "center": [0, 0, 0], "radius": 1}]},
        {"shapes": [{"kind": "circle", "center": [0, 0], "radius": 1, "rim": [0, 0]}]},
        {"shapes": [{"kind": "circle", "center": [0, 0], "radius": 1, "rim": "up"}]},
        {"shapes": [{"kind": "rectangle", "center": [0, 0], "u": [1, 0], "size": "big"}]},
        {"shapes": ["circle"]},
        {"shapes": {"kind": "circle"}},
        {"schema": "something-else", "shapes": []},
        {"pickRadius": "wide", "shapes": []},
        ["not", "a", "mapping"],
    ],
)
def test_bad_scene_descriptions(data):
    with pytest.raises(SceneError):
        scene_from_dict(data)


def test_scene_error_is_value_error():
    assert issubclass(SceneError, ValueError)
