"""Tests for primitive placement and layered duplicates."""

import pytest

from typoposter.engine.placement import (
    OUTLINED,
    add_text_run,
    duplicate_with_alternation,
    insert_behind,
    place_shape,
    rotated_about_anchor,
)
from typoposter.engine.scene import BLACK, WHITE, RectPrimitive, ShapeInstance, TextRun
from typoposter.engine.transforms import Rotate, Scale, Translate


def test_background_is_first(scene):
    bg = scene.primitives[0]
    assert isinstance(bg, RectPrimitive)
    assert bg.role == "background"
    assert (bg.width, bg.height, bg.fill) == (300, 600, WHITE)


def test_add_text_run_defaults(scene):
    run = add_text_run(scene, 16, 100, "HELLO", 40)
    assert scene.primitives[-1] is run
    assert run.fill == BLACK
    assert run.font_weight == 900
    assert run.text_anchor == "start"
    assert run.transform == []


def test_rotated_about_anchor():
    assert rotated_about_anchor(0, 5, 6) == []
    assert rotated_about_anchor(360, 5, 6) == []
    assert rotated_about_anchor(90, 5, 6) == [Rotate(90, 5, 6)]


def test_place_shape_filled(scene, shapes_by_name):
    square = shapes_by_name["square"]
    shape = place_shape(scene, square, (100, 200), 0.5, 90)
    assert shape.transform == [Translate(100, 200), Rotate(90), Scale(0.5)]
    assert all(el.attributes["fill"] == BLACK for el in shape.elements)
    # The template keeps its own paint
    assert square.elements[0].attributes["fill"] == "red"

    box = scene.measure(shape)
    assert box.x == pytest.approx(75)
    assert box.y == pytest.approx(175)
    assert box.width == pytest.approx(50)
    assert box.height == pytest.approx(50)


def test_place_shape_outlined_stroke_width(scene, shapes_by_name):
    small = place_shape(scene, shapes_by_name["square"], (50, 50), 0.5, 0, OUTLINED)
    el = small.elements[0]
    assert el.attributes["fill"] == "none"
    assert el.attributes["stroke"] == BLACK
    assert el.attributes["stroke-width"] == "4"

    large = place_shape(scene, shapes_by_name["square"], (50, 50), 4, 0, OUTLINED)
    assert large.elements[0].attributes["stroke-width"] == "1"


def test_insert_behind_keeps_background_first(scene, shapes_by_name):
    run = add_text_run(scene, 16, 100, "HELLO", 40)
    shape = place_shape(scene, shapes_by_name["bar"], (50, 50), 1, 0)
    insert_behind(scene, shape)
    assert scene.primitives[0].role == "background"
    assert scene.primitives[1] is shape
    assert scene.primitives[2] is run
    assert len(scene) == 3


def test_duplicate_alternates_fill_and_offset(scene):
    base = add_text_run(scene, 16, 100, "HELLO", 40)
    clones = duplicate_with_alternation(scene, base, copies=4, offset_step=6)
    assert [c.fill for c in clones] == [BLACK, WHITE, BLACK, WHITE]
    assert [c.transform[-1] for c in clones] == [
        Translate(6, 3),
        Translate(-12, -6),
        Translate(18, 9),
        Translate(-24, -12),
    ]
    assert scene.primitives[-4:] == clones
    assert base.transform == []


def test_duplicate_rounds_half_away_from_zero(scene):
    base = add_text_run(scene, 16, 100, "HELLO", 40)
    clones = duplicate_with_alternation(scene, base, copies=2, offset_step=5)
    assert [c.transform[-1] for c in clones] == [Translate(5, 3), Translate(-10, -5)]


def test_duplicate_minimum_vertical_step(scene):
    base = add_text_run(scene, 16, 100, "HELLO", 40)
    (clone,) = duplicate_with_alternation(scene, base, copies=1, offset_step=1)
    assert clone.transform[-1] == Translate(1, 2)


def test_duplicate_keeps_base_transform(scene):
    base = add_text_run(scene, 16, 100, "HELLO", 40, extra_transform=[Rotate(90, 16, 100)])
    (clone,) = duplicate_with_alternation(scene, base, copies=1, offset_step=4)
    assert clone.transform == [Rotate(90, 16, 100), Translate(4, 2)]
    assert base.transform == [Rotate(90, 16, 100)]


def test_duplicate_shape_recolors_elements(scene, shapes_by_name):
    shape = place_shape(scene, shapes_by_name["dots"], (50, 50), 1, 0)
    clones = duplicate_with_alternation(scene, shape, copies=2, offset_step=4)
    assert all(isinstance(c, ShapeInstance) for c in clones)
    assert {el.attributes["fill"] for el in clones[1].elements} == {WHITE}
    assert {el.attributes["fill"] for el in shape.elements} == {BLACK}


def test_duplicate_unmeasurable_base(scene):
    loose = TextRun("HELLO", 16, 100, 40)
    assert duplicate_with_alternation(scene, loose, copies=3) == []
    assert len(scene) == 1
