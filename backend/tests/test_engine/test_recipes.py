"""Tests for the built-in layout recipes, driven with scripted rolls.

With every roll at 0.0 all chances fail, distortion is skipped and ranges
resolve to their lower bound, so each recipe produces its bare skeleton.
"""

import pytest

from typoposter.engine.context import CompositionContext
from typoposter.engine.recipes.grid_rhythm import grid_rhythm
from typoposter.engine.recipes.mass_shape import mass_shape
from typoposter.engine.recipes.multiply_column import multiply_column
from typoposter.engine.recipes.vertical_stack import vertical_stack
from typoposter.engine.scene import ShapeInstance
from typoposter.engine.transforms import Scale
from tests.conftest import ScriptedRandom


def _ctx(scene, words, shapes=(), fallback=0.0):
    return CompositionContext(
        scene=scene,
        words=words,
        shapes=shapes,
        width=scene.canvas.width,
        height=scene.canvas.height,
        rng=ScriptedRandom(fallback=fallback),
    )


def test_vertical_stack_skeleton(scene):
    vertical_stack(_ctx(scene, ["ONE", "TWO", "THREE", "FOUR", "FIVE"]))
    runs = scene.text_runs
    assert [r.content for r in runs] == ["ONE", "TWO", "THREE", "FOUR"]
    assert [r.font_size for r in runs] == [180, 162, 144, 126]
    assert all(r.x == 16 and r.font_weight == 900 for r in runs)
    assert runs[0].y == 96
    for r in runs:
        assert scene.measure_baseline(r).width <= 268 + 1e-6


def test_vertical_stack_shape_behind(scene, single_shape_catalog):
    vertical_stack(_ctx(scene, ["ONE", "TWO"], single_shape_catalog, fallback=0.99))
    shape = scene.primitives[1]
    assert isinstance(shape, ShapeInstance)
    # Large scale draws outlined
    assert shape.scale > 0.9
    assert shape.elements[0].attributes["fill"] == "none"


def test_mass_shape_skeleton(scene, single_shape_catalog):
    mass_shape(_ctx(scene, ["HELLO", "WORLD", "AGAIN"], single_shape_catalog))
    assert isinstance(scene.primitives[1], ShapeInstance)
    assert scene.primitives[1].scale == pytest.approx(1.0)

    main, echo = scene.text_runs
    assert main.content == "HELLO WORLD"
    assert main.text_anchor == "middle"
    assert main.x == 150
    # No horizontal condensing for the centered headline
    assert main.transform == []
    assert echo.content == "HELLO WORLD"
    assert echo.font_weight == 700
    assert len(scene.shapes) == 2


def test_multiply_column_skeleton(scene, single_shape_catalog):
    multiply_column(_ctx(scene, ["Hello", "World"], single_shape_catalog))
    runs = scene.text_runs
    # 600px tall canvas: one row per 40px
    assert len(runs) == 15
    assert [r.content for r in runs[:4]] == ["HELLO", "hello", "HELLO", "hello"]
    assert all(r.font_weight == 800 for r in runs)
    assert len(scene.shapes) == 2


def test_multiply_column_sidebar(scene):
    multiply_column(_ctx(scene, ["Hello", "big", "World"], fallback=0.99))
    side = [r for r in scene.text_runs if r.content == "big World"]
    assert len(side) == 1
    assert side[0].text_anchor == "middle"
    assert scene.measure_baseline(side[0]).width <= 600 * 0.9 + 1e-6


def test_grid_rhythm_skeleton(scene):
    grid_rhythm(_ctx(scene, ["GRID", "RHYTHM"]))
    main, *cells = scene.text_runs
    assert main.content == "GRID RHYTHM"
    assert main.font_size == 96
    assert any(isinstance(op, Scale) for op in main.transform)
    assert scene.measure_baseline(main).width <= 149 + 1e-6
    # 3 rows x 2 columns of words, no shapes when every chance fails
    assert len(cells) == 6
    assert all(c.content in ("GRID", "RHYTHM") for c in cells)
    assert scene.shapes == []


def test_grid_rhythm_cells_start_right_of_headline(scene):
    grid_rhythm(_ctx(scene, ["GRID", "RHYTHM"]))
    _, *cells = scene.text_runs
    assert min(c.x for c in cells) == 165 - 6


@pytest.mark.parametrize("fn", [vertical_stack, mass_shape, multiply_column, grid_rhythm])
def test_recipes_without_catalog(scene, fn):
    fn(_ctx(scene, ["NO", "SHAPES", "HERE"], fallback=0.99))
    assert scene.shapes == []
    assert scene.primitives[0].role == "background"
