"""Tests for the recipe registry."""

import pytest

from typoposter.engine.config import ComposerConfig
from typoposter.engine.context import CompositionContext
from typoposter.engine.registry import RecipeRegistry, RecipeSpec, get_registry, recipe, register_builtin_recipes


def _noop(ctx: CompositionContext) -> None:
    pass


def test_register_and_get():
    reg = RecipeRegistry()
    spec = RecipeSpec(name="plain", fn=_noop)
    reg.register(spec)
    assert reg.get("plain") is spec
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = RecipeRegistry()
    reg.register(RecipeSpec(name="plain", fn=_noop))
    with pytest.raises(ValueError):
        reg.register(RecipeSpec(name="plain", fn=_noop))


def test_negative_weight_rejected():
    reg = RecipeRegistry()
    with pytest.raises(ValueError):
        reg.register(RecipeSpec(name="plain", fn=_noop, weight=-1))


def test_selection_pool_repeats_by_weight():
    reg = RecipeRegistry()
    reg.register(RecipeSpec(name="b", fn=_noop, weight=1))
    reg.register(RecipeSpec(name="a", fn=_noop, weight=2))
    assert reg.selection_pool() == ["a", "a", "b"]


def test_selection_pool_overrides():
    reg = RecipeRegistry()
    reg.register(RecipeSpec(name="a", fn=_noop, weight=2))
    reg.register(RecipeSpec(name="b", fn=_noop, weight=1))
    assert reg.selection_pool({"a": 0, "b": 3}) == ["b", "b", "b"]


def test_builtin_recipes():
    reg = register_builtin_recipes()
    names = {spec.name for spec in reg.all()}
    assert {"vertical_stack", "mass_shape", "multiply_column", "grid_rhythm"} <= names
    assert all(spec.description for spec in reg.all())


def test_default_pool_weights():
    pool = register_builtin_recipes().selection_pool(ComposerConfig().recipe_weights)
    assert pool.count("vertical_stack") == 2
    assert pool.count("mass_shape") == 2
    assert pool.count("multiply_column") == 1
    assert pool.count("grid_rhythm") == 1


def test_decorator_registers_globally():
    @recipe(name="test_decorated", weight=3, description="Registered in a test")
    def decorated(ctx: CompositionContext) -> None:
        pass

    try:
        spec = get_registry().get("test_decorated")
        assert spec.fn is decorated
        assert spec.weight == 3
    finally:
        get_registry()._recipes.pop("test_decorated", None)
