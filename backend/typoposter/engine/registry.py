"""Recipe registry — every layout recipe is a standalone function registered via decorator.

Usage:
    @recipe(name="grid_rhythm", weight=1, description="Headline plus right-hand grid")
    def grid_rhythm(ctx: CompositionContext) -> None:
        ctx.add_text(...)

Adding a new recipe = creating one module in ``typoposter.engine.recipes``
with the decorator. Nothing else changes.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from typoposter.engine.context import CompositionContext

logger = logging.getLogger(__name__)

RECIPES_PACKAGE = "typoposter.engine.recipes"


@dataclass
class RecipeSpec:
    name: str
    fn: Callable[["CompositionContext"], None]
    weight: int = 1
    description: str = ""


class RecipeRegistry:
    """Registry of layout recipes."""

    def __init__(self) -> None:
        self._recipes: dict[str, RecipeSpec] = {}

    def register(self, spec: RecipeSpec) -> None:
        if spec.name in self._recipes:
            raise ValueError(f"Duplicate recipe name: {spec.name}")
        if spec.weight < 0:
            raise ValueError(f"Recipe weight must be >= 0: {spec.name}={spec.weight}")
        self._recipes[spec.name] = spec
        logger.debug("Registered recipe %s (weight %d)", spec.name, spec.weight)

    def get(self, name: str) -> RecipeSpec:
        return self._recipes[name]

    def all(self) -> list[RecipeSpec]:
        return sorted(self._recipes.values(), key=lambda s: s.name)

    def selection_pool(self, weights: Mapping[str, int] | None = None) -> list[str]:
        """Multiset of recipe names; a name appears once per unit of weight."""
        weights = weights or {}
        pool: list[str] = []
        for spec in self.all():
            pool.extend([spec.name] * int(weights.get(spec.name, spec.weight)))
        return pool

    @property
    def count(self) -> int:
        return len(self._recipes)


# Module-level singleton
_registry = RecipeRegistry()


def get_registry() -> RecipeRegistry:
    return _registry


def recipe(*, name: str, weight: int = 1, description: str = ""):
    """Decorator to register a recipe function."""

    def decorator(fn: Callable[["CompositionContext"], None]):
        _registry.register(RecipeSpec(name=name, fn=fn, weight=weight, description=description))
        return fn

    return decorator


def register_builtin_recipes() -> RecipeRegistry:
    """Import all recipe modules so @recipe decorators fire."""
    package = importlib.import_module(RECIPES_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{RECIPES_PACKAGE}.{module_name}")
    return _registry
