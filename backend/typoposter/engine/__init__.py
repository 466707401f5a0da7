"""TypoPoster procedural composition engine."""

from typoposter.engine.registry import recipe, get_registry, register_builtin_recipes
from typoposter.engine.scene import Scene, TextRun, ShapeInstance, ShapeTemplate
from typoposter.engine.composer import PosterComposer

__all__ = [
    "recipe",
    "get_registry",
    "register_builtin_recipes",
    "Scene",
    "TextRun",
    "ShapeInstance",
    "ShapeTemplate",
    "PosterComposer",
]
