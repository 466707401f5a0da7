"""Scene model — the ordered primitive list a composition writes into.

Paint order is list order (earlier = behind). Index 0 is always the canvas
background. Bounding boxes are measured, not stored: text extents come from
the injected text metrics provider, shape extents from the template's sampled
outline, and both are mapped through the primitive's transform.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import NDArray

from typoposter.engine.transforms import TransformOp, compose_matrix, ops_after_last_rotation
from typoposter.utils.geometry import apply_affine, bbox, intersect_rect, rect_corners

if TYPE_CHECKING:
    from typoposter.engine.metrics import TextMetrics

logger = logging.getLogger(__name__)

BLACK = "#000"
WHITE = "#fff"


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.right, self.bottom)

    @classmethod
    def from_bounds(cls, bounds: tuple[float, float, float, float]) -> BoundingBox:
        xmin, ymin, xmax, ymax = bounds
        return cls(xmin, ymin, xmax - xmin, ymax - ymin)

    def intersection(self, other: BoundingBox) -> BoundingBox | None:
        """Overlap region with strictly positive area, else None."""
        overlap = intersect_rect(self.bounds, other.bounds)
        return BoundingBox.from_bounds(overlap) if overlap else None


@dataclass(frozen=True)
class Canvas:
    width: float
    height: float
    background: str = WHITE


@dataclass
class ShapeElement:
    """One drawable element of a shape: SVG tag plus its attributes."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)

    def copy(self) -> ShapeElement:
        return ShapeElement(tag=self.tag, attributes=dict(self.attributes))


@dataclass(frozen=True, eq=False)
class ShapeTemplate:
    """Reusable vector drawing from the shape catalog. Read-only."""

    name: str
    elements: tuple[ShapeElement, ...]
    # Sampled outline points of all elements, Nx2, in template coordinates
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))

    @property
    def bbox(self) -> BoundingBox:
        return BoundingBox.from_bounds(bbox(self.points))


@dataclass(eq=False)
class TextRun:
    content: str
    x: float
    y: float
    font_size: float
    font_weight: int = 900
    text_anchor: str = "start"
    fill: str = BLACK
    font_family: str = "Helvetica, Arial, sans-serif"
    transform: list[TransformOp] = field(default_factory=list)

    kind = "text"

    def append_transform(self, *ops: TransformOp) -> None:
        self.transform.extend(ops)

    def set_fill(self, color: str) -> None:
        self.fill = color

    def clone(self) -> TextRun:
        return TextRun(
            content=self.content,
            x=self.x,
            y=self.y,
            font_size=self.font_size,
            font_weight=self.font_weight,
            text_anchor=self.text_anchor,
            fill=self.fill,
            font_family=self.font_family,
            transform=list(self.transform),
        )


@dataclass(eq=False)
class ShapeInstance:
    template: ShapeTemplate
    cx: float
    cy: float
    rotation: float = 0.0
    scale: float = 1.0
    style_mode: str = "filled"
    # Own copies of the template elements; recoloring never touches the template
    elements: list[ShapeElement] = field(default_factory=list)
    transform: list[TransformOp] = field(default_factory=list)

    kind = "shape"

    def append_transform(self, *ops: TransformOp) -> None:
        self.transform.extend(ops)

    def recolor(self, fill: str | None = None, stroke: str | None = None, stroke_width: float | None = None) -> None:
        for el in self.elements:
            if fill is not None:
                el.attributes["fill"] = fill
            if stroke is not None:
                el.attributes["stroke"] = stroke
            if stroke_width is not None:
                el.attributes["stroke-width"] = f"{stroke_width:g}"

    def set_fill(self, color: str) -> None:
        self.recolor(fill=color)

    def clone(self) -> ShapeInstance:
        return ShapeInstance(
            template=self.template,
            cx=self.cx,
            cy=self.cy,
            rotation=self.rotation,
            scale=self.scale,
            style_mode=self.style_mode,
            elements=[el.copy() for el in self.elements],
            transform=list(self.transform),
        )


@dataclass(eq=False)
class RectPrimitive:
    """Plain rectangle: the canvas background or an overlap mask."""

    x: float
    y: float
    width: float
    height: float
    fill: str = WHITE
    role: str = "mask"
    transform: list[TransformOp] = field(default_factory=list)

    kind = "rect"

    def append_transform(self, *ops: TransformOp) -> None:
        self.transform.extend(ops)

    def set_fill(self, color: str) -> None:
        self.fill = color

    def clone(self) -> RectPrimitive:
        return RectPrimitive(self.x, self.y, self.width, self.height, self.fill, self.role, list(self.transform))


Primitive = Union[TextRun, ShapeInstance, RectPrimitive]


@dataclass
class Scene:
    """One composition: canvas, ordered primitives and run metadata."""

    canvas: Canvas
    metrics: TextMetrics
    primitives: list[Primitive] = field(default_factory=list)
    recipe: str | None = None
    overlap_pass_ran: bool = False
    resolutions: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.primitives:
            self.primitives.append(
                RectPrimitive(0.0, 0.0, self.canvas.width, self.canvas.height, self.canvas.background, role="background")
            )

    @property
    def background(self) -> RectPrimitive:
        return self.primitives[0]  # type: ignore[return-value]

    @property
    def text_runs(self) -> list[TextRun]:
        return [p for p in self.primitives if isinstance(p, TextRun)]

    @property
    def shapes(self) -> list[ShapeInstance]:
        return [p for p in self.primitives if isinstance(p, ShapeInstance)]

    @property
    def masks(self) -> list[RectPrimitive]:
        return [p for p in self.primitives if isinstance(p, RectPrimitive) and p.role == "mask"]

    def __len__(self) -> int:
        return len(self.primitives)

    def contains(self, primitive: Primitive) -> bool:
        return any(p is primitive for p in self.primitives)

    def append(self, primitive: Primitive) -> Primitive:
        self.primitives.append(primitive)
        return primitive

    def insert_behind(self, primitive: Primitive) -> None:
        """Move (or insert) a primitive to paint directly above the background."""
        self.primitives = [p for p in self.primitives if p is not primitive]
        self.primitives.insert(1, primitive)

    # ── Measurement ──

    def measure_local(self, primitive: Primitive) -> BoundingBox | None:
        """Box in the primitive's own coordinates, ignoring its transform.

        None when the primitive is not part of this scene or the metrics
        provider cannot measure it.
        """
        if not self.contains(primitive):
            logger.debug("Measurement skipped: primitive not in scene")
            return None
        if isinstance(primitive, TextRun):
            return self.metrics.measure(primitive)
        if isinstance(primitive, ShapeInstance):
            if len(primitive.template.points) == 0:
                return None
            return primitive.template.bbox
        return BoundingBox(primitive.x, primitive.y, primitive.width, primitive.height)

    def measure(self, primitive: Primitive) -> BoundingBox | None:
        """Axis-aligned box on the canvas, after the full transform."""
        return self._measure_through(primitive, primitive.transform)

    def measure_baseline(self, primitive: Primitive) -> BoundingBox | None:
        """Box along the primitive's own baseline: every op after its last rotation.

        For unrotated primitives this equals ``measure``; for a rotated text
        run it reports the run's length as width.
        """
        return self._measure_through(primitive, ops_after_last_rotation(primitive.transform))

    def _measure_through(self, primitive: Primitive, ops: list[TransformOp]) -> BoundingBox | None:
        if isinstance(primitive, ShapeInstance):
            if not self.contains(primitive) or len(primitive.template.points) == 0:
                return None
            points = primitive.template.points
        else:
            local = self.measure_local(primitive)
            if local is None:
                return None
            points = rect_corners(local.x, local.y, local.width, local.height)
        if not ops:
            return BoundingBox.from_bounds(bbox(points))
        return BoundingBox.from_bounds(bbox(apply_affine(compose_matrix(ops), points)))
