"""Typed SVG transform operations and their composition.

A primitive's transform is an ordered list of ops. Serialization joins the ops
left to right exactly like an SVG ``transform`` attribute, so every later op
acts in the frame already produced by the earlier ones:

    [Translate(10, 20), Rotate(90), Scale(0.5)]  ->  "translate(10 20) rotate(90) scale(0.5)"

``compose_matrix`` multiplies the same list into one 3x3 affine matrix, which
is what measurement uses to map local boxes onto the canvas.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray


def fmt(value: float) -> str:
    """Compact number for SVG attributes: 3 decimals, no trailing zeros."""
    rounded = round(float(value), 3)
    if rounded == 0:
        return "0"
    return f"{rounded:g}" if abs(rounded) < 1e6 else f"{rounded:.3f}"


@dataclass(frozen=True)
class Translate:
    dx: float
    dy: float = 0.0

    def to_svg(self) -> str:
        return f"translate({fmt(self.dx)} {fmt(self.dy)})"

    def matrix(self) -> NDArray[np.float64]:
        return np.array([[1.0, 0.0, self.dx], [0.0, 1.0, self.dy], [0.0, 0.0, 1.0]])


@dataclass(frozen=True)
class Rotate:
    """Rotation in degrees, optionally around (cx, cy) like SVG ``rotate(a cx cy)``."""

    degrees: float
    cx: float = 0.0
    cy: float = 0.0

    @property
    def has_pivot(self) -> bool:
        return self.cx != 0 or self.cy != 0

    def to_svg(self) -> str:
        if self.has_pivot:
            return f"rotate({fmt(self.degrees)} {fmt(self.cx)} {fmt(self.cy)})"
        return f"rotate({fmt(self.degrees)})"

    def matrix(self) -> NDArray[np.float64]:
        rad = math.radians(self.degrees)
        c, s = math.cos(rad), math.sin(rad)
        rot = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        if not self.has_pivot:
            return rot
        return Translate(self.cx, self.cy).matrix() @ rot @ Translate(-self.cx, -self.cy).matrix()


@dataclass(frozen=True)
class Scale:
    sx: float
    sy: float | None = None

    def to_svg(self) -> str:
        if self.sy is None:
            return f"scale({fmt(self.sx)})"
        return f"scale({fmt(self.sx)} {fmt(self.sy)})"

    def matrix(self) -> NDArray[np.float64]:
        sy = self.sx if self.sy is None else self.sy
        return np.array([[self.sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


@dataclass(frozen=True)
class SkewX:
    degrees: float

    def to_svg(self) -> str:
        return f"skewX({fmt(self.degrees)})"

    def matrix(self) -> NDArray[np.float64]:
        t = math.tan(math.radians(self.degrees))
        return np.array([[1.0, t, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])


TransformOp = Union[Translate, Rotate, Scale, SkewX]


def build_transform(ops: Iterable[TransformOp]) -> str:
    """Serialize ops left to right into an SVG transform string."""
    return " ".join(op.to_svg() for op in ops)


def about(pivot: tuple[float, float], *ops: TransformOp) -> list[TransformOp]:
    """Bracket ops with translate-to-pivot / translate-back."""
    px, py = pivot
    return [Translate(px, py), *ops, Translate(-px, -py)]


def compose_matrix(ops: Iterable[TransformOp]) -> NDArray[np.float64]:
    """Multiply ops left to right into a single 3x3 affine matrix."""
    m = np.eye(3)
    for op in ops:
        m = m @ op.matrix()
    return m


def ops_after_last_rotation(ops: list[TransformOp]) -> list[TransformOp]:
    """The tail of ``ops`` that acts in the primitive's own (unrotated) frame."""
    for i in range(len(ops) - 1, -1, -1):
        if isinstance(ops[i], Rotate):
            return ops[i + 1:]
    return list(ops)
