"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import box


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def rect_corners(x: float, y: float, width: float, height: float) -> NDArray[np.float64]:
    """Four corners of an axis-aligned rectangle as a 4x2 array."""
    return np.array(
        [
            [x, y],
            [x + width, y],
            [x + width, y + height],
            [x, y + height],
        ],
        dtype=np.float64,
    )


def apply_affine(matrix: NDArray[np.float64], points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map Nx2 points through a 3x3 affine matrix."""
    if len(points) == 0:
        return np.empty((0, 2))
    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    mapped = homogeneous @ matrix.T
    return mapped[:, :2]


def intersect_rect(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> tuple[float, float, float, float] | None:
    """Intersection of two (xmin, ymin, xmax, ymax) rectangles.

    Returns None unless the overlap has strictly positive area; touching edges
    do not count.
    """
    overlap = box(*a).intersection(box(*b))
    if overlap.is_empty or overlap.area <= 0:
        return None
    return tuple(float(v) for v in overlap.bounds)  # type: ignore[return-value]


def ellipse_points(cx: float, cy: float, rx: float, ry: float, n: int = 64) -> NDArray[np.float64]:
    """Generate points along an ellipse (circle when rx == ry)."""
    angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
    return np.column_stack([cx + rx * np.cos(angles), cy + ry * np.sin(angles)])
