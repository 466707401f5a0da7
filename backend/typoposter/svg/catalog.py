"""Shape catalog — reusable vector drawings loaded once from an SVG file.

Each group (``<g>`` or ``<symbol>``) directly under ``<defs>`` becomes one
ShapeTemplate named by its ``id``. Without ``<defs>`` the root's groups are
used. Templates should be drawn around the origin: placement translates them
to their target center.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from svgpathtools import parse_path

from typoposter.engine.scene import ShapeElement, ShapeTemplate
from typoposter.utils.geometry import ellipse_points, rect_corners

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "assets" / "shapes.svg"

SHAPE_TAGS = {"path", "circle", "ellipse", "rect", "line", "polyline", "polygon"}
GROUP_TAGS = {"g", "symbol"}

# Attributes that describe identity or paint, not geometry; paint is reset on placement
_DROP_ATTRS = {"id", "class", "style"}

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_PATH_SAMPLES = 64


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _num(attrs: dict[str, str], key: str, default: float = 0.0) -> float:
    try:
        return float(attrs.get(key, default))
    except ValueError:
        return default


def _sample_path(d: str) -> NDArray[np.float64]:
    """Sample points along a path using parametric evaluation."""
    path = parse_path(d)
    points: list[tuple[float, float]] = []
    for seg in path:
        for t in np.linspace(0, 1, _PATH_SAMPLES // max(1, len(path)) + 2):
            pt = seg.point(t)
            points.append((pt.real, pt.imag))
    return np.array(points) if points else np.empty((0, 2))


def element_points(tag: str, attrs: dict[str, str]) -> NDArray[np.float64]:
    """Outline sample points of one drawable element."""
    if tag == "path":
        return _sample_path(attrs.get("d", ""))
    if tag == "circle":
        r = _num(attrs, "r")
        return ellipse_points(_num(attrs, "cx"), _num(attrs, "cy"), r, r)
    if tag == "ellipse":
        return ellipse_points(_num(attrs, "cx"), _num(attrs, "cy"), _num(attrs, "rx"), _num(attrs, "ry"))
    if tag == "rect":
        return rect_corners(_num(attrs, "x"), _num(attrs, "y"), _num(attrs, "width"), _num(attrs, "height"))
    if tag == "line":
        return np.array([[_num(attrs, "x1"), _num(attrs, "y1")], [_num(attrs, "x2"), _num(attrs, "y2")]])
    if tag in ("polyline", "polygon"):
        values = [float(v) for v in _NUMBER_RE.findall(attrs.get("points", ""))]
        if len(values) < 2:
            return np.empty((0, 2))
        return np.array(values[: len(values) // 2 * 2]).reshape(-1, 2)
    return np.empty((0, 2))


def _collect_elements(group: ET.Element) -> list[ShapeElement]:
    elements: list[ShapeElement] = []
    for child in group.iter():
        tag = _strip_ns(child.tag)
        if tag not in SHAPE_TAGS:
            continue
        attrs = {_strip_ns(k): v for k, v in child.attrib.items() if _strip_ns(k) not in _DROP_ATTRS}
        elements.append(ShapeElement(tag=tag, attributes=attrs))
    return elements


def _template_from_group(group: ET.Element, index: int) -> ShapeTemplate | None:
    name = group.get("id") or f"shape-{index + 1}"
    elements = _collect_elements(group)
    if not elements:
        return None

    samples: list[NDArray[np.float64]] = []
    for el in elements:
        try:
            pts = element_points(el.tag, el.attributes)
        except Exception as e:
            logger.warning("Shape %s: skipping unparsable <%s>: %s", name, el.tag, e)
            continue
        if len(pts):
            samples.append(pts)

    points = np.vstack(samples) if samples else np.empty((0, 2))
    return ShapeTemplate(name=name, elements=tuple(elements), points=points)


def parse_shape_catalog(svg_text: str) -> list[ShapeTemplate]:
    """Parse shape templates from SVG markup. Unparsable markup yields no shapes."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        logger.warning("Shape catalog is not valid SVG: %s", e)
        return []

    defs = next((el for el in root if _strip_ns(el.tag) == "defs"), None)
    container = defs if defs is not None else root
    groups = [el for el in container if _strip_ns(el.tag) in GROUP_TAGS]

    templates: list[ShapeTemplate] = []
    for i, group in enumerate(groups):
        template = _template_from_group(group, i)
        if template is not None:
            templates.append(template)
    return templates


def load_shape_catalog(path: str | Path | None = None) -> list[ShapeTemplate]:
    """Load the catalog file. A missing file is an empty catalog, not an error."""
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        svg_text = catalog_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Shape catalog unavailable at %s: %s", catalog_path, e)
        return []

    templates = parse_shape_catalog(svg_text)
    logger.info("Loaded %d shape templates from %s", len(templates), catalog_path.name)
    return templates
