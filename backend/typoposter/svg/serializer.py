"""Write SVG output from a composed scene."""

from __future__ import annotations

from html import escape

from typoposter.engine.scene import Primitive, RectPrimitive, Scene, ShapeElement, ShapeInstance, TextRun
from typoposter.engine.transforms import build_transform, fmt


def _attr_str(attrs: dict[str, str]) -> str:
    return " ".join(f'{k}="{escape(str(v), quote=True)}"' for k, v in attrs.items())


def _with_transform(attrs: dict[str, str], primitive: Primitive) -> dict[str, str]:
    if primitive.transform:
        attrs["transform"] = build_transform(primitive.transform)
    return attrs


def _text_line(run: TextRun) -> str:
    attrs = _with_transform(
        {
            "x": fmt(run.x),
            "y": fmt(run.y),
            "font-family": run.font_family,
            "font-size": fmt(run.font_size),
            "font-weight": str(run.font_weight),
            "text-anchor": run.text_anchor,
            "fill": run.fill,
        },
        run,
    )
    return f"  <text {_attr_str(attrs)}>{escape(run.content, quote=False)}</text>"


def _element_line(el: ShapeElement) -> str:
    return f"    <{el.tag} {_attr_str(el.attributes)} />"


def _shape_lines(shape: ShapeInstance) -> list[str]:
    attrs = _with_transform({"data-shape": shape.template.name}, shape)
    lines = [f"  <g {_attr_str(attrs)}>"]
    lines.extend(_element_line(el) for el in shape.elements)
    lines.append("  </g>")
    return lines


def _rect_line(rect: RectPrimitive) -> str:
    attrs = _with_transform(
        {
            "x": fmt(rect.x),
            "y": fmt(rect.y),
            "width": fmt(rect.width),
            "height": fmt(rect.height),
            "fill": rect.fill,
        },
        rect,
    )
    return f"  <rect {_attr_str(attrs)} />"


def serialize_scene(scene: Scene, title: str = "") -> str:
    """Generate SVG markup for a scene, primitives in paint order."""
    w, h = fmt(scene.canvas.width), fmt(scene.canvas.height)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {w} {h}" width="{w}" height="{h}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title, quote=False)}</title>")

    for primitive in scene.primitives:
        if isinstance(primitive, TextRun):
            lines.append(_text_line(primitive))
        elif isinstance(primitive, ShapeInstance):
            lines.extend(_shape_lines(primitive))
        else:
            lines.append(_rect_line(primitive))

    lines.append("</svg>")
    return "\n".join(lines)
