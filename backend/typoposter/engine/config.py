"""Composer configuration — tuning constants for recipes, distortion and overlap handling."""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_recipe_weights() -> dict[str, int]:
    # vertical_stack and mass_shape appear twice in the selection pool
    return {
        "vertical_stack": 2,
        "mass_shape": 2,
        "multiply_column": 1,
        "grid_rhythm": 1,
    }


@dataclass
class ComposerConfig:
    """Controls composition behavior. Defaults reproduce the tuned poster look."""

    # Inner padding of the canvas in px
    padding: float = 16.0

    # Recipe selection multiset: name -> number of entries in the pool.
    # Names missing here fall back to the weight given at registration.
    recipe_weights: dict[str, int] = field(default_factory=_default_recipe_weights)

    # Typography
    font_family: str = "Helvetica, Arial, sans-serif"
    placeholder_text: str = "type something..."
    placeholder_size: float = 14.0
    placeholder_weight: int = 700
    footer_size: float = 9.0
    footer_weight: int = 700
    footer_bottom_offset: float = 6.0
    footer_word_count: int = 2

    # Distortion
    no_distortion_probability: float = 0.45
    subtle_tier_cutoff: float = 0.6  # roll < 0.6 -> subtle
    strong_tier_cutoff: float = 0.9  # roll < 0.9 -> strong, else extreme
    max_scale_y: float = 3.5
    min_scale_x: float = 0.25
    max_skew_deg: float = 18.0
    subtle_scale_y: tuple[float, float] = (1.0, 1.6)
    subtle_scale_x: tuple[float, float] = (0.8, 1.0)
    subtle_skew_deg: float = 6.0
    strong_scale_y_floor: float = 1.6
    strong_scale_y_cap: float = 2.4
    strong_scale_x: tuple[float, float] = (0.45, 0.85)
    strong_skew_deg: float = 12.0
    extreme_scale_y_floor: float = 2.4
    extreme_scale_x_cap: float = 0.55

    # Overlap resolution rolls: > mask_threshold -> white mask,
    # > invert_threshold -> invert text, else erase shape
    mask_threshold: float = 0.66
    invert_threshold: float = 0.33

    # Outlined shapes: stroke width = max(min_stroke_width, outline_stroke / scale)
    outline_stroke: float = 2.0
    min_stroke_width: float = 1.0
