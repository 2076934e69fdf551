"""Slice coloring for SPINWHEEL."""

from spinwheel.color.assigner import ColorAssigner, assign_colors
from spinwheel.color.utils import (
    normalize_hex,
    hex_to_rgb,
    rgb_to_hex,
    hsv_to_rgb,
    hex_to_hsv,
    get_luminance,
    get_optimal_text_color,
    create_light_tint,
    create_dark_variant,
    color_distance,
    generate_random_colors,
    generate_harmonious_background,
)

__all__ = [
    # Assignment
    "ColorAssigner",
    "assign_colors",
    # Utilities
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hsv_to_rgb",
    "hex_to_hsv",
    "get_luminance",
    "get_optimal_text_color",
    "create_light_tint",
    "create_dark_variant",
    "color_distance",
    "generate_random_colors",
    "generate_harmonious_background",
]
