"""Slice geometry and label layout."""

from spinwheel.layout.engine import LayoutEngine, compute_layout
from spinwheel.layout.geometry import emoji_radius, text_radius, font_sizes, max_chars_for
from spinwheel.layout.text import wrap_label, truncate_label, fit_label

__all__ = [
    "LayoutEngine",
    "compute_layout",
    "emoji_radius",
    "text_radius",
    "font_sizes",
    "max_chars_for",
    "wrap_label",
    "truncate_label",
    "fit_label",
]
