"""Ring geometry for wheel labels.

Two concentric rings carry the labels: the emoji ring near the rim and the
text ring inside it. Both drift outward as the wheel fills up so that thin
slices still get usable room, and fonts step down at fixed slice counts.
"""

import math

import numpy as np
from numpy.typing import NDArray

from spinwheel.config.settings import LayoutSettings


def slice_angle(count: int) -> float:
    """Angular width of one slice in degrees."""
    return 360.0 / count if count > 0 else 360.0


def arc_bounds(count: int) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Start, end and mid angles of every slice.

    Returns:
        Three arrays of length ``count`` (degrees)
    """
    delta = slice_angle(count)
    starts = np.arange(count, dtype=np.float64) * delta
    ends = starts + delta
    mids = starts + delta / 2
    return starts, ends, mids


def polar_to_unit(angles_deg: NDArray[np.float64], radii: NDArray[np.float64] | float) -> NDArray[np.float64]:
    """Convert wheel angles (0 at top, clockwise) to unit-circle (x, y).

    Screen convention: y grows downward, so the top of the wheel is y = -r.

    Returns:
        Array of shape (len(angles), 2)
    """
    rad = np.radians(np.asarray(angles_deg, dtype=np.float64) - 90.0)
    radii = np.asarray(radii, dtype=np.float64)
    return np.stack([radii * np.cos(rad), radii * np.sin(rad)], axis=-1)


def emoji_radius(count: int, settings: LayoutSettings) -> float:
    """Emoji ring radius as a fraction of the wheel radius."""
    return min(settings.emoji_radius_base + settings.emoji_radius_step * count, settings.emoji_radius_max)


def text_radius(count: int, has_emoji: bool, settings: LayoutSettings) -> float:
    """Text ring radius; sits closer to the rim when an emoji is present."""
    if has_emoji:
        return min(
            settings.text_radius_emoji_base + settings.text_radius_emoji_step * count,
            settings.text_radius_emoji_max,
        )
    return min(settings.text_radius_base + settings.text_radius_step * count, settings.text_radius_max)


def font_sizes(count: int, settings: LayoutSettings) -> tuple[int, int]:
    """Return (text_size, emoji_size) for a wheel of ``count`` slices."""
    for step in settings.font_steps:
        if count <= step.max_slices:
            return step.text_size, step.emoji_size
    return settings.min_text_size, settings.min_emoji_size


def line_spacing_factor(count: int, settings: LayoutSettings) -> float:
    if count <= 6:
        return settings.line_spacing_loose
    if count <= 12:
        return settings.line_spacing_normal
    return settings.line_spacing_tight


def max_chars_for(count: int, ring_radius: float, font_size: int, settings: LayoutSettings) -> int:
    """Character budget of one slice on the text ring.

    The arc length of the slice at ``ring_radius`` divided by the average
    glyph width, then adjusted by slice-count policy: small wheels are
    capped so long labels wrap onto two lines instead of running into the
    neighboring slices.
    """
    arc_px = 2 * math.pi * settings.wheel_radius_px * ring_radius / max(count, 1)
    glyph_px = font_size * settings.glyph_width_factor
    budget = int(arc_px // glyph_px)

    if count <= settings.wrap_encourage_until:
        budget = min(budget, settings.wrap_encourage_max_chars)

    return max(settings.min_chars, budget)


def is_single_line(count: int, settings: LayoutSettings) -> bool:
    return count >= settings.single_line_from
