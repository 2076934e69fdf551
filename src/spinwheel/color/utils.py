"""Color helpers for wheel palettes.

Hex strings are the exchange format everywhere: renderers receive ``#RRGGBB``
and palettes are lists of them. Shorthand ``#RGB`` input is accepted and
expanded.
"""

import math
import random
import re
from typing import Sequence, Tuple

RGB = Tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_hex(color: str) -> str:
    """Return ``color`` as an upper-case ``#RRGGBB`` string.

    Raises:
        ValueError: If the string is not a 3 or 6 digit hex color
    """
    match = _HEX_RE.match(color.strip())
    if match is None:
        raise ValueError(f"Invalid hex color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.upper()}"


def hex_to_rgb(color: str) -> RGB:
    """Convert hex color to RGB tuple."""
    digits = normalize_hex(color)[1:]
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components (0-255) to ``#RRGGBB``."""
    r, g, b = (max(0, min(255, int(round(c)))) for c in (r, g, b))
    return f"#{r:02X}{g:02X}{b:02X}"


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV to RGB.

    Args:
        h: Hue (0-360)
        s: Saturation (0-1)
        v: Value (0-1)

    Returns:
        RGB tuple (0-255 each)
    """
    h = h % 360
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        int(round((r + m) * 255)),
        int(round((g + m) * 255)),
        int(round((b + m) * 255)),
    )


def hex_to_hsv(color: str) -> Tuple[float, float, float]:
    """Convert hex color to (hue 0-360, saturation 0-1, value 0-1)."""
    r, g, b = (c / 255 for c in hex_to_rgb(color))
    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low

    h = 0.0
    if diff:
        if high == r:
            h = ((g - b) / diff) % 6
        elif high == g:
            h = (b - r) / diff + 2
        else:
            h = (r - g) / diff + 4
    h = round(h * 60) % 360

    s = 0.0 if high == 0 else diff / high
    return (h, s, high)


def get_luminance(color: str) -> float:
    """WCAG relative luminance of a color (0 = black, 1 = white)."""
    def to_linear(c: float) -> float:
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (to_linear(c / 255) for c in hex_to_rgb(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def get_optimal_text_color(background: str) -> str:
    """Dark text on light backgrounds, white text on dark ones."""
    return "#333333" if get_luminance(background) > 0.5 else "#FFFFFF"


def create_light_tint(color: str, amount: float = 0.05) -> str:
    """Blend ``amount`` of color into white."""
    r, g, b = hex_to_rgb(color)
    return rgb_to_hex(*(c * amount + 255 * (1 - amount) for c in (r, g, b)))


def create_dark_variant(color: str, factor: float = 0.6) -> str:
    """Scale color brightness by ``factor``."""
    r, g, b = hex_to_rgb(color)
    return rgb_to_hex(r * factor, g * factor, b * factor)


def color_distance(color1: str, color2: str) -> float:
    """Euclidean distance between two colors in RGB space."""
    return math.dist(hex_to_rgb(color1), hex_to_rgb(color2))


# (hue range, saturation range, value range) per generation strategy
_COLOR_STRATEGIES: list[tuple[tuple[float, float], tuple[float, float], tuple[float, float]]] = [
    ((0, 360), (0.7, 1.0), (0.8, 1.0)),     # vivid
    ((0, 60), (0.6, 1.0), (0.75, 1.0)),     # warm
    ((120, 300), (0.6, 1.0), (0.75, 1.0)),  # cool
    ((0, 360), (0.9, 1.0), (0.9, 1.0)),     # neon
    ((0, 360), (0.4, 0.8), (0.85, 1.0)),    # pastel
    ((0, 360), (0.8, 1.0), (0.6, 0.9)),     # deep
]


def generate_random_colors(
    count: int = 12,
    rng: random.Random | None = None,
    min_distance: float = 30.0,
    max_attempts: int = 10,
) -> list[str]:
    """Generate ``count`` varied colors.

    Each color is drawn from a randomly chosen strategy and re-drawn up to
    ``max_attempts`` times while it sits within ``min_distance`` of an
    earlier color. The result is shuffled.
    """
    rng = rng or random.Random()
    colors: list[str] = []

    for _ in range(count):
        color = ""
        for _attempt in range(max_attempts):
            hue, sat, val = rng.choice(_COLOR_STRATEGIES)
            color = rgb_to_hex(*hsv_to_rgb(
                rng.uniform(*hue), rng.uniform(*sat), rng.uniform(*val)
            ))
            if all(color_distance(color, other) >= min_distance for other in colors):
                break
        colors.append(color)

    rng.shuffle(colors)
    return colors


def generate_harmonious_background(wheel_colors: Sequence[str]) -> str:
    """Very light background in the complement of the palette's mean hue."""
    if not wheel_colors:
        return "#F8F9FA"

    hues = [hex_to_hsv(c)[0] for c in wheel_colors]
    complementary = (sum(hues) / len(hues) + 180) % 360
    return rgb_to_hex(*hsv_to_rgb(complementary, 0.08, 0.98))
