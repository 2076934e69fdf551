"""Animation helpers for SPINWHEEL."""

from spinwheel.animation.easing import (
    Easing,
    CubicBezier,
    SPIN_BEZIER,
    get_easing,
    interpolate,
)

__all__ = [
    "Easing",
    "CubicBezier",
    "SPIN_BEZIER",
    "get_easing",
    "interpolate",
]
