"""Easing curves for wheel spin animation.

All functions take a normalized time t (0.0 to 1.0) and return a normalized
progress value. Spin plans carry a ``CubicBezier`` curve so that any renderer
(CSS, SVG, native) can reproduce the exact deceleration; the named
ease-out curves cover simpler tweens such as settling a dragged wheel.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable


class Easing(Enum):
    """Available easing function types."""

    LINEAR = auto()

    EASE_OUT_QUAD = auto()
    EASE_OUT_CUBIC = auto()

    # Default spin deceleration, cubic-bezier(0.25, 0.1, 0.25, 1)
    SPIN = auto()


# Type alias for easing functions
EasingFunc = Callable[[float], float]


@dataclass(frozen=True)
class CubicBezier:
    """CSS-style cubic-bezier timing curve anchored at (0, 0) and (1, 1).

    Attributes:
        x1, y1: First control point
        x2, y2: Second control point
    """

    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise ValueError(
                f"Bezier x control points must be within [0, 1]: {self.x1}, {self.x2}"
            )

    @property
    def control_points(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    def _sample_x(self, s: float) -> float:
        inv = 1.0 - s
        return 3 * inv * inv * s * self.x1 + 3 * inv * s * s * self.x2 + s * s * s

    def _sample_y(self, s: float) -> float:
        inv = 1.0 - s
        return 3 * inv * inv * s * self.y1 + 3 * inv * s * s * self.y2 + s * s * s

    def _slope_x(self, s: float) -> float:
        inv = 1.0 - s
        return 3 * inv * inv * self.x1 + 6 * inv * s * (self.x2 - self.x1) + 3 * s * s * (1.0 - self.x2)

    def _solve_s(self, t: float, epsilon: float = 1e-7) -> float:
        """Find the curve parameter whose x equals t."""
        # Newton-Raphson first, it converges in a handful of steps
        s = t
        for _ in range(8):
            err = self._sample_x(s) - t
            if abs(err) < epsilon:
                return s
            slope = self._slope_x(s)
            if abs(slope) < 1e-6:
                break
            s -= err / slope

        # Bisection fallback for flat regions
        lo, hi = 0.0, 1.0
        s = t
        while lo < hi:
            x = self._sample_x(s)
            if abs(x - t) < epsilon:
                return s
            if x < t:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
            if hi - lo < epsilon:
                break
        return s

    def __call__(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return self._sample_y(self._solve_s(t))

    def to_css(self) -> str:
        """Render as a CSS timing function string."""
        return f"cubic-bezier({self.x1:g}, {self.y1:g}, {self.x2:g}, {self.y2:g})"


SPIN_BEZIER = CubicBezier(0.25, 0.1, 0.25, 1.0)


def linear(t: float) -> float:
    """Linear interpolation (no easing)."""
    return t


def ease_out_quad(t: float) -> float:
    """Decelerate to zero velocity."""
    return 1 - (1 - t) * (1 - t)


def ease_out_cubic(t: float) -> float:
    """Decelerate to zero velocity (cubic)."""
    return 1 - pow(1 - t, 3)


_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,
    Easing.EASE_OUT_QUAD: ease_out_quad,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,
    Easing.SPIN: SPIN_BEZIER,
}

_EASING_BY_NAME: dict[str, Easing] = {easing.name.lower(): easing for easing in Easing}


def get_easing(easing: Easing | str | CubicBezier) -> EasingFunc:
    """Get an easing function by enum, name, or bezier curve.

    Args:
        easing: Easing enum value, string name (e.g., "ease_out_cubic"),
            or a CubicBezier instance

    Returns:
        The easing function

    Raises:
        ValueError: If easing name is not recognized
    """
    if isinstance(easing, CubicBezier):
        return easing

    if isinstance(easing, str):
        easing_enum = _EASING_BY_NAME.get(easing.lower())
        if easing_enum is None:
            raise ValueError(f"Unknown easing function: {easing}")
        easing = easing_enum

    func = _EASING_FUNCTIONS.get(easing)
    if func is None:
        raise ValueError(f"No function registered for: {easing}")

    return func


def interpolate(
    start: float,
    end: float,
    t: float,
    easing: Easing | str | CubicBezier = Easing.LINEAR,
) -> float:
    """Interpolate between two values using an easing function.

    Args:
        start: Starting value
        end: Ending value
        t: Progress (0.0 to 1.0), clamped
        easing: Easing function to use

    Returns:
        Interpolated value
    """
    easing_func = get_easing(easing)
    eased_t = easing_func(max(0.0, min(1.0, t)))
    return start + (end - start) * eased_t
