"""Spin outcome engine.

Turns a current rotation into a randomized spin plan and maps a settled
rotation back to the slice under the pointer.

The wheel turns clockwise while slice ``i`` covers ``[i*d, (i+1)*d)``
clockwise from the pointer at 0 degrees, ``d = 360 / N``. After turning by
``r`` degrees the pointer therefore sits at wheel angle ``(360 - r) mod 360``.
"""

import logging
import math
import random

from spinwheel.animation.easing import CubicBezier
from spinwheel.config.settings import SpinSettings, get_settings
from spinwheel.core.models import SpinPlan

logger = logging.getLogger(__name__)


def _finite_or_zero(value: float, what: str) -> float:
    if value is None or not math.isfinite(value):
        logger.warning(f"Non-finite {what} {value!r}, treating as 0")
        return 0.0
    return float(value)


def resolve_spin(target_rotation_deg: float, slice_count: int) -> int | None:
    """Winning slice index for a settled rotation.

    Pure: the same target and slice count always give the same index.

    Args:
        target_rotation_deg: Cumulative rotation the wheel settled at
        slice_count: Number of slices on the wheel

    Returns:
        Index in ``[0, slice_count)``, or None for an empty wheel
    """
    if slice_count < 1:
        return None

    target = _finite_or_zero(target_rotation_deg, "target rotation")
    normalized = target % 360
    effective = (360 - normalized) % 360
    slice_angle = 360 / slice_count
    index = int(effective // slice_angle)
    # effective can round up to exactly 360
    return min(max(index, 0), slice_count - 1)


def slice_at_angle(angle_deg: float, rotation_deg: float, slice_count: int) -> int | None:
    """Slice index under a screen angle for a wheel turned by ``rotation_deg``.

    ``angle_deg`` is measured clockwise from the top of the wheel, e.g. the
    direction of a tap relative to the wheel centre.
    """
    if slice_count < 1:
        return None

    angle = _finite_or_zero(angle_deg, "angle")
    rotation = _finite_or_zero(rotation_deg, "rotation")
    effective = (angle - rotation) % 360
    index = int(effective // (360 / slice_count))
    return min(max(index, 0), slice_count - 1)


class SpinOutcomeEngine:
    """Plans spins and resolves their winners.

    The random source is injected so that tests (or replays) can pin a
    seed; by default each engine gets its own OS-seeded generator.
    """

    def __init__(
        self,
        settings: SpinSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or get_settings().spin
        if rng is None:
            rng = random.Random(self._settings.seed)
        self._rng = rng
        self._easing = CubicBezier(*self._settings.easing)

    @property
    def settings(self) -> SpinSettings:
        return self._settings

    def plan(self, current_rotation_deg: float, slice_count: int = 0) -> SpinPlan:
        """
        Draw a new spin starting from the current cumulative rotation.

        Args:
            current_rotation_deg: Where the wheel currently rests
            slice_count: Recorded on the plan for later resolution

        Returns:
            SpinPlan with target = start + 360 * turns + offset
        """
        start = _finite_or_zero(current_rotation_deg, "current rotation")
        s = self._settings

        extra_turns = self._rng.randint(s.min_extra_turns, s.max_extra_turns)
        final_offset = self._rng.random() * 360
        duration = s.base_duration_ms + self._rng.random() * s.duration_jitter_ms

        plan = SpinPlan(
            start_rotation_deg=start,
            target_rotation_deg=start + final_offset + 360 * extra_turns,
            duration_ms=duration,
            easing_curve=self._easing,
            extra_turns=extra_turns,
            final_offset_deg=final_offset,
            slice_count=slice_count,
        )
        logger.debug(
            f"Spin planned: {start:.1f} -> {plan.target_rotation_deg:.1f} deg "
            f"({extra_turns} turns) over {duration:.0f}ms"
        )
        return plan

    def resolve(self, plan: SpinPlan | float, slice_count: int | None = None) -> int | None:
        """Winning index for a plan (or a raw target rotation)."""
        if isinstance(plan, SpinPlan):
            target = plan.target_rotation_deg
            if slice_count is None:
                slice_count = plan.slice_count
        else:
            target = plan
        return resolve_spin(target, slice_count or 0)


def plan_spin(current_rotation_deg: float, rng: random.Random | None = None) -> SpinPlan:
    """Plan a spin with default settings. See ``SpinOutcomeEngine.plan``."""
    return SpinOutcomeEngine(rng=rng).plan(current_rotation_deg)
