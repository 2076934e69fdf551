"""
Wheel engine: composition root for layout, coloring and spin outcome.

A renderer calls ``layout`` whenever the slice list changes; an animation
driver calls ``spin`` to get a plan, animates it, and calls ``resolve`` with
the elapsed time until a winner comes back.
"""

import logging
import random
from typing import Any, Mapping, Sequence

from spinwheel.color.assigner import ColorAssigner, assign_colors
from spinwheel.config.settings import Settings, get_settings
from spinwheel.config.themes import get_theme
from spinwheel.core.models import Slice, SliceLayout, SpinPlan, WheelState
from spinwheel.layout.engine import LayoutEngine, compute_layout
from spinwheel.spin.engine import SpinOutcomeEngine, plan_spin, resolve_spin

logger = logging.getLogger(__name__)


class WheelEngine:
    """
    Orchestrates the wheel's pure computations.

    Holds no animation state: rotation and the spinning flag are owned by
    the caller and passed in through ``WheelState``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        palette: Sequence[str] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        if not palette:
            palette = get_theme(self._settings.theme).palette
        self._colors = ColorAssigner(palette)
        self._layout = LayoutEngine(self._settings.layout)
        self._spin = SpinOutcomeEngine(self._settings.spin, rng)
        logger.debug(f"WheelEngine ready (theme={self._settings.theme}, {len(palette)} colors)")

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def palette(self) -> list[str]:
        return self._colors.palette

    def assign_colors(self, slice_ids: Sequence[str], palette: Sequence[str] | None = None) -> list[str]:
        return self._colors.assign(slice_ids, palette)

    def colorize(self, slices: Sequence[Slice], palette: Sequence[str] | None = None) -> list[Slice]:
        """Return copies of ``slices`` with neighbor-distinct colors."""
        return self._colors.colorize(slices, palette)

    def layout(self, slices: Sequence[Slice | Mapping[str, Any]]) -> list[SliceLayout]:
        return self._layout.layout(slices)

    def spin(self, state: WheelState) -> SpinPlan | None:
        """
        Plan a spin for the given wheel state.

        Returns:
            SpinPlan, or None if the wheel cannot spin right now (fewer
            than two slices, or a spin already in flight)
        """
        if state.is_spinning:
            logger.debug("Spin request ignored: already spinning")
            return None
        if state.slice_count < 2:
            logger.debug(f"Spin request ignored: {state.slice_count} slice(s)")
            return None
        return self._spin.plan(state.rotation_deg, state.slice_count)

    def resolve(self, plan: SpinPlan, elapsed_ms: float) -> int | None:
        """
        Winning index once the animation has run its course.

        Returns:
            None while ``elapsed_ms`` is below the plan duration
        """
        if not plan.is_settled(elapsed_ms):
            return None
        return self._spin.resolve(plan)


__all__ = [
    "WheelEngine",
    "assign_colors",
    "compute_layout",
    "plan_spin",
    "resolve_spin",
]
