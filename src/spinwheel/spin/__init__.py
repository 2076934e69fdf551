"""Spin planning and outcome resolution."""

from spinwheel.spin.engine import (
    SpinOutcomeEngine,
    plan_spin,
    resolve_spin,
    slice_at_angle,
)

__all__ = ["SpinOutcomeEngine", "plan_spin", "resolve_spin", "slice_at_angle"]
