"""SPINWHEEL - headless wheel-of-fortune engine.

Lays out labelled slices on a circle, colors them so neighbors differ, and
plans and resolves randomized spins. Output is plain data for any renderer.
"""

__version__ = "0.1.0"

from spinwheel.core.models import Slice, SliceLayout, SpinPlan, WheelState
from spinwheel.core.state import SpinPhase, SpinSession
from spinwheel.engine import (
    WheelEngine,
    assign_colors,
    compute_layout,
    plan_spin,
    resolve_spin,
)

__all__ = [
    # Data
    "Slice",
    "SliceLayout",
    "SpinPlan",
    "WheelState",
    # Engine
    "WheelEngine",
    "SpinPhase",
    "SpinSession",
    # Functional API
    "assign_colors",
    "compute_layout",
    "plan_spin",
    "resolve_spin",
]
