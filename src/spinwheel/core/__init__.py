"""Core data types for SPINWHEEL.

The spin session lives in ``spinwheel.core.state``; it depends on the spin
engine and is imported from there directly.
"""

from .models import Slice, SliceLayout, SpinPlan, WheelState

__all__ = ["Slice", "SliceLayout", "SpinPlan", "WheelState"]
