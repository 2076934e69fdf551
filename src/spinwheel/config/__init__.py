"""Configuration for SPINWHEEL."""

from spinwheel.config.settings import (
    FontStep,
    LayoutSettings,
    SpinSettings,
    Settings,
    get_settings,
)

__all__ = ["FontStep", "LayoutSettings", "SpinSettings", "Settings", "get_settings"]
