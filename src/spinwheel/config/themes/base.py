"""
Wheel theme definitions and theme loading utilities.

A theme only decides how a wheel looks (palette, label and stroke colors).
The engine itself never sees theme identity: it consumes ``wheel_colors``
as a plain palette of hex strings.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any
import logging

import yaml

from spinwheel.color.utils import (
    create_dark_variant,
    create_light_tint,
    get_luminance,
    get_optimal_text_color,
    normalize_hex,
)

logger = logging.getLogger(__name__)

THEMES_PATH = Path(__file__).parent
DEFAULT_THEME = "pastel"


class ThemeName(str, Enum):
    """Built-in theme identifiers."""
    PASTEL = "pastel"
    SUNSET = "sunset"
    OCEAN = "ocean"
    FOREST = "forest"
    NEON = "neon"
    VINTAGE = "vintage"
    AURORA = "aurora"
    AUTUMN = "autumn"
    CUSTOM = "custom"


@dataclass
class ThemeUIColors:
    """Colors for the chrome around the wheel."""
    primary: str = "#4e4370"
    secondary: str = "#666666"
    accent: str = "#94c4f5"
    text: str = "#333333"
    card_background: str = "#ffffff"
    modal_background: str = "#ffffff"
    button_background: str = "#94c4f5"
    button_text: str = "#ffffff"


@dataclass
class Theme:
    """Complete wheel theme."""
    name: str = DEFAULT_THEME
    display_name: str = "Pastel Dream"
    emoji: str = ""
    background: str = "#f3efff"

    # Slice label and divider colors
    text_color: str = "#4e4370"
    stroke_color: str = "#ffffff"

    wheel_colors: list[str] = field(default_factory=list)
    ui: ThemeUIColors = field(default_factory=ThemeUIColors)

    @property
    def palette(self) -> list[str]:
        """Wheel colors as a palette for color assignment."""
        return list(self.wheel_colors)

    @classmethod
    def from_yaml(cls, data: dict[str, Any]) -> "Theme":
        """Create theme from YAML data."""
        if not isinstance(data, dict):
            raise ValueError(f"Theme data must be a mapping, got {type(data).__name__}")

        theme = cls(
            name=data.get("name", DEFAULT_THEME),
            display_name=data.get("display_name", data.get("name", "")),
            emoji=data.get("emoji", ""),
            background=data.get("background", "#ffffff"),
            text_color=data.get("text_color", "#4e4370"),
            stroke_color=data.get("stroke_color", "#ffffff"),
            wheel_colors=[normalize_hex(c) for c in data.get("wheel_colors", [])],
        )

        if "ui" in data:
            theme.ui = ThemeUIColors(**data["ui"])

        return theme


def load_theme(theme_name: str, themes_path: Path | None = None) -> Theme:
    """
    Load a theme from YAML file.

    Args:
        theme_name: Name of the theme (without .yaml extension)
        themes_path: Path to themes directory

    Returns:
        Theme instance

    Raises:
        FileNotFoundError: If no YAML file exists for the theme
    """
    if themes_path is None:
        themes_path = THEMES_PATH

    theme_file = themes_path / f"{theme_name}.yaml"

    with open(theme_file, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    theme = Theme.from_yaml(data)
    logger.debug(f"Loaded theme '{theme.name}' with {len(theme.wheel_colors)} colors")
    return theme


def list_themes(themes_path: Path | None = None) -> list[str]:
    """List available themes."""
    if themes_path is None:
        themes_path = THEMES_PATH

    return sorted(f.stem for f in themes_path.glob("*.yaml"))


@lru_cache(maxsize=None)
def _cached_theme(name: str) -> Theme:
    try:
        return load_theme(name.lower())
    except FileNotFoundError:
        logger.warning(f"Unknown theme '{name}', using '{DEFAULT_THEME}'")
        return load_theme(DEFAULT_THEME)


def get_theme(theme_name: str | ThemeName = DEFAULT_THEME) -> Theme:
    """Get a built-in theme by name, falling back to the default theme.

    Returns a private copy; changing it leaves the cached theme intact.
    """
    name = theme_name.value if isinstance(theme_name, ThemeName) else str(theme_name)
    return copy.deepcopy(_cached_theme(name))


def theme_label_colors(theme_name: str | ThemeName) -> tuple[str, str]:
    """Return (text_color, stroke_color) for a theme."""
    theme = get_theme(theme_name)
    return theme.text_color, theme.stroke_color


def create_custom_theme(
    colors: list[str],
    name: str = "My Custom Theme",
    background: str | None = None,
) -> Theme:
    """Derive a full theme from a user palette.

    The background defaults to a very light tint of the first color; text
    and panel colors follow the background's luminance.

    Raises:
        ValueError: If fewer than three colors are given
    """
    if len(colors) < 3:
        raise ValueError(f"A custom theme needs at least 3 colors, got {len(colors)}")

    colors = [normalize_hex(c) for c in colors]
    background = normalize_hex(background) if background else create_light_tint(colors[0])
    text_color = get_optimal_text_color(background)
    is_dark = get_luminance(background) <= 0.5
    panel = "#2A2A2A" if is_dark else "#FFFFFF"

    return Theme(
        name=ThemeName.CUSTOM.value,
        display_name=name or "My Custom Theme",
        emoji="⭐",
        background=background,
        text_color=create_dark_variant(colors[0]) if not is_dark else text_color,
        stroke_color="#FFFFFF",
        wheel_colors=colors,
        ui=ThemeUIColors(
            primary=colors[0],
            secondary=colors[1],
            accent=colors[2],
            text=text_color,
            card_background=panel,
            modal_background="#1E1E1E" if is_dark else "#FFFFFF",
            button_background=colors[2],
            button_text="#FFFFFF",
        ),
    )
