"""Built-in wheel themes."""

from spinwheel.config.themes.base import (
    Theme,
    ThemeName,
    ThemeUIColors,
    DEFAULT_THEME,
    load_theme,
    list_themes,
    get_theme,
    theme_label_colors,
    create_custom_theme,
)

__all__ = [
    "Theme",
    "ThemeName",
    "ThemeUIColors",
    "DEFAULT_THEME",
    "load_theme",
    "list_themes",
    "get_theme",
    "theme_label_colors",
    "create_custom_theme",
]
