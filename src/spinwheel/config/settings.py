"""
Engine settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested values use a double underscore, e.g. SPINWHEEL_SPIN__MIN_EXTRA_TURNS=3.
"""

from functools import lru_cache

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FontStep(BaseModel):
    """Font sizes used while the slice count is at most ``max_slices``."""
    max_slices: int = Field(ge=1)
    text_size: int = Field(ge=1)
    emoji_size: int = Field(ge=1)


class LayoutSettings(BaseModel):
    """Label ring geometry and text fitting policy."""

    # Reference wheel radius in pixels for character budgets
    wheel_radius_px: float = Field(default=175.0, gt=0)

    # Emoji ring: min(base + step * N, max)
    emoji_radius_base: float = 0.75
    emoji_radius_step: float = 0.008
    emoji_radius_max: float = 0.88

    # Text ring without an emoji
    text_radius_base: float = 0.60
    text_radius_step: float = 0.006
    text_radius_max: float = 0.75

    # Text ring when the slice carries an emoji
    text_radius_emoji_base: float = 0.58
    text_radius_emoji_step: float = 0.01
    text_radius_emoji_max: float = 0.80

    font_steps: list[FontStep] = Field(default_factory=lambda: [
        FontStep(max_slices=4, text_size=14, emoji_size=26),
        FontStep(max_slices=6, text_size=13, emoji_size=24),
        FontStep(max_slices=8, text_size=12, emoji_size=22),
        FontStep(max_slices=14, text_size=11, emoji_size=18),
        FontStep(max_slices=26, text_size=10, emoji_size=15),
    ])
    min_text_size: int = 8
    min_emoji_size: int = 12

    # Average glyph width as a fraction of the font size
    glyph_width_factor: float = Field(default=0.7, gt=0)
    min_chars: int = Field(default=3, ge=1)

    # N >= single_line_from: one line, truncated with an ellipsis
    single_line_from: int = 12
    # N <= wrap_encourage_until: budget capped to favour two lines
    wrap_encourage_until: int = 10
    wrap_encourage_max_chars: int = 10

    max_label_length: int = 50
    ellipsis: str = "…"

    # Line spacing multipliers
    line_spacing_loose: float = 1.15   # N <= 6
    line_spacing_normal: float = 1.10  # N <= 12
    line_spacing_tight: float = 1.05

    empty_message: str = "Add at least 2 items!"

    @model_validator(mode="after")
    def _sort_font_steps(self) -> "LayoutSettings":
        self.font_steps = sorted(self.font_steps, key=lambda step: step.max_slices)
        return self


class SpinSettings(BaseModel):
    """Spin plan randomization."""

    min_extra_turns: int = Field(default=4, ge=0)
    max_extra_turns: int = Field(default=8, ge=0)

    base_duration_ms: float = Field(default=3800.0, ge=0)
    duration_jitter_ms: float = Field(default=1000.0, ge=0)

    # cubic-bezier control points of the deceleration curve
    easing: tuple[float, float, float, float] = (0.25, 0.1, 0.25, 1.0)

    # Fixed seed for reproducible spins (None = OS entropy)
    seed: int | None = None

    @model_validator(mode="after")
    def _check_turns(self) -> "SpinSettings":
        if self.max_extra_turns < self.min_extra_turns:
            raise ValueError(
                f"max_extra_turns ({self.max_extra_turns}) < min_extra_turns ({self.min_extra_turns})"
            )
        return self


class Settings(BaseSettings):
    """Main engine settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPINWHEEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # Default theme whose wheel colors seed the palette
    theme: str = "pastel"

    # Nested settings
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    spin: SpinSettings = Field(default_factory=SpinSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
