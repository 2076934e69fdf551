import pytest
from pydantic import ValidationError

from spinwheel.config.settings import FontStep, LayoutSettings, Settings, SpinSettings, get_settings


def test_defaults(settings):
    assert settings.debug is False
    assert settings.theme == "pastel"
    assert settings.spin.min_extra_turns == 4
    assert settings.spin.max_extra_turns == 8
    assert settings.spin.seed is None
    assert settings.layout.wheel_radius_px == 175
    assert settings.layout.ellipsis == "…"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SPINWHEEL_THEME", "neon")
    monkeypatch.setenv("SPINWHEEL_SPIN__SEED", "42")
    monkeypatch.setenv("SPINWHEEL_LAYOUT__MIN_CHARS", "4")
    settings = Settings(_env_file=None)
    assert settings.theme == "neon"
    assert settings.spin.seed == 42
    assert settings.layout.min_chars == 4


def test_nested_fields_ignore_unprefixed_env(monkeypatch):
    monkeypatch.setenv("SEED", "99")
    assert Settings(_env_file=None).spin.seed is None


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_turn_range_validated():
    with pytest.raises(ValidationError):
        SpinSettings(min_extra_turns=6, max_extra_turns=3)


def test_font_steps_sorted():
    layout = LayoutSettings(
        font_steps=[
            FontStep(max_slices=10, text_size=11, emoji_size=16),
            FontStep(max_slices=4, text_size=14, emoji_size=26),
        ]
    )
    assert [step.max_slices for step in layout.font_steps] == [4, 10]
