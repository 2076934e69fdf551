import random

import pytest

from spinwheel.color.utils import (
    color_distance,
    create_dark_variant,
    create_light_tint,
    generate_harmonious_background,
    generate_random_colors,
    get_luminance,
    get_optimal_text_color,
    hex_to_hsv,
    hex_to_rgb,
    hsv_to_rgb,
    normalize_hex,
    rgb_to_hex,
)


def test_normalize_hex():
    assert normalize_hex("#abc") == "#AABBCC"
    assert normalize_hex("ffacab") == "#FFACAB"
    with pytest.raises(ValueError):
        normalize_hex("#12345")


def test_rgb_hex_conversion():
    assert hex_to_rgb("#FF8000") == (255, 128, 0)
    assert rgb_to_hex(255, 128, 0) == "#FF8000"
    assert rgb_to_hex(300, -5, 12) == "#FF000C"


def test_hsv_conversion():
    assert hsv_to_rgb(0, 1, 1) == (255, 0, 0)
    assert hsv_to_rgb(120, 1, 1) == (0, 255, 0)
    assert hsv_to_rgb(240, 1, 1) == (0, 0, 255)
    h, s, v = hex_to_hsv("#0000FF")
    assert h == 240
    assert s == pytest.approx(1.0)
    assert v == pytest.approx(1.0)


def test_luminance_and_text_color():
    assert get_luminance("#FFFFFF") == pytest.approx(1.0)
    assert get_luminance("#000000") == pytest.approx(0.0)
    assert get_optimal_text_color("#FFFFFF") == "#333333"
    assert get_optimal_text_color("#1A1A2E") == "#FFFFFF"


def test_tint_and_dark_variant():
    assert create_light_tint("#000000") == "#F2F2F2"
    assert create_dark_variant("#FFFFFF") == "#999999"


def test_generate_random_colors_seeded():
    first = generate_random_colors(12, rng=random.Random(7))
    second = generate_random_colors(12, rng=random.Random(7))
    assert first == second
    assert len(first) == 12
    assert all(c.startswith("#") and len(c) == 7 for c in first)


def test_harmonious_background_is_light():
    bg = generate_harmonious_background(["#FF0000", "#FF8800"])
    assert get_luminance(bg) > 0.85
    assert generate_harmonious_background([]) == "#F8F9FA"


def test_color_distance():
    assert color_distance("#000000", "#000000") == 0
    assert color_distance("#000000", "#FFFFFF") == pytest.approx(441.67, abs=0.01)
