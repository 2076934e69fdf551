import math

import pytest

from spinwheel.config.settings import LayoutSettings
from spinwheel.core.models import Slice
from spinwheel.layout import geometry
from spinwheel.layout.engine import LayoutEngine, compute_layout


@pytest.fixture
def engine(settings):
    return LayoutEngine(settings.layout)


def test_empty_wheel_placeholder(engine):
    result = engine.layout([])
    assert len(result) == 1
    placeholder = result[0]
    assert placeholder.is_placeholder
    assert placeholder.full_circle
    assert placeholder.text_lines == ["Add at least 2 items!"]


def test_single_slice_full_circle(engine):
    result = engine.layout([Slice(id="a", label="Read a Book")])
    assert len(result) == 1
    entry = result[0]
    assert entry.full_circle
    assert not entry.is_placeholder
    assert (entry.arc_start, entry.arc_end) == (0.0, 360.0)
    assert entry.text_radius == 0.0
    assert entry.text_anchor == (0.0, 0.0)
    assert " ".join(entry.text_lines) == "Read a Book"


@pytest.mark.parametrize("count", [2, 3, 5, 8, 13])
def test_arcs_tile_the_circle(engine, make_slices, count):
    result = engine.layout(make_slices(count))
    delta = 360 / count
    assert [r.index for r in result] == list(range(count))
    for i, entry in enumerate(result):
        assert entry.arc_start == pytest.approx(i * delta)
        assert entry.arc_end == pytest.approx((i + 1) * delta)
        assert entry.mid_angle == pytest.approx(i * delta + delta / 2)
        assert entry.rotation_deg == pytest.approx(entry.mid_angle + 90)
    assert result[-1].arc_end == pytest.approx(360.0)


def test_radii_formulas():
    s = LayoutSettings()
    assert geometry.emoji_radius(2, s) == pytest.approx(0.766)
    assert geometry.emoji_radius(30, s) == pytest.approx(0.88)
    assert geometry.text_radius(10, False, s) == pytest.approx(0.66)
    assert geometry.text_radius(40, False, s) == pytest.approx(0.75)
    assert geometry.text_radius(10, True, s) == pytest.approx(0.68)
    assert geometry.text_radius(30, True, s) == pytest.approx(0.80)


@pytest.mark.parametrize("has_emoji", [False, True])
def test_text_ring_inside_emoji_ring(has_emoji):
    s = LayoutSettings()
    for n in range(1, 201):
        assert geometry.text_radius(n, has_emoji, s) < geometry.emoji_radius(n, s)


@pytest.mark.parametrize("count,expected", [
    (2, (14, 26)),
    (4, (14, 26)),
    (5, (13, 24)),
    (8, (12, 22)),
    (14, (11, 18)),
    (26, (10, 15)),
    (27, (8, 12)),
    (100, (8, 12)),
])
def test_font_steps(count, expected):
    assert geometry.font_sizes(count, LayoutSettings()) == expected


def test_small_wheel_budget_encourages_wrapping():
    s = LayoutSettings()
    # Two slices have room for far more than ten characters
    assert geometry.max_chars_for(2, geometry.text_radius(2, False, s), 14, s) == 10


def test_budget_from_arc_length():
    s = LayoutSettings()
    radius = geometry.text_radius(16, False, s)
    arc = 2 * math.pi * 175 * radius / 16
    assert geometry.max_chars_for(16, radius, 10, s) == int(arc // 7)


def test_long_label_single_line_on_crowded_wheel(engine, make_slices):
    slices = make_slices(15) + [Slice(id="long", label="Extraordinarily Long Activity Name")]
    result = engine.layout(slices)
    entry = result[-1]
    assert len(entry.text_lines) == 1
    assert entry.text_lines[0].endswith("…")
    assert len(entry.text_lines[0]) <= entry.max_chars


def test_long_label_wraps_on_small_wheel(engine):
    result = engine.layout([
        Slice(id="a", label="Jump Trampoline"),
        Slice(id="b", label="Dance Party"),
        Slice(id="c", label="Craft Corner"),
    ])
    assert result[0].text_lines == ["Jump", "Trampoline"]
    assert len(result[0].line_offsets) == 2
    assert result[0].line_offsets[0] == pytest.approx(-result[0].line_offsets[1])


def test_anchors_on_rings(engine, make_slices):
    result = engine.layout(make_slices(4))
    first = result[0]
    # Mid angle 45 degrees: up and to the right of centre
    x, y = first.text_anchor
    assert x > 0 and y < 0
    assert math.hypot(x, y) == pytest.approx(first.text_radius)
    assert math.hypot(*first.emoji_anchor) == pytest.approx(first.emoji_radius)


def test_emoji_slices_use_emoji_text_ring(engine):
    result = engine.layout([
        Slice(id="a", label="Swim", has_emoji=True),
        Slice(id="b", label="Read"),
    ])
    assert result[0].text_radius == pytest.approx(0.60)
    assert result[1].text_radius == pytest.approx(0.612)


def test_overlong_label_is_clipped(engine, caplog):
    result = engine.layout([Slice(id="a", label="x" * 80), Slice(id="b", label="y")])
    assert sum(len(line) for line in result[0].text_lines) == 50
    assert "exceeds 50" in caplog.text


def test_accepts_mappings():
    result = compute_layout([
        {"id": "1", "label": "Tag", "hasEmoji": True},
        {"id": "2", "name": "Chess"},
    ])
    assert [r.slice_id for r in result] == ["1", "2"]
    assert result[0].has_emoji and not result[1].has_emoji
    assert result[1].text_lines == ["Chess"]


def test_layout_does_not_touch_slices(engine, make_slices):
    slices = make_slices(6)
    before = list(slices)
    engine.layout(slices)
    assert slices == before


def _wheel_with(label, count):
    return [Slice(id="long", label=label)] + [Slice(id=f"s{i}", label="Go") for i in range(1, count)]


@pytest.mark.parametrize("count, factor", [(6, 1.15), (7, 1.10), (12, 1.10), (13, 1.05)])
def test_line_spacing_steps(settings, count, factor):
    assert geometry.line_spacing_factor(count, settings.layout) == factor


@pytest.mark.parametrize("count, font_size, factor", [(6, 13, 1.15), (7, 12, 1.10)])
def test_wrapped_lines_use_stepped_spacing(engine, count, font_size, factor):
    entry = engine.layout(_wheel_with("Movie night", count))[0]
    assert entry.text_lines == ["Movie", "night"]
    assert entry.line_offsets[1] - entry.line_offsets[0] == pytest.approx(font_size * factor)


def test_eleven_slices_still_wrap(engine):
    entry = engine.layout(_wheel_with("Movie night", 11))[0]
    assert entry.max_chars == 8
    assert entry.text_lines == ["Movie", "night"]


def test_twelve_slices_truncate_to_one_line(engine):
    entry = engine.layout(_wheel_with("Movie night", 12))[0]
    assert entry.max_chars == 7
    assert entry.text_lines == ["Movie…"]
    assert entry.line_offsets == [0.0]
