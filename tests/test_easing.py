import pytest

from spinwheel.animation.easing import SPIN_BEZIER, CubicBezier, Easing, get_easing, interpolate


def test_bezier_endpoints():
    assert SPIN_BEZIER(0.0) == 0.0
    assert SPIN_BEZIER(1.0) == 1.0
    assert SPIN_BEZIER(-0.5) == 0.0
    assert SPIN_BEZIER(2.0) == 1.0


def test_bezier_monotonic_deceleration():
    samples = [SPIN_BEZIER(i / 200) for i in range(201)]
    assert all(b >= a for a, b in zip(samples, samples[1:]))
    # Ease-out: ahead of linear progress over the second half
    assert SPIN_BEZIER(0.5) > 0.5
    # Zero exit velocity: the last step moves far less than a linear step
    assert samples[-1] - samples[-2] < 0.1 / 200


def test_linear_bezier_is_identity():
    curve = CubicBezier(1 / 3, 1 / 3, 2 / 3, 2 / 3)
    for t in (0.1, 0.25, 0.5, 0.9):
        assert curve(t) == pytest.approx(t, abs=1e-6)


def test_bezier_rejects_out_of_range_x():
    with pytest.raises(ValueError):
        CubicBezier(1.5, 0, 0.5, 1)


def test_bezier_css():
    assert SPIN_BEZIER.to_css() == "cubic-bezier(0.25, 0.1, 0.25, 1)"


def test_get_easing_by_name_and_enum():
    assert get_easing("ease_out_cubic")(0.5) == pytest.approx(0.875)
    assert get_easing(Easing.LINEAR)(0.3) == 0.3
    assert get_easing(Easing.SPIN) is SPIN_BEZIER
    assert get_easing(SPIN_BEZIER) is SPIN_BEZIER
    with pytest.raises(ValueError):
        get_easing("wobble")


def test_interpolate_clamps():
    assert interpolate(10, 20, 0.5) == 15
    assert interpolate(10, 20, 1.5) == 20
    assert interpolate(0, 100, 0.5, "ease_out_quad") == pytest.approx(75)


@pytest.mark.parametrize("easing", list(Easing))
def test_registered_curves_span_zero_to_one(easing):
    func = get_easing(easing)
    assert func(0.0) == pytest.approx(0.0)
    assert func(1.0) == pytest.approx(1.0)
    assert 0.0 < func(0.5) < 1.0
