import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from drawkit.geometry import Point2d
from drawkit.segments import (
    SegmentSettings,
    TrigSettings,
    get_fundamental,
    get_hue,
    linear_frequencies,
    logarithmic_frequencies,
    make_functions,
    make_trig_points,
)

frequencies = st.floats(min_value=1.0 / 32.0, max_value=32.0)


def test_fundamental_of_one_is_one():
    assert get_fundamental(1.0) == 1.0


def test_fundamental_folds_three_into_octave():
    assert get_fundamental(3.0) == 1.5


def test_fundamental_ignores_sign():
    assert get_fundamental(-3.0) == get_fundamental(3.0)


def test_fundamental_rejects_zero():
    with pytest.raises(ValueError):
        get_fundamental(0.0)


@given(frequencies)
def test_hue_within_circle(frequency):
    assert 0.0 <= get_hue(frequency) < 360.0


def test_octaves_share_a_hue():
    assert get_hue(1.0) == 0.0
    assert get_hue(2.0) == get_hue(4.0) == get_hue(0.5) == 0.0
    assert get_hue(3.0) == pytest.approx(get_hue(6.0))


def test_linear_frequencies_even_spacing():
    values = linear_frequencies(1.0, 4.0, 4)
    assert len(values) == 4
    assert values[0] == 1.0
    assert values[-1] == pytest.approx(4.0)
    steps = [b - a for a, b in zip(values, values[1:])]
    assert all(step == pytest.approx(steps[0]) for step in steps)


def test_logarithmic_frequencies_constant_ratio():
    values = logarithmic_frequencies(1.0, 4.0, 5)
    assert values[0] == 1.0
    assert values[-1] == pytest.approx(4.0)
    ratios = [b / a for a, b in zip(values, values[1:])]
    assert all(ratio == pytest.approx(ratios[0]) for ratio in ratios)


@pytest.mark.parametrize("spread", [linear_frequencies, logarithmic_frequencies])
def test_frequencies_need_two(spread):
    with pytest.raises(ValueError):
        spread(1.0, 4.0, 1)


def test_default_settings():
    settings = SegmentSettings()
    assert settings.function_count == 4
    assert settings.point_count == 256
    assert settings.start_frequency == 1.0
    assert settings.end_frequency == 4.0
    assert settings.amplitude == 200.0
    assert settings.is_logarithmic is True


def test_default_trig_settings():
    trig = TrigSettings()
    assert (trig.amplitude, trig.frequency, trig.phase) == (400.0, 1.0, 0.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"function_count": 1},
        {"function_count": 33},
        {"point_count": 2049},
        {"start_frequency": 0.0},
        {"end_frequency": 33.0},
        {"amplitude": -1.0},
    ],
)
def test_segment_settings_out_of_range(kwargs):
    with pytest.raises(ValueError):
        SegmentSettings(**kwargs)


@pytest.mark.parametrize(
    "kwargs", [{"phase": 181.0}, {"frequency": 0.0}, {"amplitude": 1001.0}]
)
def test_trig_settings_out_of_range(kwargs):
    with pytest.raises(ValueError):
        TrigSettings(**kwargs)


@pytest.mark.parametrize("logarithmic", [True, False])
def test_make_functions(logarithmic):
    settings = SegmentSettings(function_count=6, is_logarithmic=logarithmic)
    functions = make_functions(settings)
    assert len(functions) == 6
    assert functions[0].frequency == settings.start_frequency
    assert functions[-1].frequency == pytest.approx(settings.end_frequency)
    for function in functions:
        assert function.amplitude == settings.amplitude
        assert function.phase == 0.0
        assert function.hue == get_hue(function.frequency)


def test_make_functions_spreads_differ():
    log = make_functions(SegmentSettings(is_logarithmic=True))
    lin = make_functions(SegmentSettings(is_logarithmic=False))
    assert [f.frequency for f in log] == logarithmic_frequencies(1.0, 4.0, 4)
    assert [f.frequency for f in lin] == linear_frequencies(1.0, 4.0, 4)


def test_trig_points_span_image():
    trig = TrigSettings(amplitude=200.0, frequency=1.0)
    points = make_trig_points(256, trig, 1920)
    assert len(points) == 256
    assert points[0] == Point2d(0.0, 540.0)
    assert points[-1].x == pytest.approx(1920.0)
    assert points[-1].y == pytest.approx(540.0)
    xs = [p.x for p in points]
    assert xs == sorted(xs)


def test_trig_points_stay_within_amplitude():
    trig = TrigSettings(amplitude=100.0, frequency=3.0, phase=45.0)
    points = make_trig_points(500, trig, 800)
    assert all(440.0 - 1e-9 <= p.y <= 640.0 + 1e-9 for p in points)


def test_trig_points_cosine_starts_at_peak():
    trig = TrigSettings(amplitude=200.0)
    points = make_trig_points(10, trig, 100, math.cos)
    assert points[0].y == pytest.approx(540.0 - 200.0)


def test_trig_points_need_two():
    with pytest.raises(ValueError):
        make_trig_points(1, TrigSettings(), 100)