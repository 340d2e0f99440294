import itertools

import pandas as pd
import pytest

from transit_weather.core.weather_sample import SafetyAssessment, WeatherSample
from transit_weather.intelligence.safety_engine import (
    assess_frame,
    assess_sample,
    assess_series,
    samples_to_frame,
)

from conftest import make_sample


def test_mild_conditions_are_fully_safe():
    sample = WeatherSample(
        temperature_c=30, humidity_pct=70, wind_speed_kmh=10,
        precipitation_chance_pct=20, visibility_km=10,
    )
    assessment = assess_sample(sample)
    assert assessment.safety_score == 100
    assert assessment.delay_risk == 0


def test_severe_conditions_clamp_to_zero():
    # Deductions 48 + 30 + 30 + 36 = 144
    sample = WeatherSample(
        temperature_c=38, humidity_pct=70, wind_speed_kmh=40,
        precipitation_chance_pct=60, visibility_km=2,
    )
    assessment = assess_sample(sample)
    assert assessment.safety_score == 0
    assert assessment.delay_risk == 100


@pytest.mark.parametrize("fields, expected", [
    ({"precipitation": 50}, 60),
    ({"wind": 30}, 90),
    ({"visibility": 4}, 90),
    ({"temperature": 40}, 60),
    ({"temperature": 0}, 60),
])
def test_single_deductions(fields, expected):
    assert assess_sample(make_sample(**fields)).safety_score == pytest.approx(expected)


@pytest.mark.parametrize("fields", [
    {"precipitation": 30},
    {"wind": 25},
    {"visibility": 5},
    {"temperature": 5},
    {"temperature": 35},
])
def test_thresholds_are_exclusive(fields):
    assert assess_sample(make_sample(**fields)).safety_score == 100


def test_humidity_does_not_affect_safety():
    assert assess_sample(make_sample(humidity=100)).safety_score == 100
    assert assess_sample(make_sample(humidity=0)).safety_score == 100


def test_bounded_and_complementary_over_grid():
    grid = itertools.product(
        (-30, 0, 4.9, 12.3, 35.1, 60),      # temperature
        (0, 55.5, 100),                     # humidity
        (-5, 0, 25.1, 33.3, 70, 200),       # wind
        (0, 30.5, 47.9, 100, 150),          # precipitation
        (-2, 0, 0.3, 4.99, 10, 50),         # visibility
    )
    for temperature, humidity, wind, precipitation, visibility in grid:
        assessment = assess_sample(make_sample(temperature, humidity, wind, precipitation, visibility))
        assert 0 <= assessment.safety_score <= 100
        assert 0 <= assessment.delay_risk <= 100
        assert assessment.safety_score + assessment.delay_risk == 100


def test_nan_field_is_worst_case():
    assessment = assess_sample(make_sample(visibility=float("nan")))
    assert assessment == SafetyAssessment(safety_score=0.0, delay_risk=100.0)


def test_infinite_values_stay_bounded():
    assert assess_sample(make_sample(precipitation=float("inf"))).safety_score == 0
    assert assess_sample(make_sample(temperature=float("-inf"))).safety_score == 0
    assert assess_sample(make_sample(visibility=float("inf"))).safety_score == 100


def test_assess_series_keeps_order_without_smoothing():
    series = [make_sample(), make_sample(wind=30), make_sample()]
    assessments = assess_series(series)
    assert [a.safety_score for a in assessments] == [100, 90, 100]
    assert assess_series([]) == []


def test_assess_frame_matches_per_sample_scoring():
    samples = [
        make_sample(),
        make_sample(temperature=38, wind=40, precipitation=60, visibility=2),
        make_sample(temperature=-3.3, wind=27.7, precipitation=31.1, visibility=4.4),
        make_sample(temperature=36.6, precipitation=99.9),
        make_sample(visibility=float("nan")),
    ]
    frame = assess_frame(samples_to_frame(samples))

    expected = assess_series(samples)
    assert list(frame["safety_score"]) == [a.safety_score for a in expected]
    assert list(frame["delay_risk"]) == [a.delay_risk for a in expected]


def test_assess_frame_preserves_input_and_defaults_missing_columns():
    frame = pd.DataFrame({"wind_speed_kmh": [30.0, 10.0], "time": ["01:00 AM", "02:00 AM"]})
    result = assess_frame(frame)

    assert "safety_score" not in frame.columns
    assert list(result["time"]) == ["01:00 AM", "02:00 AM"]
    # missing columns count as 0: visibility 0 km deducts 50, temperature 0 C deducts 40
    assert list(result["safety_score"]) == [0.0, 10.0]
    assert list(result["delay_risk"]) == [100.0, 90.0]


def test_assess_frame_empty():
    result = assess_frame(samples_to_frame([]))
    assert result.empty
    assert "safety_score" in result.columns
