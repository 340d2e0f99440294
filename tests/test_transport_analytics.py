from transit_weather.core.weather_sample import SafetyAssessment
from transit_weather.intelligence.transport_analytics import (
    analyze_hourly,
    plan_travel_days,
    summarize_safety,
)

from conftest import make_day, make_hour


def test_analyze_hourly_counts_safe_and_risky_hours():
    hourly = [
        make_hour("06:00 AM", precipitation=10, wind=10),   # safe, recommended
        make_hour("09:00 AM", precipitation=25, wind=22),   # safe
        make_hour("12:00 PM", precipitation=70, wind=10),   # risky, avoid
        make_hour("03:00 PM", precipitation=40, wind=40),   # risky, avoid
    ]
    analytics = analyze_hourly(hourly)

    assert analytics.safe_hours == 2
    assert analytics.risky_hours == 2
    assert analytics.delay_probability == 50
    assert analytics.recommended_times == ("06:00 AM",)
    assert analytics.avoid_times == ("12:00 PM", "03:00 PM")


def test_analyze_hourly_empty_series():
    analytics = analyze_hourly([])
    assert analytics.to_dict() == {
        "safe_hours": 0,
        "risky_hours": 0,
        "delay_probability": 0,
        "recommended_times": [],
        "avoid_times": [],
    }


def test_suggested_times_are_capped_at_three():
    hourly = [make_hour(f"{h:02d}:00 AM") for h in range(1, 6)]
    analytics = analyze_hourly(hourly)

    assert analytics.safe_hours == 5
    assert analytics.recommended_times == ("01:00 AM", "02:00 AM", "03:00 AM")


def test_delay_probability_uses_series_length():
    one_risky = [make_hour("a"), make_hour("b"), make_hour("c", precipitation=80)]
    two_risky = [make_hour("a"), make_hour("b", wind=30), make_hour("c", precipitation=80)]

    assert analyze_hourly(one_risky).delay_probability == 33
    assert analyze_hourly(two_risky).delay_probability == 67


def test_nan_hour_is_risky_and_avoided():
    analytics = analyze_hourly([make_hour("a", precipitation=float("nan"))])
    assert analytics.risky_hours == 1
    assert analytics.avoid_times == ("a",)


def test_plan_travel_days():
    daily = [
        make_day("Thursday", precipitation=10, wind=10),
        make_day("Friday", precipitation=70, wind=10),
        make_day("Saturday", precipitation=30, wind=30),
        make_day("Sunday", precipitation=5, wind=45),
    ]
    plan = plan_travel_days(daily)

    assert plan.best_days == ("Today",)
    assert plan.caution_days == ("Tomorrow", "Sunday")
    assert plan.advice == (
        "Best travel days: Today",
        "Exercise caution: Tomorrow, Sunday",
        "Check real-time conditions before departure",
        "Monitor weather updates during travel",
    )


def test_plan_travel_days_empty_forecast():
    plan = plan_travel_days([])
    assert plan.best_days == ()
    assert plan.caution_days == ()
    assert len(plan.advice) == 2


def test_summarize_safety():
    assessments = [
        SafetyAssessment(100.0, 0.0),
        SafetyAssessment(50.0, 50.0),
        SafetyAssessment(0.0, 100.0),
    ]
    summary = summarize_safety(assessments)

    assert summary == {
        "samples": 3,
        "min_safety_score": 0.0,
        "mean_safety_score": 50.0,
        "max_safety_score": 100.0,
        "mean_delay_risk": 50.0,
        "level": "fair",
    }


def test_summarize_safety_empty():
    summary = summarize_safety([])
    assert summary["samples"] == 0
    assert summary["level"] == "fair"
