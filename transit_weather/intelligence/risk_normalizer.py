import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict


# Worst-case value substituted when an input is NaN
WORST_CASE_RISK = 100.0

# --------------------------------------------------
# Color palette per impact level (UI-agnostic)
# --------------------------------------------------
IMPACT_COLORS = {
    "excellent": "#2ECC71",  # Green
    "good": "#A3D977",       # Light green
    "fair": "#F1C40F",       # Yellow
    "poor": "#E67E22",       # Orange
    "dangerous": "#E74C3C",  # Red
}


def is_nan(value: float) -> bool:
    return isinstance(value, float) and math.isnan(value)


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """
    Bound value to [low, high].

    NaN is not handled here; callers apply the worst-case policy first.
    """
    return max(low, min(high, value))


def round_half_up(value: float):
    """
    Round .5 towards +inf, like the dashboard charts.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def round_half_up_places(value: float, places: int = 2) -> float:
    """
    Round .5 away from zero at the given decimal place, using the printed value.

    round(62.345, 2) gives 62.34 because of binary representation;
    this gives 62.35. Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def impact_to_color(level: str) -> str:
    """
    Convert impact level -> HEX color
    """
    return IMPACT_COLORS.get(level, IMPACT_COLORS["dangerous"])


def normalize_score_payload(score: float, level: str) -> Dict:
    """
    UI-ready normalization payload
    """
    return {
        "score": round_half_up_places(score, 2),
        "score_percent": round_half_up(score),
        "level": level,
        "color": impact_to_color(level),
    }
