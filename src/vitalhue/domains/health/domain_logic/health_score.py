"""Deterministic health scoring: metrics snapshot -> integer score in [0, 100].

Each adjustment function takes one metric value and returns a signed integer
delta. Cut points are fixed and composed additively on top of a baseline of
100; within a metric the first matching rule wins, evaluated top-down.
All formulas are deterministic, no randomness, no I/O.
"""

from __future__ import annotations

from typing import Any

from vitalhue.domains.health.domain_logic.score_models import (
    BASELINE_SCORE,
    MAX_SCORE,
    MIN_SCORE,
    MIN_SCORING_FACTORS,
    SPARSE_DATA_FLOOR,
    HealthMetrics,
)


def _clamp(value: int, lo: int = MIN_SCORE, hi: int = MAX_SCORE) -> int:
    """Clamp a value to [lo, hi]."""
    return max(lo, min(hi, value))


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(n in text for n in needles)


# ---------------------------------------------------------------------------
# Per-metric adjustments
# ---------------------------------------------------------------------------

def weight_adjustment(weight: float) -> int:
    """Weight in lbs (rough BMI proxy, average height assumed)."""
    if weight > 200:
        return -15
    if weight > 180:
        return -10
    if weight < 120:
        return -5
    return 0


def body_fat_adjustment(body_fat: float) -> int:
    if body_fat > 30:
        return -20
    if body_fat > 25:
        return -10
    if body_fat < 15:
        return -5
    return 0


def blood_pressure_adjustment(category: str) -> int:
    """Case-insensitive substring match on the blood pressure category.

    Order matters: "prehypertension" also contains "hypertension" and so
    scores as high blood pressure.
    """
    bp = category.lower()
    if _contains_any(bp, ("high", "hypertension")):
        return -25
    if _contains_any(bp, ("elevated", "prehypertension")):
        return -15
    if _contains_any(bp, ("low", "hypotension")):
        return -10
    return 0


def insulin_resistance_adjustment(category: str) -> int:
    ir = category.lower()
    if _contains_any(ir, ("high", "severe")):
        return -30
    if "moderate" in ir:
        return -20
    if _contains_any(ir, ("mild", "slight")):
        return -10
    return 0


def adherence_adjustment(adherence: float) -> int:
    """Plan/medication adherence percentage."""
    if adherence < 50:
        return -25
    if adherence < 70:
        return -15
    if adherence < 85:
        return -5
    if adherence > 95:
        return 5
    return 0


def exercise_adjustment(minutes_per_week: float) -> int:
    # 150 min/week is the usual recommendation
    if minutes_per_week < 75:
        return -15
    if minutes_per_week < 150:
        return -10
    if minutes_per_week > 300:
        return 5
    return 0


def glucose_average_adjustment(glucose_mg_dl: float) -> int:
    if glucose_mg_dl > 180:
        return -30
    if glucose_mg_dl > 140:
        return -20
    if glucose_mg_dl > 120:
        return -10
    if 70 <= glucose_mg_dl <= 100:
        return 5
    return 0


def glucose_variability_adjustment(stddev_mg_dl: float) -> int:
    if stddev_mg_dl > 40:
        return -20
    if stddev_mg_dl > 25:
        return -10
    if stddev_mg_dl < 15:
        return 5
    return 0


# ---------------------------------------------------------------------------
# Presence rules
# ---------------------------------------------------------------------------

def _present_nonzero(value: float | None) -> bool:
    """Numeric metrics where zero means "not recorded"."""
    return value is not None and value != 0


def _present(value: float | None) -> bool:
    """Numeric metrics where zero is a legitimate reading."""
    return value is not None


def _present_category(value: str | None) -> bool:
    return isinstance(value, str) and value != ""


# (field name, presence check, adjustment) in scoring order
_SCORING_RULES = (
    ("weight", _present_nonzero, weight_adjustment),
    ("body_fat", _present_nonzero, body_fat_adjustment),
    ("blood_pressure", _present_category, blood_pressure_adjustment),
    ("insulin_resistance", _present_category, insulin_resistance_adjustment),
    ("adherence", _present, adherence_adjustment),
    ("exercise_minutes", _present, exercise_adjustment),
    ("glucose_average", _present_nonzero, glucose_average_adjustment),
    ("glucose_variability", _present_nonzero, glucose_variability_adjustment),
)


# ---------------------------------------------------------------------------
# Score
# ---------------------------------------------------------------------------

def compute_health_score_details(metrics: HealthMetrics) -> tuple[int, dict[str, Any]]:
    """Compute the health score and report how it was reached.

    Returns:
        (score in [0, 100], details dict with ``factors``, ``adjustments``,
        ``raw_score`` and ``sparse_floor_applied``)
    """
    score = BASELINE_SCORE
    factors = 0
    adjustments: dict[str, int] = {}

    for name, is_present, adjust in _SCORING_RULES:
        value = getattr(metrics, name)
        if not is_present(value):
            continue
        factors += 1
        delta = adjust(value)
        adjustments[name] = delta
        score += delta

    details: dict[str, Any] = {
        "factors": factors,
        "adjustments": adjustments,
        "raw_score": score,
        "sparse_floor_applied": False,
    }

    # Too few data points for a meaningful assessment: stay in the "good" range
    if factors < MIN_SCORING_FACTORS:
        details["sparse_floor_applied"] = score < SPARSE_DATA_FLOOR
        return _clamp(max(SPARSE_DATA_FLOOR, score)), details

    return _clamp(score), details


def compute_health_score(metrics: HealthMetrics) -> int:
    """Map a metrics snapshot to an integer score in [0, 100]."""
    score, _ = compute_health_score_details(metrics)
    return score
