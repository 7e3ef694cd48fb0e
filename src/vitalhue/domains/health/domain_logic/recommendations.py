"""Tier-based and patient-specific health recommendations."""

from __future__ import annotations

from vitalhue.domains.health.domain_logic.score_models import (
    MAX_RECOMMENDATIONS,
    HealthMetrics,
    StatusTier,
)

# Exactly three per tier; order is significant.
TIER_RECOMMENDATIONS: dict[StatusTier, tuple[str, str, str]] = {
    "excellent": (
        "Maintain your current healthy lifestyle",
        "Consider setting new fitness goals",
        "Share your success strategies with others",
    ),
    "good": (
        "Focus on consistency with current routines",
        "Consider adding new healthy habits",
        "Monitor progress regularly",
    ),
    "fair": (
        "Review diet and exercise plans with your provider",
        "Increase physical activity gradually",
        "Focus on medication adherence",
    ),
    "needs-attention": (
        "Schedule follow-up with healthcare provider",
        "Prioritize consistent medication adherence",
        "Consider working with a nutritionist",
    ),
    "critical": (
        "Contact your healthcare provider immediately",
        "Review emergency action plan",
        "Consider intensive monitoring",
    ),
}

ADHERENCE_REMINDER = "Set medication reminders to improve adherence"
WEIGHT_MANAGEMENT = "Focus on sustainable weight management strategies"
BLOOD_SUGAR_PRIORITY = "Prioritize blood sugar management"


def _patient_specific(patient: HealthMetrics) -> list[str]:
    """Conditional advice, evaluated in fixed order. Zero counts as unrecorded."""
    extra: list[str] = []
    if patient.adherence and patient.adherence < 70:
        extra.append(ADHERENCE_REMINDER)
    if patient.weight and patient.weight > 200:
        extra.append(WEIGHT_MANAGEMENT)
    if (
        isinstance(patient.insulin_resistance, str)
        and "high" in patient.insulin_resistance.lower()
    ):
        extra.append(BLOOD_SUGAR_PRIORITY)
    return extra


def generate_recommendations(
    tier: StatusTier, patient: HealthMetrics | None = None
) -> list[str]:
    """Return up to four recommendations: the tier's base set, then patient advice.

    The tier set always has three entries, so at most one patient-specific
    recommendation survives truncation.
    """
    recommendations = list(TIER_RECOMMENDATIONS[tier])
    if patient is not None:
        recommendations.extend(_patient_specific(patient))
    return recommendations[:MAX_RECOMMENDATIONS]
