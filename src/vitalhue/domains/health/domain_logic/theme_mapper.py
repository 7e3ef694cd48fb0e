"""Score -> status tier -> palette/message lookup, and the full evaluation bundle.

Tiers are distinct visual zones: there is no interpolation between palettes,
so scores of 89 and 90 render differently.
"""

from __future__ import annotations

from dataclasses import dataclass

from vitalhue.domains.health.domain_logic.health_score import (
    compute_health_score_details,
)
from vitalhue.domains.health.domain_logic.recommendations import (
    generate_recommendations,
)
from vitalhue.domains.health.domain_logic.score_models import (
    DEFAULT_SCORE,
    STATUS_TIERS,
    TIER_THRESHOLDS,
    HealthMetrics,
    HealthScoreResult,
    StatusTier,
    ThemePalette,
)

# ---------------------------------------------------------------------------
# Static tier tables
# ---------------------------------------------------------------------------

TIER_PALETTES: dict[StatusTier, ThemePalette] = {
    # Rich green
    "excellent": ThemePalette(
        primary="hsl(142, 76%, 36%)",
        secondary="hsl(142, 76%, 46%)",
        accent="hsl(160, 84%, 39%)",
        background="hsl(143, 64%, 98%)",
        card="hsl(143, 64%, 96%)",
        border="hsl(142, 29%, 85%)",
        text="hsl(142, 13%, 15%)",
        muted="hsl(142, 13%, 45%)",
    ),
    # Bright blue
    "good": ThemePalette(
        primary="hsl(213, 94%, 68%)",
        secondary="hsl(213, 94%, 78%)",
        accent="hsl(204, 94%, 68%)",
        background="hsl(213, 100%, 98%)",
        card="hsl(213, 100%, 96%)",
        border="hsl(213, 27%, 84%)",
        text="hsl(213, 13%, 15%)",
        muted="hsl(213, 13%, 45%)",
    ),
    # Amber
    "fair": ThemePalette(
        primary="hsl(45, 93%, 47%)",
        secondary="hsl(45, 93%, 57%)",
        accent="hsl(38, 92%, 50%)",
        background="hsl(45, 100%, 98%)",
        card="hsl(45, 100%, 96%)",
        border="hsl(45, 34%, 78%)",
        text="hsl(45, 13%, 15%)",
        muted="hsl(45, 13%, 45%)",
    ),
    # Orange
    "needs-attention": ThemePalette(
        primary="hsl(24, 95%, 53%)",
        secondary="hsl(24, 95%, 63%)",
        accent="hsl(20, 91%, 48%)",
        background="hsl(24, 100%, 98%)",
        card="hsl(24, 100%, 96%)",
        border="hsl(24, 34%, 78%)",
        text="hsl(24, 13%, 15%)",
        muted="hsl(24, 13%, 45%)",
    ),
    # Red
    "critical": ThemePalette(
        primary="hsl(0, 84%, 60%)",
        secondary="hsl(0, 84%, 70%)",
        accent="hsl(0, 72%, 51%)",
        background="hsl(0, 100%, 98%)",
        card="hsl(0, 100%, 96%)",
        border="hsl(0, 34%, 78%)",
        text="hsl(0, 13%, 15%)",
        muted="hsl(0, 13%, 45%)",
    ),
}

TIER_MESSAGES: dict[StatusTier, str] = {
    "excellent": "Excellent health metrics - keep up the great work!",
    "good": "Good health metrics - you're on the right track!",
    "fair": "Fair health metrics - some areas need attention.",
    "needs-attention": (
        "Health metrics need attention - let's work together on improvements."
    ),
    "critical": "Critical health metrics - immediate attention recommended.",
}

PRIMARY_FOREGROUND = "hsl(0, 0%, 98%)"
STATUS_DATA_ATTRIBUTE = "data-health-status"


# ---------------------------------------------------------------------------
# Tier resolution
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TierResolution:
    """Tier, message and palette for a score."""

    tier: StatusTier
    message: str
    theme: ThemePalette

    def recommendations(self, patient: HealthMetrics | None = None) -> list[str]:
        return generate_recommendations(self.tier, patient)


def tier_for_score(score: int) -> StatusTier:
    """First tier (top-down) whose lower bound the score reaches."""
    for tier in STATUS_TIERS:
        if score >= TIER_THRESHOLDS[tier]:
            return tier
    return "critical"


def resolve_tier(score: int) -> TierResolution:
    """Map a score to its tier, static message and palette."""
    tier = tier_for_score(score)
    return TierResolution(tier=tier, message=TIER_MESSAGES[tier], theme=TIER_PALETTES[tier])


def theme_css_variables(theme: ThemePalette) -> dict[str, str]:
    """CSS custom properties a UI assigns on the document root for this palette."""
    return {
        "--primary": theme.primary,
        "--primary-foreground": PRIMARY_FOREGROUND,
        "--secondary": theme.secondary,
        "--secondary-foreground": theme.text,
        "--accent": theme.accent,
        "--accent-foreground": theme.text,
        "--background": theme.background,
        "--foreground": theme.text,
        "--card": theme.card,
        "--card-foreground": theme.text,
        "--border": theme.border,
        "--muted": theme.muted,
        "--muted-foreground": theme.muted,
    }


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

def evaluate_health(metrics: HealthMetrics | None) -> HealthScoreResult:
    """Score a metrics snapshot and attach tier, message, theme and advice.

    ``None`` means no patient is known: the default "good" bundle is returned
    without patient-specific recommendations.
    """
    if metrics is None:
        resolution = resolve_tier(DEFAULT_SCORE)
        return HealthScoreResult(
            score=DEFAULT_SCORE,
            status_tier=resolution.tier,
            message=resolution.message,
            theme=resolution.theme,
            recommendations=tuple(resolution.recommendations()),
        )

    score, details = compute_health_score_details(metrics)
    resolution = resolve_tier(score)
    return HealthScoreResult(
        score=score,
        status_tier=resolution.tier,
        message=resolution.message,
        theme=resolution.theme,
        recommendations=tuple(resolution.recommendations(metrics)),
        factors=details["factors"],
        adjustments=details["adjustments"],
    )
