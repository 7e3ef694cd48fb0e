"""Health score models and domain constants for adaptive theming."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Literal


# ---------------------------------------------------------------------------
# Domain constants (used by health_score, theme_mapper and the MCP tools)
# ---------------------------------------------------------------------------

StatusTier = Literal["excellent", "good", "fair", "needs-attention", "critical"]

# Descending order; thresholds in TIER_THRESHOLDS line up with this list.
STATUS_TIERS: list[StatusTier] = [
    "excellent",
    "good",
    "fair",
    "needs-attention",
    "critical",
]

# Closed lower bounds. "critical" catches everything below 40.
TIER_THRESHOLDS: dict[StatusTier, int] = {
    "excellent": 90,
    "good": 75,
    "fair": 60,
    "needs-attention": 40,
    "critical": 0,
}

BASELINE_SCORE = 100
MIN_SCORE = 0
MAX_SCORE = 100

# Fewer than MIN_SCORING_FACTORS metrics -> score floored at SPARSE_DATA_FLOOR
SPARSE_DATA_FLOOR = 75
MIN_SCORING_FACTORS = 3

DEFAULT_SCORE = 75              # No patient data at all -> "good" tier
MAX_RECOMMENDATIONS = 4


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HealthMetrics:
    """A patient's metric snapshot. ``None`` means "not a factor"."""

    weight: float | None = None              # lbs
    body_fat: float | None = None            # %
    blood_pressure: str | None = None        # free-text category
    insulin_resistance: str | None = None    # free-text category
    adherence: float | None = None           # 0-100
    exercise_minutes: float | None = None    # minutes/week
    glucose_average: float | None = None     # mg/dL
    glucose_variability: float | None = None # mg/dL stddev

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that are present."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class ThemePalette:
    """Colour palette for one status tier."""

    primary: str
    secondary: str
    accent: str
    background: str
    card: str
    border: str
    text: str
    muted: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class HealthScoreResult:
    """Score, tier and presentation bundle for one metrics snapshot."""

    score: int
    status_tier: StatusTier
    message: str
    theme: ThemePalette
    recommendations: tuple[str, ...] = ()
    factors: int = 0
    adjustments: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Cached results are shared between callers; keep them read-only
        object.__setattr__(self, "adjustments", MappingProxyType(dict(self.adjustments)))
        object.__setattr__(self, "recommendations", tuple(self.recommendations))

    def as_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "status": self.status_tier,
            "message": self.message,
            "theme": self.theme.as_dict(),
            "recommendations": list(self.recommendations),
            "factors": self.factors,
            "adjustments": dict(self.adjustments),
        }
