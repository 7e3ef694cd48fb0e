"""Unit tests for tier resolution, palettes, CSS variables and evaluate_health."""

from __future__ import annotations

import json

import pytest

from vitalhue.domains.health.domain_logic.recommendations import TIER_RECOMMENDATIONS
from vitalhue.domains.health.domain_logic.score_models import (
    DEFAULT_SCORE,
    STATUS_TIERS,
    HealthMetrics,
    ThemePalette,
)
from vitalhue.domains.health.domain_logic.theme_mapper import (
    PRIMARY_FOREGROUND,
    TIER_MESSAGES,
    TIER_PALETTES,
    evaluate_health,
    resolve_tier,
    theme_css_variables,
    tier_for_score,
)


class TestTierBoundaries:
    @pytest.mark.parametrize(
        "score, tier",
        [
            (100, "excellent"),
            (90, "excellent"),
            (89, "good"),
            (75, "good"),
            (74, "fair"),
            (60, "fair"),
            (59, "needs-attention"),
            (40, "needs-attention"),
            (39, "critical"),
            (0, "critical"),
        ],
    )
    def test_lower_bounds_are_closed(self, score, tier):
        assert tier_for_score(score) == tier
        assert resolve_tier(score).tier == tier

    def test_negative_score_is_critical(self):
        assert tier_for_score(-5) == "critical"


class TestTierTables:
    def test_every_tier_has_palette_and_message(self):
        for tier in STATUS_TIERS:
            assert isinstance(TIER_PALETTES[tier], ThemePalette)
            assert TIER_MESSAGES[tier]

    def test_palettes_are_distinct(self):
        primaries = {TIER_PALETTES[t].primary for t in STATUS_TIERS}
        assert len(primaries) == len(STATUS_TIERS)

    def test_no_blending_at_boundary(self):
        assert resolve_tier(89).theme != resolve_tier(90).theme
        assert resolve_tier(89).theme == resolve_tier(75).theme

    def test_resolution_carries_static_message(self):
        resolution = resolve_tier(95)
        assert resolution.message == "Excellent health metrics - keep up the great work!"
        assert resolution.theme.primary == "hsl(142, 76%, 36%)"

    def test_critical_palette_is_red(self):
        assert resolve_tier(10).theme.primary == "hsl(0, 84%, 60%)"


class TestTierResolutionRecommendations:
    def test_without_patient_returns_base_set(self):
        recs = resolve_tier(50).recommendations()
        assert recs == list(TIER_RECOMMENDATIONS["needs-attention"])

    def test_with_patient_appends_advice(self):
        recs = resolve_tier(50).recommendations(HealthMetrics(weight=230))
        assert len(recs) == 4
        assert recs[-1] == "Focus on sustainable weight management strategies"


class TestCssVariables:
    def test_maps_palette_to_custom_properties(self):
        theme = TIER_PALETTES["good"]
        css = theme_css_variables(theme)
        assert css["--primary"] == theme.primary
        assert css["--primary-foreground"] == PRIMARY_FOREGROUND
        assert css["--foreground"] == theme.text
        assert css["--card-foreground"] == theme.text
        assert css["--muted-foreground"] == theme.muted
        assert css["--background"] == theme.background

    def test_all_names_are_custom_properties(self):
        css = theme_css_variables(TIER_PALETTES["fair"])
        assert len(css) == 13
        assert all(name.startswith("--") for name in css)


class TestEvaluateHealth:
    def test_no_patient_gives_default_bundle(self):
        result = evaluate_health(None)
        assert result.score == DEFAULT_SCORE
        assert result.status_tier == "good"
        assert list(result.recommendations) == list(TIER_RECOMMENDATIONS["good"])
        assert result.factors == 0

    def test_empty_metrics_scores_75(self):
        result = evaluate_health(HealthMetrics())
        assert result.score == 75
        assert result.status_tier == "good"

    def test_worst_case_is_critical(self, worst_case_metrics):
        result = evaluate_health(worst_case_metrics)
        assert result.score == 0
        assert result.status_tier == "critical"
        assert result.message == TIER_MESSAGES["critical"]
        assert result.recommendations[:3] == TIER_RECOMMENDATIONS["critical"]
        # adherence 40 -> reminder wins the single free slot
        assert result.recommendations[3] == "Set medication reminders to improve adherence"

    def test_neutral_is_excellent(self, neutral_metrics):
        result = evaluate_health(neutral_metrics)
        assert result.score == 100
        assert result.status_tier == "excellent"
        assert result.theme == TIER_PALETTES["excellent"]

    def test_repeated_calls_are_identical(self, worst_case_metrics):
        first = evaluate_health(worst_case_metrics)
        second = evaluate_health(worst_case_metrics)
        assert first == second
        assert json.dumps(first.as_dict()) == json.dumps(second.as_dict())

    def test_as_dict_is_json_serializable(self, neutral_metrics):
        payload = json.loads(json.dumps(evaluate_health(neutral_metrics).as_dict()))
        assert payload["status"] == "excellent"
        assert payload["theme"]["primary"] == "hsl(142, 76%, 36%)"
        assert payload["adjustments"] == {"weight": 0, "body_fat": 0, "adherence": 0}
