"""MCP tools for health scoring, status summaries and adaptive theming."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from fastmcp import FastMCP

if TYPE_CHECKING:
    from vitalhue.domains.health.connectors import PatientRecordSource
    from vitalhue.domains.health.domain_logic.theme_cache import ThemeCache

from vitalhue.domains.health.connectors.patient_records import (
    PatientNotFoundError,
    metrics_from_patient,
    patient_id_of,
    require_patient,
)
from vitalhue.domains.health.domain_logic.health_score import (
    compute_health_score_details,
)
from vitalhue.domains.health.domain_logic.score_models import (
    HealthMetrics,
    HealthScoreResult,
)
from vitalhue.domains.health.domain_logic.theme_mapper import (
    STATUS_DATA_ATTRIBUTE,
    resolve_tier,
    theme_css_variables,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------

def _status_payload(result: HealthScoreResult) -> dict[str, Any]:
    """Status summary in the shape the patient dashboard renders."""
    return {
        "score": result.score,
        "status": result.status_tier,
        "message": result.message,
        "color": result.theme.primary,
        "recommendations": list(result.recommendations),
    }


def _theme_payload(result: HealthScoreResult, *, theme_enabled: bool) -> dict[str, Any]:
    return {
        "health_score": result.score,
        "status": result.status_tier,
        "status_message": result.message,
        "theme": result.theme.as_dict(),
        "theme_enabled": theme_enabled,
        # Disabled theming leaves the UI's own variables untouched
        "css_variables": theme_css_variables(result.theme) if theme_enabled else {},
        "data_attributes": {STATUS_DATA_ATTRIBUTE: result.status_tier},
    }


def register_health_status_tools(
    mcp: FastMCP,
    patient_source: PatientRecordSource,
    theme_cache: ThemeCache,
    *,
    theme_enabled: bool = True,
) -> None:
    """Register health score, status and adaptive theme tools on the MCP server."""

    async def _metrics_for(patient_id: str | None) -> HealthMetrics | None:
        if patient_id in (None, ""):
            return None
        try:
            record = await require_patient(patient_source, patient_id)
        except PatientNotFoundError as exc:
            raise ValueError(str(exc)) from exc
        return metrics_from_patient(record)

    @mcp.tool
    def health_score(
        weight: float | None = None,
        body_fat: float | None = None,
        blood_pressure: str | None = None,
        insulin_resistance: str | None = None,
        adherence: float | None = None,
        exercise_minutes: float | None = None,
        glucose_average: float | None = None,
        glucose_variability: float | None = None,
    ) -> str:
        """Compute a 0-100 health score from a metrics snapshot.

        Every metric is optional; omitted metrics are not scored. With fewer
        than three metrics the score never drops below 75.

        Args:
            weight: Body weight in lbs.
            body_fat: Body fat percentage.
            blood_pressure: Blood pressure category, e.g. 'elevated', 'hypertension'.
            insulin_resistance: Insulin resistance category, e.g. 'mild', 'severe'.
            adherence: Plan adherence percentage (0-100).
            exercise_minutes: Exercise minutes per week.
            glucose_average: Average glucose in mg/dL.
            glucose_variability: Glucose standard deviation in mg/dL.
        """
        metrics = HealthMetrics(
            weight=weight,
            body_fat=body_fat,
            blood_pressure=blood_pressure,
            insulin_resistance=insulin_resistance,
            adherence=adherence,
            exercise_minutes=exercise_minutes,
            glucose_average=glucose_average,
            glucose_variability=glucose_variability,
        )
        score, details = compute_health_score_details(metrics)
        tier = resolve_tier(score)
        logger.debug("health_score: %d (%s) from %d factors", score, tier.tier, details["factors"])

        return json.dumps({
            "score": score,
            "status": tier.tier,
            "message": tier.message,
            "factors": details["factors"],
            "adjustments": details["adjustments"],
            "sparse_floor_applied": details["sparse_floor_applied"],
        }, indent=2)

    @mcp.tool
    async def health_status(patient_id: str | None = None) -> str:
        """Summarize a patient's health status with recommendations.

        Returns the score, status tier, message, status colour and up to four
        recommendations. Without a patient id the default "good" status is
        returned.

        Args:
            patient_id: Id of the patient record to evaluate.
        """
        metrics = await _metrics_for(patient_id)
        result = theme_cache.evaluate(metrics)
        payload = _status_payload(result)
        payload["patient_id"] = patient_id
        payload["data_source"] = patient_source.data_source
        return json.dumps(payload, indent=2)

    @mcp.tool
    async def adaptive_theme(patient_id: str | None = None) -> str:
        """Return the colour theme matching a patient's health status.

        Includes the palette, the CSS custom properties to assign on the
        document root and the ``data-health-status`` attribute value.

        Args:
            patient_id: Id of the patient record to evaluate.
        """
        metrics = await _metrics_for(patient_id)
        result = theme_cache.evaluate(metrics)
        payload = _theme_payload(result, theme_enabled=theme_enabled)
        payload["patient_id"] = patient_id
        return json.dumps(payload, indent=2)

    @mcp.tool
    async def patient_health_overview() -> str:
        """List every patient with their health score and status tier.

        Intended for the provider dashboard; sorted by score, lowest first,
        so patients needing attention come first.
        """
        rows = []
        for record in await patient_source.list_patients():
            result = theme_cache.evaluate(metrics_from_patient(record))
            rows.append({
                "patient_id": patient_id_of(record),
                "name": record.get("name", ""),
                "score": result.score,
                "status": result.status_tier,
                "color": result.theme.primary,
            })
        rows.sort(key=lambda row: (row["score"], row["patient_id"]))

        return json.dumps({
            "data_source": patient_source.data_source,
            "patient_count": len(rows),
            "patients": rows,
        }, indent=2)
