"""Patient record -> HealthMetrics conversion.

Stored records use the clinic schema's camelCase keys. Numeric columns may
arrive as decimal strings (``"185.00"``). Empty or zero values are treated as
"not recorded", and non-string categories (the schema's boolean
``insulinResistance`` flag) carry no category text, so they are ignored.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from vitalhue.domains.health.domain_logic.score_models import HealthMetrics

if TYPE_CHECKING:
    from vitalhue.domains.health.connectors import PatientRecordSource

logger = logging.getLogger(__name__)


class PatientNotFoundError(LookupError):
    """Raised when a patient id is not known to the record source."""


class PatientRecordError(Exception):
    """Raised when a patient record file cannot be read or parsed."""


# record key -> HealthMetrics field
_NUMERIC_FIELDS = {
    "weight": "weight",
    "bodyFat": "body_fat",
    "adherence": "adherence",
    "exerciseMinutes": "exercise_minutes",
    "glucoseAverage": "glucose_average",
    "glucoseVariability": "glucose_variability",
}

_CATEGORY_FIELDS = {
    "bloodPressure": "blood_pressure",
    "insulinResistance": "insulin_resistance",
}


def _num(val: Any) -> float | None:
    """Convert to float, returning None for missing, zero, non-finite or non-numeric values."""
    if val is None or isinstance(val, bool):
        return None
    try:
        number = float(val)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number or None


def _category(val: Any) -> str | None:
    if isinstance(val, str) and val:
        return val
    return None


def metrics_from_patient(record: dict[str, Any]) -> HealthMetrics:
    """Build a metrics snapshot from a stored patient record."""
    values: dict[str, Any] = {}
    for key, field_name in _NUMERIC_FIELDS.items():
        values[field_name] = _num(record.get(key))
    for key, field_name in _CATEGORY_FIELDS.items():
        values[field_name] = _category(record.get(key))
    return HealthMetrics(**values)


def patient_id_of(record: dict[str, Any]) -> str:
    return str(record.get("id", ""))


async def require_patient(source: PatientRecordSource, patient_id: str) -> dict[str, Any]:
    """Fetch a patient record or raise :class:`PatientNotFoundError`."""
    record = await source.get_patient(patient_id)
    if record is None:
        logger.info("Patient %s not found in %s source", patient_id, source.data_source)
        raise PatientNotFoundError(f"Unknown patient id: {patient_id!r}")
    return record
