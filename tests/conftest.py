"""Shared test fixtures for VitalHue tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATIENT_RECORDS_PATH", "")
    monkeypatch.setenv("ADAPTIVE_THEME_ENABLED", "true")
    monkeypatch.setenv("THEME_CACHE_SIZE", "128")

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from vitalhue.domains.health.connectors.providers import MockPatientRecordSource  # noqa: E402
from vitalhue.domains.health.domain_logic.score_models import HealthMetrics  # noqa: E402
from vitalhue.domains.health.domain_logic.theme_cache import ThemeCache  # noqa: E402


def make_patient_record(**overrides: Any) -> dict[str, Any]:
    """Create a stored patient record with neutral defaults."""
    record: dict[str, Any] = {
        "id": "42",
        "name": "Test Patient",
        "age": 40,
        "weight": "160.00",
        "bodyFat": "20.0",
        "bloodPressure": "120/80",
        "insulinResistance": False,
        "adherence": 90,
    }
    record.update(overrides)
    return record


@pytest.fixture
def patient_record():
    """Factory fixture for stored patient records."""
    return make_patient_record


@pytest.fixture
def neutral_metrics() -> HealthMetrics:
    """Three neutral metrics: scores exactly 100."""
    return HealthMetrics(weight=150, body_fat=20, adherence=90)


@pytest.fixture
def worst_case_metrics() -> HealthMetrics:
    return HealthMetrics(
        weight=250,
        body_fat=35,
        blood_pressure="high",
        insulin_resistance="severe",
        adherence=40,
    )


@pytest.fixture
def mock_patient_source() -> MockPatientRecordSource:
    return MockPatientRecordSource()


@pytest.fixture
def theme_cache() -> ThemeCache:
    return ThemeCache(maxsize=16)
