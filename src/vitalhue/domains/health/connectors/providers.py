"""Concrete PatientRecordSource implementations."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from vitalhue.domains.health.connectors.mock_data import get_mock_patients
from vitalhue.domains.health.connectors.patient_records import (
    PatientRecordError,
    patient_id_of,
)

logger = logging.getLogger(__name__)


class MockPatientRecordSource:
    """Serves the built-in demo patients. Always available."""

    def __init__(self) -> None:
        self._patients = {patient_id_of(p): p for p in get_mock_patients()}

    async def get_patient(self, patient_id: str) -> dict[str, Any] | None:
        return self._patients.get(str(patient_id))

    async def list_patients(self) -> list[dict[str, Any]]:
        return list(self._patients.values())

    @property
    def data_source(self) -> str:
        return "mock"


class JsonFilePatientSource:
    """Reads patient records from a JSON export (a list of record objects).

    The file is loaded once at construction; records without an ``id`` are
    skipped.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        self._patients = self._load()

    def _load(self) -> dict[str, dict[str, Any]]:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise PatientRecordError(f"Patient records file not found: {self._path}") from exc
        except OSError as exc:
            raise PatientRecordError(f"Cannot read patient records file {self._path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise PatientRecordError(f"Patient records file is not UTF-8: {self._path}") from exc
        except json.JSONDecodeError as exc:
            raise PatientRecordError(f"Invalid JSON in {self._path}: {exc}") from exc

        if not isinstance(raw, list):
            raise PatientRecordError(
                f"Expected a JSON list of patient records in {self._path}"
            )

        patients: dict[str, dict[str, Any]] = {}
        for record in raw:
            if not isinstance(record, dict) or record.get("id") in (None, ""):
                logger.warning("Skipping patient record without an id in %s", self._path)
                continue
            patients[patient_id_of(record)] = record
        logger.info("Loaded %d patient records from %s", len(patients), self._path)
        return patients

    async def get_patient(self, patient_id: str) -> dict[str, Any] | None:
        return self._patients.get(str(patient_id))

    async def list_patients(self) -> list[dict[str, Any]]:
        return list(self._patients.values())

    @property
    def data_source(self) -> str:
        return "json_file"
