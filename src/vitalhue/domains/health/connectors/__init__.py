"""Patient record connectors - abstraction layer for patient record retrieval."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PatientRecordSource(Protocol):
    """Abstract interface for reading stored patient records.

    Tools call these methods without knowing whether records come from the
    clinic database, an exported JSON file, or demo data.
    """

    async def get_patient(self, patient_id: str) -> dict[str, Any] | None:
        """Return one patient record, or None when the id is unknown."""
        ...

    async def list_patients(self) -> list[dict[str, Any]]:
        """Return every available patient record."""
        ...

    @property
    def data_source(self) -> str:
        """Label for the active data source: 'json_file' or 'mock'."""
        ...
