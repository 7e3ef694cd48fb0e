"""VitalHue Adaptive Health MCP Server - application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from vitalhue.core.config.settings import get_settings
from vitalhue.domains.health.connectors import PatientRecordSource
from vitalhue.domains.health.connectors.providers import (
    JsonFilePatientSource,
    MockPatientRecordSource,
)
from vitalhue.domains.health.domain_logic.theme_cache import ThemeCache
from vitalhue.domains.health.prompts.health_prompts import register_health_prompts
from vitalhue.domains.health.resources.themes import register_health_theme_resources
from vitalhue.domains.health.tools.health_status_tools import (
    register_health_status_tools,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "VitalHue Adaptive Health"
SERVER_VERSION = "0.1.0"


def create_app(
    *,
    patient_source_override: PatientRecordSource | None = None,
    theme_cache_override: ThemeCache | None = None,
) -> FastMCP:
    """Create and configure the VitalHue MCP server.

    This is the main application factory. It:
    1. Creates the FastMCP server instance
    2. Initializes the patient record source (JSON export or demo data)
    3. Creates the theme cache
    4. Registers all tools, resources, and prompts
    """
    settings = get_settings()

    # --- Server instance ---
    server = FastMCP(
        SERVER_NAME,
        instructions=(
            "Adaptive health status server. Scores patient metric snapshots "
            "(0-100), maps the score to a status tier with a matching colour "
            "theme, and returns tier-specific recommendations."
        ),
    )

    # --- Initialize patient record source ---
    if patient_source_override is not None:
        patient_source = patient_source_override
    elif settings.patient_records_path:
        patient_source = JsonFilePatientSource(settings.patient_records_path)
        logger.info("Using patient records from %s", settings.patient_records_path)
    else:
        patient_source = MockPatientRecordSource()
        logger.info("Using demo patient records")

    # --- Initialize theme cache ---
    if theme_cache_override is not None:
        theme_cache = theme_cache_override
    else:
        theme_cache = ThemeCache(maxsize=settings.theme_cache_size)

    if not settings.adaptive_theme_enabled:
        logger.info("Adaptive theming disabled; CSS variables will not be emitted")

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": SERVER_NAME,
            "version": SERVER_VERSION,
            "data_source": patient_source.data_source,
            "adaptive_theme_enabled": settings.adaptive_theme_enabled,
            "theme_cache": theme_cache.stats(),
        }

    register_health_status_tools(
        server,
        patient_source,
        theme_cache,
        theme_enabled=settings.adaptive_theme_enabled,
    )
    logger.info("Health status tools registered")

    # --- Register resources ---
    register_health_theme_resources(server)

    # --- Register prompts ---
    register_health_prompts(server)

    return server


# Module-level instance for FastMCP discovery.
# Lazy: only created when this module is loaded directly (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
