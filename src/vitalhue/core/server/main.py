"""VitalHue server entry point - ``python -m vitalhue.core.server.main``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from vitalhue.core.config.settings import Settings, get_settings
from vitalhue.core.server.app import create_app

logger = logging.getLogger(__name__)


def _is_loopback_host(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def _check_bind(settings: Settings) -> None:
    """Patient health statuses are unauthenticated; keep them on this machine."""
    if settings.vitalhue_allow_insecure_bind or _is_loopback_host(settings.vitalhue_host):
        return
    raise RuntimeError(
        f"Refusing to serve patient health statuses on {settings.vitalhue_host!r}: "
        "the server has no authentication. Bind to a loopback address or set "
        "VITALHUE_ALLOW_INSECURE_BIND=true to accept the exposure."
    )


def run() -> None:
    """Start the VitalHue MCP server over streamable HTTP."""
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.vitalhue_log_level.upper(), logging.INFO))

    _check_bind(settings)

    mcp = create_app()
    logger.info(
        "Serving adaptive health themes on %s:%d (patient records: %s, theme cache: %d entries)",
        settings.vitalhue_host,
        settings.vitalhue_port,
        settings.patient_records_path or "demo patients",
        settings.theme_cache_size,
    )
    mcp.run(
        transport="streamable-http",
        host=settings.vitalhue_host,
        port=settings.vitalhue_port,
    )


if __name__ == "__main__":
    run()
