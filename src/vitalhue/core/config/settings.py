"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """VitalHue server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default; patient data should not be served to the LAN
    # without an auth layer in front.
    vitalhue_host: str = "127.0.0.1"
    vitalhue_port: int = 8001
    vitalhue_log_level: str = "info"
    # Non-loopback binds are refused unless this is set true.
    vitalhue_allow_insecure_bind: bool = False

    # Patient records (JSON export). Empty -> built-in demo patients.
    patient_records_path: str = ""

    # Adaptive theme
    adaptive_theme_enabled: bool = True
    theme_cache_size: int = 128


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
