"""Configuration management for the monitoring dashboard host."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from .dashboard.server_config import DashboardConfig, DashboardConfigError, HostEnvironment

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "./config/dashboard.yaml"

# YAML key -> DashboardConfig field. Keys mirror the env var names without
# the DASHBOARD_ prefix, lowercased.
_YAML_FIELDS: dict[str, str] = {
    "route_prefix": "route_prefix",
    "title": "dashboard_title",
    "default_endpoint": "default_data_endpoint",
    "custom_html_path": "custom_html_path",
    "auto_refresh": "enable_auto_refresh",
    "refresh_interval_seconds": "auto_refresh_interval_seconds",
    "custom_css": "custom_css",
    "username": "username",
    "password": "password",
    "auth_realm": "authentication_realm",
}


@dataclass
class Config:
    """Host configuration loaded from environment (and optional YAML)."""

    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    environment: HostEnvironment = field(default_factory=HostEnvironment)
    host: str = "127.0.0.1"
    port: int = 8080


def _parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _load_yaml_overrides(path: Path) -> dict:
    """Load dashboard overrides from a YAML file (optional)."""
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except Exception as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping at the top level", path)
        return {}

    section = data.get("dashboard", data)
    if not isinstance(section, dict):
        return {}

    overrides: dict[str, object] = {}
    for key, value in section.items():
        field_name = _YAML_FIELDS.get(str(key).strip().lower())
        if field_name is None:
            logger.warning("Unknown dashboard setting %r in %s", key, path)
            continue
        overrides[field_name] = value
    return overrides


def _env_overrides() -> dict[str, object]:
    overrides: dict[str, object] = {}
    for key, field_name in _YAML_FIELDS.items():
        raw = os.getenv(f"DASHBOARD_{key.upper()}")
        if raw is not None and raw != "":
            overrides[field_name] = raw
    return overrides


def _coerce_dashboard_kwargs(raw: dict[str, object]) -> dict[str, object]:
    kwargs = dict(raw)
    if "enable_auto_refresh" in kwargs:
        kwargs["enable_auto_refresh"] = _parse_bool(kwargs["enable_auto_refresh"])
    # Strings come from env vars; YAML scalars are already typed and go to DashboardConfig as-is.
    if isinstance(kwargs.get("auto_refresh_interval_seconds"), str):
        try:
            kwargs["auto_refresh_interval_seconds"] = int(kwargs["auto_refresh_interval_seconds"])
        except (TypeError, ValueError):
            raise DashboardConfigError(
                f"auto_refresh_interval_seconds must be an integer, got {kwargs['auto_refresh_interval_seconds']!r}",
                "auto_refresh_interval_seconds",
            ) from None
    if kwargs.get("custom_html_path"):
        kwargs["custom_html_path"] = Path(str(kwargs["custom_html_path"]))
    for key in (
        "route_prefix",
        "dashboard_title",
        "default_data_endpoint",
        "authentication_realm",
        "username",
        "password",
        "custom_css",
    ):
        if key in kwargs and kwargs[key] is not None:
            kwargs[key] = str(kwargs[key])
    return kwargs


def load_config(config_file: Optional[Path] = None) -> Config:
    """Load configuration from environment variables.

    Precedence: environment, then the YAML file named by
    ``DASHBOARD_CONFIG_FILE`` (``./config/dashboard.yaml`` by default), then
    the ``DashboardConfig`` defaults. Raises ``DashboardConfigError`` for an
    invalid combination.
    """
    load_dotenv()

    path = Path(config_file or os.getenv("DASHBOARD_CONFIG_FILE", DEFAULT_CONFIG_FILE))
    merged = _load_yaml_overrides(path)
    merged.update(_env_overrides())

    dashboard = DashboardConfig(**_coerce_dashboard_kwargs(merged))
    environment = HostEnvironment(
        name=os.getenv("DASHBOARD_ENV", "production"),
        content_root=Path(os.getenv("DASHBOARD_CONTENT_ROOT", ".")).resolve(),
    )

    return Config(
        dashboard=dashboard,
        environment=environment,
        host=os.getenv("DASHBOARD_HOST", "127.0.0.1"),
        port=int(os.getenv("DASHBOARD_PORT", "8080")),
    )
