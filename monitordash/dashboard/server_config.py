"""Dashboard configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from aiohttp import web

AuthorizationPredicate = Callable[[web.Request], Union[bool, Awaitable[bool]]]

MIN_REFRESH_INTERVAL_SECONDS = 5


class DashboardConfigError(ValueError):
    """Raised when a dashboard configuration is invalid."""

    def __init__(self, message: str, field_name: str):
        super().__init__(f"{message} (field: {field_name})")
        self.field_name = field_name


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


@dataclass(frozen=True, slots=True)
class DashboardConfig:
    """Options for the monitoring dashboard middleware.

    Validated once in ``__post_init__``. The dataclass is frozen, so the
    refresh-interval and username/password invariants hold for its lifetime;
    use ``dataclasses.replace`` to derive a new (re-validated) config.
    """

    route_prefix: str = "/wolverine-ui"
    dashboard_title: str = "API Monitoring Dashboard"
    default_data_endpoint: str = "/api/monitoring/stats"
    authorization: Optional[AuthorizationPredicate] = field(default=None, compare=False)
    custom_html_path: Optional[Path] = None
    enable_auto_refresh: bool = True
    auto_refresh_interval_seconds: int = 60
    custom_css: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    authentication_realm: str = "Monitoring Dashboard"

    def __post_init__(self) -> None:
        if _is_blank(self.route_prefix):
            raise DashboardConfigError("route_prefix cannot be empty", "route_prefix")

        prefix = self.route_prefix.strip()
        if not prefix.startswith("/"):
            prefix = "/" + prefix
        prefix = prefix.rstrip("/") or "/"
        object.__setattr__(self, "route_prefix", prefix)

        if self.custom_html_path is not None and not isinstance(self.custom_html_path, Path):
            object.__setattr__(self, "custom_html_path", Path(self.custom_html_path))

        interval = self.auto_refresh_interval_seconds
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise DashboardConfigError(
                f"auto_refresh_interval_seconds must be an integer, got {interval!r}",
                "auto_refresh_interval_seconds",
            )
        if interval < MIN_REFRESH_INTERVAL_SECONDS:
            raise DashboardConfigError(
                f"auto_refresh_interval_seconds must be at least {MIN_REFRESH_INTERVAL_SECONDS} seconds",
                "auto_refresh_interval_seconds",
            )

        has_username = not _is_blank(self.username)
        has_password = not _is_blank(self.password)
        if has_username != has_password:
            raise DashboardConfigError(
                "Basic authentication requires both username and password to be set. "
                "Either set both or leave both empty to disable authentication.",
                "password" if has_username else "username",
            )

    @property
    def is_basic_auth_enabled(self) -> bool:
        return not _is_blank(self.username) and not _is_blank(self.password)


@dataclass(frozen=True, slots=True)
class HostEnvironment:
    """The hosting application's environment (name + content root)."""

    name: str = "production"
    content_root: Path = field(default_factory=Path.cwd)

    def is_development(self) -> bool:
        return (self.name or "").strip().lower() == "development"
