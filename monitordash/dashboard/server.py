"""Composed monitoring dashboard and aiohttp wiring."""

from __future__ import annotations

from typing import Optional

from aiohttp import web

from .server_config import DashboardConfig, DashboardConfigError, HostEnvironment
from .server_core import DashboardServerCoreMixin
from .server_frontend import DashboardServerFrontendMixin
from .server_resources import ResourceBundle
from .server_security import DashboardServerSecurityMixin

MONITORING_DASHBOARD_KEY: web.AppKey["MonitoringDashboard"] = web.AppKey("monitoring_dashboard")


class MonitoringDashboard(
    DashboardServerCoreMixin,
    DashboardServerSecurityMixin,
    DashboardServerFrontendMixin,
):
    """Dashboard middleware composed from mixins."""


def setup_dashboard(
    app: web.Application,
    config: Optional[DashboardConfig] = None,
    *,
    environment: Optional[HostEnvironment] = None,
    bundle: Optional[ResourceBundle] = None,
) -> MonitoringDashboard:
    """Mount the dashboard on ``app`` as a middleware and return it.

    Must be called before the application is started (aiohttp freezes the
    middleware list on startup).
    """
    dashboard = MonitoringDashboard(
        config=config or DashboardConfig(),
        environment=environment,
        bundle=bundle,
    )
    app.middlewares.append(dashboard.middleware)
    app[MONITORING_DASHBOARD_KEY] = dashboard
    return dashboard


__all__ = [
    "DashboardConfig",
    "DashboardConfigError",
    "HostEnvironment",
    "MONITORING_DASHBOARD_KEY",
    "MonitoringDashboard",
    "setup_dashboard",
]
