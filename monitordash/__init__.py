"""Embeddable, auth-gated monitoring dashboard for aiohttp applications."""

from .dashboard.server import (
    DashboardConfig,
    DashboardConfigError,
    HostEnvironment,
    MonitoringDashboard,
    setup_dashboard,
)

__all__ = [
    "DashboardConfig",
    "DashboardConfigError",
    "HostEnvironment",
    "MonitoringDashboard",
    "setup_dashboard",
]
