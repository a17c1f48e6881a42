"""Request classification for the dashboard middleware."""

from __future__ import annotations

from enum import Enum


class RouteKind(str, Enum):
    DASHBOARD_ROOT = "dashboard_root"
    ASSET = "asset"
    PASS_THROUGH = "pass_through"


def classify_path(path: str, route_prefix: str) -> RouteKind:
    """Decide which dashboard handler (if any) owns ``path``.

    Checked in order: dashboard root (``<prefix>`` or ``<prefix>/``), assets
    (``<prefix>/assets/...``), then everything else. Case-insensitive.
    """
    path = (path or "").lower()
    prefix = (route_prefix or "").lower()
    base = prefix.rstrip("/")

    if path == prefix or path == f"{base}/":
        return RouteKind.DASHBOARD_ROOT
    if path.startswith(f"{base}/assets/"):
        return RouteKind.ASSET
    return RouteKind.PASS_THROUGH
