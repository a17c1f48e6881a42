"""Core dashboard initialization and the request middleware."""

from __future__ import annotations

import logging
from typing import Optional

from aiohttp import web

from ..cache import HtmlCache
from .server_config import DashboardConfig, HostEnvironment
from .server_resources import ResourceBundle, ResourceResolver
from .server_routes import RouteKind, classify_path

logger = logging.getLogger(__name__)


class DashboardServerCoreMixin:
    """Owns config, resolver and shell cache; dispatches requests."""

    def __init__(
        self,
        *,
        config: DashboardConfig,
        environment: Optional[HostEnvironment] = None,
        bundle: Optional[ResourceBundle] = None,
    ):
        self.config = config
        self.environment = environment or HostEnvironment()
        self.bundle = bundle if bundle is not None else ResourceBundle.from_package()
        self.resolver = ResourceResolver(config, self.environment, self.bundle)
        self.html_cache = HtmlCache()

        logger.info(
            "Monitoring dashboard mounted at %s (basic auth %s, %d packaged resources)",
            config.route_prefix,
            "enabled" if config.is_basic_auth_enabled else "disabled",
            len(self.bundle),
        )

    def classify(self, path: str) -> RouteKind:
        return classify_path(path, self.config.route_prefix)

    @web.middleware
    async def middleware(self, request: web.Request, handler):  # type: ignore[override]
        kind = self.classify(request.path)
        if kind is RouteKind.DASHBOARD_ROOT:
            return await self._serve_dashboard(request)
        if kind is RouteKind.ASSET:
            return await self._serve_asset(request)
        return await handler(request)
