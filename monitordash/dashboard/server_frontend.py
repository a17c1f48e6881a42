"""Dashboard shell and static asset handlers."""

from __future__ import annotations

import logging

from aiohttp import web

from .server_helpers import HTML_CONTENT_TYPE
from .server_render import render_placeholders

logger = logging.getLogger(__name__)


class DashboardServerFrontendMixin:
    """Serve the dashboard shell and its packaged assets."""

    async def _load_shell_html(self) -> str:
        # Custom/development files bypass the cache so edits show up without a restart.
        html_text = await self.resolver.read_shell_override()
        if html_text is not None:
            return html_text
        return self.html_cache.get_or_load(self.resolver.load_embedded_shell)

    async def _serve_dashboard(self, request: web.Request) -> web.Response:
        denied = await self._check_access(request)
        if denied is not None:
            return denied

        html_out = render_placeholders(await self._load_shell_html(), self.config)
        return web.Response(text=html_out, content_type=HTML_CONTENT_TYPE, charset="utf-8")

    async def _serve_asset(self, request: web.Request) -> web.Response:
        asset = self.resolver.resolve_asset(request.path)
        if asset is None:
            logger.debug("Dashboard asset not found: %s", request.path)
            return web.Response(status=404)
        return web.Response(body=asset.body, content_type=asset.content_type)
