"""Standalone dashboard host process.

Run:
  python -m monitordash.dashboard.main
"""

from __future__ import annotations

import logging
import sys

from aiohttp import web

from ..config import Config, load_config
from .server import setup_dashboard

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


async def _healthz(request: web.Request) -> web.Response:
    return web.json_response({"ok": True})


def create_app(config: Config) -> web.Application:
    app = web.Application()
    app.router.add_get("/healthz", _healthz)
    setup_dashboard(app, config.dashboard, environment=config.environment)
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(
        "Dashboard listening on http://%s:%s%s",
        config.host,
        config.port,
        config.dashboard.route_prefix,
    )
    web.run_app(app, host=config.host, port=int(config.port), print=None)


if __name__ == "__main__":
    main()
