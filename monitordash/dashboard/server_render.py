"""Template token substitution for the dashboard shell."""

from __future__ import annotations

from .server_config import DashboardConfig

TOKEN_TITLE = "{{DASHBOARD_TITLE}}"
TOKEN_ENDPOINT = "{{DEFAULT_ENDPOINT}}"
TOKEN_BASE_PATH = "{{BASE_PATH}}"
TOKEN_AUTO_REFRESH = "{{AUTO_REFRESH}}"
TOKEN_REFRESH_INTERVAL = "{{REFRESH_INTERVAL}}"


def render_placeholders(html_text: str, config: DashboardConfig) -> str:
    """Fill the shell's template tokens from ``config``.

    Every occurrence of each token is replaced. ``custom_css`` is injected
    as a ``<style>`` block right before the first ``</head>``; pages without
    one are left as-is.
    """
    replacements = (
        (TOKEN_TITLE, config.dashboard_title),
        (TOKEN_ENDPOINT, config.default_data_endpoint),
        # A site-root prefix renders as "" so "{{BASE_PATH}}/assets" stays same-origin.
        (TOKEN_BASE_PATH, config.route_prefix.rstrip("/")),
        (TOKEN_AUTO_REFRESH, "true" if config.enable_auto_refresh else "false"),
        (TOKEN_REFRESH_INTERVAL, str(int(config.auto_refresh_interval_seconds) * 1000)),
    )
    result = html_text
    for token, value in replacements:
        result = result.replace(token, value)

    if config.custom_css:
        result = result.replace("</head>", f"<style>{config.custom_css}</style></head>", 1)

    return result
