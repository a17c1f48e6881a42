"""Basic-Auth helpers for the dashboard middleware."""

from __future__ import annotations

import base64
import binascii
import inspect
import logging
from typing import Optional

from aiohttp import web

from .server_helpers import UNAUTHORIZED_HTML

logger = logging.getLogger(__name__)

BASIC_SCHEME = "basic "


def constant_time_equals(a: Optional[str], b: Optional[str]) -> bool:
    """Compare two strings without exiting early on the first mismatch.

    Lengths are compared up front, so a length difference is observable.
    For equal lengths every character pair is folded into the result.
    """
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False

    result = 0
    for x, y in zip(a, b):
        result |= ord(x) ^ ord(y)
    return result == 0


def parse_basic_auth(header: Optional[str]) -> Optional[tuple[str, str]]:
    """Decode a ``Basic`` Authorization header into ``(username, password)``.

    Returns None for anything that is not a well-formed Basic credential.
    The password is everything after the first colon.
    """
    if not header or not header.strip():
        return None
    if header[: len(BASIC_SCHEME)].lower() != BASIC_SCHEME:
        return None

    encoded = header[len(BASIC_SCHEME):].strip()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        return None

    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


def is_basic_auth_valid(header: Optional[str], username: Optional[str], password: Optional[str]) -> bool:
    """Return True when ``header`` carries exactly the expected credentials."""
    parsed = parse_basic_auth(header)
    if parsed is None:
        return False

    user_ok = constant_time_equals(parsed[0], username)
    password_ok = constant_time_equals(parsed[1], password)
    return user_ok and password_ok


class DashboardServerSecurityMixin:
    """Auth checks for the dashboard root."""

    def _is_basic_auth_valid(self, request: web.Request) -> bool:
        return is_basic_auth_valid(
            request.headers.get("Authorization"),
            self.config.username,
            self.config.password,
        )

    def _basic_auth_challenge(self) -> web.Response:
        return web.Response(
            status=401,
            text="401 Unauthorized - Authentication required",
            content_type="text/plain",
            charset="utf-8",
            headers={"WWW-Authenticate": f'Basic realm="{self.config.authentication_realm}"'},
        )

    def _unauthorized_page(self) -> web.Response:
        return web.Response(
            status=401,
            text=UNAUTHORIZED_HTML,
            content_type="text/html",
            charset="utf-8",
        )

    async def _is_authorized(self, request: web.Request) -> bool:
        predicate = self.config.authorization
        if predicate is None:
            return True
        try:
            allowed = predicate(request)
            if inspect.isawaitable(allowed):
                allowed = await allowed
        except Exception:
            logger.exception("Dashboard authorization predicate failed; denying %s", request.path)
            return False
        return bool(allowed)

    async def _check_access(self, request: web.Request) -> Optional[web.Response]:
        """Return a 401 response when the request may not see the dashboard."""
        if self.config.is_basic_auth_enabled and not self._is_basic_auth_valid(request):
            logger.debug("Basic auth rejected for %s", request.remote)
            return self._basic_auth_challenge()

        if not await self._is_authorized(request):
            logger.debug("Authorization predicate denied %s", request.remote)
            return self._unauthorized_page()

        return None
