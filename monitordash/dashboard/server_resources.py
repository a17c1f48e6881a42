"""Resolve dashboard HTML and static assets from the packaged bundle."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath
from typing import Iterator, Optional

from .server_config import DashboardConfig, HostEnvironment
from .server_helpers import (
    BUNDLE_ASSET_ROOT,
    BUNDLE_NAMESPACE,
    DEFAULT_CONTENT_TYPE,
    FALLBACK_HTML,
    PACKAGED_NAMESPACE,
)

logger = logging.getLogger(__name__)

CONTENT_TYPES: dict[str, str] = {
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".eot": "application/vnd.ms-fontobject",
}

# Relative to the host's content root; read fresh on every request in development.
DEV_SHELL_PATH = Path("wwwroot") / "monitoring" / "dashboard.html"


def content_type_for(path: str) -> str:
    """Map a file extension to its MIME type (binary for unknown suffixes)."""
    suffix = PurePosixPath(path).suffix.lower()
    return CONTENT_TYPES.get(suffix, DEFAULT_CONTENT_TYPE)


@dataclass(frozen=True, slots=True)
class ResolvedAsset:
    body: bytes
    content_type: str


class ResourceBundle:
    """Read-only set of packaged files addressed by dotted logical names.

    A file at ``<root>/monitoring/assets/app.css`` is exposed as
    ``<namespace>.monitoring.assets.app.css`` (no prefix for an empty
    namespace). Names are kept in sorted order so enumeration, and the fuzzy
    lookup built on it, is stable.
    """

    def __init__(self, root: Optional[Traversable], namespace: str = PACKAGED_NAMESPACE):
        self.namespace = namespace
        entries: dict[str, Traversable] = {}
        if root is not None and root.is_dir():
            base = [namespace] if namespace else []
            for parts, item in self._walk(root, []):
                entries[".".join(base + parts)] = item
        else:
            logger.warning("Dashboard resource bundle not found at %s", root)
        self._entries = dict(sorted(entries.items()))

    @classmethod
    def from_package(cls, package: str = "monitordash.dashboard", directory: str = "wwwroot") -> "ResourceBundle":
        try:
            root = resources.files(package) / directory
        except ModuleNotFoundError:
            root = None
        return cls(root, namespace=f"{BUNDLE_NAMESPACE}.{directory}")

    def _walk(self, node: Traversable, parts: list[str]) -> Iterator[tuple[list[str], Traversable]]:
        for child in node.iterdir():
            if child.name.startswith(".") or child.name == "__pycache__":
                continue
            if child.is_dir():
                yield from self._walk(child, parts + [child.name])
            elif child.is_file():
                yield parts + [child.name], child

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def read_bytes(self, name: str) -> Optional[bytes]:
        item = self._entries.get(name)
        if item is None:
            return None
        try:
            return item.read_bytes()
        except OSError as exc:
            logger.warning("Failed to read packaged resource %s: %s", name, exc)
            return None


class ResourceResolver:
    """Three-tier lookup for the dashboard shell plus packaged asset lookup."""

    def __init__(self, config: DashboardConfig, environment: HostEnvironment, bundle: ResourceBundle):
        self.config = config
        self.environment = environment
        self.bundle = bundle

    # Shell HTML

    def shell_override_path(self) -> Optional[Path]:
        """Return the on-disk shell to serve instead of the packaged one, if any."""
        custom = self.config.custom_html_path
        if custom is not None and custom.is_file():
            return custom
        if self.environment.is_development():
            dev_path = Path(self.environment.content_root) / DEV_SHELL_PATH
            if dev_path.is_file():
                return dev_path
        return None

    async def read_shell_override(self) -> Optional[str]:
        """Read the custom or development shell; never cached."""
        path = self.shell_override_path()
        if path is None:
            return None
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read dashboard HTML from %s: %s", path, exc)
            return None

    def shell_resource_names(self) -> list[str]:
        return [
            f"{BUNDLE_NAMESPACE}.{BUNDLE_ASSET_ROOT}.dashboard.html",
            f"{BUNDLE_NAMESPACE}.dashboard.html",
            "dashboard.html",
        ]

    def load_embedded_shell(self) -> str:
        """Load the packaged shell, or the built-in fallback page."""
        for name in self.shell_resource_names():
            data = self.bundle.read_bytes(name)
            if data is None:
                continue
            try:
                return data.decode("utf-8-sig")
            except UnicodeDecodeError as exc:
                logger.warning("Packaged dashboard HTML %s is not UTF-8: %s", name, exc)
        logger.warning("Packaged dashboard HTML not found; serving fallback page")
        return FALLBACK_HTML

    # Static assets

    def asset_resource_name(self, path: str) -> str:
        """Turn ``<prefix>/assets/x/y.css`` into the bundle's dotted name."""
        prefix = self.config.route_prefix.rstrip("/")
        relative = path[len(prefix):] if path.lower().startswith(prefix.lower()) else path
        key = (BUNDLE_ASSET_ROOT + relative.replace("/", ".")).strip(".")
        return f"{BUNDLE_NAMESPACE}.{key}"

    def _fuzzy_match(self, path: str) -> Optional[str]:
        file_name = path.rsplit("/", 1)[-1]
        if not file_name:
            return None
        # Only assets are eligible; the shell must stay behind the dashboard root.
        asset_prefix = f"{BUNDLE_NAMESPACE}.{BUNDLE_ASSET_ROOT}.assets."
        candidates = [
            name for name in self.bundle.names() if name.startswith(asset_prefix) and file_name in name
        ]
        if not candidates:
            return None
        if len(candidates) > 1:
            logger.warning(
                "Ambiguous asset lookup for %s: %d resources match, using %s",
                path,
                len(candidates),
                candidates[0],
            )
        return candidates[0]

    def resolve_asset(self, path: str) -> Optional[ResolvedAsset]:
        """Resolve an asset request path; None when nothing matches."""
        name = self.asset_resource_name(path)
        body = self.bundle.read_bytes(name)
        if body is None:
            fallback = self._fuzzy_match(path)
            if fallback is not None:
                logger.debug("Asset %s resolved by file name to %s", path, fallback)
                body = self.bundle.read_bytes(fallback)
        if body is None:
            return None
        return ResolvedAsset(body=body, content_type=content_type_for(path))
