"""Write-once cache for the dashboard shell HTML.

Each dashboard owns one ``HtmlCache``. The first caller that finds it empty
runs the loader under a lock; everyone else either waits on that lock or, once
the value is published, reads it without locking.

Usage:
    cache = HtmlCache()
    html = cache.get_or_load(resolver.load_embedded_shell)
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class HtmlCache:
    """Thread-safe, load-once holder for the raw shell HTML."""

    __slots__ = ("_value", "_lock")

    def __init__(self):
        self._value: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._value is not None

    def peek(self) -> Optional[str]:
        """Return the cached HTML without loading it."""
        return self._value

    def get_or_load(self, loader: Callable[[], str]) -> str:
        """
        Return the cached HTML, calling ``loader`` on first use only.

        Args:
            loader: Zero-argument callable producing the shell HTML. It runs
                at most once for the lifetime of this cache.

        Returns:
            The cached HTML text
        """
        value = self._value
        if value is not None:
            return value

        with self._lock:
            # Another caller may have populated it while we waited.
            if self._value is not None:
                return self._value

            value = loader()
            self._value = value
            logger.debug("Dashboard shell cached (%d chars)", len(value))
            return value
