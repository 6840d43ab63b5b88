"""Bounded memoization of sanitize results."""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Union

from purifytext.config import SanitizeConfig
from purifytext.exceptions import InvalidArgument
from purifytext.sanitizer import run_pipeline

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10_000


class SanitizeCache:
    """
    Memoizes sanitize results keyed by (input, config).

    The frozen SanitizeConfig is hashable, so it serves as its own
    serialized key. Entries are never evicted: once the cache holds
    *max_entries* results, further results are computed and returned
    but not stored. ``clear()`` empties the table.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 0:
            raise InvalidArgument("max_entries", "must not be negative")
        self._max_entries = max_entries
        self._entries: dict[tuple[str, SanitizeConfig], str] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def sanitize(
        self,
        raw: Any,
        config: Union[SanitizeConfig, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> str:
        """Same result as :func:`purifytext.sanitizer.sanitize`, memoized."""
        if raw is None:
            return ""
        text = raw if isinstance(raw, str) else str(raw)
        if not text:
            return ""
        cfg = SanitizeConfig.resolve(config, **overrides)
        key = (text, cfg)

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self.hits += 1
                return cached
            self.misses += 1

        result = run_pipeline(text, cfg)
        self._store(key, result)
        return result

    def clear(self) -> None:
        """Drop every cached entry and reset the counters."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def _store(self, key: tuple[str, SanitizeConfig], value: str) -> None:
        with self._lock:
            if len(self._entries) >= self._max_entries:
                logger.debug(
                    "Sanitize cache full (%d entries); not storing result",
                    self._max_entries,
                )
                return
            self._entries[key] = value
