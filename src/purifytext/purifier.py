"""Purifier: sanitize-then-match orchestration, the main entry point."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from purifytext.cache import SanitizeCache
from purifytext.config import MatchConfig, ProcessConfig
from purifytext.exceptions import InvalidArgument, NoMatchFound
from purifytext.matcher import find_match
from purifytext.models import ProcessOutcome, ProcessResult
from purifytext.sanitizer import run_pipeline

logger = logging.getLogger(__name__)

_ConfigArg = Union[MatchConfig, Mapping[str, Any], None]


class Purifier:
    """
    Sanitizes input and checks it against a candidate set.

    *config* holds the instance defaults. Per-call mappings and keyword
    overrides merge onto them; a per-call config object replaces them.
    When a *cache* is given, output sanitizing goes through it.
    """

    def __init__(
        self,
        config: _ConfigArg = None,
        cache: Optional[SanitizeCache] = None,
    ):
        self._config = ProcessConfig.resolve(config)
        self._cache = cache

    @property
    def config(self) -> ProcessConfig:
        return self._config

    @property
    def cache(self) -> Optional[SanitizeCache]:
        return self._cache

    # ── Public API ────────────────────────────────────────────────

    def evaluate(
        self,
        value: Any,
        candidates: Optional[Sequence[str]] = None,
        config: _ConfigArg = None,
        **overrides: Any,
    ) -> ProcessOutcome:
        """
        Process *value* without raising for a missed match.

        Returns a successful ProcessOutcome holding the sanitized value, or
        a failed one carrying the NoMatchFound a throwing call would raise.
        Raises InvalidArgument if *value* is empty.
        """
        cfg = self._resolve(config, overrides)
        return self._evaluate(value, candidates, cfg)

    def process(
        self,
        value: Any,
        candidates: Optional[Sequence[str]] = None,
        config: _ConfigArg = None,
        **overrides: Any,
    ) -> Optional[str]:
        """
        Sanitize *value* and, if *candidates* are given, require a match.

        Returns the sanitized value. On a miss, raises NoMatchFound, or
        returns None when ``throw_on_no_match`` is off.
        Raises InvalidArgument if *value* is empty.
        """
        cfg = self._resolve(config, overrides)
        return self._process(value, candidates, cfg)

    def process_or_none(
        self,
        value: Any,
        candidates: Optional[Sequence[str]] = None,
        config: _ConfigArg = None,
        **overrides: Any,
    ) -> Optional[str]:
        """Like :meth:`process` but returns None instead of raising on a miss."""
        return self.evaluate(value, candidates, config, **overrides).value

    def process_detailed(
        self,
        value: Any,
        candidates: Optional[Sequence[str]] = None,
        config: _ConfigArg = None,
        **overrides: Any,
    ) -> ProcessResult:
        """
        Return the full ProcessResult for *value*; never raises on a miss.

        ``matched_with`` is the original (unsanitized) candidate that matched.
        Without candidates the result counts as matched.
        """
        cfg = self._resolve(config, overrides)
        return self._detailed(value, candidates, cfg)

    def process_batch(
        self,
        values: Iterable[Any],
        candidates: Optional[Sequence[str]] = None,
        config: _ConfigArg = None,
        **overrides: Any,
    ) -> list[Optional[str]]:
        """
        Apply :meth:`process` to each value, in order.

        A NoMatchFound aborts the batch unless ``throw_on_no_match`` is off.
        """
        cfg = self._resolve(config, overrides)
        results = [self._process(value, candidates, cfg) for value in values]
        logger.debug("Processed batch of %d values", len(results))
        return results

    def process_batch_detailed(
        self,
        values: Iterable[Any],
        candidates: Optional[Sequence[str]] = None,
        config: _ConfigArg = None,
        **overrides: Any,
    ) -> list[ProcessResult]:
        """Apply :meth:`process_detailed` to each value, in order."""
        cfg = self._resolve(config, overrides)
        results = [self._detailed(value, candidates, cfg) for value in values]
        logger.debug("Processed detailed batch of %d values", len(results))
        return results

    # ── Private helpers ───────────────────────────────────────────

    def _resolve(
        self, config: _ConfigArg, overrides: Mapping[str, Any]
    ) -> ProcessConfig:
        # Config objects replace the instance defaults; mappings merge onto them
        if isinstance(config, MatchConfig):
            return ProcessConfig.resolve(config, **overrides)
        if config is not None:
            if not isinstance(config, Mapping):
                return ProcessConfig.resolve(config)
            overrides = {**config, **overrides}
        return ProcessConfig.resolve(self._config, **overrides)

    def _process(
        self, value: Any, candidates: Optional[Sequence[str]], cfg: ProcessConfig
    ) -> Optional[str]:
        outcome = self._evaluate(value, candidates, cfg)
        if outcome.ok:
            return outcome.value
        if cfg.throw_on_no_match:
            raise outcome.error
        logger.debug("No match for %r; returning None", value)
        return None

    def _evaluate(
        self, value: Any, candidates: Optional[Sequence[str]], cfg: ProcessConfig
    ) -> ProcessOutcome:
        result = self._detailed(value, candidates, cfg)
        if result.matched:
            return ProcessOutcome(value=result.sanitized)
        return ProcessOutcome(
            error=NoMatchFound(cfg.error_message, result.original, candidates)
        )

    def _detailed(
        self, value: Any, candidates: Optional[Sequence[str]], cfg: ProcessConfig
    ) -> ProcessResult:
        original = self._require_text(value)
        sanitized = self._sanitize_output(original, cfg)

        if not candidates:
            return ProcessResult(
                sanitized=sanitized, matched=True, original=original
            )

        # Strict mode compares the original input, never the sanitized one
        matched_with = find_match(original, candidates, cfg.match_config())
        return ProcessResult(
            sanitized=sanitized,
            matched=matched_with is not None,
            original=original,
            matched_with=matched_with,
        )

    def _sanitize_output(self, text: str, cfg: ProcessConfig) -> str:
        if self._cache is not None:
            return self._cache.sanitize(text, cfg.sanitize)
        return run_pipeline(text, cfg.sanitize)

    @staticmethod
    def _require_text(value: Any) -> str:
        if value is None:
            raise InvalidArgument("value")
        text = value if isinstance(value, str) else str(value)
        if not text:
            raise InvalidArgument("value")
        return text
