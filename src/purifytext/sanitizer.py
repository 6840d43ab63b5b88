"""Text sanitizing: a fixed pipeline of pure stages driven by SanitizeConfig."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Callable, Mapping, Optional, Union

from purifytext.config import SanitizeConfig

_WHITESPACE_RE = re.compile(r"\s+")
_DIGITS_RE = re.compile(r"[0-9]")


@lru_cache(maxsize=None)
def _disallowed_re(
    numbers: bool, hyphens: bool, underscores: bool
) -> re.Pattern[str]:
    """Pattern matching every character the filter stage removes."""
    allowed = r"A-Za-z\s"
    if numbers:
        allowed += "0-9"
    if hyphens:
        allowed += r"\-"
    if underscores:
        allowed += "_"
    return re.compile(f"[^{allowed}]")


def _apply_case(text: str, config: SanitizeConfig) -> str:
    if config.convert_to_upper_case or not config.preserve_case:
        return text.upper()
    return text


def _filter_characters(text: str, config: SanitizeConfig) -> str:
    if config.remove_special_chars:
        pattern = _disallowed_re(
            config.preserve_numbers,
            config.preserve_hyphens,
            config.preserve_underscores,
        )
        return pattern.sub("", text)
    if not config.preserve_numbers:
        return _DIGITS_RE.sub("", text)
    return text


def _strip_whitespace(text: str, config: SanitizeConfig) -> str:
    if config.remove_whitespace or not config.preserve_spaces:
        return _WHITESPACE_RE.sub("", text)
    return text


def _trim_edges(text: str, config: SanitizeConfig) -> str:
    return text.strip() if config.trim_edges else text


# Order is part of the contract.
STAGES: tuple[Callable[[str, SanitizeConfig], str], ...] = (
    _apply_case,
    _filter_characters,
    _strip_whitespace,
    _trim_edges,
)


def run_pipeline(text: str, config: SanitizeConfig) -> str:
    """Run every stage over *text* with an already-resolved *config*."""
    for stage in STAGES:
        text = stage(text, config)
    return text


def sanitize(
    raw: Any,
    config: Union[SanitizeConfig, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> str:
    """
    Normalise *raw* into its canonical form, e.g. 'orange-cat' -> 'ORANGECAT'.

    ``None`` and empty input give ``""``. Non-string input is converted with
    ``str()`` first. Keyword *overrides* are merged onto *config*.
    """
    text = _as_text(raw)
    if not text:
        return ""
    return run_pipeline(text, SanitizeConfig.resolve(config, **overrides))


def _as_text(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    return raw if isinstance(raw, str) else str(raw)
