"""Typed result models for purifytext."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from purifytext.exceptions import NoMatchFound


@dataclass(frozen=True)
class ProcessResult:
    """Complete result of processing one input against a candidate set."""

    sanitized: str
    matched: bool
    original: str
    matched_with: Optional[str] = None   # original candidate, not sanitized

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "sanitized": self.sanitized,
            "matched": self.matched,
            "original": self.original,
            "matched_with": self.matched_with,
        }


@dataclass(frozen=True)
class ProcessOutcome:
    """
    Success or failure of a processing call, without raising.

    On success ``value`` holds the sanitized input. On failure ``error``
    holds the NoMatchFound that a throwing caller would see.
    """

    value: Optional[str] = None
    error: Optional[NoMatchFound] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
