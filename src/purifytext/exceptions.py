"""Custom exception hierarchy for purifytext."""

from __future__ import annotations

from typing import Optional, Sequence


class PurifyTextError(Exception):
    """Base exception for all purifytext errors."""


class InvalidArgument(PurifyTextError, ValueError):
    """A required argument is empty, missing or of the wrong kind."""

    def __init__(self, argument: str, detail: str = "must not be empty"):
        self.argument = argument
        super().__init__(f"Invalid argument '{argument}': {detail}")


class NoMatchFound(PurifyTextError):
    """The value did not match any of the supplied candidates."""

    def __init__(
        self,
        message: str,
        value: Optional[str] = None,
        candidates: Sequence[str] = (),
    ):
        self.value = value
        if isinstance(candidates, str):
            candidates = (candidates,)
        self.candidates = tuple(candidates)
        super().__init__(message)


class SizeLimitExceeded(PurifyTextError, ValueError):
    """An operand is longer than the edit-distance helper accepts."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input length {length} exceeds the maximum of {limit}"
        )
