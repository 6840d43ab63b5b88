"""Candidate matching, plus auxiliary edit-distance and similarity helpers."""

from __future__ import annotations

from difflib import SequenceMatcher
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from purifytext.config import MatchConfig, SanitizeConfig
from purifytext.exceptions import SizeLimitExceeded
from purifytext.sanitizer import run_pipeline

MAX_EDIT_LENGTH = 1000

_ConfigArg = Union[MatchConfig, Mapping[str, Any], None]


def match(
    value: Optional[str],
    candidates: Optional[Sequence[str]],
    config: _ConfigArg = None,
    **overrides: Any,
) -> bool:
    """
    Return True if *value* matches one of *candidates*.

    Strict mode (the default) is exact, case-sensitive equality on the raw
    strings. Otherwise both sides go through ``config.compare`` first.
    Empty or missing input and candidates never match.
    """
    return find_match(value, candidates, config, **overrides) is not None


def find_match(
    value: Optional[str],
    candidates: Optional[Sequence[str]],
    config: _ConfigArg = None,
    **overrides: Any,
) -> Optional[str]:
    """Return the first original candidate that *value* matches, or None."""
    if not value or not _is_candidate_list(candidates):
        return None
    cfg = MatchConfig.resolve(config, **overrides)

    if cfg.strict_matching:
        for candidate in candidates:
            if candidate == value:
                return candidate
        return None

    target = run_pipeline(str(value), cfg.compare)
    if not target:
        return None
    for candidate in candidates:
        if candidate is None:
            continue
        if run_pipeline(str(candidate), cfg.compare) == target:
            return candidate
    return None


def match_batch(
    values: Iterable[Optional[str]],
    candidates: Optional[Sequence[str]],
    config: _ConfigArg = None,
    **overrides: Any,
) -> list[bool]:
    """Apply :func:`match` to each of *values*, preserving order."""
    cfg = MatchConfig.resolve(config, **overrides)
    return [match(value, candidates, cfg) for value in values]


def levenshtein(
    a: Sequence[Any], b: Sequence[Any], max_length: int = MAX_EDIT_LENGTH
) -> int:
    """
    Edit distance between two sequences of the same element type.

    Insertions, deletions and substitutions each cost 1. Raises
    SizeLimitExceeded when either operand is longer than *max_length*.
    """
    for operand in (a, b):
        if len(operand) > max_length:
            raise SizeLimitExceeded(len(operand), max_length)

    previous_row = list(range(len(b) + 1))
    for i, a_item in enumerate(a, start=1):
        current_row = [i]
        for j, b_item in enumerate(b, start=1):
            insertions = current_row[j - 1] + 1
            deletions = previous_row[j] + 1
            substitutions = previous_row[j - 1] + (a_item != b_item)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row
    return previous_row[-1]


def similarity(
    a: Optional[str], b: Optional[str], compare: Optional[SanitizeConfig] = None
) -> float:
    """
    Score how alike *a* and *b* are, from 0.0 to 1.0.

    Uses SequenceMatcher ratio on the comparison forms so that case,
    punctuation and spacing differences are ignored.
    """
    profile = compare or SanitizeConfig.comparison()
    left = run_pipeline(a or "", profile)
    right = run_pipeline(b or "", profile)
    # Nothing left to compare on one side is never a match
    if not left or not right:
        return 0.0
    return SequenceMatcher(None, left, right).ratio()


def closest_match(
    value: Optional[str],
    candidates: Optional[Sequence[str]],
    max_distance: int = 0,
    compare: Optional[SanitizeConfig] = None,
    max_length: int = MAX_EDIT_LENGTH,
) -> Optional[str]:
    """
    Return the candidate nearest to *value* by edit distance.

    Both sides are compared in their comparison forms. Only candidates within
    *max_distance* qualify; ties go to the earliest candidate.
    """
    if not value or not _is_candidate_list(candidates):
        return None
    profile = compare or SanitizeConfig.comparison()
    target = run_pipeline(str(value), profile)

    best: Optional[tuple[int, str]] = None
    for candidate in candidates:
        if candidate is None:
            continue
        distance = levenshtein(
            target, run_pipeline(str(candidate), profile), max_length
        )
        if distance <= max_distance and (best is None or distance < best[0]):
            best = (distance, candidate)
            # Exact match, nothing can beat it
            if distance == 0:
                break
    return best[1] if best else None


def _is_candidate_list(candidates: Any) -> bool:
    """A bare string is not a candidate list, even though it iterates."""
    return bool(candidates) and not isinstance(candidates, str)
