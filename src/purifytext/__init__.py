"""purifytext: sanitize free-form identifiers and match them against a whitelist."""

import logging

from purifytext.cache import SanitizeCache
from purifytext.config import MatchConfig, ProcessConfig, SanitizeConfig
from purifytext.exceptions import (
    InvalidArgument,
    NoMatchFound,
    PurifyTextError,
    SizeLimitExceeded,
)
from purifytext.matcher import (
    closest_match,
    find_match,
    levenshtein,
    match,
    match_batch,
    similarity,
)
from purifytext.models import ProcessOutcome, ProcessResult
from purifytext.purifier import Purifier
from purifytext.sanitizer import sanitize

logging.getLogger(__name__).addHandler(logging.NullHandler())

_default_cache = SanitizeCache()
_default_purifier = Purifier()

memoized_sanitize = _default_cache.sanitize
clear_cache = _default_cache.clear

process = _default_purifier.process
process_or_none = _default_purifier.process_or_none
process_detailed = _default_purifier.process_detailed
process_batch = _default_purifier.process_batch
process_batch_detailed = _default_purifier.process_batch_detailed

__all__ = [
    "Purifier",
    "SanitizeCache",
    "SanitizeConfig",
    "MatchConfig",
    "ProcessConfig",
    "ProcessResult",
    "ProcessOutcome",
    "PurifyTextError",
    "InvalidArgument",
    "NoMatchFound",
    "SizeLimitExceeded",
    "sanitize",
    "memoized_sanitize",
    "clear_cache",
    "match",
    "match_batch",
    "find_match",
    "levenshtein",
    "similarity",
    "closest_match",
    "process",
    "process_or_none",
    "process_detailed",
    "process_batch",
    "process_batch_detailed",
]
