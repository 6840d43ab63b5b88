"""Immutable configuration values for sanitizing, matching and processing."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Final, Mapping, Union

from purifytext.exceptions import InvalidArgument

DEFAULT_ERROR_MESSAGE: Final[str] = "No match found in the provided array."


@dataclass(frozen=True)
class SanitizeConfig:
    """
    Toggles for the sanitize pipeline.

    The toggles are independent; the pipeline always applies them in the
    order case -> character filter -> whitespace -> edge trim. Explicit
    conversions (``convert_to_upper_case``, ``remove_whitespace``) win over
    the matching preserve flags.
    """

    remove_special_chars: bool = True
    convert_to_upper_case: bool = True
    remove_whitespace: bool = True
    preserve_numbers: bool = True
    trim_edges: bool = True
    preserve_case: bool = True
    preserve_spaces: bool = True
    preserve_hyphens: bool = False
    preserve_underscores: bool = False

    @classmethod
    def comparison(cls) -> SanitizeConfig:
        """Profile used to compare values in non-strict matching."""
        return cls(
            remove_special_chars=True,
            convert_to_upper_case=True,
            remove_whitespace=True,
            preserve_numbers=True,
        )

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def resolve(
        cls,
        config: Union[SanitizeConfig, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> SanitizeConfig:
        """
        Build a config from *config* (instance, mapping or None) with
        *overrides* applied on top of it.

        Raises InvalidArgument on unknown keys or a config of the wrong type.
        """
        base, overrides = _split(cls, config, overrides)
        if not overrides:
            return base
        _check_keys(cls.field_names(), overrides)
        return replace(base, **overrides)


@dataclass(frozen=True)
class MatchConfig:
    """Comparison mode for the matcher."""

    strict_matching: bool = True
    # Applied to both sides when strict_matching is off.
    compare: SanitizeConfig = field(default_factory=SanitizeConfig.comparison)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def resolve(
        cls,
        config: Union[MatchConfig, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> MatchConfig:
        """Same contract as SanitizeConfig.resolve, for match settings."""
        base, overrides = _split(cls, config, overrides)
        if not overrides:
            return base
        _check_keys(cls.field_names(), overrides)
        if "compare" in overrides:
            overrides["compare"] = SanitizeConfig.resolve(overrides["compare"])
        return replace(base, **overrides)


@dataclass(frozen=True)
class ProcessConfig(MatchConfig):
    """
    Match settings plus the output profile and the no-match policy.

    Flat sanitize toggles passed to :meth:`resolve` (for example
    ``preserve_hyphens=True``) are applied to the output profile ``sanitize``.
    """

    sanitize: SanitizeConfig = field(default_factory=SanitizeConfig)
    throw_on_no_match: bool = True
    error_message: str = DEFAULT_ERROR_MESSAGE

    @classmethod
    def resolve(
        cls,
        config: Union[MatchConfig, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> ProcessConfig:
        if isinstance(config, MatchConfig) and not isinstance(config, cls):
            config = cls(
                strict_matching=config.strict_matching, compare=config.compare
            )
        base, overrides = _split(cls, config, overrides)
        if not overrides:
            return base

        own = cls.field_names()
        _check_keys(own | SanitizeConfig.field_names(), overrides)

        direct = {k: v for k, v in overrides.items() if k in own}
        flat = {k: v for k, v in overrides.items() if k not in own}
        for key in ("sanitize", "compare"):
            if key in direct:
                direct[key] = SanitizeConfig.resolve(direct[key])
        if flat:
            direct["sanitize"] = replace(
                direct.get("sanitize", base.sanitize), **flat
            )
        if direct.get("error_message", "") is None:
            del direct["error_message"]
        return replace(base, **direct)

    def match_config(self) -> MatchConfig:
        """The comparison-only part of this config."""
        return MatchConfig(
            strict_matching=self.strict_matching, compare=self.compare
        )


def _split(
    cls: type, config: Any, overrides: dict[str, Any]
) -> tuple[Any, dict[str, Any]]:
    """Return (base instance, overrides) with mapping configs folded in."""
    if config is None:
        return cls(), overrides
    if isinstance(config, cls):
        return config, overrides
    if isinstance(config, Mapping):
        return cls(), {**config, **overrides}
    raise InvalidArgument(
        "config",
        f"expected {cls.__name__} or a mapping, got {type(config).__name__}",
    )


def _check_keys(allowed: frozenset[str], given: Mapping[str, Any]) -> None:
    unknown = set(given) - allowed
    if unknown:
        raise InvalidArgument(
            "config", f"unknown option(s): {', '.join(sorted(unknown))}"
        )
