"""Tests for purifytext.config module."""

from dataclasses import FrozenInstanceError

import pytest

from purifytext.config import (
    DEFAULT_ERROR_MESSAGE,
    MatchConfig,
    ProcessConfig,
    SanitizeConfig,
)
from purifytext.exceptions import InvalidArgument


class TestSanitizeConfig:
    def test_defaults(self):
        cfg = SanitizeConfig()
        assert cfg.remove_special_chars is True
        assert cfg.convert_to_upper_case is True
        assert cfg.remove_whitespace is True
        assert cfg.preserve_numbers is True
        assert cfg.trim_edges is True
        assert cfg.preserve_case is True
        assert cfg.preserve_spaces is True
        assert cfg.preserve_hyphens is False
        assert cfg.preserve_underscores is False

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            SanitizeConfig().trim_edges = False

    def test_hashable_and_comparable(self):
        assert hash(SanitizeConfig()) == hash(SanitizeConfig())
        assert SanitizeConfig(preserve_hyphens=True) != SanitizeConfig()

    def test_resolve_none(self):
        assert SanitizeConfig.resolve() == SanitizeConfig()

    def test_resolve_overrides_do_not_mutate_base(self):
        base = SanitizeConfig()
        resolved = SanitizeConfig.resolve(base, preserve_hyphens=True)
        assert resolved.preserve_hyphens is True
        assert base.preserve_hyphens is False

    def test_resolve_mapping(self):
        resolved = SanitizeConfig.resolve({"trim_edges": False}, preserve_numbers=False)
        assert resolved == SanitizeConfig(trim_edges=False, preserve_numbers=False)

    def test_resolve_unknown_key(self):
        with pytest.raises(InvalidArgument, match="unknown option"):
            SanitizeConfig.resolve(removeSpecialChars=False)

    def test_resolve_wrong_type(self):
        with pytest.raises(InvalidArgument):
            SanitizeConfig.resolve("uppercase")


class TestMatchConfig:
    def test_strict_by_default(self):
        assert MatchConfig().strict_matching is True

    def test_comparison_profile(self):
        compare = MatchConfig().compare
        assert compare == SanitizeConfig.comparison()
        assert compare.convert_to_upper_case is True
        assert compare.remove_whitespace is True
        assert compare.remove_special_chars is True

    def test_resolve_nested_mapping(self):
        cfg = MatchConfig.resolve(strict_matching=False, compare={"preserve_hyphens": True})
        assert cfg.strict_matching is False
        assert cfg.compare.preserve_hyphens is True


class TestProcessConfig:
    def test_defaults(self):
        cfg = ProcessConfig()
        assert cfg.strict_matching is True
        assert cfg.throw_on_no_match is True
        assert cfg.error_message == DEFAULT_ERROR_MESSAGE
        assert cfg.sanitize == SanitizeConfig()

    def test_flat_sanitize_keys_go_to_output_profile(self):
        cfg = ProcessConfig.resolve(preserve_hyphens=True, throw_on_no_match=False)
        assert cfg.sanitize.preserve_hyphens is True
        assert cfg.compare.preserve_hyphens is False
        assert cfg.throw_on_no_match is False

    def test_flat_keys_layer_over_nested_profile(self):
        cfg = ProcessConfig.resolve(
            sanitize={"convert_to_upper_case": False}, preserve_hyphens=True
        )
        assert cfg.sanitize == SanitizeConfig(
            convert_to_upper_case=False, preserve_hyphens=True
        )

    def test_lifts_match_config(self):
        cfg = ProcessConfig.resolve(MatchConfig(strict_matching=False))
        assert isinstance(cfg, ProcessConfig)
        assert cfg.strict_matching is False
        assert cfg.throw_on_no_match is True

    def test_none_error_message_keeps_default(self):
        cfg = ProcessConfig.resolve(error_message=None)
        assert cfg.error_message == DEFAULT_ERROR_MESSAGE

    def test_match_config(self):
        cfg = ProcessConfig(strict_matching=False)
        assert cfg.match_config() == MatchConfig(strict_matching=False)

    def test_unknown_key(self):
        with pytest.raises(InvalidArgument):
            ProcessConfig.resolve(max_levenshtein_distance=2)
