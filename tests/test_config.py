"""Tests for codec configuration."""
import pytest

from rdf_starstring.config import (
    CodecConfig,
    DEFAULT_CONFIG,
    DEFAULT_MAX_NESTING_DEPTH,
    ENV_MAX_NESTING_DEPTH,
    MAX_NESTING_DEPTH_CEILING,
)
from rdf_starstring.errors import ConfigValidationError


class TestCodecConfig:
    def test_defaults(self):
        config = CodecConfig()
        assert config.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH
        assert DEFAULT_CONFIG == config

    def test_to_dict(self):
        assert CodecConfig(max_nesting_depth=8).to_dict() == {"max_nesting_depth": 8}

    def test_from_dict(self):
        assert CodecConfig.from_dict({"max_nesting_depth": 3}).max_nesting_depth == 3
        assert CodecConfig.from_dict({}).max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH

    def test_validate(self):
        assert CodecConfig().validate() == []
        assert CodecConfig(max_nesting_depth=0).validate() == ["max_nesting_depth must be at least 1"]

    def test_validate_or_raise(self):
        with pytest.raises(ConfigValidationError):
            CodecConfig(max_nesting_depth=-1).validate_or_raise()

    def test_ceiling(self):
        assert CodecConfig(max_nesting_depth=MAX_NESTING_DEPTH_CEILING).validate() == []
        errors = CodecConfig(max_nesting_depth=MAX_NESTING_DEPTH_CEILING + 1).validate()
        assert errors == [f"max_nesting_depth cannot exceed {MAX_NESTING_DEPTH_CEILING}"]

    def test_above_ceiling_rejected(self):
        with pytest.raises(ConfigValidationError, match="cannot exceed"):
            CodecConfig(max_nesting_depth=1000).validate_or_raise()


class TestConfigFromEnv:
    def test_unset(self):
        assert CodecConfig.from_env({}) == CodecConfig()

    def test_blank(self):
        assert CodecConfig.from_env({ENV_MAX_NESTING_DEPTH: " "}) == CodecConfig()

    def test_set(self):
        assert CodecConfig.from_env({ENV_MAX_NESTING_DEPTH: "12"}).max_nesting_depth == 12

    def test_not_an_integer(self):
        with pytest.raises(ConfigValidationError, match="must be an integer"):
            CodecConfig.from_env({ENV_MAX_NESTING_DEPTH: "deep"})

    def test_out_of_range(self):
        with pytest.raises(ConfigValidationError):
            CodecConfig.from_env({ENV_MAX_NESTING_DEPTH: "0"})

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_MAX_NESTING_DEPTH, "5")
        assert CodecConfig.from_env().max_nesting_depth == 5

    def test_above_ceiling(self):
        with pytest.raises(ConfigValidationError, match="cannot exceed"):
            CodecConfig.from_env({ENV_MAX_NESTING_DEPTH: "1000"})
