"""Tests for engine configuration."""

import logging

import pytest

from bigtwo_engine.config import ENVIRONMENT_VARIABLES, EngineConfig
from bigtwo_engine.log import configure_logging


class TestEngineConfig:
    """Defaults, environment parsing and validation."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.seed is None
        assert config.cpu_delay == 0.0
        assert config.decision_timeout is None
        assert config.log_level == "INFO"

    def test_from_env(self):
        config = EngineConfig.from_env(
            {
                "BIGTWO_SEED": "12",
                "BIGTWO_CPU_DELAY": "0.5",
                "BIGTWO_DECISION_TIMEOUT": "30",
                "BIGTWO_LOG_LEVEL": "debug",
            }
        )
        assert config.seed == 12
        assert config.cpu_delay == 0.5
        assert config.decision_timeout == 30.0
        assert config.log_level == "DEBUG"

    def test_from_empty_env(self):
        assert EngineConfig.from_env({}) == EngineConfig()

    def test_blank_values_mean_unset(self):
        config = EngineConfig.from_env({"BIGTWO_SEED": "", "BIGTWO_DECISION_TIMEOUT": " "})
        assert config.seed is None
        assert config.decision_timeout is None

    @pytest.mark.parametrize(
        "env",
        [
            {"BIGTWO_SEED": "abc"},
            {"BIGTWO_CPU_DELAY": "soon"},
            {"BIGTWO_CPU_DELAY": "-1"},
            {"BIGTWO_DECISION_TIMEOUT": "-5"},
            {"BIGTWO_LOG_LEVEL": "LOUD"},
        ],
    )
    def test_invalid_values(self, env):
        with pytest.raises(ValueError):
            EngineConfig.from_env(env)

    def test_to_dict(self):
        assert EngineConfig(seed=3).to_dict() == {
            "seed": 3,
            "cpu_delay": 0.0,
            "decision_timeout": None,
            "log_level": "INFO",
        }

    def test_documented_variables(self):
        assert set(ENVIRONMENT_VARIABLES) == {
            "BIGTWO_SEED",
            "BIGTWO_CPU_DELAY",
            "BIGTWO_DECISION_TIMEOUT",
            "BIGTWO_LOG_LEVEL",
        }


def test_configure_logging_accepts_level_names(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging("debug")
    assert calls[0]["level"] == "DEBUG"
