"""
Unit tests for configuration management.
"""

import logging

import pytest

from poker_hands.application.config_service import (
    LOG_LEVEL_ENV,
    PLAYER_ENV,
    ConfigService,
    LoggingConfig,
    configure_logging,
    parse_player,
)
from poker_hands.application.round_service import Player
from poker_hands.core.exceptions import ConfigError


class TestConfigService:
    """ConfigService tests."""

    def test_defaults(self):
        config = ConfigService(environ={}).get_config()

        assert config.logging_config.log_level == "WARNING"
        assert config.tally.player == Player.PLAYER_ONE

    def test_presets(self):
        service = ConfigService(environ={})

        assert service.available_presets() == ["debug", "default"]
        assert service.get_config("debug").logging_config.log_level == "DEBUG"

    def test_unknown_preset(self):
        with pytest.raises(ConfigError):
            ConfigService(environ={}).get_config("tournament")

    def test_environment_overrides(self):
        service = ConfigService(environ={LOG_LEVEL_ENV: "info", PLAYER_ENV: "2"})

        config = service.get_config()

        assert config.logging_config.log_level == "info"
        assert config.tally.player == Player.PLAYER_TWO

    def test_invalid_environment_values(self):
        with pytest.raises(ConfigError):
            ConfigService(environ={LOG_LEVEL_ENV: "LOUD"}).get_config()
        with pytest.raises(ConfigError):
            ConfigService(environ={PLAYER_ENV: "3"}).get_config()

    def test_explicit_overrides_win_over_environment(self):
        service = ConfigService(environ={LOG_LEVEL_ENV: "LOUD", PLAYER_ENV: "3"})

        config = service.get_config(log_level="DEBUG", player=Player.PLAYER_TWO)

        assert config.logging_config.log_level == "DEBUG"
        assert config.tally.player == Player.PLAYER_TWO


class TestHelpers:
    """Module helper tests."""

    def test_parse_player(self):
        assert parse_player("1") == Player.PLAYER_ONE
        assert parse_player("2") == Player.PLAYER_TWO
        with pytest.raises(ConfigError):
            parse_player("two")

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError):
            LoggingConfig(log_level="VERBOSE")

    def test_configure_logging(self, restore_root_logger):
        configure_logging(LoggingConfig(log_level="debug"))

        assert logging.getLogger().level == logging.DEBUG

        configure_logging(LoggingConfig())
        assert logging.getLogger().level == logging.WARNING
