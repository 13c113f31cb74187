"""
ConfigService - configuration management.

Holds the logging and tally settings as named presets and applies
environment overrides.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Dict, List, Mapping, Optional

from ..core.exceptions import ConfigError
from .round_service import Player

LOG_LEVEL_ENV = "POKER_HANDS_LOG_LEVEL"
PLAYER_ENV = "POKER_HANDS_PLAYER"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """Validate the log level."""
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level}")


@dataclass(frozen=True)
class TallyConfig:
    """Win tally configuration."""
    player: Player = Player.PLAYER_ONE


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)
    tally: TallyConfig = field(default_factory=TallyConfig)


def parse_player(value: str) -> Player:
    """
    Parse a player number.

    Args:
        value: "1" or "2"

    Raises:
        ConfigError: for any other value
    """
    try:
        return Player(int(value))
    except ValueError:
        raise ConfigError(f"Invalid player: {value!r}, expected 1 or 2") from None


class ConfigService:
    """Configuration service."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Args:
            environ: environment to read overrides from, os.environ by default
        """
        self.logger = logging.getLogger(__name__)
        self._environ = os.environ if environ is None else environ
        self._presets: Dict[str, AppConfig] = {
            'default': AppConfig(),
            'debug': AppConfig(logging_config=LoggingConfig(log_level='DEBUG')),
        }

    def available_presets(self) -> List[str]:
        """Names of the known presets."""
        return sorted(self._presets)

    def get_config(self, preset: str = 'default', log_level: Optional[str] = None,
                   player: Optional[Player] = None) -> AppConfig:
        """
        Return a preset with overrides applied.

        Explicit arguments win over the environment; an environment value
        that is overridden is never read.

        Args:
            preset: preset name
            log_level: log level override
            player: counted player override

        Returns:
            AppConfig: the resolved configuration

        Raises:
            ConfigError: for an unknown preset or an invalid override
        """
        if preset not in self._presets:
            raise ConfigError(f"Unknown config preset: {preset}")

        config = self._presets[preset]

        log_level = log_level or self._environ.get(LOG_LEVEL_ENV)
        if log_level:
            config = replace(config, logging_config=replace(config.logging_config, log_level=log_level))

        if player is None and self._environ.get(PLAYER_ENV):
            player = parse_player(self._environ[PLAYER_ENV])
        if player is not None:
            config = replace(config, tally=TallyConfig(player=player))

        self.logger.debug("Resolved config %s: %s", preset, config)
        return config


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from a LoggingConfig."""
    logging.basicConfig(level=config.log_level.upper(), format=config.log_format, force=True)
