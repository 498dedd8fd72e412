"""
Runtime Configuration

Reads server, database and logging settings from environment variables,
falling back to the defaults in constants.py.
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from constants import DatabaseConfig, EnvKeys, LogConfig, ServerConfig
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class AppConfig:
    database_url: str
    host: str
    port: int
    log_level: str
    log_dir: Optional[Path]


def _read_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"{EnvKeys.PORT} must be an integer, got '{raw}'")
    if not 0 < port < 65536:
        raise ConfigurationError(f"{EnvKeys.PORT} out of range: {port}")
    return port


def _read_log_level(raw: str) -> str:
    level = raw.upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"{EnvKeys.LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)}, got '{raw}'"
        )
    return level


def load_config(environ=None) -> AppConfig:
    """
    Build the application configuration from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        AppConfig with every setting resolved

    Raises:
        ConfigurationError: If a value is blank or cannot be parsed
    """
    env = os.environ if environ is None else environ

    # Set but blank is an error; unset falls back to the default
    blank = [
        key for key in (EnvKeys.DATABASE_URL, EnvKeys.HOST, EnvKeys.PORT, EnvKeys.LOG_LEVEL)
        if key in env and not env[key].strip()
    ]
    if blank:
        raise ConfigurationError(
            f"Blank configuration values: {', '.join(blank)}",
            missing_keys=blank
        )

    log_dir = env.get(EnvKeys.LOG_DIR)

    config = AppConfig(
        database_url=env.get(EnvKeys.DATABASE_URL, DatabaseConfig.URL),
        host=env.get(EnvKeys.HOST, ServerConfig.HOST),
        port=_read_port(env.get(EnvKeys.PORT, str(ServerConfig.PORT))),
        log_level=_read_log_level(env.get(EnvKeys.LOG_LEVEL, LogConfig.LEVEL)),
        log_dir=Path(log_dir) if log_dir else None,
    )
    logger.debug(f"Configuration loaded: database={config.database_url}, port={config.port}")
    return config
