"""
Application Configuration

Reads runtime settings for the Friends API from environment variables.

Variables:
- FRIENDS_APP_NAME: prefix for alert headers (X-<name>-alert)
- FRIENDS_ENABLE_TRANSLATION: emit i18n message keys instead of sentences
- FRIENDS_DATABASE_URL: SQLAlchemy database URL
- FRIENDS_LOG_DIR / FRIENDS_LOG_LEVEL: logging destination and threshold
- FRIENDS_CORS_ORIGINS: comma-separated list of allowed origins
- FRIENDS_HOST / FRIENDS_PORT: address uvicorn binds to
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DATA_DIR = Path.home() / ".local/share/FriendsApi"

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def env_flag(name: str, default: str = 'false') -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).strip().lower() in ('true', '1', 'yes')


def env_list(name: str, default: str = '') -> list[str]:
    """Read a comma-separated list, dropping blanks."""
    return [item.strip() for item in os.environ.get(name, default).split(',') if item.strip()]


@dataclass(frozen=True)
class AppConfig:
    app_name: str
    enable_translation: bool
    database_url: str
    log_dir: Path
    log_level: str
    cors_origins: list[str]
    host: str
    port: int


def load_config() -> AppConfig:
    """
    Build the configuration from the current environment.

    Raises:
        ConfigurationError: If FRIENDS_LOG_LEVEL is not a known level or
            FRIENDS_PORT is not an integer
    """
    log_level = os.environ.get('FRIENDS_LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid FRIENDS_LOG_LEVEL '{log_level}'",
            missing_keys=['FRIENDS_LOG_LEVEL']
        )

    try:
        port = int(os.environ.get('FRIENDS_PORT', '8080'))
    except ValueError:
        raise ConfigurationError("FRIENDS_PORT must be an integer", missing_keys=['FRIENDS_PORT'])

    database_url = os.environ.get('FRIENDS_DATABASE_URL', '').strip()
    if not database_url:
        database_url = f"sqlite:///{DATA_DIR / 'friends.db'}"

    config = AppConfig(
        app_name=os.environ.get('FRIENDS_APP_NAME', 'friendsApp').strip() or 'friendsApp',
        enable_translation=env_flag('FRIENDS_ENABLE_TRANSLATION', 'true'),
        database_url=database_url,
        log_dir=Path(os.environ.get('FRIENDS_LOG_DIR', str(DATA_DIR / 'logs'))).expanduser(),
        log_level=log_level,
        cors_origins=env_list('FRIENDS_CORS_ORIGINS', '*'),
        host=os.environ.get('FRIENDS_HOST', '127.0.0.1'),
        port=port,
    )
    logger.debug(f"Loaded configuration for {config.app_name} (database: {config.database_url.split(':')[0]})")
    return config


settings = load_config()
