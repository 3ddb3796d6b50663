"""
Runtime Configuration

All settings are read once from environment variables at import time.
Unset variables fall back to the defaults in constants.py or the data directory.

Variables:
- TUTORIALS_DATA_DIR: base directory for the SQLite database and logs
- TUTORIALS_DATABASE_URL: SQLAlchemy database URL
- TUTORIALS_LOG_DIR / TUTORIALS_LOG_LEVEL: logging destination and level
- TUTORIALS_HOST / TUTORIALS_PORT: uvicorn bind address
- TUTORIALS_CORS_ORIGINS: comma separated list of allowed origins
- TUTORIALS_SQL_ECHO: log emitted SQL statements
"""
import os
from pathlib import Path

from constants import LogConfig, ServerConfig
from exceptions import ConfigurationError


def _env(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


def parse_bool(value: str) -> bool:
    """
    Interpret an environment flag.

    Returns:
        True for 'true', '1' or 'yes' (case-insensitive), False otherwise
    """
    return value.strip().lower() in ('true', '1', 'yes')


def parse_port(value: str) -> int:
    """
    Parse and range-check a TCP port.

    Raises:
        ConfigurationError: If the value is not an integer in 1-65535
    """
    try:
        port = int(value)
    except ValueError:
        raise ConfigurationError(f"Invalid port: {value!r}", invalid_keys=["TUTORIALS_PORT"])
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"Port out of range: {port}", invalid_keys=["TUTORIALS_PORT"])
    return port


def parse_log_level(value: str) -> str:
    """
    Normalize a log level name.

    Raises:
        ConfigurationError: If the level is not a standard logging level name
    """
    level = value.strip().upper()
    if level not in LogConfig.LEVELS:
        raise ConfigurationError(f"Unknown log level: {value!r}", invalid_keys=["TUTORIALS_LOG_LEVEL"])
    return level


def parse_origins(value: str) -> list[str]:
    """Split a comma separated origin list, dropping blanks"""
    return [origin.strip() for origin in value.split(",") if origin.strip()]


DATA_DIR = Path(_env("TUTORIALS_DATA_DIR", str(Path.home() / ".tutorials-api"))).expanduser()
DATABASE_URL = _env("TUTORIALS_DATABASE_URL", f"sqlite:///{DATA_DIR / 'tutorials.db'}")
LOG_DIR = Path(_env("TUTORIALS_LOG_DIR", str(DATA_DIR / "logs"))).expanduser()
LOG_LEVEL = parse_log_level(_env("TUTORIALS_LOG_LEVEL", "INFO"))
HOST = _env("TUTORIALS_HOST", ServerConfig.HOST)
PORT = parse_port(_env("TUTORIALS_PORT", str(ServerConfig.PORT)))
CORS_ORIGINS = parse_origins(_env("TUTORIALS_CORS_ORIGINS", "*"))
SQL_ECHO = parse_bool(_env("TUTORIALS_SQL_ECHO", "false"))
