"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
application so handlers, services and tests agree on them.
"""


class ServerConfig:
    """Server configuration defaults (overridable via config.app_config)"""

    HOST = "0.0.0.0"
    PORT = 8080


class TutorialFilters:
    """Query parameter values with special meaning for the tutorial listing"""

    # Legacy: GET /tutorials?title=published lists published tutorials
    PUBLISHED_KEYWORD = "published"


class LogConfig:
    """Log file rotation settings"""

    FILE_NAME = "tutorials-api.log"
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5
    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
