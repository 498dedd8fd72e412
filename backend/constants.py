"""
Application-wide constants and configuration keys.

This module centralizes magic strings and numbers used throughout the application
so the API, the service layer and the configuration loader agree on them.
"""
from enum import Enum


class LookupStatus(str, Enum):
    """
    Outcome of a storage lookup.

    - FOUND: the store returned at least one record
    - EMPTY: the store holds nothing matching the lookup
    - FAULT: the store could not be read
    """

    FOUND = 'FOUND'
    EMPTY = 'EMPTY'
    FAULT = 'FAULT'


class ServerConfig:
    """Server configuration defaults"""

    HOST = "127.0.0.1"
    PORT = 8000
    SERVICE_NAME = "User Records API"
    VERSION = "1.0.0"


class DatabaseConfig:
    """Database configuration defaults"""

    URL = "sqlite:///./users.db"
    USERS_TABLE = "users"
    # Signed 64-bit INTEGER primary key range
    MIN_ID = -2**63
    MAX_ID = 2**63 - 1


class LogConfig:
    """Logging configuration defaults"""

    LEVEL = "INFO"
    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    FILE_NAME = "user_records.log"
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5
    REQUEST_ID_HEADER = "X-Request-ID"


class EnvKeys:
    """Environment variables read by config.app_config"""

    DATABASE_URL = "USER_RECORDS_DATABASE_URL"
    HOST = "USER_RECORDS_HOST"
    PORT = "USER_RECORDS_PORT"
    LOG_LEVEL = "USER_RECORDS_LOG_LEVEL"
    LOG_DIR = "USER_RECORDS_LOG_DIR"


class ApiPaths:
    """Route prefixes"""

    V1_PREFIX = "/api/v1"
    USERS = "/users"
    HEALTH = "/api/health"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    NO_CONTENT = 204

    # Client Errors
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
