"""
Configuration Management for TapCount

Application settings resolved from environment variables, with defaults that
vary by deployment environment.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_PORT = 3000
DEFAULT_DATA_FILE = "touchcount.json"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class AppConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    data_path: Path = field(default_factory=lambda: Path(DEFAULT_DATA_FILE))
    serialize_increments: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'AppConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.logging.level = "DEBUG"
        elif environment == Environment.TESTING:
            config.host = "127.0.0.1"
            config.logging.level = "WARNING"
        elif environment == Environment.PRODUCTION:
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AppConfig':
        """
        Load configuration from environment variables.

        Recognized variables: PORT, HOST, TAPCOUNT_ENV, TAPCOUNT_DATA_PATH,
        TAPCOUNT_LOG_LEVEL and TAPCOUNT_SERIALIZE_INCREMENTS.
        """
        env = os.environ if environ is None else environ

        env_name = env.get("TAPCOUNT_ENV", Environment.DEVELOPMENT.value).strip().lower()
        try:
            environment = Environment(env_name)
        except ValueError:
            raise ValueError(f"Unknown TAPCOUNT_ENV: {env_name!r}")

        config = cls.for_environment(environment)

        if env.get("PORT"):
            config.port = parse_port(env["PORT"])
        if env.get("HOST"):
            config.host = env["HOST"]
        if env.get("TAPCOUNT_DATA_PATH"):
            config.data_path = Path(env["TAPCOUNT_DATA_PATH"]).expanduser()
        if env.get("TAPCOUNT_LOG_LEVEL"):
            config.logging.level = env["TAPCOUNT_LOG_LEVEL"].upper()
        if env.get("TAPCOUNT_SERIALIZE_INCREMENTS"):
            config.serialize_increments = parse_bool(env["TAPCOUNT_SERIALIZE_INCREMENTS"])

        return config


def parse_port(value) -> int:
    try:
        port = int(str(value).strip())
    except ValueError:
        raise ValueError(f"Invalid port: {value!r}")
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


def parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")
