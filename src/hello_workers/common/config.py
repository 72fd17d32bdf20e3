import os
from collections.abc import Sequence
from dataclasses import dataclass


class ConfigError(ValueError):
    pass


LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


@dataclass(frozen=True)
class ServiceConfig:
    port: int
    host: str
    log_level: str


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"Invalid port {raw!r}: not an integer") from None
    if not 1 <= port <= 65535:
        raise ConfigError(f"Invalid port {port}: must be between 1 and 65535")
    return port


def _log_level(raw: str) -> str:
    level = raw.lower()
    return level if level in LOG_LEVELS else "info"


def load_config(argv: Sequence[str]) -> ServiceConfig:
    """
    Build the service config from the positional arguments (program name
    excluded). The first argument is the port to listen on.
    """
    if not argv:
        raise ConfigError("Missing port argument")

    return ServiceConfig(
        port=_parse_port(argv[0]),
        host=os.getenv("HOST", "0.0.0.0"),
        log_level=_log_level(os.getenv("LOG_LEVEL", "info")),
    )
