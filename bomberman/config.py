"""Server and client settings read from a .env file and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_ENV_FILE = ".env"


class ConfigError(Exception):
    """Raised when the settings file cannot be loaded."""


@dataclass(frozen=True)
class ServerConfig:
    addr: str
    port: str


@dataclass(frozen=True)
class ClientConfig:
    host: str
    port: str


def _load_env(env_file) -> tuple[str, str]:
    path = Path(env_file or DEFAULT_ENV_FILE)
    if not path.is_file():
        raise ConfigError(f"error loading .env file: {path}")
    load_dotenv(path)
    return (
        os.environ.get("SERVER_ADDR") or "localhost",
        os.environ.get("SERVER_PORT") or "8080",
    )


def load_server_config(env_file=None) -> ServerConfig:
    """Load the address and port the server listens on."""
    return ServerConfig(*_load_env(env_file))


def load_client_config(env_file=None) -> ClientConfig:
    """Load the address and port the client connects to."""
    return ClientConfig(*_load_env(env_file))