from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from onelink.errors import ConfigurationError
from onelink.tables import DEFAULT_SERVICE_TYPE, is_valid_service_type

DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEOUT = 30.0
# Percentage at which a response counts as fully translated.
DEFAULT_TRANSLATED_THRESHOLD = 97

ENV_PREFIX = "ONELINK_"


@dataclass(frozen=True)
class ClientSettings:
    username: str
    password: str
    host: str
    language: str = DEFAULT_LANGUAGE
    service_type: str = DEFAULT_SERVICE_TYPE
    timeout: float = DEFAULT_TIMEOUT
    translated_threshold: int = DEFAULT_TRANSLATED_THRESHOLD


@dataclass(frozen=True)
class RequestOverrides:
    """Per-call overlay applied on top of the client defaults."""

    mime_type: str | None = None
    service_type: str | None = None


def build_settings(
    *,
    env_file: Path | None = None,
    username: str | None = None,
    password: str | None = None,
    host: str | None = None,
    language: str | None = None,
    service_type: str | None = None,
    timeout: float | None = None,
    translated_threshold: int | None = None,
) -> ClientSettings:
    """Merge keyword arguments over ONELINK_* environment variables and validate them.

    A `.env` file is loaded first (``env_file`` or the nearest one in or above the
    working directory); variables already present in the environment are kept.
    """
    if env_file is not None:
        env_file = env_file.expanduser()
        if not env_file.exists():
            raise ConfigurationError(f"Env file not found: {env_file}")
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    username = username or _env("USERNAME")
    password = password or _env("PASSWORD")
    host = host or _env("HOST")
    missing = [
        f"{ENV_PREFIX}{name}"
        for name, value in (("USERNAME", username), ("PASSWORD", password), ("HOST", host))
        if not value
    ]
    if missing:
        raise ConfigurationError(f"Missing {', '.join(missing)}. Add it to .env or the environment.")
    assert username is not None and password is not None and host is not None

    service_type = service_type or _env("SERVICE_TYPE") or DEFAULT_SERVICE_TYPE
    if not is_valid_service_type(service_type):
        raise ConfigurationError(f"Invalid service type: {service_type!r}")

    return ClientSettings(
        username=username,
        password=password,
        host=host,
        language=language or _env("LANGUAGE") or DEFAULT_LANGUAGE,
        service_type=service_type,
        timeout=timeout if timeout is not None else _parse_timeout(_env("TIMEOUT")),
        translated_threshold=(
            translated_threshold
            if translated_threshold is not None
            else _parse_threshold(_env("TRANSLATED_THRESHOLD"))
        ),
    )


def _env(name: str) -> str | None:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None:
        return None
    return value.strip() or None


def _parse_timeout(text: str | None) -> float:
    if text is None:
        return DEFAULT_TIMEOUT
    try:
        value = float(text)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {ENV_PREFIX}TIMEOUT: {text!r}") from exc
    if value <= 0:
        raise ConfigurationError("Timeout must be positive")
    return value


def _parse_threshold(text: str | None) -> int:
    if text is None:
        return DEFAULT_TRANSLATED_THRESHOLD
    try:
        value = int(text)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {ENV_PREFIX}TRANSLATED_THRESHOLD: {text!r}") from exc
    if not 0 <= value <= 100:
        raise ConfigurationError("Translated threshold must be between 0 and 100")
    return value
