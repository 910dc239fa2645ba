"""Process-wide settings: configured once before the first request, read-only afterwards."""

import os
from dataclasses import dataclass, replace
from typing import Optional

from errors import ConfigurationError

DEFAULT_BASE_URL = "https://petstore.swagger.io/v2"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """HTTP defaults shared by every RequestBuilder and HttpExecutor."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    log_http: bool = False
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        timeout = _float_env("PETSTORE_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            base_url=os.getenv("PETSTORE_BASE_URL", cls.base_url).rstrip("/"),
            timeout=timeout,
            log_http=_bool_env("PETSTORE_LOG_HTTP", cls.log_http),
            verify_ssl=_bool_env("PETSTORE_VERIFY_SSL", cls.verify_ssl),
        )


_settings: Optional[Settings] = None


def configure(settings: Optional[Settings] = None, **overrides) -> Settings:
    """
    Set the process-wide settings. Environment values are the starting point,
    then `settings` (if given) and keyword overrides.

    Calling again with identical values is a no-op; different values raise
    ConfigurationError because settings are immutable once set.
    """
    global _settings
    candidate = settings or Settings.from_env()
    if overrides:
        candidate = replace(candidate, **overrides)
    candidate = replace(candidate, base_url=candidate.base_url.rstrip("/"))

    if _settings is not None:
        if _settings != candidate:
            raise ConfigurationError(
                f"Settings already configured ({_settings.base_url}); refusing to change them"
            )
        return _settings

    _settings = candidate
    return _settings


def get_settings() -> Settings:
    if _settings is None:
        return configure()
    return _settings


def reset_settings() -> None:
    """Forget the configured settings. Only meant for test isolation."""
    global _settings
    _settings = None
