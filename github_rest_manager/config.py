"""Manager configuration and the credential fallback shared by all managers."""

import dataclasses
from dataclasses import dataclass

from .settings import get_settings


class ConfigurationError(RuntimeError):
    """No credentials were given and none could be recovered."""


@dataclass(frozen=True)
class ManagerConfig:
    """Credentials and request options for a manager.

    Args:
        access_token: personal access token sent with every request
        default_error_message: message used when a failure carries no
            error payload from GitHub
        request_timeout: timeout in seconds, None for the settings default
        api_url: base URL of the REST API
    """

    access_token: str
    default_error_message: str | None = None
    request_timeout: float | None = None
    api_url: str | None = None


_stored_config: ManagerConfig | None = None


def store_config(config: ManagerConfig) -> None:
    """Remember config so later managers can be built without credentials."""
    global _stored_config
    _stored_config = config


def get_stored_config() -> ManagerConfig | None:
    return _stored_config


def reset_stored_config() -> None:
    global _stored_config
    _stored_config = None


def resolve_config(
    access_token: str | None = None,
    default_error_message: str | None = None,
    request_timeout: float | None = None,
    config: ManagerConfig | None = None,
) -> ManagerConfig:
    """Work out the configuration for a new manager.

    An explicit config or access token is stored and returned. Without one,
    the previously stored config is reused, then GITHUB_TOKEN from the
    settings. Overrides passed alongside a missing token apply to the reused
    config only and are not stored. GITHUB_DEFAULT_ERROR_MESSAGE fills in a
    missing default error message whenever a new config is built.
    """
    if config is not None:
        if access_token is not None:
            raise ValueError("pass either config or access_token, not both")
        store_config(config)
        return config

    if access_token is not None:
        if default_error_message is None:
            default_error_message = get_settings().github_default_error_message
        config = ManagerConfig(
            access_token=access_token,
            default_error_message=default_error_message,
            request_timeout=request_timeout,
        )
        store_config(config)
        return config

    config = _stored_config
    if config is None:
        settings = get_settings()
        if not settings.github_token:
            raise ConfigurationError(
                "No access token: pass one to a manager first or set GITHUB_TOKEN"
            )
        config = ManagerConfig(
            access_token=settings.github_token,
            default_error_message=settings.github_default_error_message,
        )

    overrides = {}
    if default_error_message is not None:
        overrides["default_error_message"] = default_error_message
    if request_timeout is not None:
        overrides["request_timeout"] = request_timeout
    return dataclasses.replace(config, **overrides) if overrides else config
