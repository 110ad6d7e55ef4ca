"""Runtime configuration for scxctl.

Where the loader lives on D-Bus, how long to wait for replies and how
chatty to be are read from ``SCXCTL_*`` environment variables (or a
``.env`` file in the working directory) via pydantic-settings.
Command-line flags override these values in the CLI layer.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scxctl.exceptions import ConfigurationError

BusKind = Literal["system", "session"]

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


class LoaderSettings(BaseSettings):
    """Connection and logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="SCXCTL_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    bus: BusKind = Field(
        default="system",
        description="Message bus hosting the loader.",
    )
    bus_name: str = Field(
        default="org.scx.Loader",
        min_length=1,
        description="Well-known D-Bus name of the loader.",
    )
    object_path: str = Field(
        default="/org/scx/Loader",
        pattern=r"^/",
        description="Object path exporting the loader interface.",
    )
    interface: str = Field(
        default="org.scx.Loader",
        min_length=1,
        description="Loader interface name.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for each D-Bus reply.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Threshold for diagnostic logging on stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(**overrides: object) -> LoaderSettings:
    """Build :class:`LoaderSettings`, mapping validation failures.

    *overrides* take precedence over the environment; ``None`` values
    are ignored so unset CLI flags do not clobber configuration.

    Raises
    ------
    ConfigurationError
        If any value fails validation.
    """
    explicit = {key: value for key, value in overrides.items() if value is not None}
    try:
        return LoaderSettings(**explicit)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid scxctl configuration: {problems}",
            hint="Check the SCXCTL_* environment variables.",
        ) from exc
