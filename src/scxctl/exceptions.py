"""Custom exception hierarchy for scxctl.

All exceptions that cross layer boundaries must inherit from
:class:`ScxctlError`.  Raw third-party exceptions (e.g. from jeepney)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
ScxctlError
├── UsageError
│   ├── SchedulerStateError
│   ├── InvalidSchedulerError
│   └── InvalidModeError
├── ConfigurationError
├── LoaderUnavailableError
├── LoaderCallError
├── ProtocolError
├── UnknownSchedulerError
└── EnvironmentError
"""

from __future__ import annotations

HELP_HINT: str = "For more information, try '--help'"


class ScxctlError(Exception):
    """Base exception for all scxctl errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line usage ----------------------------------------------------

class UsageError(ScxctlError):
    """Raised when the command cannot run as invoked by the user."""

    def __init__(self, message: str, *, hint: str | None = HELP_HINT) -> None:
        super().__init__(message, hint=hint)


class SchedulerStateError(UsageError):
    """Raised when the loader is in the wrong state for the command.

    ``start`` requires no scheduler to be running; ``switch`` requires
    one to be running.
    """


class InvalidSchedulerError(UsageError):
    """Raised when a scheduler name is not supported by the loader."""


class InvalidModeError(UsageError):
    """Raised when a scheduler mode name is not recognised."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(ScxctlError):
    """Raised when ``SCXCTL_*`` settings fail validation."""


# --- Loader / D-Bus --------------------------------------------------------

class LoaderUnavailableError(ScxctlError):
    """Raised when the scx_loader service cannot be reached over D-Bus."""


class LoaderCallError(ScxctlError):
    """Raised when the loader answers a call with a D-Bus error."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        dbus_error: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.dbus_error: str | None = dbus_error
        """D-Bus error name returned by the loader, when known."""


class ProtocolError(ScxctlError):
    """Raised when the loader replies with data of an unexpected shape."""


class UnknownSchedulerError(ScxctlError):
    """Raised when a scheduler name has no known display form."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ScxctlError):
    """Raised when a required runtime dependency is not available."""


def append_loader_service_suggestion(hint: str | None) -> str:
    """Append scx_loader service guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Make sure the scx_loader service is running:"
    if hint and marker in hint:
        return hint
    lines = [hint] if hint else []
    lines.extend((marker, "    systemctl start scx_loader.service"))
    return "\n".join(lines)
