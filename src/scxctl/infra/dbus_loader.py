"""jeepney-backed implementation of :class:`~scxctl.core.protocols.LoaderClient`.

This module is the **only** place in the codebase that imports
``jeepney``.  All jeepney and socket exceptions are caught here and
re-raised as typed :class:`~scxctl.exceptions.ScxctlError` subclasses —
nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from scxctl.config import LoaderSettings
from scxctl.core.models import SchedMode
from scxctl.exceptions import (
    EnvironmentError,
    LoaderCallError,
    LoaderUnavailableError,
    ProtocolError,
    append_loader_service_suggestion,
)

logger = logging.getLogger(__name__)


def _import_jeepney() -> Any:
    """Import jeepney lazily so ``--help`` works without it."""
    try:
        import jeepney
        import jeepney.io.blocking
        import jeepney.wrappers
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "jeepney is not installed. Install with: pip install jeepney",
        ) from exc
    return jeepney


class DbusLoaderClient:
    """Concrete :class:`LoaderClient` talking to ``org.scx.Loader``.

    Usage::

        with DbusLoaderClient(settings) as client:
            client.current_scheduler()

    The bus connection is opened on first use and closed by
    :meth:`close`.  A pre-opened *connection* may be injected, in which
    case the caller keeps ownership of it.

    This class satisfies the :class:`~scxctl.core.protocols.LoaderClient`
    protocol structurally — no explicit inheritance required.
    """

    # D-Bus error names meaning "nobody is answering", as opposed to the
    # loader itself refusing the request.
    _UNAVAILABLE_ERRORS: tuple[str, ...] = (
        "org.freedesktop.DBus.Error.ServiceUnknown",
        "org.freedesktop.DBus.Error.NameHasNoOwner",
        "org.freedesktop.DBus.Error.NoReply",
        "org.freedesktop.DBus.Error.Timeout",
        "org.freedesktop.DBus.Error.UnknownObject",
    )

    def __init__(
        self,
        settings: LoaderSettings | None = None,
        *,
        connection: Any | None = None,
    ) -> None:
        self._settings: LoaderSettings = settings or LoaderSettings()
        self._jeepney: Any = _import_jeepney()
        self._address: Any = self._jeepney.DBusAddress(
            self._settings.object_path,
            bus_name=self._settings.bus_name,
            interface=self._settings.interface,
        )
        self._connection: Any | None = connection
        self._owns_connection: bool = connection is None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> DbusLoaderClient:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the bus connection if this client opened it (idempotent)."""
        if self._connection is not None and self._owns_connection:
            self._connection.close()
            self._connection = None

    # ------------------------------------------------------------------
    # Protocol: properties
    # ------------------------------------------------------------------

    def current_scheduler(self) -> str:
        return self._get_str("CurrentScheduler")

    def current_scheduler_args(self) -> list[str]:
        return self._get_str_list("CurrentSchedulerArgs")

    def scheduler_mode(self) -> SchedMode:
        value = self._get_property("SchedulerMode")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ProtocolError(f"SchedulerMode is not an integer: {value!r}")
        return SchedMode.from_wire(value)

    def supported_schedulers(self) -> list[str]:
        return self._get_str_list("SupportedSchedulers")

    # ------------------------------------------------------------------
    # Protocol: methods
    # ------------------------------------------------------------------

    def start_scheduler(self, name: str, mode: SchedMode) -> None:
        self._call_method("StartScheduler", "su", (name, int(mode)))

    def start_scheduler_with_args(self, name: str, args: Sequence[str]) -> None:
        self._call_method("StartSchedulerWithArgs", "sas", (name, list(args)))

    def switch_scheduler(self, name: str, mode: SchedMode) -> None:
        self._call_method("SwitchScheduler", "su", (name, int(mode)))

    def switch_scheduler_with_args(self, name: str, args: Sequence[str]) -> None:
        self._call_method("SwitchSchedulerWithArgs", "sas", (name, list(args)))

    def stop_scheduler(self) -> None:
        self._call_method("StopScheduler")

    def restart_scheduler(self) -> None:
        self._call_method("RestartScheduler")

    # ------------------------------------------------------------------
    # Message plumbing
    # ------------------------------------------------------------------

    def _call_method(
        self,
        method: str,
        signature: str | None = None,
        body: tuple[Any, ...] = (),
    ) -> tuple[Any, ...]:
        logger.debug("Calling %s.%s%r", self._settings.interface, method, body)
        msg = self._jeepney.new_method_call(self._address, method, signature, body)
        return self._send(msg, method)

    def _get_property(self, name: str) -> Any:
        logger.debug("Reading property %s.%s", self._settings.interface, name)
        msg = self._jeepney.Properties(self._address).get(name)
        reply = self._send(msg, name)
        try:
            ((_signature, value),) = reply
        except (TypeError, ValueError) as exc:
            raise ProtocolError(
                f"Unexpected reply for property {name}: {reply!r}",
            ) from exc
        return value

    def _get_str(self, name: str) -> str:
        value = self._get_property(name)
        if not isinstance(value, str):
            raise ProtocolError(f"{name} is not a string: {value!r}")
        return value

    def _get_str_list(self, name: str) -> list[str]:
        value = self._get_property(name)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ProtocolError(f"{name} is not a list of strings: {value!r}")
        return list(value)

    def _send(self, msg: Any, what: str) -> tuple[Any, ...]:
        """Send *msg*, wait for the reply and unwrap its body."""
        connection = self._open()
        try:
            reply = connection.send_and_get_reply(
                msg, timeout=self._settings.timeout_seconds,
            )
        except TimeoutError as exc:
            raise LoaderUnavailableError(
                f"Timed out waiting for scx_loader to answer {what}",
                hint=append_loader_service_suggestion(None),
            ) from exc
        except OSError as exc:
            raise LoaderUnavailableError(
                f"Lost connection to the {self._settings.bus} bus: {exc}",
            ) from exc

        try:
            return tuple(self._jeepney.wrappers.unwrap_msg(reply))
        except self._jeepney.wrappers.DBusErrorResponse as exc:
            self._raise_mapped(exc, what)

    def _open(self) -> Any:
        if self._connection is not None:
            return self._connection

        bus = self._settings.bus.upper()
        logger.debug("Opening %s bus connection", self._settings.bus)
        try:
            self._connection = self._jeepney.io.blocking.open_dbus_connection(bus=bus)
        except (OSError, KeyError, ValueError) as exc:
            raise LoaderUnavailableError(
                f"Cannot connect to the D-Bus {self._settings.bus} bus: {exc}",
                hint="Is the D-Bus daemon running?",
            ) from exc
        return self._connection

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    @classmethod
    def _raise_mapped(cls, exc: Any, what: str) -> None:
        """Translate a jeepney ``DBusErrorResponse`` into a domain exception.

        Always raises.
        """
        name: str | None = exc.name
        data = exc.data
        detail = data[0] if isinstance(data, tuple) and len(data) == 1 else data
        logger.debug("Loader replied with error %s: %r", name, data)

        if name in cls._UNAVAILABLE_ERRORS:
            raise LoaderUnavailableError(
                f"scx_loader is not available: {detail}",
                hint=append_loader_service_suggestion(None),
            ) from exc
        raise LoaderCallError(
            f"{what} failed: {detail}",
            dbus_error=name,
        ) from exc
