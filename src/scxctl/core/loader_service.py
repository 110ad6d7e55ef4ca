"""Core loader service — orchestrates queries and scheduler lifecycle.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~scxctl.core.protocols.LoaderClient` injected at
construction time (dependency inversion), keeping the core free of any
D-Bus imports.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~scxctl.exceptions.ScxctlError` subclasses escape.
* Every public command returns the status line to display.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from scxctl.core.messages import format_scheduler_message, format_status, format_supported
from scxctl.core.models import SchedMode, SchedulerStatus, SupportedSched
from scxctl.core.naming import NO_SCHEDULER, ensure_scx_prefix, is_supported
from scxctl.core.protocols import LoaderClient
from scxctl.exceptions import (
    HELP_HINT,
    InvalidSchedulerError,
    LoaderCallError,
    ScxctlError,
    SchedulerStateError,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class LoaderService:
    """Stateless service wrapping one loader client.

    Parameters
    ----------
    client:
        Any object satisfying the :class:`LoaderClient` protocol.
    """

    def __init__(self, client: LoaderClient) -> None:
        self._client: LoaderClient = client

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def status(self) -> SchedulerStatus:
        """Snapshot the running scheduler, its mode or its arguments.

        The mode is only queried when the scheduler runs without
        explicit arguments.
        """
        current = self._call(self._client.current_scheduler)
        if current == NO_SCHEDULER:
            return SchedulerStatus(scheduler=None, mode=None)

        sched = SupportedSched.from_name(current)
        args = tuple(self._call(self._client.current_scheduler_args))
        if args:
            return SchedulerStatus(scheduler=sched, mode=None, args=args)

        mode = self._call(self._client.scheduler_mode)
        return SchedulerStatus(scheduler=sched, mode=mode)

    def describe_status(self) -> str:
        """Return the ``get`` status line."""
        return format_status(self.status())

    def supported_schedulers(self) -> list[str]:
        """Return the raw, prefixed scheduler names the loader supports."""
        return list(self._call(self._client.supported_schedulers))

    def describe_supported(self) -> str:
        """Return the ``list`` status line."""
        return format_supported(self.supported_schedulers())

    # ------------------------------------------------------------------
    # Lifecycle commands
    # ------------------------------------------------------------------

    def start(
        self,
        sched_name: str,
        mode: SchedMode | None = None,
        args: Sequence[str] | None = None,
    ) -> str:
        """Start *sched_name* while no scheduler is running.

        Raises
        ------
        SchedulerStateError
            If a scheduler is already running.
        InvalidSchedulerError
            If the loader does not support *sched_name*.
        """
        self.check_scheduler_state(expecting_running=False)

        sched = self.validate_sched(sched_name)
        mode = mode if mode is not None else SchedMode.AUTO

        if args is not None:
            logger.debug("Starting %s with args %r", sched.value, list(args))
            self._call(self._client.start_scheduler_with_args, sched.value, list(args))
        else:
            logger.debug("Starting %s in mode %s", sched.value, mode.label)
            self._call(self._client.start_scheduler, sched.value, mode)

        return format_scheduler_message("started", sched, mode, args)

    def switch(
        self,
        sched_name: str | None = None,
        mode: SchedMode | None = None,
        args: Sequence[str] | None = None,
    ) -> str:
        """Switch the running scheduler, its mode, or its arguments.

        Without *sched_name* the running scheduler is kept; without
        *mode* the loader's current mode is kept.

        Raises
        ------
        SchedulerStateError
            If no scheduler is running.
        InvalidSchedulerError
            If the loader does not support *sched_name*.
        """
        current = self.check_scheduler_state(expecting_running=True)

        if sched_name is not None:
            sched = self.validate_sched(sched_name)
        else:
            sched = SupportedSched.from_name(current)

        if mode is None:
            mode = self._call(self._client.scheduler_mode)

        if args is not None:
            logger.debug("Switching to %s with args %r", sched.value, list(args))
            self._call(self._client.switch_scheduler_with_args, sched.value, list(args))
        else:
            logger.debug("Switching to %s in mode %s", sched.value, mode.label)
            self._call(self._client.switch_scheduler, sched.value, mode)

        return format_scheduler_message("switched to", sched, mode, args)

    def stop(self) -> str:
        self._call(self._client.stop_scheduler)
        return "stopped"

    def restart(self) -> str:
        self._call(self._client.restart_scheduler)
        return "restarted"

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def check_scheduler_state(self, *, expecting_running: bool) -> str:
        """Verify whether a scheduler runs and return the raw current name.

        Raises
        ------
        SchedulerStateError
            If the running state differs from *expecting_running*.
        """
        current = self._call(self._client.current_scheduler)
        is_running = current != NO_SCHEDULER

        if expecting_running and not is_running:
            raise SchedulerStateError(
                "no scx scheduler running, use 'start' instead of 'switch'",
            )
        if not expecting_running and is_running:
            raise SchedulerStateError(
                "scx scheduler already running, use 'switch' instead of 'start'",
            )
        return current

    def validate_sched(self, sched_name: str) -> SupportedSched:
        """Resolve a user-typed scheduler name against the loader's list.

        Both ``lavd`` and ``scx_lavd`` are accepted.

        Raises
        ------
        InvalidSchedulerError
            If neither form appears in the supported list.
        UnknownSchedulerError
            If the loader supports a scheduler scxctl cannot display.
        """
        supported = self.supported_schedulers()
        if not is_supported(sched_name, supported):
            raise InvalidSchedulerError(
                f"invalid value '{sched_name}' for '--sched <SCHED>'",
                hint=f"{format_supported(supported)}\n\n{HELP_HINT}",
            )
        return SupportedSched.from_name(ensure_scx_prefix(sched_name))

    # ------------------------------------------------------------------
    # Client delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _call(method: Callable[..., _T], *args: object) -> _T:
        """Call the client and ensure only our exceptions escape."""
        try:
            return method(*args)
        except ScxctlError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise LoaderCallError(
                f"Unexpected loader client error: {exc}",
            ) from exc
