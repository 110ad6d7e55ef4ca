"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from scxctl.core.models import SchedMode


class LoaderClient(Protocol):
    """Contract for scx_loader backends.

    Each method maps one-to-one onto a property or method of the
    ``org.scx.Loader`` D-Bus interface.  Scheduler names are always the
    raw ``scx_``-prefixed form.

    Implementations must map all backend-specific exceptions to
    :class:`~scxctl.exceptions.ScxctlError` subclasses:

    LoaderUnavailableError
        When the loader cannot be reached.
    LoaderCallError
        When the loader rejects the call.
    ProtocolError
        When a reply does not have the documented shape.
    """

    def current_scheduler(self) -> str:
        """Return the running scheduler name, or ``"unknown"``."""
        ...  # pragma: no cover

    def current_scheduler_args(self) -> list[str]:
        """Return the explicit arguments of the running scheduler."""
        ...  # pragma: no cover

    def scheduler_mode(self) -> SchedMode:
        """Return the mode of the running scheduler."""
        ...  # pragma: no cover

    def supported_schedulers(self) -> list[str]:
        """Return every scheduler name the loader can start."""
        ...  # pragma: no cover

    def start_scheduler(self, name: str, mode: SchedMode) -> None:
        ...  # pragma: no cover

    def start_scheduler_with_args(self, name: str, args: Sequence[str]) -> None:
        ...  # pragma: no cover

    def switch_scheduler(self, name: str, mode: SchedMode) -> None:
        ...  # pragma: no cover

    def switch_scheduler_with_args(self, name: str, args: Sequence[str]) -> None:
        ...  # pragma: no cover

    def stop_scheduler(self) -> None:
        ...  # pragma: no cover

    def restart_scheduler(self) -> None:
        ...  # pragma: no cover
