"""Scheduler-control logic independent of D-Bus and of the terminal.

Models, name handling, status-line formatting and :class:`LoaderService`.
Nothing here prints or imports from ``cli`` or ``infra``; the loader is
reached only through the :class:`LoaderClient` protocol.
"""

from scxctl.core.loader_service import LoaderService
from scxctl.core.models import SchedMode, SchedulerStatus, SupportedSched
from scxctl.core.naming import SCHED_PREFIX, ensure_scx_prefix, remove_scx_prefix
from scxctl.core.protocols import LoaderClient

__all__: list[str] = [
    "LoaderClient",
    "LoaderService",
    "SCHED_PREFIX",
    "SchedMode",
    "SchedulerStatus",
    "SupportedSched",
    "ensure_scx_prefix",
    "remove_scx_prefix",
]
