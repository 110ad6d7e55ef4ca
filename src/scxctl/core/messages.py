"""Status-line formatting.

Pure transforms from domain models to the single line of text each
command prints.  Rendering (colour, target stream) is the CLI layer's
job.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from scxctl.core.models import SchedMode, SchedulerStatus, SupportedSched
from scxctl.core.naming import short_names

NOT_RUNNING_MESSAGE: str = "no scx scheduler running"


def _join_args(args: Sequence[str]) -> str:
    return " ".join(args)


def format_scheduler_message(
    action: str,
    sched: SupportedSched,
    mode: SchedMode | None = None,
    args: Sequence[str] | None = None,
) -> str:
    """Describe a scheduler together with its mode or arguments.

    Arguments take precedence over the mode; a missing mode renders
    as ``Auto``.

    >>> format_scheduler_message("started", SupportedSched.LAVD, SchedMode.GAMING)
    'started Lavd in Gaming mode'
    """
    if args is not None:
        return f'{action} {sched.label} with arguments "{_join_args(args)}"'
    shown = mode if mode is not None else SchedMode.AUTO
    return f"{action} {sched.label} in {shown.label} mode"


def format_status(status: SchedulerStatus) -> str:
    """Render the ``get`` output for *status*."""
    if status.scheduler is None:
        return NOT_RUNNING_MESSAGE
    if status.args:
        return format_scheduler_message("running", status.scheduler, args=status.args)
    return format_scheduler_message("running", status.scheduler, status.mode)


def format_supported(names: Iterable[str]) -> str:
    """Render the ``list`` output from raw loader names."""
    return f"supported schedulers: [{', '.join(short_names(names))}]"
