"""Scheduler name normalisation.

The loader speaks in ``scx_``-prefixed names (``scx_lavd``) while users
type and read the short form (``lavd``).  These helpers are pure string
transforms: no I/O, no state.
"""

from __future__ import annotations

from collections.abc import Iterable

SCHED_PREFIX: str = "scx_"

NO_SCHEDULER: str = "unknown"
"""Value of ``CurrentScheduler`` while no scx scheduler is attached."""


def ensure_scx_prefix(name: str) -> str:
    """Return *name* with exactly one leading ``scx_`` prefix."""
    if name.startswith(SCHED_PREFIX):
        return name
    return f"{SCHED_PREFIX}{name}"


def remove_scx_prefix(name: str) -> str:
    """Return *name* without its leading ``scx_`` prefix, if any."""
    if name.startswith(SCHED_PREFIX):
        return name[len(SCHED_PREFIX):]
    return name


def short_names(names: Iterable[str]) -> list[str]:
    """Strip the prefix from every name, preserving order."""
    return [remove_scx_prefix(name) for name in names]


def is_supported(name: str, supported: Iterable[str]) -> bool:
    """Check *name* against loader-reported names.

    Both the raw prefixed form and the short form are accepted.
    """
    raw = list(supported)
    return name in raw or name in short_names(raw)
