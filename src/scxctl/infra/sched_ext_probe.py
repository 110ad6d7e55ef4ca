"""Infrastructure: kernel sched_ext detection.

This module reads the sched_ext sysfs interface to tell whether the
running kernel supports extensible schedulers and which BPF scheduler,
if any, is attached.

Rules
-----
* Read-only access to sysfs — no writes, no subprocess.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SCHED_EXT_ROOT: Path = Path("/sys/kernel/sched_ext")


# ---------------------------------------------------------------------------
# Probe result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SchedExtStatus:
    """Result of a sched_ext sysfs probe.

    Attributes
    ----------
    supported : bool
        Whether the kernel exposes the sched_ext sysfs directory.
    state : str | None
        Contents of ``state`` (``"enabled"``, ``"disabled"``, …).
    ops : str | None
        Name of the attached BPF scheduler, when one is enabled.
    """

    supported: bool
    state: str | None
    ops: str | None

    @property
    def enabled(self) -> bool:
        return self.state == "enabled"


# ---------------------------------------------------------------------------
# Probe logic
# ---------------------------------------------------------------------------

def _read_attr(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8").strip() or None
    except OSError:
        return None


def probe_sched_ext(root: Path = SCHED_EXT_ROOT) -> SchedExtStatus:
    """Inspect *root* and report sched_ext availability.

    Returns a :class:`SchedExtStatus` regardless of the outcome — the
    caller decides whether to abort or merely warn.
    """
    if not root.is_dir():
        return SchedExtStatus(supported=False, state=None, ops=None)

    state = _read_attr(root / "state")
    ops = _read_attr(root / "root" / "ops") if state == "enabled" else None
    return SchedExtStatus(supported=True, state=state, ops=ops)
