"""Domain models for scxctl.

Enumerations mirror the values the scx_loader daemon exchanges over
D-Bus.  :class:`SchedulerStatus` is a **frozen** dataclass — an
immutable snapshot with no behaviour beyond data access.  Nothing in
this module performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from scxctl.exceptions import InvalidModeError, ProtocolError, UnknownSchedulerError


# ---------------------------------------------------------------------------
# Scheduler mode
# ---------------------------------------------------------------------------

class SchedMode(IntEnum):
    """Operating profile requested from a scheduler.

    The integer value is what travels over D-Bus (signature ``u``).
    """

    AUTO = 0
    GAMING = 1
    POWER_SAVE = 2
    LOW_LATENCY = 3
    SERVER = 4

    @property
    def label(self) -> str:
        """CamelCase display form, e.g. ``"PowerSave"``."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def cli_name(self) -> str:
        """Kebab-case command-line form, e.g. ``"power-save"``."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_cli(cls, value: str) -> SchedMode:
        """Parse a kebab-case mode name as typed on the command line."""
        normalized = value.strip().lower().replace("_", "-")
        for mode in cls:
            if mode.cli_name == normalized:
                return mode
        raise InvalidModeError(
            f"invalid value '{value}' for '--mode <MODE>'",
            hint="possible values: " + ", ".join(m.cli_name for m in cls),
        )

    @classmethod
    def from_wire(cls, value: int) -> SchedMode:
        """Parse the integer reported by the loader."""
        try:
            return cls(value)
        except ValueError as exc:
            raise ProtocolError(
                f"Loader reported an unknown scheduler mode: {value!r}",
            ) from exc


# ---------------------------------------------------------------------------
# Supported schedulers
# ---------------------------------------------------------------------------

class SupportedSched(Enum):
    """Schedulers scxctl knows how to present.

    The value is the loader-side name, always carrying the ``scx_``
    prefix.
    """

    BPFLAND = "scx_bpfland"
    COSMOS = "scx_cosmos"
    FLASH = "scx_flash"
    LAVD = "scx_lavd"
    P2DQ = "scx_p2dq"
    TICKLESS = "scx_tickless"
    RUSTLAND = "scx_rustland"
    RUSTY = "scx_rusty"

    @property
    def label(self) -> str:
        """Display form used in status lines, e.g. ``"Lavd"``."""
        return _SCHED_LABELS.get(self, self.name.capitalize())

    @classmethod
    def from_name(cls, name: str) -> SupportedSched:
        """Parse a fully prefixed loader name (``scx_lavd``)."""
        try:
            return cls(name)
        except ValueError as exc:
            raise UnknownSchedulerError(
                f"Failed to parse scheduler '{name}'",
                hint="This scxctl release does not know that scheduler.",
            ) from exc


_SCHED_LABELS: dict[SupportedSched, str] = {
    SupportedSched.P2DQ: "P2DQ",
}


# ---------------------------------------------------------------------------
# Loader status snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SchedulerStatus:
    """What the loader reports about the running scheduler."""

    scheduler: SupportedSched | None
    """Running scheduler, or ``None`` when nothing is attached."""

    mode: SchedMode | None
    """Active mode; only queried when the scheduler runs without arguments."""

    args: tuple[str, ...] = ()
    """Explicit command-line arguments the scheduler was started with."""

    @property
    def running(self) -> bool:
        return self.scheduler is not None
