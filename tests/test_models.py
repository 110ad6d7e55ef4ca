"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import pytest

from scxctl.core.models import SchedMode, SchedulerStatus, SupportedSched
from scxctl.exceptions import InvalidModeError, ProtocolError, UnknownSchedulerError


# ---------------------------------------------------------------------------
# SchedMode
# ---------------------------------------------------------------------------

class TestSchedMode:
    @pytest.mark.parametrize(
        ("mode", "wire"),
        [
            (SchedMode.AUTO, 0),
            (SchedMode.GAMING, 1),
            (SchedMode.POWER_SAVE, 2),
            (SchedMode.LOW_LATENCY, 3),
            (SchedMode.SERVER, 4),
        ],
    )
    def test_wire_values(self, mode: SchedMode, wire: int) -> None:
        assert int(mode) == wire
        assert SchedMode.from_wire(wire) is mode

    def test_labels_are_camel_case(self) -> None:
        assert SchedMode.AUTO.label == "Auto"
        assert SchedMode.POWER_SAVE.label == "PowerSave"
        assert SchedMode.LOW_LATENCY.label == "LowLatency"

    def test_cli_names_are_kebab_case(self) -> None:
        assert [m.cli_name for m in SchedMode] == [
            "auto", "gaming", "power-save", "low-latency", "server",
        ]

    @pytest.mark.parametrize("value", ["power-save", "POWER-SAVE", "power_save", " power-save "])
    def test_from_cli_is_lenient(self, value: str) -> None:
        assert SchedMode.from_cli(value) is SchedMode.POWER_SAVE

    def test_from_cli_rejects_unknown(self) -> None:
        with pytest.raises(InvalidModeError, match="invalid value 'turbo'") as exc_info:
            SchedMode.from_cli("turbo")
        assert exc_info.value.hint is not None
        assert "low-latency" in exc_info.value.hint

    def test_from_wire_rejects_unknown(self) -> None:
        with pytest.raises(ProtocolError, match="unknown scheduler mode"):
            SchedMode.from_wire(42)


# ---------------------------------------------------------------------------
# SupportedSched
# ---------------------------------------------------------------------------

class TestSupportedSched:
    def test_values_carry_prefix(self) -> None:
        assert all(s.value.startswith("scx_") for s in SupportedSched)

    def test_from_name(self) -> None:
        assert SupportedSched.from_name("scx_lavd") is SupportedSched.LAVD

    def test_from_name_requires_prefix(self) -> None:
        with pytest.raises(UnknownSchedulerError):
            SupportedSched.from_name("lavd")

    def test_from_name_unknown(self) -> None:
        with pytest.raises(UnknownSchedulerError, match="Failed to parse scheduler 'scx_nope'"):
            SupportedSched.from_name("scx_nope")

    @pytest.mark.parametrize(
        ("sched", "label"),
        [
            (SupportedSched.BPFLAND, "Bpfland"),
            (SupportedSched.LAVD, "Lavd"),
            (SupportedSched.P2DQ, "P2DQ"),
            (SupportedSched.RUSTY, "Rusty"),
        ],
    )
    def test_labels(self, sched: SupportedSched, label: str) -> None:
        assert sched.label == label


# ---------------------------------------------------------------------------
# SchedulerStatus
# ---------------------------------------------------------------------------

class TestSchedulerStatus:
    def test_not_running(self) -> None:
        status = SchedulerStatus(scheduler=None, mode=None)
        assert status.running is False
        assert status.args == ()

    def test_running(self) -> None:
        status = SchedulerStatus(scheduler=SupportedSched.LAVD, mode=SchedMode.AUTO)
        assert status.running is True

    def test_frozen(self) -> None:
        status = SchedulerStatus(scheduler=None, mode=None)
        with pytest.raises(AttributeError):
            status.mode = SchedMode.GAMING  # type: ignore[misc]
