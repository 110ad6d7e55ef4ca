"""Regression tests for optional CLI UI dependencies (rich/questionary).

Bootstrap commands must keep working when the UI packages are missing,
and the interactive picker must fail cleanly only when it is actually
reached.
"""

from __future__ import annotations

import sys
from typing import Any
from unittest.mock import patch

import pytest

from scxctl.cli import exit_codes
from scxctl.cli.app import main
from scxctl.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_status_line_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    use_fake_loader: Any,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    use_fake_loader()

    assert main(["list"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out.strip() == (
        "supported schedulers: [bpfland, flash, lavd, p2dq, rusty]"
    )


@patch("scxctl.infra.dbus_loader.DbusLoaderClient")
@patch("scxctl.cli.doctor.probe_sched_ext")
def test_doctor_works_without_rich(
    mock_probe: Any,
    mock_client_cls: Any,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from scxctl.infra.sched_ext_probe import SchedExtStatus

    _hide_rich(monkeypatch)
    mock_probe.return_value = SchedExtStatus(supported=False, state=None, ops=None)
    client = mock_client_cls.return_value.__enter__.return_value
    client.current_scheduler.return_value = "unknown"

    code = main(["doctor"])
    assert code == exit_codes.SUCCESS


@patch("scxctl.cli.sched_prompt.is_interactive", return_value=True)
def test_interactive_start_errors_cleanly_when_questionary_missing(
    _mock_tty: Any,
    monkeypatch: pytest.MonkeyPatch,
    use_fake_loader: Any,
) -> None:
    _hide_questionary(monkeypatch)
    fake = use_fake_loader()

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main(["start"])
    assert fake.calls == []
