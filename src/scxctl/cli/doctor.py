"""``scxctl doctor``: can this machine drive scx_loader?

Each check yields a ``(component, value, status)`` row. Status strings
carry Rich markup; the plain renderer strips them down to OK/WARN/FAIL.
A FAIL row makes the command exit non-zero, a WARN row does not.
"""

from __future__ import annotations

import platform
import sys

from scxctl.cli import exit_codes
from scxctl.cli.console import console, escape
from scxctl.config import LoaderSettings
from scxctl.core.naming import NO_SCHEDULER
from scxctl.exceptions import ScxctlError, append_loader_service_suggestion
from scxctl.infra.sched_ext_probe import probe_sched_ext
from scxctl.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _jeepney_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the jeepney row."""
    try:
        import jeepney
    except ImportError:
        return "jeepney", "NOT INSTALLED", "[red]FAIL[/red]"
    return "jeepney", getattr(jeepney, "__version__", "unknown"), "[green]OK[/green]"


def _loader_check(settings: LoaderSettings) -> tuple[str, str, str]:
    """Return (label, value, status) for the scx_loader row."""
    from scxctl.infra.dbus_loader import DbusLoaderClient

    try:
        with DbusLoaderClient(settings) as client:
            current = client.current_scheduler()
    except ScxctlError as exc:
        return "scx_loader", str(exc), "[red]FAIL[/red]"

    if current == NO_SCHEDULER:
        return "scx_loader", "reachable, no scheduler running", "[green]OK[/green]"
    return "scx_loader", f"reachable, running {current}", "[green]OK[/green]"


def _sched_ext_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the kernel sched_ext row."""
    status = probe_sched_ext()
    if not status.supported:
        return "sched_ext", "not supported by kernel", "[yellow]WARN[/yellow]"
    if status.enabled and status.ops:
        return "sched_ext", f"enabled ({status.ops})", "[green]OK[/green]"
    return "sched_ext", status.state or "unknown", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system = platform.system()
    value = f"{system} {platform.release()} ({platform.machine()})"
    status = "[green]OK[/green]" if system == "Linux" else "[yellow]WARN[/yellow]"
    return "OS", value, status


def _scxctl_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the scxctl version row."""
    return "scxctl", __version__, "[green]OK[/green]"


_PLAIN_STATUSES: tuple[str, ...] = ("FAIL", "WARN", "OK")


def _status_plain(status: str) -> str:
    """Drop the Rich markup around a status cell."""
    return next((word for word in _PLAIN_STATUSES if word in status), status)


def _render_plain(checks: list[Check]) -> None:
    rows = [(label, value, _status_plain(status)) for label, value, status in checks]
    value_width = max([40, *(len(value) for _, value, _ in rows)])
    rule = "-" * (12 + value_width + 10)

    print("\nscxctl doctor", file=sys.stderr)
    print(rule, file=sys.stderr)
    for label, value, status in rows:
        print(f"{label:<12}{value:<{value_width}}  {status}", file=sys.stderr)
    print(rule, file=sys.stderr)


def _render_rich(checks: list[Check], table_class: type) -> None:
    table = table_class(
        title="scxctl doctor",
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, escape(value), status)

    console.print()
    console.print(table)
    console.print()


def _collect(settings: LoaderSettings) -> list[Check]:
    jeepney_row = _jeepney_version_check()
    checks = [
        _scxctl_version_check(),
        _python_version_check(),
        _os_check(),
        _sched_ext_check(),
        jeepney_row,
    ]
    # Talking to the loader needs jeepney.
    if "FAIL" not in jeepney_row[2]:
        checks.append(_loader_check(settings))
    return checks


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: LoaderSettings) -> int:
    """Run every check and print the summary to stderr.

    Returns :data:`exit_codes.GENERAL_ERROR` when any row failed, else
    :data:`exit_codes.SUCCESS`.
    """
    checks = _collect(settings)
    failed = [label for label, _, status in checks if "FAIL" in status]

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _render_plain(checks)
        summary = f"Failed: {', '.join(failed)}." if failed else "All checks passed."
    else:
        _render_rich(checks, Table)
        summary = (
            f"[bold red]Failed: {escape(', '.join(failed))}.[/bold red]"
            if failed
            else "[bold green]All checks passed.[/bold green]"
        )
    console.print(summary)

    if "scx_loader" in failed:
        console.print(escape(append_loader_service_suggestion(None)))
    return exit_codes.GENERAL_ERROR if failed else exit_codes.SUCCESS
