"""Argument parsing, command dispatch and the error boundary of scxctl.

Each subcommand maps to one handler that calls :class:`LoaderService`
and prints a single status line on stdout. :func:`cli` turns any
:class:`~scxctl.exceptions.ScxctlError` into ``error: <message>`` plus
its hint on stderr, and into an exit code from :mod:`exit_codes`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from scxctl.cli import exit_codes
from scxctl.cli.console import console, escape, print_status
from scxctl.config import LoaderSettings, load_settings
from scxctl.core.models import SchedMode
from scxctl.exceptions import ScxctlError, UsageError
from scxctl.logging import configure_logging
from scxctl.version import __version__

if TYPE_CHECKING:
    from scxctl.core.loader_service import LoaderService

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _split_args(value: str) -> list[str]:
    """Parse the comma-delimited ``--args`` value, dropping empty items."""
    parts = [part for part in value.split(",") if part]
    if not parts:
        raise argparse.ArgumentTypeError("expected at least one argument")
    return parts


def _add_service_arguments(
    parser: argparse.ArgumentParser,
    *,
    sched_help: str,
) -> None:
    """Add the ``--sched`` / ``--mode`` / ``--args`` trio shared by start and switch."""
    parser.add_argument("-s", "--sched", default=None, metavar="SCHED", help=sched_help)
    exclusive = parser.add_mutually_exclusive_group()
    exclusive.add_argument(
        "-m",
        "--mode",
        default=None,
        choices=[mode.cli_name for mode in SchedMode],
        help="Scheduler mode.",
    )
    exclusive.add_argument(
        "-a",
        "--args",
        default=None,
        type=_split_args,
        metavar="ARGS",
        help=(
            "Comma-separated arguments passed to the scheduler instead of a "
            "mode (use --args=-s,5000 when the first one starts with '-')."
        ),
    )


def _build_parser() -> argparse.ArgumentParser:
    """Global flags plus one subparser per loader operation and ``doctor``."""
    parser = argparse.ArgumentParser(
        prog="scxctl",
        description="Control sched_ext schedulers through the scx_loader D-Bus service.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log D-Bus traffic to stderr.",
    )
    parser.add_argument(
        "--bus",
        choices=("system", "session"),
        default=None,
        help="Message bus hosting scx_loader (default: system).",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.add_parser("get", help="Get the current scheduler and mode.")
    sub.add_parser("list", help="List all supported schedulers.")
    start = sub.add_parser("start", help="Start a scheduler in a mode or with arguments.")
    _add_service_arguments(
        start,
        sched_help="Scheduler to start (prompted for when omitted on a terminal).",
    )
    switch = sub.add_parser("switch", help="Switch the scheduler, its mode or its arguments.")
    _add_service_arguments(
        switch,
        sched_help="Scheduler to switch to (default: the running one).",
    )
    sub.add_parser("stop", help="Stop the current scheduler.")
    sub.add_parser("restart", help="Restart the current scheduler with its settings.")
    sub.add_parser("doctor", help="Check the environment scxctl depends on.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _report_error(message: str, hint: str | None, *, label: str | None = "error:") -> None:
    """Print *message* and its *hint* to stderr without Rich markup or emoji codes."""
    text = escape(message)
    if label is not None:
        text = f"[bold red]{label}[/bold red] {text}"
    console.print(text, emoji=False)
    if hint:
        console.print()
        console.print(escape(hint), emoji=False)



@contextmanager
def _loader_service(settings: LoaderSettings) -> Iterator[LoaderService]:
    """Open a D-Bus client for the duration of one command."""
    from scxctl.core.loader_service import LoaderService
    from scxctl.infra.dbus_loader import DbusLoaderClient

    with DbusLoaderClient(settings) as client:
        yield LoaderService(client)


def _mode_of(args: argparse.Namespace) -> SchedMode | None:
    return SchedMode.from_cli(args.mode) if args.mode is not None else None


def _handle_get(service: LoaderService, _args: argparse.Namespace) -> int:
    print_status(service.describe_status())
    return exit_codes.SUCCESS


def _handle_list(service: LoaderService, _args: argparse.Namespace) -> int:
    try:
        line = service.describe_supported()
    except ScxctlError as exc:
        logger.debug("Listing schedulers failed", exc_info=True)
        _report_error(f"scheduler list failed: {exc}", exc.hint, label=None)
        return exit_codes.GENERAL_ERROR
    print_status(line)
    return exit_codes.SUCCESS


def _handle_start(service: LoaderService, args: argparse.Namespace) -> int:
    sched_name: str | None = args.sched
    if sched_name is None:
        from scxctl.cli.sched_prompt import is_interactive, prompt_scheduler_selection

        if not is_interactive():
            raise UsageError(
                "the following required arguments were not provided: --sched <SCHED>",
            )
        # Fail fast before prompting when a scheduler already runs.
        service.check_scheduler_state(expecting_running=False)
        sched_name = prompt_scheduler_selection(service.supported_schedulers())

    print_status(service.start(sched_name, _mode_of(args), args.args))
    return exit_codes.SUCCESS


def _handle_switch(service: LoaderService, args: argparse.Namespace) -> int:
    print_status(service.switch(args.sched, _mode_of(args), args.args))
    return exit_codes.SUCCESS


def _handle_stop(service: LoaderService, _args: argparse.Namespace) -> int:
    print_status(service.stop())
    return exit_codes.SUCCESS


def _handle_restart(service: LoaderService, _args: argparse.Namespace) -> int:
    print_status(service.restart())
    return exit_codes.SUCCESS


_HANDLERS: dict[str, Callable[[LoaderService, argparse.Namespace], int]] = {
    "get": _handle_get,
    "list": _handle_list,
    "start": _handle_start,
    "switch": _handle_switch,
    "stop": _handle_stop,
    "restart": _handle_restart,
}


def _handle_doctor(settings: LoaderSettings) -> int:
    # Does not need a live loader connection up front.
    from scxctl.cli.doctor import run_doctor

    return run_doctor(settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Parse *argv* (default ``sys.argv[1:]``), run one command, return its exit code.

    ScxctlError propagates to the caller; :func:`cli` renders it.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    settings = load_settings(bus=args.bus)
    configure_logging("DEBUG" if args.verbose else settings.log_level)
    logger.debug("Running %r against %s bus", args.command, settings.bus)

    if args.command == "doctor":
        return _handle_doctor(settings)

    handler = _HANDLERS[args.command]
    with _loader_service(settings) as service:
        return handler(service, args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: run :func:`main` and exit with its status."""
    try:
        code = main()
        sys.exit(code)
    except ScxctlError as exc:
        _report_error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]interrupted[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]internal error:[/bold red] "
            f"{type(exc).__name__}: {escape(str(exc))}\n"
            "This is a bug in scxctl; please report it.",
            emoji=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
