"""Interactive scheduler selection for ``scxctl start``.

Used when ``--sched`` is omitted on an interactive terminal.  The user
picks from the loader's supported list with questionary arrow keys;
the raw ``scx_``-prefixed name is returned.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from scxctl.core.naming import remove_scx_prefix
from scxctl.exceptions import EnvironmentError, InvalidSchedulerError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def is_interactive() -> bool:
    """True when both stdin and stdout are attached to a terminal."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def _build_choice_label(index: int, name: str) -> str:
    """Single-line label shown in the selector, e.g. ``"  1.  lavd"``."""
    return f"  {index + 1}.  {remove_scx_prefix(name)}"


def prompt_scheduler_selection(supported: Sequence[str]) -> str:
    """Prompt the user to choose one of *supported*.

    Raises
    ------
    InvalidSchedulerError
        If the loader supports nothing, or the prompt is cancelled.
    """
    if not supported:
        raise InvalidSchedulerError(
            "scx_loader reports no supported schedulers.",
            hint="Install at least one scx scheduler package.",
        )

    questionary = _import_questionary()

    choices = [
        questionary.Choice(title=_build_choice_label(i, name), value=name)
        for i, name in enumerate(supported)
    ]

    selected: str | None = questionary.select(
        "Select scheduler to start:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise InvalidSchedulerError(
            "No scheduler selected.",
            hint="Pass --sched <SCHED> or pick one with the arrow keys.",
        )

    return selected
