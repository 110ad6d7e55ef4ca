"""In-memory test doubles shared across the scxctl test suite."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from scxctl.core.models import SchedMode

SUPPORTED: list[str] = ["scx_bpfland", "scx_flash", "scx_lavd", "scx_p2dq", "scx_rusty"]


class FakeLoaderClient:
    """In-memory stand-in for the scx_loader D-Bus interface.

    Mutating calls update the fake state and are recorded in
    :attr:`calls` as ``(method, *args)`` tuples.
    """

    def __init__(
        self,
        *,
        current: str = "unknown",
        mode: SchedMode = SchedMode.AUTO,
        args: Sequence[str] = (),
        supported: Sequence[str] = SUPPORTED,
    ) -> None:
        self.current = current
        self.mode = mode
        self.args = list(args)
        self.supported = list(supported)
        self.calls: list[tuple[Any, ...]] = []

    def current_scheduler(self) -> str:
        return self.current

    def current_scheduler_args(self) -> list[str]:
        return list(self.args)

    def scheduler_mode(self) -> SchedMode:
        return self.mode

    def supported_schedulers(self) -> list[str]:
        return list(self.supported)

    def start_scheduler(self, name: str, mode: SchedMode) -> None:
        self.calls.append(("start_scheduler", name, mode))
        self.current, self.mode, self.args = name, mode, []

    def start_scheduler_with_args(self, name: str, args: Sequence[str]) -> None:
        self.calls.append(("start_scheduler_with_args", name, list(args)))
        self.current, self.args = name, list(args)

    def switch_scheduler(self, name: str, mode: SchedMode) -> None:
        self.calls.append(("switch_scheduler", name, mode))
        self.current, self.mode, self.args = name, mode, []

    def switch_scheduler_with_args(self, name: str, args: Sequence[str]) -> None:
        self.calls.append(("switch_scheduler_with_args", name, list(args)))
        self.current, self.args = name, list(args)

    def stop_scheduler(self) -> None:
        self.calls.append(("stop_scheduler",))
        self.current, self.args = "unknown", []

    def restart_scheduler(self) -> None:
        self.calls.append(("restart_scheduler",))
