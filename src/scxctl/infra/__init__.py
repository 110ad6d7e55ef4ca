"""Adapters to the outside world: the scx_loader D-Bus client and sysfs.

Errors leave this package as ScxctlError subclasses only, and nothing
here writes to the terminal.
"""

from scxctl.infra.dbus_loader import DbusLoaderClient
from scxctl.infra.sched_ext_probe import SchedExtStatus, probe_sched_ext

__all__: list[str] = [
    "DbusLoaderClient",
    "SchedExtStatus",
    "probe_sched_ext",
]
