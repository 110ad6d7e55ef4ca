"""scxctl — command-line control for the sched_ext scheduler loader.

Talks to the ``scx_loader`` daemon over D-Bus with a strict layered
architecture.
"""

from scxctl.version import __version__

__all__: list[str] = ["__version__"]
