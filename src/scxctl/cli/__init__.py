"""Command-line front end: argparse tree, console output, prompts, doctor.

Only this package writes to the terminal. ``core`` and ``infra`` raise
ScxctlError subclasses and leave rendering to :func:`scxctl.cli.app.cli`.
"""
