"""Shared pytest fixtures and configuration for the scxctl test suite.

Guidelines
----------
* No D-Bus access in any test.
* jeepney must be mocked at the connection boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state (sysfs, terminals).
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pytest

from fakes import FakeLoaderClient

from scxctl.core.loader_service import LoaderService


@pytest.fixture
def fake_client() -> FakeLoaderClient:
    return FakeLoaderClient()


@pytest.fixture
def use_fake_loader(
    monkeypatch: pytest.MonkeyPatch,
) -> Any:
    """Route ``scxctl.cli.app`` commands to a :class:`FakeLoaderClient`.

    Returns a function that installs and returns the fake.
    """
    from scxctl.cli import app as app_module

    def install(client: FakeLoaderClient | None = None) -> FakeLoaderClient:
        fake = client or FakeLoaderClient()

        @contextmanager
        def _fake_service(_settings: object) -> Iterator[LoaderService]:
            yield LoaderService(fake)

        monkeypatch.setattr(app_module, "_loader_service", _fake_service)
        return fake

    return install


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Keep ``SCXCTL_*`` variables and ``.env`` files out of tests."""
    for key in list(os.environ):
        if key.startswith("SCXCTL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
