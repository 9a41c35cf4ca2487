"""Pytest hooks and fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point every app-data lookup at an empty home and drop ambient settings."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("WSRPC_AGENT", raising=False)
    for name in list(os.environ):
        if name.startswith("DCRCTL_"):
            monkeypatch.delenv(name, raising=False)
    return home
