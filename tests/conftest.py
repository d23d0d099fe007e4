from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # The pytest entrypoint does not guarantee the CWD is on sys.path.
    # Make the repository root (containing `tenfoot/`) importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()


@pytest.fixture(autouse=True)
def _isolate_tenfoot_env(monkeypatch):
    """Keep a developer's TENFOOT_* environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("TENFOOT_"):
            monkeypatch.delenv(name, raising=False)
