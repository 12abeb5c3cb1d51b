from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from wpfx import settings


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty directory with no Wine variables set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WINEPREFIX", raising=False)
    monkeypatch.delenv("WINEDLLOVERRIDES", raising=False)
    return tmp_path


@pytest.fixture
def fake_resolution(monkeypatch):
    calls = []

    def _probe():
        calls.append(True)
        return ("2560", "1440")

    monkeypatch.setattr(settings, "get_resolution", _probe)
    return calls


@pytest.fixture
def mock_run_calls(monkeypatch):
    """Replace subprocess.run; returns (calls, set_returncode)."""
    calls = []
    state = {"returncode": 0}

    def _run(argv, **kw):
        calls.append((argv, kw))
        return subprocess.CompletedProcess(argv, state["returncode"])

    def set_returncode(code: int) -> None:
        state["returncode"] = code

    monkeypatch.setattr(subprocess, "run", _run)
    return calls, set_returncode
