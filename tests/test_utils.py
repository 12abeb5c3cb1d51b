from __future__ import annotations

import logging
import os
import subprocess

from wpfx import utils


def _completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(["sh"], returncode, stdout=stdout, stderr=stderr)


def test_get_resolution_parses_first_token(monkeypatch):
    seen = []

    def _run(argv, **kw):
        seen.append(argv)
        return _completed(stdout="3840x2160\n")

    monkeypatch.setattr(utils.subprocess, "run", _run)
    assert utils.get_resolution() == ("3840", "2160")
    assert seen[0][:2] == ["sh", "-c"]
    assert "xrandr" in seen[0][2]


def test_get_resolution_picks_token_out_of_noise(monkeypatch):
    monkeypatch.setattr(utils.subprocess, "run", lambda argv, **kw: _completed(stdout="mode 1280x1024 1024x768\n"))
    assert utils.get_resolution() == ("1280", "1024")


def test_get_resolution_falls_back_on_failure(monkeypatch, caplog):
    monkeypatch.setattr(
        utils.subprocess, "run",
        lambda argv, **kw: _completed(stderr="xrandr: not found", returncode=127),
    )
    with caplog.at_level(logging.WARNING, logger="wpfx.utils"):
        assert utils.get_resolution() == ("1920", "1080")
    assert "defaulting to 1920x1080" in caplog.text


def test_get_resolution_falls_back_on_empty_output(monkeypatch):
    monkeypatch.setattr(utils.subprocess, "run", lambda argv, **kw: _completed(stdout="\n"))
    assert utils.get_resolution() == ("1920", "1080")


def test_get_resolution_falls_back_when_shell_missing(monkeypatch, caplog):
    def _boom(argv, **kw):
        raise FileNotFoundError("sh")

    monkeypatch.setattr(utils.subprocess, "run", _boom)
    with caplog.at_level(logging.WARNING, logger="wpfx.utils"):
        assert utils.get_resolution() == ("1920", "1080")
    assert "could not execute xrandr" in caplog.text


def test_absolute_path():
    assert utils.absolute_path("/opt/games/pfx", cwd="/home/me") == "/opt/games/pfx"
    assert utils.absolute_path("pfx", cwd="/home/me/game") == "/home/me/game/pfx"
    # no normalization
    assert utils.absolute_path("../pfx", cwd="/home/me/game") == "/home/me/game/../pfx"


def test_absolute_path_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert utils.absolute_path("pfx") == os.path.join(os.getcwd(), "pfx")


def test_overlay_env_keeps_existing_values():
    current = {"PATH": "/usr/bin", "WINEPREFIX": "/mine"}
    merged = utils.overlay_env(current, {"WINEPREFIX": "/cfg", "WINEDLLOVERRIDES": "x=n"})
    assert merged == {"PATH": "/usr/bin", "WINEPREFIX": "/mine", "WINEDLLOVERRIDES": "x=n"}
    # input untouched
    assert current == {"PATH": "/usr/bin", "WINEPREFIX": "/mine"}


def test_overlay_env_empty_string_counts_as_set():
    merged = utils.overlay_env({"WINEPREFIX": ""}, {"WINEPREFIX": "/cfg"})
    assert merged["WINEPREFIX"] == ""
