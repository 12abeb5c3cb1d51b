# wpfx/launch.py
from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Dict, List, Mapping, Optional

from . import DXVK_DLL_OVERRIDES, GAMESCOPE_BIN
from .errors import ErrorKind, WpfxError
from .models import AppConfig, Invocation
from .utils import absolute_path, overlay_env

LOGGER = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Small helpers
# ──────────────────────────────────────────────────────────────────────────────

def _gamescope_args(config: AppConfig) -> List[str]:
    gs = config.gamescope
    args = [
        "-W", gs.output_width,
        "-H", gs.output_height,
        "-w", gs.game_width,
        "-h", gs.game_height,
    ]
    if gs.relative_mouse:
        args.append("--force-grab-cursor")
    if gs.fullscreen:
        args.append("--fullscreen")
    # everything after the separator is the wrapped command
    args += ["--", config.runner]
    return args

def env_defaults(config: AppConfig, cwd: Optional[str] = None) -> Dict[str, str]:
    """Variables the child needs unless the caller already set them."""
    defaults = {"WINEPREFIX": absolute_path(config.prefix, cwd)}
    if config.dxvk:
        defaults["WINEDLLOVERRIDES"] = DXVK_DLL_OVERRIDES
    return defaults

# ──────────────────────────────────────────────────────────────────────────────
# Public API
# ──────────────────────────────────────────────────────────────────────────────

def create_command(
    config: AppConfig,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
) -> Invocation:
    """
    Compose the invocation for a config, without the executable to run.

    - gamescope disabled: the runner is launched directly.
    - gamescope enabled: gamescope is launched with the runner as its wrapped command.
    - WINEPREFIX (and WINEDLLOVERRIDES with dxvk) are injected unless already
      present in `environ` (a snapshot of os.environ by default).
    """
    if config.gamescope.enabled:
        inv = Invocation(GAMESCOPE_BIN, _gamescope_args(config))
    else:
        inv = Invocation(config.runner)

    current = dict(os.environ) if environ is None else environ
    inv.env = overlay_env(current, env_defaults(config, cwd))
    LOGGER.debug("WINEPREFIX=%s", inv.env["WINEPREFIX"])
    return inv

def run_invocation(invocation: Invocation) -> int:
    """
    Run the child with inherited stdio and wait for it.
    Returns its exit code, or the signal number if a signal killed it.
    """
    LOGGER.debug("Launching: %s", shlex.join(invocation.argv))
    try:
        p = subprocess.run(invocation.argv, env=invocation.env, check=False)
    except OSError as e:
        raise WpfxError(ErrorKind.COULD_NOT_EXECUTE_RUNNER, e) from e

    # Popen reports death-by-signal N as -N
    if p.returncode < 0:
        return -p.returncode
    return p.returncode
