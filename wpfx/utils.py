import logging
import os
import re
import subprocess
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from . import DEFAULT_RESOLUTION

LOGGER = logging.getLogger(__name__)

# Largest connected mode first
XRANDR_PIPELINE = r"xrandr | grep ' connected' | grep -oP '\d+x\d+' | sort -nr | head -n 1"

_RESOLUTION_RE = re.compile(r"(\d+)x(\d+)")

def _fallback_resolution(reason: str) -> Tuple[str, str]:
    LOGGER.warning("%s; defaulting to %sx%s", reason, *DEFAULT_RESOLUTION)
    return DEFAULT_RESOLUTION

def parse_resolution(text: str) -> Optional[Tuple[str, str]]:
    m = _RESOLUTION_RE.search(text or "")
    if not m:
        return None
    return m.group(1), m.group(2)

def get_resolution() -> Tuple[str, str]:
    """Probe the current display size as (width, height) strings.

    Never fails: a missing shell, a non-zero exit or output without a
    WIDTHxHEIGHT token all degrade to DEFAULT_RESOLUTION with a warning.
    """
    try:
        out = subprocess.run(
            ["sh", "-c", XRANDR_PIPELINE],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return _fallback_resolution(f"could not execute xrandr: {e}")

    if out.returncode != 0 or not out.stdout.strip():
        return _fallback_resolution(
            f"xrandr did not exit successfully: {(out.stderr or '').strip()}"
        )

    res = parse_resolution(out.stdout)
    if res is None:
        return _fallback_resolution(f"unexpected xrandr output: {out.stdout.strip()!r}")
    return res

def absolute_path(path: str, cwd: Optional[str] = None) -> str:
    if Path(path).is_absolute():
        return path
    return os.path.join(cwd if cwd is not None else os.getcwd(), path)

def overlay_env(current: Mapping[str, str], defaults: Mapping[str, str]) -> Dict[str, str]:
    """Merge `defaults` under `current`: values already set in `current` win."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
    return merged
