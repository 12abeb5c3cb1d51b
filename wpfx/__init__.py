import logging
import os

__version__ = "0.3.0"

# Fixed location in the working directory unless overridden
CONFIG_PATH = os.environ.get("WPFX_CONFIG", "wpfx.toml")
GAMESCOPE_BIN = os.environ.get("WPFX_GAMESCOPE", "gamescope")
LOG_LEVEL = os.environ.get("WPFX_LOG_LEVEL", "WARNING")

DEFAULT_RUNNER = "wine"
DEFAULT_PREFIX = "pfx"
DEFAULT_RESOLUTION = ("1920", "1080")
DXVK_DLL_OVERRIDES = "dxgi,d3d11,d3d10core,d3d9=n,b"


def resolve_log_level(name: str) -> int:
    """Map a level name to its number; unknown names mean WARNING."""
    return logging.getLevelNamesMapping().get(name.strip().upper(), logging.WARNING)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(levelname)s: %(message)s",
    )
