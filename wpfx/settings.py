import logging
import tomllib
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w

from . import DEFAULT_PREFIX, DEFAULT_RUNNER
from .errors import ErrorKind, WpfxError
from .models import AppConfig, GamescopeConfig
from .utils import absolute_path, get_resolution

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]

def default_config() -> AppConfig:
    width, height = get_resolution()
    return AppConfig(
        executable=None,
        runner=DEFAULT_RUNNER,
        prefix=DEFAULT_PREFIX,
        dxvk=False,
        gamescope=GamescopeConfig(
            enabled=False,
            output_width=width,
            output_height=height,
            game_width=width,
            game_height=height,
            fullscreen=True,
            relative_mouse=False,
        ),
    )

# --- TOML codec ---

def _field(table: Dict[str, Any], key: str, kind: type, where: str) -> Any:
    if key not in table:
        raise WpfxError(ErrorKind.PARSING_CONFIG_FILE, f"missing field `{key}` in {where}")
    value = table[key]
    if not isinstance(value, kind):
        raise WpfxError(
            ErrorKind.PARSING_CONFIG_FILE,
            f"field `{key}` in {where} must be a {_TYPE_NAMES[kind]}",
        )
    return value

_TYPE_NAMES = {str: "string", bool: "boolean", dict: "table"}

def config_from_toml(text: str) -> AppConfig:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise WpfxError(ErrorKind.PARSING_CONFIG_FILE, e) from e

    gs = _field(data, "gamescope", dict, "config")
    executable = data.get("executable")
    if executable is not None and not isinstance(executable, str):
        raise WpfxError(ErrorKind.PARSING_CONFIG_FILE, "field `executable` in config must be a string")

    return AppConfig(
        executable=executable,
        runner=_field(data, "runner", str, "config"),
        prefix=_field(data, "prefix", str, "config"),
        dxvk=_field(data, "dxvk", bool, "config"),
        gamescope=GamescopeConfig(
            enabled=_field(gs, "enabled", bool, "[gamescope]"),
            output_width=_field(gs, "output_width", str, "[gamescope]"),
            output_height=_field(gs, "output_height", str, "[gamescope]"),
            game_width=_field(gs, "game_width", str, "[gamescope]"),
            game_height=_field(gs, "game_height", str, "[gamescope]"),
            fullscreen=_field(gs, "fullscreen", bool, "[gamescope]"),
            relative_mouse=_field(gs, "relative_mouse", bool, "[gamescope]"),
        ),
    )

def config_to_toml(config: AppConfig) -> str:
    data = asdict(config)
    # TOML has no null; an unset executable is simply left out
    if data.get("executable") is None:
        data.pop("executable", None)
    return tomli_w.dumps(data)

# --- file operations ---

def _create_config_file(path: Path, config: AppConfig) -> None:
    """Write `config` to a file that must not exist yet."""
    text = config_to_toml(config)
    try:
        f = open(path, "x", encoding="utf-8")
    except FileExistsError:
        raise
    except OSError as e:
        raise WpfxError(ErrorKind.CREATING_CONFIG_FILE, e) from e
    with f:
        try:
            f.write(text)
        except OSError as e:
            raise WpfxError(ErrorKind.WRITING_CONFIG_FILE, e) from e

def read_or_init_config(path: PathLike) -> AppConfig:
    """Load the config at `path`, creating it with defaults when missing."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        LOGGER.warning("%s file not found, creating it", path.name)
        config = default_config()
        try:
            _create_config_file(path, config)
        except FileExistsError as e:
            raise WpfxError(ErrorKind.CREATING_CONFIG_FILE, e) from e
        return config
    except (OSError, UnicodeDecodeError) as e:
        raise WpfxError(ErrorKind.READING_CONFIG_FILE, e) from e
    return config_from_toml(text)

def init_config(path: PathLike) -> AppConfig:
    """Write a default config to `path`, which must not exist yet."""
    path = Path(path)
    if path.exists():
        raise WpfxError(ErrorKind.CONFIG_ALREADY_EXISTS)

    config = default_config()
    try:
        _create_config_file(path, config)
    except FileExistsError:
        raise WpfxError(ErrorKind.CONFIG_ALREADY_EXISTS) from None
    return config

def create_prefix(config: AppConfig, cwd: Optional[str] = None) -> bool:
    """Create the prefix directory; False when it already existed."""
    prefix = Path(absolute_path(config.prefix, cwd))
    try:
        prefix.mkdir()
    except FileExistsError:
        return False
    except OSError as e:
        raise WpfxError(ErrorKind.COULD_NOT_CREATE_PREFIX, e) from e
    return True
