from enum import IntEnum
from typing import Optional


class ErrorKind(IntEnum):
    """Failure categories; the value is the process exit code."""

    CREATING_CONFIG_FILE = 1
    READING_CONFIG_FILE = 2
    WRITING_CONFIG_FILE = 3
    PARSING_CONFIG_FILE = 4
    CONFIG_ALREADY_EXISTS = 5
    COULD_NOT_EXECUTE_RUNNER = 6
    COULD_NOT_CREATE_PREFIX = 7
    NO_EXE_PROVIDED = 8

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.CREATING_CONFIG_FILE: "Failed creating config file",
    ErrorKind.READING_CONFIG_FILE: "Failed reading config file",
    ErrorKind.WRITING_CONFIG_FILE: "Failed writing config file",
    ErrorKind.PARSING_CONFIG_FILE: "Failed parsing config file",
    ErrorKind.CONFIG_ALREADY_EXISTS: "Configuration file already exists",
    ErrorKind.COULD_NOT_EXECUTE_RUNNER: "Failed to execute wine runner",
    ErrorKind.COULD_NOT_CREATE_PREFIX: "Could not create prefix directory",
    ErrorKind.NO_EXE_PROVIDED: (
        "No executable was provided, either in wpfx.toml (as 'executable') "
        "or as an argument to run"
    ),
}


class WpfxError(Exception):
    """Fatal error carrying the kind that decides the exit code."""

    def __init__(self, kind: ErrorKind, detail: Optional[object] = None):
        self.kind = kind
        self.detail = detail
        super().__init__(str(self))

    @property
    def exit_code(self) -> int:
        return int(self.kind)

    def __str__(self) -> str:
        if self.detail is None:
            return self.kind.message
        return f"{self.kind.message}: {self.detail}"
