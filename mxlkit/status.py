"""Status codes, the error type that carries them, and version information."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class Status(enum.IntEnum):
    """Outcome of an operation on flows and instances."""

    OK = 0
    UNKNOWN = 1
    FLOW_NOT_FOUND = 2
    OUT_OF_RANGE_TOO_LATE = 3
    OUT_OF_RANGE_TOO_EARLY = 4
    INVALID_FLOW_READER = 5
    INVALID_FLOW_WRITER = 6
    TIMEOUT = 7
    INVALID_ARG = 8
    CONFLICT = 9


class MxlError(Exception):
    """Raised where an operation ends with a status other than ``OK``."""

    def __init__(self, status: Status, message: Optional[str] = None) -> None:
        self.status = Status(status)
        self.message = message
        text = self.status.name if message is None else f"{self.status.name}: {message}"
        super().__init__(text)


@dataclass(frozen=True)
class VersionType:
    """A four part version number."""

    major: int
    minor: int
    bugfix: int
    build: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.bugfix}.{self.build}"


_VERSION = VersionType(major=0, minor=6, bugfix=0, build=0)


def get_version() -> VersionType:
    """Return the version of this SDK."""
    return _VERSION