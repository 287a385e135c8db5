"""
Wizard actions

One frozen dataclass per user event the wizard reacts to.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union

from core.models import TargetField


@dataclass(frozen=True)
class SelectFile:
    """A file was picked; its read is in flight under `token`."""
    file_name: str
    token: int


@dataclass(frozen=True)
class FileLoaded:
    token: int
    text: str


@dataclass(frozen=True)
class FileFailed:
    token: int
    message: str


@dataclass(frozen=True)
class MapColumn:
    column: str
    target: Optional[TargetField] = None


@dataclass(frozen=True)
class ConfirmMapping:
    pass


@dataclass(frozen=True)
class ChooseDefaultTimezone:
    timezone: str


@dataclass(frozen=True)
class ConfirmTimezone:
    pass


@dataclass(frozen=True)
class Launch:
    launched_on: date = field(default_factory=date.today)


@dataclass(frozen=True)
class Back:
    pass


Action = Union[
    SelectFile, FileLoaded, FileFailed, MapColumn, ConfirmMapping,
    ChooseDefaultTimezone, ConfirmTimezone, Launch, Back,
]
