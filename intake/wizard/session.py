"""
Wizard session state

A WizardSession is an immutable snapshot of one upload: the stage, the parsed
file, the column mappings, the built batch and the chosen default timezone.
Transitions produce new sessions (see machine.py).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from core.config import DEFAULT_CALENDAR_INVITES_PER_DAY, IntakeConfig
from core.models import ColumnMapping, LaunchPayload, ParseResult, ProspectBatch
from intake.timezones import DEFAULT_TIMEZONE, detect_default, is_supported


class Stage(str, Enum):
    UPLOAD = 'upload'
    MAPPING = 'mapping'
    TIMEZONE = 'timezone'
    PREVIEW = 'preview'

    @property
    def number(self) -> int:
        return list(Stage).index(self) + 1

    @property
    def heading(self) -> str:
        return _STAGE_HEADINGS[self]


_STAGE_HEADINGS = {
    Stage.UPLOAD: 'Upload CSV',
    Stage.MAPPING: 'Field Mapping',
    Stage.TIMEZONE: 'Timezone Setup',
    Stage.PREVIEW: 'Preview & Launch',
}


class Exit(str, Enum):
    BACKWARD = 'backward'  # "back" from the first stage
    LAUNCHED = 'launched'


@dataclass(frozen=True)
class WizardSession:
    stage: Stage = Stage.UPLOAD
    default_timezone: str = DEFAULT_TIMEZONE
    calendar_invites_per_day: int = DEFAULT_CALENDAR_INVITES_PER_DAY

    # Upload
    file_name: Optional[str] = None
    pending_token: Optional[int] = None
    parse_result: Optional[ParseResult] = None

    # Mapping / build
    mappings: Tuple[ColumnMapping, ...] = ()
    batch: Optional[ProspectBatch] = None

    # User-facing messages: notice is informational, error blocks progress
    notice: Optional[str] = None
    error: Optional[str] = None

    # Launch
    exit: Optional[Exit] = None
    launch_payload: Optional[LaunchPayload] = None

    @classmethod
    def start(cls, config: Optional[IntakeConfig] = None) -> 'WizardSession':
        """
        New session at the upload stage. The default timezone is the configured
        override when it is supported, otherwise the detected host zone.
        """
        if config is None:
            return cls(default_timezone=detect_default())

        default_timezone = config.default_timezone
        if not is_supported(default_timezone):
            default_timezone = detect_default()

        return cls(
            default_timezone=default_timezone,
            calendar_invites_per_day=config.calendar_invites_per_day,
        )

    @property
    def is_finished(self) -> bool:
        return self.exit is not None

    @property
    def had_prospects_without_state(self) -> bool:
        return bool(self.batch and self.batch.without_state_indices)
