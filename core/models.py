"""
Prospect Intake Data Models
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple, Literal


RawRow = Dict[str, str]


class TargetField(str, Enum):
    """Canonical prospect fields a source column can be mapped to."""
    FIRST_NAME = 'first_name'
    LAST_NAME = 'last_name'
    TITLE = 'title'
    COMPANY = 'company'
    STATE = 'state'
    EMAIL = 'email'

    @property
    def required(self) -> bool:
        return self in _REQUIRED_FIELDS

    @property
    def label(self) -> str:
        return _FIELD_LABELS[self]

    @classmethod
    def required_fields(cls) -> List['TargetField']:
        return [f for f in cls if f.required]

    @classmethod
    def parse(cls, value: str) -> Optional['TargetField']:
        """Look up a field by value or label, case-insensitive. None if unknown."""
        needle = (value or '').strip().lower()
        for f in cls:
            if needle in (f.value, f.label.lower()):
                return f
        return None


_REQUIRED_FIELDS = frozenset({
    TargetField.FIRST_NAME,
    TargetField.LAST_NAME,
    TargetField.COMPANY,
    TargetField.EMAIL,
})

_FIELD_LABELS = {
    TargetField.FIRST_NAME: 'First Name',
    TargetField.LAST_NAME: 'Last Name',
    TargetField.TITLE: 'Title',
    TargetField.COMPANY: 'Company',
    TargetField.STATE: 'State',
    TargetField.EMAIL: 'Email',
}


@dataclass(frozen=True)
class ColumnMapping:
    """One detected source column and the target field it feeds (None = unmapped)."""
    name: str
    sample_value: str = ""
    target: Optional[TargetField] = None
    assigned_seq: int = 0  # stamp of the last assignment, 0 while unmapped


@dataclass(frozen=True)
class ParseResult:
    """Headers and rows read from one CSV upload."""
    headers: Tuple[str, ...]
    rows: Tuple[RawRow, ...]
    truncated: bool = False
    total_row_count: int = 0

    @property
    def kept_row_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class ProspectRecord:
    """Canonical prospect built from one CSV row."""
    first_name: str = ""
    last_name: str = ""
    company: str = ""
    email: str = ""
    title: Optional[str] = None
    state: Optional[str] = None
    timezone: Optional[str] = None

    @property
    def has_state(self) -> bool:
        return bool(self.state and self.state.strip())

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            'first_name': self.first_name,
            'last_name': self.last_name,
            'title': self.title,
            'company': self.company,
            'state': self.state,
            'email': self.email,
            'timezone': self.timezone,
        }


@dataclass(frozen=True)
class ProspectBatch:
    """
    Ordered prospects plus the state/no-state partition.

    The partition is fixed when the batch is built; the views below always
    read the current records so a backfilled timezone is visible through them.
    """
    records: Tuple[ProspectRecord, ...] = ()
    without_state_indices: Tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    @property
    def without_state(self) -> List[ProspectRecord]:
        return [self.records[i] for i in self.without_state_indices]

    @property
    def with_state(self) -> List[ProspectRecord]:
        missing = set(self.without_state_indices)
        return [r for i, r in enumerate(self.records) if i not in missing]


@dataclass(frozen=True)
class MappingStatus:
    all_required_mapped: bool
    total_mapped_count: int
    missing_required: Tuple[TargetField, ...] = ()
    conflicts: Tuple[TargetField, ...] = ()


CampaignStatus = Literal['active', 'paused', 'completed']


@dataclass(frozen=True)
class CampaignLaunch:
    """What the campaign-launch collaborator receives."""
    prospect_count: int
    campaign_name: str
    status: CampaignStatus = 'active'


@dataclass(frozen=True)
class LaunchPayload:
    batch: ProspectBatch
    prospect_count: int
    timezone_distribution: Dict[str, int] = field(default_factory=dict)
    campaign: Optional[CampaignLaunch] = None
    launched_on: Optional[date] = None
