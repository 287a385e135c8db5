"""Prospect Intake Core"""

from ._version import __version__
from .config import IntakeConfig, get_config, reload_config
from .models import (
    TargetField,
    ColumnMapping,
    ParseResult,
    ProspectRecord,
    ProspectBatch,
    MappingStatus,
    CampaignLaunch,
    LaunchPayload,
)

__all__ = [
    '__version__',
    'IntakeConfig', 'get_config', 'reload_config',
    'TargetField', 'ColumnMapping', 'ParseResult', 'ProspectRecord',
    'ProspectBatch', 'MappingStatus', 'CampaignLaunch', 'LaunchPayload',
]
