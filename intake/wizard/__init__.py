"""
Prospect upload wizard
"""

from .actions import (
    Action,
    SelectFile,
    FileLoaded,
    FileFailed,
    MapColumn,
    ConfirmMapping,
    ChooseDefaultTimezone,
    ConfirmTimezone,
    Launch,
    Back,
)
from .session import Stage, Exit, WizardSession
from .machine import transition
from .summary import (
    PreviewSummary,
    preview_summary,
    timezone_distribution,
    estimated_duration_days,
    without_state_preview,
    launch_payload,
)
from .controller import WizardController

__all__ = [
    'Action', 'SelectFile', 'FileLoaded', 'FileFailed', 'MapColumn', 'ConfirmMapping',
    'ChooseDefaultTimezone', 'ConfirmTimezone', 'Launch', 'Back',
    'Stage', 'Exit', 'WizardSession', 'transition',
    'PreviewSummary', 'preview_summary', 'timezone_distribution', 'estimated_duration_days',
    'without_state_preview', 'launch_payload',
    'WizardController',
]
