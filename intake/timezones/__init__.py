"""
Timezone resolution for Prospect Intake
"""

from .resolver import (
    DEFAULT_TIMEZONE,
    TIMEZONE_OPTIONS,
    SUPPORTED_TIMEZONES,
    US_STATE_TIMEZONES,
    TimezoneOption,
    resolve_from_state,
    detect_default,
    display_name,
    format_option,
    is_supported,
)

__all__ = [
    'DEFAULT_TIMEZONE', 'TIMEZONE_OPTIONS', 'SUPPORTED_TIMEZONES', 'US_STATE_TIMEZONES',
    'TimezoneOption', 'resolve_from_state', 'detect_default', 'display_name',
    'format_option', 'is_supported',
]
