"""
US timezone resolution

Maps US state codes to one of six supported IANA zones, detects the host's
local zone, and formats zones for display. Every lookup falls back to
DEFAULT_TIMEZONE instead of raising.
"""

import os
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional
import zoneinfo

from core.log import get_logger

logger = get_logger(__name__)


class TimezoneOption(NamedTuple):
    value: str
    label: str
    offset: str


DEFAULT_TIMEZONE = 'America/New_York'

TIMEZONE_OPTIONS: List[TimezoneOption] = [
    TimezoneOption('America/New_York', 'Eastern Time (ET)', 'UTC-5/-4'),
    TimezoneOption('America/Chicago', 'Central Time (CT)', 'UTC-6/-5'),
    TimezoneOption('America/Denver', 'Mountain Time (MT)', 'UTC-7/-6'),
    TimezoneOption('America/Los_Angeles', 'Pacific Time (PT)', 'UTC-8/-7'),
    TimezoneOption('America/Anchorage', 'Alaska Time (AKT)', 'UTC-9/-8'),
    TimezoneOption('Pacific/Honolulu', 'Hawaii Time (HST)', 'UTC-10'),
]

SUPPORTED_TIMEZONES = frozenset(option.value for option in TIMEZONE_OPTIONS)

_OPTIONS_BY_VALUE: Dict[str, TimezoneOption] = {o.value: o for o in TIMEZONE_OPTIONS}

_EASTERN = 'America/New_York'
_CENTRAL = 'America/Chicago'
_MOUNTAIN = 'America/Denver'
_PACIFIC = 'America/Los_Angeles'

# 50 states + DC. Each state goes to the zone covering most of its population.
US_STATE_TIMEZONES: Dict[str, str] = {
    # Eastern
    'CT': _EASTERN, 'DE': _EASTERN, 'FL': _EASTERN, 'GA': _EASTERN,
    'IN': _EASTERN, 'KY': _EASTERN, 'ME': _EASTERN, 'MD': _EASTERN,
    'MA': _EASTERN, 'MI': _EASTERN, 'NH': _EASTERN, 'NJ': _EASTERN,
    'NY': _EASTERN, 'NC': _EASTERN, 'OH': _EASTERN, 'PA': _EASTERN,
    'RI': _EASTERN, 'SC': _EASTERN, 'TN': _EASTERN, 'VT': _EASTERN,
    'VA': _EASTERN, 'WV': _EASTERN, 'DC': _EASTERN,

    # Central
    'AL': _CENTRAL, 'AR': _CENTRAL, 'IL': _CENTRAL, 'IA': _CENTRAL,
    'KS': _CENTRAL, 'LA': _CENTRAL, 'MN': _CENTRAL, 'MS': _CENTRAL,
    'MO': _CENTRAL, 'NE': _CENTRAL, 'ND': _CENTRAL, 'OK': _CENTRAL,
    'SD': _CENTRAL, 'TX': _CENTRAL, 'WI': _CENTRAL,

    # Mountain (Arizona keeps standard time but schedules as Mountain)
    'AZ': _MOUNTAIN, 'CO': _MOUNTAIN, 'ID': _MOUNTAIN, 'MT': _MOUNTAIN,
    'NV': _MOUNTAIN, 'NM': _MOUNTAIN, 'UT': _MOUNTAIN, 'WY': _MOUNTAIN,

    # Pacific
    'CA': _PACIFIC, 'OR': _PACIFIC, 'WA': _PACIFIC,

    'AK': 'America/Anchorage',
    'HI': 'Pacific/Honolulu',
}

_LOCALTIME = Path('/etc/localtime')
_TIMEZONE_FILE = Path('/etc/timezone')


def resolve_from_state(state_code: Optional[str]) -> str:
    """
    Resolve a US state code to its IANA timezone.

    Args:
        state_code: Two-letter code, any case, surrounding whitespace ignored

    Returns:
        IANA zone name; DEFAULT_TIMEZONE for blank or unknown codes

    Examples:
        >>> resolve_from_state(" ca ")
        "America/Los_Angeles"

        >>> resolve_from_state("ZZ")
        "America/New_York"
    """
    if not isinstance(state_code, str):
        return DEFAULT_TIMEZONE
    return US_STATE_TIMEZONES.get(state_code.strip().upper(), DEFAULT_TIMEZONE)


def is_supported(timezone: Optional[str]) -> bool:
    return timezone in SUPPORTED_TIMEZONES


def display_name(timezone: Optional[str]) -> str:
    """Label for a supported zone, e.g. "Central Time (CT)". Unknown zones get the Eastern label."""
    option = _OPTIONS_BY_VALUE.get(timezone) or _OPTIONS_BY_VALUE[DEFAULT_TIMEZONE]
    return option.label


def format_option(timezone: Optional[str]) -> str:
    option = _OPTIONS_BY_VALUE.get(timezone) or _OPTIONS_BY_VALUE[DEFAULT_TIMEZONE]
    return f"{option.label} ({option.offset})"


def _host_timezone() -> Optional[str]:
    """
    Best-effort IANA name of the host's local zone.

    Checked in order: the TZ variable, an /etc/localtime symlink into the zone
    database, then the name in /etc/timezone. Hosts with none of these (a copied
    /etc/localtime without /etc/timezone, Windows) yield None.
    """
    tz_env = os.environ.get('TZ', '').strip().lstrip(':')
    if tz_env:
        return tz_env

    if _LOCALTIME.is_symlink():
        target = _LOCALTIME.resolve()
        for base in zoneinfo.TZPATH:
            try:
                return target.relative_to(Path(base).resolve()).as_posix()
            except ValueError:
                continue

    if _TIMEZONE_FILE.is_file():
        name = _TIMEZONE_FILE.read_text().strip()
        if name:
            return name
    return None


def detect_default() -> str:
    """
    Detect the host's timezone, limited to the supported set.

    Returns:
        The host zone if it is one of TIMEZONE_OPTIONS, else DEFAULT_TIMEZONE
    """
    try:
        detected = _host_timezone()
    except Exception:
        logger.debug("Timezone detection failed", exc_info=True)
        return DEFAULT_TIMEZONE

    if detected in SUPPORTED_TIMEZONES:
        return detected

    logger.debug("Host timezone %r not supported, defaulting to %s", detected, DEFAULT_TIMEZONE)
    return DEFAULT_TIMEZONE
