"""
Derived summaries for the timezone and preview steps

Nothing here is stored on the session; every figure is recomputed from the
current batch and default timezone.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Sequence, Tuple

from core.config import DEFAULT_CALENDAR_INVITES_PER_DAY
from core.log import get_logger
from core.models import CampaignLaunch, LaunchPayload, ProspectBatch, ProspectRecord
from intake.timezones import TIMEZONE_OPTIONS

logger = get_logger(__name__)

PREVIEW_LIMIT = 5
WITHOUT_STATE_PREVIEW_LIMIT = 10


@dataclass(frozen=True)
class PreviewSummary:
    prospect_count: int
    estimated_days: int
    timezone_count: int
    timezone_distribution: Dict[str, int]
    first_records: Tuple[ProspectRecord, ...]

    @property
    def hidden_count(self) -> int:
        return self.prospect_count - len(self.first_records)


def timezone_distribution(records: Sequence[ProspectRecord], default_timezone: str) -> Dict[str, int]:
    """
    Count prospects per timezone, treating an unset timezone as the default.

    Returns:
        {zone: count}, supported zones first in option order, then any
        other zone in order of first appearance
    """
    counts: Dict[str, int] = {}
    for record in records:
        tz = record.timezone or default_timezone
        counts[tz] = counts.get(tz, 0) + 1

    ordered = {o.value: counts.pop(o.value) for o in TIMEZONE_OPTIONS if o.value in counts}
    ordered.update(counts)
    return ordered


def estimated_duration_days(prospect_count: int, invites_per_day: int) -> int:
    if prospect_count <= 0:
        return 0
    if invites_per_day <= 0:
        logger.warning(
            "Invalid calendar invites per day %r, using %d", invites_per_day, DEFAULT_CALENDAR_INVITES_PER_DAY,
        )
        invites_per_day = DEFAULT_CALENDAR_INVITES_PER_DAY
    return math.ceil(prospect_count / invites_per_day)


def preview_summary(batch: ProspectBatch, default_timezone: str, invites_per_day: int) -> PreviewSummary:
    distribution = timezone_distribution(batch.records, default_timezone)
    return PreviewSummary(
        prospect_count=len(batch),
        estimated_days=estimated_duration_days(len(batch), invites_per_day),
        timezone_count=len(distribution),
        timezone_distribution=distribution,
        first_records=batch.records[:PREVIEW_LIMIT],
    )


def without_state_preview(
    batch: ProspectBatch, limit: int = WITHOUT_STATE_PREVIEW_LIMIT
) -> Tuple[List[ProspectRecord], int]:
    """First `limit` prospects lacking a state, plus how many more there are."""
    missing = batch.without_state
    return missing[:limit], max(len(missing) - limit, 0)


def campaign_name(launched_on: date) -> str:
    return f"Campaign {launched_on.month}/{launched_on.day}/{launched_on.year}"


def launch_payload(batch: ProspectBatch, default_timezone: str, launched_on: date) -> LaunchPayload:
    return LaunchPayload(
        batch=batch,
        prospect_count=len(batch),
        timezone_distribution=timezone_distribution(batch.records, default_timezone),
        campaign=CampaignLaunch(
            prospect_count=len(batch),
            campaign_name=campaign_name(launched_on),
            status='active',
        ),
        launched_on=launched_on,
    )
