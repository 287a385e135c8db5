from __future__ import annotations

import logging
from datetime import date

import pytest

from core.models import ProspectBatch, ProspectRecord
from intake.wizard import estimated_duration_days, launch_payload, preview_summary, timezone_distribution, without_state_preview


def _batch(*timezones):
    records = tuple(ProspectRecord(first_name=f"p{i}", timezone=tz) for i, tz in enumerate(timezones))
    missing = tuple(i for i, tz in enumerate(timezones) if tz is None)
    return ProspectBatch(records=records, without_state_indices=missing)


def test_distribution_counts_unset_as_default():
    batch = _batch("Pacific/Honolulu", None, "America/Chicago", None)
    assert timezone_distribution(batch.records, "America/Chicago") == {
        "America/Chicago": 3,
        "Pacific/Honolulu": 1,
    }


def test_distribution_follows_option_order():
    batch = _batch("Pacific/Honolulu", "America/New_York", "America/Denver")
    assert list(timezone_distribution(batch.records, "America/New_York")) == [
        "America/New_York", "America/Denver", "Pacific/Honolulu",
    ]


def test_estimated_duration_rounds_up():
    assert estimated_duration_days(51, 25) == 3
    assert estimated_duration_days(50, 25) == 2
    assert estimated_duration_days(1, 25) == 1
    assert estimated_duration_days(0, 25) == 0


@pytest.mark.parametrize("invites_per_day", [0, -3])
def test_estimated_duration_falls_back_on_invalid_rate(invites_per_day, caplog):
    with caplog.at_level(logging.WARNING, logger="prospect_intake"):
        assert estimated_duration_days(30, invites_per_day) == 2
    assert "Invalid calendar invites per day" in caplog.text


def test_preview_summary_with_zero_rate():
    summary = preview_summary(_batch("America/Denver"), "America/New_York", invites_per_day=0)
    assert summary.estimated_days == 1


def test_preview_summary_shows_first_five():
    batch = _batch(*(["America/Denver"] * 7))
    summary = preview_summary(batch, "America/New_York", invites_per_day=5)

    assert summary.prospect_count == 7
    assert summary.estimated_days == 2
    assert summary.timezone_count == 1
    assert [r.first_name for r in summary.first_records] == ["p0", "p1", "p2", "p3", "p4"]
    assert summary.hidden_count == 2


def test_without_state_preview_limits_to_ten():
    batch = _batch(*([None] * 13))
    shown, more = without_state_preview(batch)
    assert len(shown) == 10
    assert more == 3


def test_launch_payload_counts_whole_batch():
    batch = _batch(*(["America/Denver"] * 8))
    payload = launch_payload(batch, "America/New_York", date(2026, 10, 19))
    assert payload.prospect_count == 8
    assert len(payload.batch) == 8
    assert payload.campaign.prospect_count == 8
    assert payload.campaign.campaign_name == "Campaign 10/19/2026"
