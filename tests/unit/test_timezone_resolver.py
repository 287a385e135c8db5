from __future__ import annotations

import pytest

from intake.timezones import (
    DEFAULT_TIMEZONE,
    SUPPORTED_TIMEZONES,
    TIMEZONE_OPTIONS,
    US_STATE_TIMEZONES,
    detect_default,
    display_name,
    format_option,
    resolve_from_state,
)
from intake.timezones import resolver


def test_state_table_covers_states_and_dc():
    assert len(US_STATE_TIMEZONES) == 51
    assert "DC" in US_STATE_TIMEZONES


def test_every_state_maps_into_supported_set():
    assert set(US_STATE_TIMEZONES.values()) <= SUPPORTED_TIMEZONES


def test_resolve_is_case_insensitive():
    assert resolve_from_state("ca") == resolve_from_state("CA") == "America/Los_Angeles"


@pytest.mark.parametrize("code, expected", [
    (" tx ", "America/Chicago"),
    ("NY", "America/New_York"),
    ("co", "America/Denver"),
    ("AK", "America/Anchorage"),
    ("hi", "Pacific/Honolulu"),
    ("AL", "America/Chicago"),
])
def test_resolve_known_states(code, expected):
    assert resolve_from_state(code) == expected


@pytest.mark.parametrize("code", ["ZZ", "", "   ", "California", None])
def test_resolve_unknown_falls_back_to_eastern(code):
    assert resolve_from_state(code) == "America/New_York"


def test_display_name_known_and_unknown():
    assert display_name("America/Chicago") == "Central Time (CT)"
    assert display_name("Europe/Paris") == "Eastern Time (ET)"
    assert display_name(None) == "Eastern Time (ET)"


def test_format_option_includes_offset():
    assert format_option("Pacific/Honolulu") == "Hawaii Time (HST) (UTC-10)"


def test_six_supported_zones():
    assert [o.value for o in TIMEZONE_OPTIONS] == [
        "America/New_York",
        "America/Chicago",
        "America/Denver",
        "America/Los_Angeles",
        "America/Anchorage",
        "Pacific/Honolulu",
    ]


def test_detect_default_uses_supported_host_zone(clean_env):
    clean_env.setenv("TZ", "America/Denver")
    assert detect_default() == "America/Denver"


def test_detect_default_rejects_unsupported_zone(clean_env):
    clean_env.setenv("TZ", "Europe/Berlin")
    assert detect_default() == DEFAULT_TIMEZONE


def test_detect_default_never_raises(monkeypatch):
    def broken():
        raise OSError("no tz database")

    monkeypatch.setattr(resolver, "_host_timezone", broken)
    assert detect_default() == DEFAULT_TIMEZONE


def test_detect_default_without_any_source(monkeypatch):
    monkeypatch.setattr(resolver, "_host_timezone", lambda: None)
    assert detect_default() == DEFAULT_TIMEZONE


def test_detect_default_reads_timezone_file(clean_env, tmp_path):
    copied = tmp_path / "localtime"
    copied.write_bytes(b"TZif")
    tz_file = tmp_path / "timezone"
    tz_file.write_text("America/Chicago\n")

    clean_env.setattr(resolver, "_LOCALTIME", copied)
    clean_env.setattr(resolver, "_TIMEZONE_FILE", tz_file)
    assert detect_default() == "America/Chicago"


def test_detect_default_with_copied_localtime_only(clean_env, tmp_path):
    copied = tmp_path / "localtime"
    copied.write_bytes(b"TZif")

    clean_env.setattr(resolver, "_LOCALTIME", copied)
    clean_env.setattr(resolver, "_TIMEZONE_FILE", tmp_path / "missing")
    assert resolver._host_timezone() is None
    assert detect_default() == DEFAULT_TIMEZONE
