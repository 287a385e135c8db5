# Shared pytest fixtures
from __future__ import annotations

from pathlib import Path

import pytest

from core.log import reset_logging
from core.models import TargetField
from intake.wizard import FileLoaded, MapColumn, SelectFile, WizardSession, transition

SCENARIO_CSV = (
    "first_name,last_name,company,email,state\n"
    "Ada,Lovelace,Analytical Engines,ada@x.com,CA\n"
    "Grace,Hopper,Navy,grace@x.com,\n"
)

ENV_VARS = ("CALENDAR_INVITES_PER_DAY", "DEFAULT_TIMEZONE", "OUTPUT_DIR", "LOG_LEVEL", "TZ")


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def clean_env(monkeypatch):
    # setenv first so teardown also removes values loaded from .env files
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture()
def scenario_csv() -> str:
    return SCENARIO_CSV


@pytest.fixture()
def write_csv(tmp_path: Path):
    def _write(text: str, name: str = "prospects.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


def _map_same_name(session: WizardSession) -> WizardSession:
    for m in session.mappings:
        target = TargetField.parse(m.name)
        if target is not None:
            session = transition(session, MapColumn(m.name, target))
    return session


@pytest.fixture()
def map_same_name():
    """Map every column whose header is a target field name onto that field."""
    return _map_same_name


@pytest.fixture()
def loaded_session(scenario_csv) -> WizardSession:
    session = WizardSession(default_timezone="America/New_York")
    session = transition(session, SelectFile("prospects.csv", 1))
    return transition(session, FileLoaded(1, scenario_csv))
