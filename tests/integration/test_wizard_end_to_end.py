from __future__ import annotations

import asyncio
from datetime import date

import pytest

from core.models import TargetField
from intake.loaders import CSVLoader
from intake.wizard import (
    Back,
    ChooseDefaultTimezone,
    ConfirmMapping,
    ConfirmTimezone,
    Exit,
    Launch,
    MapColumn,
    Stage,
    WizardController,
    WizardSession,
)


@pytest.fixture()
def collaborators():
    launched = []
    navigation = []
    return launched, navigation, launched.append, lambda view, payload=None: navigation.append((view, payload))


@pytest.fixture()
def controller(collaborators):
    _, _, launcher, navigator = collaborators
    return WizardController(launcher, navigator, session=WizardSession(default_timezone="America/New_York"))


def test_ada_and_grace(controller, collaborators, write_csv, scenario_csv):
    launched, navigation, _, _ = collaborators

    session = asyncio.run(controller.load_file(write_csv(scenario_csv)))
    assert session.stage is Stage.MAPPING

    for name in ("first_name", "last_name", "company", "email", "state"):
        controller.dispatch(MapColumn(name, TargetField(name)))

    session = controller.dispatch(ConfirmMapping())
    assert session.stage is Stage.TIMEZONE
    ada, grace = session.batch.records
    assert ada.timezone == "America/Los_Angeles"
    assert session.batch.without_state == [grace]

    controller.dispatch(ChooseDefaultTimezone("America/Chicago"))
    session = controller.dispatch(ConfirmTimezone())
    assert session.stage is Stage.PREVIEW
    assert session.batch.records[1].first_name == "Grace"
    assert session.batch.records[1].timezone == "America/Chicago"

    assert controller.dispatch(Launch(date(2026, 10, 19))) is None

    assert controller.exit is Exit.LAUNCHED
    assert not controller.active
    (payload,) = launched
    assert payload.prospect_count == 2
    assert payload.campaign.status == "active"
    assert navigation == [("dashboard", payload.campaign)]

    with pytest.raises(RuntimeError):
        controller.session


def test_newer_file_wins_over_slower_read(controller, monkeypatch, write_csv, scenario_csv):
    slow = write_csv("email\nslow@x.com\n", "slow.csv")
    fast = write_csv(scenario_csv, "fast.csv")

    async def delayed_read(self):
        await asyncio.sleep(0.05 if self.file_path.name == "slow.csv" else 0)
        return self.read_text()

    monkeypatch.setattr(CSVLoader, "read_text_async", delayed_read)

    async def pick_both():
        await asyncio.gather(controller.load_file(slow), controller.load_file(fast))

    asyncio.run(pick_both())

    session = controller.session
    assert session.stage is Stage.MAPPING
    assert session.file_name == "fast.csv"
    assert session.parse_result.headers[0] == "first_name"


def test_unreadable_file_keeps_session(controller, tmp_path):
    session = asyncio.run(controller.load_file(tmp_path / "gone.csv"))
    assert session.stage is Stage.UPLOAD
    assert "gone.csv" in session.error
    assert session.parse_result is None


def test_back_from_upload_navigates_away(controller, collaborators):
    launched, navigation, _, _ = collaborators
    assert controller.dispatch(Back()) is None
    assert controller.exit is Exit.BACKWARD
    assert navigation == [("new-cadence", None)]
    assert launched == []
