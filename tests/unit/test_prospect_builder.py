from __future__ import annotations

from core.models import ParseResult, TargetField
from intake.builders import backfill_timezones, build_batch
from intake.loaders import parse_csv_text
from intake.mappers import init_mappings, set_mapping


def _mapped(result: ParseResult, **targets):
    mappings = init_mappings(result)
    for column, target in targets.items():
        mappings = set_mapping(mappings, column, target)
    return mappings


def _scenario(scenario_csv):
    result = parse_csv_text(scenario_csv)
    mappings = _mapped(
        result,
        first_name=TargetField.FIRST_NAME,
        last_name=TargetField.LAST_NAME,
        company=TargetField.COMPANY,
        email=TargetField.EMAIL,
        state=TargetField.STATE,
    )
    return result, mappings


def test_build_projects_rows_in_order(scenario_csv):
    result, mappings = _scenario(scenario_csv)
    batch = build_batch(result.rows, mappings)

    assert [r.first_name for r in batch.records] == ["Ada", "Grace"]
    assert batch.records[0].company == "Analytical Engines"
    assert batch.records[0].email == "ada@x.com"


def test_state_derives_timezone(scenario_csv):
    result, mappings = _scenario(scenario_csv)
    batch = build_batch(result.rows, mappings)

    assert batch.records[0].timezone == "America/Los_Angeles"
    assert batch.records[1].timezone is None


def test_partition_by_state(scenario_csv):
    result, mappings = _scenario(scenario_csv)
    batch = build_batch(result.rows, mappings)

    assert [r.first_name for r in batch.with_state] == ["Ada"]
    assert [r.first_name for r in batch.without_state] == ["Grace"]
    assert len(batch.with_state) + len(batch.without_state) == len(result.rows)
    assert all(not r.has_state for r in batch.without_state)
    assert all(r.has_state for r in batch.with_state)


def test_whitespace_state_counts_as_missing():
    result = parse_csv_text('first,state\nAda," "\n')
    batch = build_batch(result.rows, _mapped(result, first=TargetField.FIRST_NAME, state=TargetField.STATE))
    assert batch.without_state_indices == (0,)
    assert batch.records[0].timezone is None


def test_unknown_state_still_gets_default_zone():
    result = parse_csv_text("first,state\nAda,ZZ\n")
    batch = build_batch(result.rows, _mapped(result, first=TargetField.FIRST_NAME, state=TargetField.STATE))
    assert batch.without_state_indices == ()
    assert batch.records[0].timezone == "America/New_York"


def test_state_unmapped_means_every_record_lacks_state(scenario_csv):
    result = parse_csv_text(scenario_csv)
    batch = build_batch(result.rows, _mapped(result, first_name=TargetField.FIRST_NAME))
    assert batch.without_state_indices == (0, 1)


def test_unmapped_columns_are_dropped():
    result = parse_csv_text("first,phone\nAda,555\n")
    batch = build_batch(result.rows, _mapped(result, first=TargetField.FIRST_NAME))
    assert batch.records[0].to_dict() == {
        "first_name": "Ada", "last_name": "", "title": None, "company": "",
        "state": None, "email": "", "timezone": None,
    }


def test_no_deduplication():
    result = parse_csv_text("email\na@x.com\na@x.com\n")
    batch = build_batch(result.rows, _mapped(result, email=TargetField.EMAIL))
    assert len(batch) == 2


def test_backfill_only_touches_missing_timezones(scenario_csv):
    result, mappings = _scenario(scenario_csv)
    batch = backfill_timezones(build_batch(result.rows, mappings), "America/Chicago")

    assert batch.records[0].timezone == "America/Los_Angeles"
    assert batch.records[1].timezone == "America/Chicago"
    assert batch.without_state_indices == (1,)


def test_backfill_again_replaces_previous_default(scenario_csv):
    result, mappings = _scenario(scenario_csv)
    batch = backfill_timezones(build_batch(result.rows, mappings), "America/Chicago")
    batch = backfill_timezones(batch, "Pacific/Honolulu")

    assert batch.records[0].timezone == "America/Los_Angeles"
    assert batch.records[1].timezone == "Pacific/Honolulu"
