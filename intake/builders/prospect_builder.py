"""
Prospect batch builder

Projects parsed CSV rows through the column mapping into ProspectRecords and
splits them by whether a US state was supplied.
"""

from dataclasses import replace
from typing import Dict, List, Sequence

from core.log import get_logger
from core.models import ColumnMapping, ProspectBatch, ProspectRecord, RawRow, TargetField
from intake.mappers.field_mapper import effective_mapping
from intake.timezones import resolve_from_state

logger = get_logger(__name__)


def build_record(row: RawRow, columns: Dict[TargetField, str]) -> ProspectRecord:
    values = {target.value: row.get(column, '') for target, column in columns.items()}

    state = values.get(TargetField.STATE.value)
    timezone = resolve_from_state(state) if state and state.strip() else None

    return ProspectRecord(
        first_name=values.get(TargetField.FIRST_NAME.value, ''),
        last_name=values.get(TargetField.LAST_NAME.value, ''),
        company=values.get(TargetField.COMPANY.value, ''),
        email=values.get(TargetField.EMAIL.value, ''),
        title=values.get(TargetField.TITLE.value),
        state=state,
        timezone=timezone,
    )


def build_batch(rows: Sequence[RawRow], mappings: Sequence[ColumnMapping]) -> ProspectBatch:
    """
    Build the prospect batch for the current mapping.

    Args:
        rows: Parsed rows in file order
        mappings: Column mappings; unmapped columns are dropped

    Returns:
        ProspectBatch in row order (no dedup), with the indices of
        records lacking a state
    """
    columns = effective_mapping(mappings)

    records: List[ProspectRecord] = []
    without_state: List[int] = []
    for index, row in enumerate(rows):
        record = build_record(row, columns)
        if not record.has_state:
            without_state.append(index)
        records.append(record)

    logger.info(
        "Built %d prospects (%d with state, %d without)",
        len(records), len(records) - len(without_state), len(without_state),
    )
    return ProspectBatch(records=tuple(records), without_state_indices=tuple(without_state))


def backfill_timezones(batch: ProspectBatch, default_timezone: str) -> ProspectBatch:
    """
    Give every prospect without a state-derived timezone the default.

    State-less records are refilled on every call, so confirming a different
    default replaces the previous one. Resolved records are left alone.
    """
    missing = set(batch.without_state_indices)
    records = tuple(
        replace(r, timezone=default_timezone) if i in missing or not r.timezone else r
        for i, r in enumerate(batch.records)
    )
    return replace(batch, records=records)
