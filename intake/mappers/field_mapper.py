"""
Field mapper

Tracks which source column feeds which prospect field. Mapping is entirely
user-directed: columns start unmapped and nothing is guessed from header names.

When two columns are mapped to the same field, both assignments are kept and
the most recently assigned column is the one whose values are used.
"""

from typing import Dict, Optional, Sequence, Tuple

from core.log import get_logger
from core.models import ColumnMapping, MappingStatus, ParseResult, TargetField

logger = get_logger(__name__)

Mappings = Tuple[ColumnMapping, ...]


def init_mappings(parse_result: ParseResult) -> Mappings:
    """One unmapped entry per header, sampled from the first row."""
    first_row = parse_result.rows[0] if parse_result.rows else {}
    return tuple(
        ColumnMapping(name=header, sample_value=first_row.get(header, ''))
        for header in parse_result.headers
    )


def set_mapping(
    mappings: Sequence[ColumnMapping],
    column_name: str,
    target: Optional[TargetField],
) -> Mappings:
    """
    Point one column at a target field, or unmap it with target=None.

    Args:
        mappings: Current column mappings
        column_name: Source column to change
        target: Field to map to, None for "don't map"

    Returns:
        New mappings tuple; unchanged if no column has that name
    """
    if not any(m.name == column_name for m in mappings):
        logger.debug("Ignoring mapping for unknown column %r", column_name)
        return tuple(mappings)

    next_seq = max((m.assigned_seq for m in mappings), default=0) + 1

    updated = []
    for m in mappings:
        if m.name != column_name:
            updated.append(m)
        elif target is None:
            updated.append(ColumnMapping(m.name, m.sample_value))
        else:
            updated.append(ColumnMapping(m.name, m.sample_value, target, next_seq))
    return tuple(updated)


def effective_mapping(mappings: Sequence[ColumnMapping]) -> Dict[TargetField, str]:
    """
    Resolve {target: source column}. For a target claimed by several
    columns the highest assigned_seq wins.
    """
    winners: Dict[TargetField, ColumnMapping] = {}
    for m in mappings:
        if m.target is None:
            continue
        current = winners.get(m.target)
        if current is None or m.assigned_seq > current.assigned_seq:
            winners[m.target] = m
    return {target: m.name for target, m in winners.items()}


def mapping_status(mappings: Sequence[ColumnMapping]) -> MappingStatus:
    counts: Dict[TargetField, int] = {}
    for m in mappings:
        if m.target is not None:
            counts[m.target] = counts.get(m.target, 0) + 1

    missing = tuple(f for f in TargetField.required_fields() if not counts.get(f))
    conflicts = tuple(f for f in TargetField if counts.get(f, 0) > 1)

    return MappingStatus(
        all_required_mapped=not missing,
        total_mapped_count=sum(counts.values()),
        missing_required=missing,
        conflicts=conflicts,
    )


def describe_status(status: MappingStatus) -> str:
    """
    One-line status, e.g. "3 fields mapped • Missing required fields: Email".
    """
    if status.all_required_mapped:
        detail = "All required fields mapped"
    else:
        detail = "Missing required fields: " + ", ".join(f.label for f in status.missing_required)
    return f"{status.total_mapped_count} fields mapped • {detail}"
