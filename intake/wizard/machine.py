"""
Wizard state machine

    upload -> mapping -> timezone -> preview -> (launch)

The timezone step is skipped when every prospect has a state. transition() is
pure: it takes a session and an action and returns the next session. An action
that is not valid for the current stage returns the session unchanged.
"""

from dataclasses import replace

from core.log import get_logger
from intake.builders import backfill_timezones, build_batch
from intake.loaders import is_csv_file, parse_csv_text
from intake.mappers.field_mapper import init_mappings, mapping_status, set_mapping
from intake.timezones import is_supported
from .actions import (
    Action,
    Back,
    ChooseDefaultTimezone,
    ConfirmMapping,
    ConfirmTimezone,
    FileFailed,
    FileLoaded,
    Launch,
    MapColumn,
    SelectFile,
)
from .session import Exit, Stage, WizardSession
from .summary import launch_payload

logger = get_logger(__name__)


def _select_file(session: WizardSession, action: SelectFile) -> WizardSession:
    if not is_csv_file(action.file_name):
        return replace(session, error=f"{action.file_name} is not a CSV file", notice=None)
    return replace(session, pending_token=action.token, file_name=action.file_name, error=None, notice=None)


def _file_loaded(session: WizardSession, action: FileLoaded) -> WizardSession:
    result = parse_csv_text(action.text)
    if not result.headers:
        return replace(session, pending_token=None, error=f"{session.file_name} has no header row")

    notice = None
    if result.truncated:
        notice = (
            f"Your file contains {result.total_row_count} prospects, but only the first "
            f"{result.kept_row_count} have been loaded."
        )

    return replace(
        session,
        stage=Stage.MAPPING,
        pending_token=None,
        parse_result=result,
        mappings=init_mappings(result),
        batch=None,
        notice=notice,
        error=None,
    )


def _confirm_mapping(session: WizardSession) -> WizardSession:
    status = mapping_status(session.mappings)
    if not status.all_required_mapped:
        missing = ", ".join(f.label for f in status.missing_required)
        return replace(session, notice=f"Map the required fields before continuing: {missing}")

    if status.conflicts:
        logger.warning(
            "Fields mapped from more than one column (last assignment wins): %s",
            ", ".join(f.value for f in status.conflicts),
        )

    batch = build_batch(session.parse_result.rows, session.mappings)
    next_stage = Stage.TIMEZONE if batch.without_state_indices else Stage.PREVIEW
    return replace(session, stage=next_stage, batch=batch, notice=None)


def _back(session: WizardSession) -> WizardSession:
    if session.stage == Stage.UPLOAD:
        return replace(session, exit=Exit.BACKWARD)
    if session.stage == Stage.MAPPING:
        return replace(session, stage=Stage.UPLOAD, notice=None)
    if session.stage == Stage.TIMEZONE:
        return replace(session, stage=Stage.MAPPING, notice=None)
    previous = Stage.TIMEZONE if session.had_prospects_without_state else Stage.MAPPING
    return replace(session, stage=previous, notice=None)


def transition(session: WizardSession, action: Action) -> WizardSession:
    """
    Apply one action.

    Args:
        session: Current session
        action: User event

    Returns:
        The next session (the same object when the action does not apply)
    """
    if session.is_finished:
        return session

    stage = session.stage
    next_session = session

    if isinstance(action, SelectFile) and stage == Stage.UPLOAD:
        next_session = _select_file(session, action)

    elif isinstance(action, (FileLoaded, FileFailed)) and stage == Stage.UPLOAD:
        if action.token != session.pending_token:
            logger.info("Discarding stale read for upload #%s", action.token)
        elif isinstance(action, FileLoaded):
            next_session = _file_loaded(session, action)
        else:
            next_session = replace(session, pending_token=None, error=action.message)

    elif isinstance(action, MapColumn) and stage == Stage.MAPPING:
        next_session = replace(session, mappings=set_mapping(session.mappings, action.column, action.target))

    elif isinstance(action, ConfirmMapping) and stage == Stage.MAPPING:
        next_session = _confirm_mapping(session)

    elif isinstance(action, ChooseDefaultTimezone) and stage == Stage.TIMEZONE:
        if is_supported(action.timezone):
            next_session = replace(session, default_timezone=action.timezone, notice=None)
        else:
            next_session = replace(session, notice=f"Unsupported timezone: {action.timezone}")

    elif isinstance(action, ConfirmTimezone) and stage == Stage.TIMEZONE:
        next_session = replace(
            session,
            stage=Stage.PREVIEW,
            batch=backfill_timezones(session.batch, session.default_timezone),
            notice=None,
        )

    elif isinstance(action, Launch) and stage == Stage.PREVIEW:
        batch = backfill_timezones(session.batch, session.default_timezone)
        payload = launch_payload(batch, session.default_timezone, action.launched_on)
        next_session = replace(session, batch=batch, exit=Exit.LAUNCHED, launch_payload=payload, notice=None)

    elif isinstance(action, Back):
        next_session = _back(session)

    if next_session.stage != stage:
        logger.info("Wizard %s -> %s", stage.value, next_session.stage.value)
    elif next_session is session:
        logger.debug("%s ignored at %s", type(action).__name__, stage.value)
    return next_session
