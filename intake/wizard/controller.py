"""
Wizard controller

Owns one WizardSession, feeds it actions, performs the file read and calls the
external collaborators when the wizard exits:

    launcher(payload)            campaign launch, given the LaunchPayload
    navigator(view, payload)     leave the wizard ("dashboard" / "new-cadence")
"""

import itertools
from pathlib import Path
from typing import Any, Callable, Optional, Union

from core.config import IntakeConfig
from core.log import get_logger
from core.models import LaunchPayload
from intake.loaders import CSVLoader, CSVReadError
from .actions import Action, FileFailed, FileLoaded, SelectFile
from .machine import transition
from .session import Exit, WizardSession

logger = get_logger(__name__)

Launcher = Callable[[LaunchPayload], Any]
Navigator = Callable[..., Any]

DASHBOARD_VIEW = 'dashboard'
PREVIOUS_VIEW = 'new-cadence'


class WizardController:
    """
    Drive a prospect upload from file choice to launch.

    Example:
        controller = WizardController(launcher=launch, navigator=go)
        await controller.load_file("prospects.csv")
        controller.dispatch(MapColumn("email", TargetField.EMAIL))
    """

    def __init__(
        self,
        launcher: Launcher,
        navigator: Optional[Navigator] = None,
        config: Optional[IntakeConfig] = None,
        session: Optional[WizardSession] = None,
    ):
        self.launcher = launcher
        self.navigator = navigator
        self._session: Optional[WizardSession] = session or WizardSession.start(config)
        self._tokens = itertools.count(1)
        self.exit: Optional[Exit] = None
        self.payload: Optional[LaunchPayload] = None

    @property
    def session(self) -> WizardSession:
        if self._session is None:
            raise RuntimeError("The wizard session has ended")
        return self._session

    @property
    def active(self) -> bool:
        return self._session is not None

    def dispatch(self, action: Action) -> Optional[WizardSession]:
        """
        Apply an action. Returns the new session, or None once the wizard has exited.
        """
        self._session = transition(self.session, action)
        if self._session.is_finished:
            self._finish(self._session)
            return None
        return self._session

    async def load_file(self, file_path: Union[str, Path]) -> Optional[WizardSession]:
        """
        Select and read a CSV file. Only the most recently selected file may
        commit its contents; an older read finishing late is discarded.
        """
        path = Path(file_path)
        token = next(self._tokens)
        self.dispatch(SelectFile(path.name, token))
        if self.session.pending_token != token:
            return self.session

        try:
            text = await CSVLoader(path).read_text_async()
        except CSVReadError as e:
            logger.error("%s", e)
            action: Action = FileFailed(token, str(e))
        else:
            action = FileLoaded(token, text)

        if not self.active:
            return None
        return self.dispatch(action)

    def _finish(self, session: WizardSession) -> None:
        self.exit = session.exit
        self._session = None

        if session.exit == Exit.LAUNCHED:
            self.payload = session.launch_payload
            logger.info(
                "Launching %s with %d prospects",
                self.payload.campaign.campaign_name, self.payload.prospect_count,
            )
            self.launcher(self.payload)
            if self.navigator:
                self.navigator(DASHBOARD_VIEW, self.payload.campaign)
        elif self.navigator:
            self.navigator(PREVIOUS_VIEW, None)
