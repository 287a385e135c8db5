"""
Prospect Intake Configuration
Centralized configuration management
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from ._version import __version__
from .log import get_logger

logger = get_logger(__name__)

DEFAULT_CALENDAR_INVITES_PER_DAY = 25


def _positive_int(raw: Optional[str], default: int, name: str) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s=%d must be positive, using %d", name, value, default)
        return default
    return value


class IntakeConfig:
    """
    Centralized configuration for Prospect Intake.
    Loads from .env and provides typed access to all settings.
    """

    def __init__(self, env_file: Optional[Path] = None):
        if env_file is None:
            env_file = Path(__file__).parent.parent / '.env'

        if env_file.exists():
            load_dotenv(env_file)

        # Framework settings
        self.framework_name = "Prospect Intake"
        self.framework_version = __version__

        # Paths
        self.root_dir = Path(__file__).parent.parent

        # Output directory from .env or default
        output_dir_env = os.getenv('OUTPUT_DIR', 'output')
        if Path(output_dir_env).is_absolute():
            self.output_dir = Path(output_dir_env)
        else:
            self.output_dir = self.root_dir / output_dir_env

        # Scheduling
        self.calendar_invites_per_day = _positive_int(
            os.getenv('CALENDAR_INVITES_PER_DAY'),
            DEFAULT_CALENDAR_INVITES_PER_DAY,
            'CALENDAR_INVITES_PER_DAY',
        )

        # Optional override for the detected default timezone
        self.default_timezone = os.getenv('DEFAULT_TIMEZONE', '').strip() or None

        self.log_level = os.getenv('LOG_LEVEL', 'WARNING').strip().upper() or 'WARNING'

    @property
    def has_timezone_override(self) -> bool:
        return self.default_timezone is not None

    def get_output_dir(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    def get_config_status(self) -> Dict[str, Any]:
        return {
            'framework': {
                'name': self.framework_name,
                'version': self.framework_version
            },
            'intake': {
                'calendar_invites_per_day': self.calendar_invites_per_day,
                'default_timezone': self.default_timezone or 'auto-detect',
                'output_dir': str(self.output_dir),
                'log_level': self.log_level,
            }
        }

    def __repr__(self) -> str:
        status = self.get_config_status()
        return f"IntakeConfig({status['intake']})"


# Global config instance
_config: Optional[IntakeConfig] = None


def get_config() -> IntakeConfig:
    global _config
    if _config is None:
        _config = IntakeConfig()
    return _config


def reload_config(env_file: Optional[Path] = None) -> IntakeConfig:
    global _config
    _config = IntakeConfig(env_file)
    return _config
