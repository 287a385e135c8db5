"""Prospect Intake - CSV prospect upload wizard"""

from core._version import __version__

__all__ = ['__version__']
