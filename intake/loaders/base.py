"""
Abstract base class for data loaders
"""

from abc import ABC, abstractmethod

from core.models import ParseResult


class DataLoader(ABC):
    """
    Abstract base class for loading prospect data.

    All loaders must implement the load() method which returns a ParseResult:
    - headers: column names in source order
    - rows: raw records keyed by header
    """

    @abstractmethod
    def load(self) -> ParseResult:
        """
        Load data from source.

        Returns:
            ParseResult with headers, rows and truncation info
        """
        pass
