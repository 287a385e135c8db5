"""
CSV prospect loader

Reads one uploaded CSV file and parses it into headers and raw rows:
- First line is the header, comma-separated
- Quoted fields may contain commas
- At most MAX_ROWS data rows are kept; overflow is reported, not silent
"""

import asyncio
import csv
from pathlib import Path
from typing import List, Union

from core.log import get_logger
from core.models import ParseResult, RawRow
from .base import DataLoader

logger = get_logger(__name__)

MAX_ROWS = 1000


class CSVReadError(IOError):
    """The uploaded file could not be read as text."""


def _unquote(token: str) -> str:
    token = token.strip()
    if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
        return token[1:-1]
    return token


def _split_header(line: str) -> List[str]:
    """
    Header names in source order. A repeated name gets a numeric suffix
    ("email", "email_2") so every column keeps its own values.
    """
    headers: List[str] = []
    seen = set()
    for name in (_unquote(token) for token in line.split(',')):
        unique, n = name, 1
        while unique in seen:
            n += 1
            unique = f"{name}_{n}"
        if unique != name:
            logger.info("Duplicate column %r renamed to %r", name, unique)
        seen.add(unique)
        headers.append(unique)
    return headers


def _tokenize(line: str) -> List[str]:
    """Split one data line, keeping quoted commas inside their field."""
    try:
        tokens = next(csv.reader([line], skipinitialspace=True), [])
    except csv.Error:
        return [_unquote(t) for t in line.split(',')]
    return [t.strip() for t in tokens]


def parse_csv_text(text: str, max_rows: int = MAX_ROWS) -> ParseResult:
    """
    Parse raw CSV text.

    Args:
        text: Whole file contents
        max_rows: Cap on data rows kept

    Returns:
        ParseResult with headers in source order, rows in file order,
        and the truncation flag / true data-row count
    """
    lines = text.split('\n')
    if not lines or not lines[0].strip():
        return ParseResult(headers=(), rows=())

    headers = _split_header(lines[0].rstrip('\r'))

    data_lines = [line.rstrip('\r') for line in lines[1:] if line.strip()]
    total = len(data_lines)

    rows: List[RawRow] = []
    for line in data_lines[:max_rows]:
        values = _tokenize(line)
        row = {header: (values[i] if i < len(values) else '') for i, header in enumerate(headers)}
        if any(value.strip() for value in row.values()):
            rows.append(row)

    truncated = total > max_rows
    if truncated:
        logger.warning("File contains %d data rows; only the first %d were kept", total, max_rows)
    logger.info("Parsed %d columns, %d rows", len(headers), len(rows))

    return ParseResult(
        headers=tuple(headers),
        rows=tuple(rows),
        truncated=truncated,
        total_row_count=total,
    )


def is_csv_file(file_path: Union[str, Path]) -> bool:
    return Path(file_path).suffix.lower() == '.csv'


class CSVLoader(DataLoader):
    """
    Load prospects from a CSV file.

    Example:
        loader = CSVLoader("prospects.csv")
        result = loader.load()
    """

    ENCODINGS = ('utf-8-sig', 'cp1252')

    def __init__(self, file_path: Union[str, Path], max_rows: int = MAX_ROWS):
        self.file_path = Path(file_path)
        self.max_rows = max_rows

    def read_text(self) -> str:
        """
        Read the whole file as text.

        Raises:
            CSVReadError: Missing, unreadable, or binary file
        """
        try:
            raw = self.file_path.read_bytes()
        except OSError as e:
            raise CSVReadError(f"Cannot read {self.file_path}: {e.strerror or e}") from e

        if b'\x00' in raw:
            raise CSVReadError(f"{self.file_path} is not a text file")

        for encoding in self.ENCODINGS:
            try:
                return raw.decode(encoding)
            except UnicodeDecodeError:
                continue

        raise CSVReadError(f"{self.file_path} is not valid UTF-8 text")

    async def read_text_async(self) -> str:
        """read_text() on a worker thread."""
        return await asyncio.to_thread(self.read_text)

    def load(self) -> ParseResult:
        return parse_csv_text(self.read_text(), self.max_rows)

    def get_info(self) -> dict:
        result = self.load()
        return {
            'file_path': str(self.file_path),
            'file_size': self.file_path.stat().st_size,
            'row_count': result.kept_row_count,
            'total_row_count': result.total_row_count,
            'truncated': result.truncated,
            'column_count': len(result.headers),
            'headers': list(result.headers),
        }
