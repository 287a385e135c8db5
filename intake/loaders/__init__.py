"""
Data loaders for Prospect Intake
"""

from .base import DataLoader
from .csv_loader import CSVLoader, CSVReadError, MAX_ROWS, parse_csv_text, is_csv_file

__all__ = ['DataLoader', 'CSVLoader', 'CSVReadError', 'MAX_ROWS', 'parse_csv_text', 'is_csv_file']
