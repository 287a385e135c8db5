"""
Exporters for Prospect Intake
"""

from .batch_exporter import BatchExporter

__all__ = ['BatchExporter']
