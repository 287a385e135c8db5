"""
Prospect builders for Prospect Intake
"""

from .prospect_builder import build_batch, build_record, backfill_timezones

__all__ = ['build_batch', 'build_record', 'backfill_timezones']
