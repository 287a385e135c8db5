"""
Field mappers for Prospect Intake
"""

from .field_mapper import (
    init_mappings,
    set_mapping,
    effective_mapping,
    mapping_status,
    describe_status,
)
from .interactive_mapper import InteractiveMapper

__all__ = [
    'init_mappings', 'set_mapping', 'effective_mapping', 'mapping_status', 'describe_status',
    'InteractiveMapper',
]
