"""
Tap adapter configuration domain.
"""

from .config import InterfaceConfig
from .schema import TAP_ADAPTER_GROUP, TAP_ADAPTER_OPTIONS, TAP_ADAPTER_TITLE

__all__ = [
    'InterfaceConfig',
    'TAP_ADAPTER_GROUP',
    'TAP_ADAPTER_OPTIONS',
    'TAP_ADAPTER_TITLE',
]
