"""
Switch configuration domain.
"""

from .config import ForwardingConfig, RoutingMethod, parse_routing_method
from .schema import SWITCH_GROUP, SWITCH_OPTIONS, SWITCH_TITLE

__all__ = [
    'ForwardingConfig',
    'RoutingMethod',
    'parse_routing_method',
    'SWITCH_GROUP',
    'SWITCH_OPTIONS',
    'SWITCH_TITLE',
]
