"""
Switch domain configuration classes.

This module defines how frames are forwarded between connected peers.
"""

from dataclasses import dataclass
from typing import Any, Dict
from enum import Enum

from freelan.config.core.parsers import choice


class RoutingMethod(Enum):
    """Frame forwarding policies."""
    SWITCH = "switch"
    HUB = "hub"


parse_routing_method = choice(
    RoutingMethod,
    {"switch": RoutingMethod.SWITCH, "hub": RoutingMethod.HUB},
    "routing method",
)


@dataclass(frozen=True)
class ForwardingConfig:
    """Switch settings."""
    routing_method: RoutingMethod = RoutingMethod.SWITCH
    relay_mode_enabled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'routing_method': self.routing_method.value,
            'relay_mode_enabled': self.relay_mode_enabled,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ForwardingConfig':
        """Create configuration from parsed option values, keyed by option name."""
        config = cls()
        return cls(
            routing_method=data.get('routing_method', config.routing_method),
            relay_mode_enabled=data.get('relay_mode_enabled', config.relay_mode_enabled),
        )
