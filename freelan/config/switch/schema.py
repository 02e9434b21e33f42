"""
Switch option schema definitions.
"""

from freelan.config.core.registry import OptionDescriptor, OptionKind

from .config import parse_routing_method

SWITCH_GROUP = 'switch'
SWITCH_TITLE = 'Switch options'

SWITCH_OPTIONS = (
    OptionDescriptor(
        SWITCH_GROUP, 'routing_method',
        default='switch',
        help='The routing method for messages.',
        parser=parse_routing_method,
    ),
    OptionDescriptor(
        SWITCH_GROUP, 'relay_mode_enabled',
        kind=OptionKind.BOOLEAN,
        default=False,
        help='Whether to enable the relay mode.',
    ),
)
