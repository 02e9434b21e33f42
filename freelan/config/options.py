"""
The process-wide option registry.
"""

import threading
from typing import Optional

from .core.registry import OptionRegistry
from .fscp.schema import FSCP_GROUP, FSCP_OPTIONS, FSCP_TITLE
from .security.schema import SECURITY_GROUP, SECURITY_OPTIONS, SECURITY_TITLE
from .tap_adapter.schema import TAP_ADAPTER_GROUP, TAP_ADAPTER_OPTIONS, TAP_ADAPTER_TITLE
from .switch.schema import SWITCH_GROUP, SWITCH_OPTIONS, SWITCH_TITLE

_registry: Optional[OptionRegistry] = None
_registry_lock = threading.Lock()


def build_registry() -> OptionRegistry:
    """Build and freeze a registry holding every option group."""
    registry = OptionRegistry()
    registry.register_group(FSCP_GROUP, FSCP_OPTIONS, FSCP_TITLE)
    registry.register_group(SECURITY_GROUP, SECURITY_OPTIONS, SECURITY_TITLE)
    registry.register_group(TAP_ADAPTER_GROUP, TAP_ADAPTER_OPTIONS, TAP_ADAPTER_TITLE)
    registry.register_group(SWITCH_GROUP, SWITCH_OPTIONS, SWITCH_TITLE)
    return registry.freeze()


def get_default_registry() -> OptionRegistry:
    """Get or create the global option registry."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = build_registry()
        return _registry
