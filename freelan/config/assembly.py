"""
Configuration assembly and validation.

Drives the typed value parsers over the resolved raw values, enforces the
required and paired option rules, and builds the immutable configuration
record handed to the engine.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Type

from .core.errors import ConfigurationError, InvalidOptionValue
from .core.parsers import parse_option
from .core.provider import RawOptionValue
from .core.registry import OptionRegistry
from .core.validator import (
    ConfigValidator, PairedOptionValidator, RequiredOptionValidator, ValidationResult
)
from .fscp.config import ChannelConfig
from .security.config import SecurityConfig
from .switch.config import ForwardingConfig
from .tap_adapter.config import InterfaceConfig
from freelan.logger import FreelanStructLogger, get_freelan_logger


@dataclass(frozen=True)
class Configuration:
    """
    The resolved node configuration.

    Instances are immutable; the engine and its subsystems share one by
    reference for the lifetime of the run.
    """
    fscp: ChannelConfig
    security: SecurityConfig
    tap_adapter: InterfaceConfig = field(default_factory=InterfaceConfig)
    switch: ForwardingConfig = field(default_factory=ForwardingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'fscp': self.fscp.to_dict(),
            'security': self.security.to_dict(),
            'tap_adapter': self.tap_adapter.to_dict(),
            'switch': self.switch.to_dict(),
        }


GROUP_RECORDS: Dict[str, Type] = {
    'fscp': ChannelConfig,
    'security': SecurityConfig,
    'tap_adapter': InterfaceConfig,
    'switch': ForwardingConfig,
}


@dataclass
class AssemblyResult:
    """The assembled configuration, or the errors that prevented it."""
    configuration: Optional[Configuration] = None
    result: ValidationResult = field(default_factory=ValidationResult)

    @property
    def is_valid(self) -> bool:
        return self.configuration is not None and self.result.is_valid


class ConfigurationAssembler:
    """
    Build a Configuration out of resolved raw values.

    Every option is parsed even after a failure so that all problems are
    reported at once.
    """

    def __init__(
        self,
        registry: OptionRegistry,
        logger: Optional[FreelanStructLogger] = None,
        validators: Optional[List[ConfigValidator]] = None,
    ):
        self.registry = registry
        self.logger = (logger or get_freelan_logger()).bind(component="ConfigurationAssembler")
        if validators is None:
            validators = [RequiredOptionValidator(registry), PairedOptionValidator(registry)]
        self.validators = validators

    def assemble(self, values: Mapping[str, Any]) -> AssemblyResult:
        """
        Assemble the configuration.

        Args:
            values: Option key to RawOptionValue, plain raw value or None

        Returns:
            An AssemblyResult holding the configuration when no fatal error occurred
        """
        raw = {
            key: value.value if isinstance(value, RawOptionValue) else value
            for key, value in values.items()
        }

        assembly = AssemblyResult()

        for validator in self.validators:
            assembly.result.extend(validator.validate(raw))

        parsed: Dict[str, Dict[str, Any]] = {group: {} for group in self.registry.groups()}

        for descriptor in self.registry:
            value = raw.get(descriptor.key)
            if value is None:
                continue

            try:
                parsed[descriptor.group][descriptor.name] = parse_option(descriptor, value)
            except ConfigurationError as e:
                assembly.result.add(e.with_key(descriptor.key))
                self.logger.debug("Option rejected", key=descriptor.key, error=str(e))

        if not assembly.result.is_valid:
            return assembly

        records = {}
        for group, record_type in GROUP_RECORDS.items():
            try:
                records[group] = record_type.from_dict(parsed.get(group, {}))
            except ValueError as e:
                assembly.result.add_error(InvalidOptionValue(str(e), key=group))

        if assembly.result.is_valid:
            assembly.configuration = Configuration(**records)
            self.logger.debug("Configuration assembled", warnings=len(assembly.result.warnings))

        return assembly
