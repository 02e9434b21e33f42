"""
Configuration validation framework.

This module provides the result object shared by the resolver and the
assembler, and the validators that run over resolved option values.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional

from .errors import ConfigurationError, ErrorKind, IncompleteOptionPair, MissingRequiredOption
from .registry import OptionRegistry
from freelan.logger import get_freelan_logger


class ValidationResult:
    """Errors and warnings collected while resolving a configuration."""

    def __init__(
        self,
        errors: Optional[List[ConfigurationError]] = None,
        warnings: Optional[List[ConfigurationError]] = None,
    ):
        self.errors = list(errors or [])
        self.warnings = list(warnings or [])

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, error: ConfigurationError):
        """Record an error or a warning depending on its kind."""
        if error.fatal:
            self.errors.append(error)
        else:
            self.warnings.append(error)

    def add_error(self, error: ConfigurationError):
        self.errors.append(error)

    def add_warning(self, warning: ConfigurationError):
        self.warnings.append(warning)

    def extend(self, other: "ValidationResult"):
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def has_kind(self, kind: ErrorKind) -> bool:
        return any(e.kind is kind for e in self.errors + self.warnings)

    def errors_of(self, kind: ErrorKind) -> List[ConfigurationError]:
        return [e for e in self.errors + self.warnings if e.kind is kind]

    @property
    def first_error(self) -> Optional[ConfigurationError]:
        return self.errors[0] if self.errors else None

    def raise_for_errors(self):
        """Raise the first fatal error, if any."""
        if self.errors:
            raise self.errors[0]

    def __bool__(self):
        return self.is_valid

    def __repr__(self) -> str:
        return f"ValidationResult(errors={self.errors!r}, warnings={self.warnings!r})"


class ConfigValidator(ABC):
    """Abstract base class for validators of resolved option values."""

    def __init__(self, registry: OptionRegistry):
        self.registry = registry
        self.logger = get_freelan_logger().bind(component=type(self).__name__)

    @abstractmethod
    def validate(self, values: Mapping[str, object]) -> ValidationResult:
        """Validate a mapping of option key to resolved value (or None)."""
        pass


class RequiredOptionValidator(ConfigValidator):
    """Checks that every required descriptor received a value from some tier."""

    def validate(self, values: Mapping[str, object]) -> ValidationResult:
        result = ValidationResult()

        for descriptor in self.registry:
            if descriptor.required and values.get(descriptor.key) is None:
                result.add_error(MissingRequiredOption(descriptor.key))

        return result


class PairedOptionValidator(ConfigValidator):
    """
    Reports options that are meant to be given together but were not.

    Half-supplied pairs are warnings only: both halves are still loaded
    independently and no consistency check between them takes place.
    """

    def validate(self, values: Mapping[str, object]) -> ValidationResult:
        result = ValidationResult()
        reported: Dict[frozenset, bool] = {}

        for descriptor in self.registry:
            partner = descriptor.paired_with
            if partner is None:
                continue

            pair = frozenset((descriptor.key, partner))
            if pair in reported:
                continue
            reported[pair] = True

            has_self = values.get(descriptor.key) is not None
            has_partner = values.get(partner) is not None

            if has_self != has_partner:
                given, missing = (descriptor.key, partner) if has_self else (partner, descriptor.key)
                result.add_warning(IncompleteOptionPair(given, missing))
                self.logger.warning("Incomplete option pair", given=given, missing=missing)

        return result
