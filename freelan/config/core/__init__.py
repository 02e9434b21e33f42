"""
Core configuration resolution components.

This module provides the foundational components for configuration resolution:
- OptionRegistry: Catalog of every recognized option
- ConfigProvider: Tier providers (command line, file, defaults)
- SourceLayeringResolver: Precedence merging across tiers
- ConfigValidator: Validation over resolved values
- Error taxonomy shared by all of the above
"""

from .registry import OptionRegistry, OptionDescriptor, OptionKind
from .provider import (
    ConfigProvider, CommandLineConfigProvider, FileConfigProvider,
    DefaultConfigProvider, RawOptionValue, SourceTier
)
from .discovery import (
    DiscoveryResult, discover_configuration_file, get_configuration_files,
    CONFIGURATION_FILE_ENV, CONFIGURATION_FILENAME
)
from .resolver import SourceLayeringResolver, Resolution
from .validator import ConfigValidator, RequiredOptionValidator, PairedOptionValidator, ValidationResult
from .errors import (
    ErrorKind, ConfigurationError, MissingRequiredOption, InvalidOptionValue,
    ExplicitFileUnreadable, DiscoveredFileAbsent, UnrecognizedOptionKey,
    CredentialLoadError, ConfigurationFileError, IncompleteOptionPair
)
from .types import Endpoint, AddressPrefixLength, EthernetAddress

__all__ = [
    # Registry
    'OptionRegistry',
    'OptionDescriptor',
    'OptionKind',

    # Providers
    'ConfigProvider',
    'CommandLineConfigProvider',
    'FileConfigProvider',
    'DefaultConfigProvider',
    'RawOptionValue',
    'SourceTier',

    # Discovery
    'DiscoveryResult',
    'discover_configuration_file',
    'get_configuration_files',
    'CONFIGURATION_FILE_ENV',
    'CONFIGURATION_FILENAME',

    # Resolver
    'SourceLayeringResolver',
    'Resolution',

    # Validators
    'ConfigValidator',
    'RequiredOptionValidator',
    'PairedOptionValidator',
    'ValidationResult',

    # Errors
    'ErrorKind',
    'ConfigurationError',
    'MissingRequiredOption',
    'InvalidOptionValue',
    'ExplicitFileUnreadable',
    'DiscoveredFileAbsent',
    'UnrecognizedOptionKey',
    'CredentialLoadError',
    'ConfigurationFileError',
    'IncompleteOptionPair',

    # Types
    'Endpoint',
    'AddressPrefixLength',
    'EthernetAddress',
]
