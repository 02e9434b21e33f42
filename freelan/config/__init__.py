"""
Node configuration management.

This module resolves the configuration of a freelan node with:
- Option schemas per domain (fscp, security, tap_adapter, switch)
- Command line, configuration file and default value tiers
- Typed parsing, assembly and validation into an immutable record
"""

# Core infrastructure
from .core import (
    OptionRegistry, OptionDescriptor, OptionKind,
    SourceLayeringResolver, Resolution, RawOptionValue, SourceTier,
    CommandLineConfigProvider, FileConfigProvider, DefaultConfigProvider,
    ValidationResult, ErrorKind, ConfigurationError
)

# Domain configurations
from .fscp import ChannelConfig, HostnameResolutionProtocol
from .security import (
    SecurityConfig, CertificateValidationMethod, CredentialMaterial,
    TrustedAuthority, CertificateValidationScript
)
from .tap_adapter import InterfaceConfig
from .switch import ForwardingConfig, RoutingMethod

# Assembly
from .options import build_registry, get_default_registry
from .assembly import Configuration, ConfigurationAssembler, AssemblyResult
from .loader import LoadResult, load_configuration

__all__ = [
    # Core infrastructure
    'OptionRegistry',
    'OptionDescriptor',
    'OptionKind',
    'SourceLayeringResolver',
    'Resolution',
    'RawOptionValue',
    'SourceTier',
    'CommandLineConfigProvider',
    'FileConfigProvider',
    'DefaultConfigProvider',
    'ValidationResult',
    'ErrorKind',
    'ConfigurationError',

    # Domains
    'ChannelConfig',
    'HostnameResolutionProtocol',
    'SecurityConfig',
    'CertificateValidationMethod',
    'CredentialMaterial',
    'TrustedAuthority',
    'CertificateValidationScript',
    'InterfaceConfig',
    'ForwardingConfig',
    'RoutingMethod',

    # Assembly
    'build_registry',
    'get_default_registry',
    'Configuration',
    'ConfigurationAssembler',
    'AssemblyResult',
    'LoadResult',
    'load_configuration',
]
