"""
Source layering resolver.

Merges the command line, the configuration file and the built-in defaults
into one raw value per registered option. For every option the first tier
holding it wins outright: list values are replaced, never merged.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Union

from .discovery import CONFIGURATION_FILE_ENV, discover_configuration_file
from .errors import (
    ConfigurationFileError, DiscoveredFileAbsent,
    ExplicitFileUnreadable, UnrecognizedOptionKey
)
from .provider import (
    CommandLineConfigProvider, ConfigProvider, DefaultConfigProvider,
    FileConfigProvider, RawOptionValue, SourceTier
)
from .registry import OptionRegistry
from .validator import ValidationResult
from freelan.logger import FreelanStructLogger, get_freelan_logger


@dataclass
class Resolution:
    """
    Output of the resolver.

    `values` maps every registered key to its winning raw value, or None
    when no tier holds it.
    """
    values: Dict[str, Optional[RawOptionValue]] = field(default_factory=dict)
    configuration_file: Optional[Path] = None
    result: ValidationResult = field(default_factory=ValidationResult)

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid

    def raw(self) -> Dict[str, object]:
        """The winning values without their tier."""
        return {key: (raw.value if raw is not None else None) for key, raw in self.values.items()}

    def tier_of(self, key: str) -> Optional[SourceTier]:
        raw = self.values.get(key)
        return raw.tier if raw is not None else None


class SourceLayeringResolver:
    """Resolve raw option values across the precedence tiers."""

    def __init__(self, registry: OptionRegistry, logger: Optional[FreelanStructLogger] = None):
        self.registry = registry
        self.logger = (logger or get_freelan_logger()).bind(component="SourceLayeringResolver")

    def resolve(
        self,
        command_line: Union[CommandLineConfigProvider, Mapping[str, object], None] = None,
        configuration_file: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
        candidates: Optional[Iterable[Path]] = None,
    ) -> Resolution:
        """
        Resolve every registered option.

        Args:
            command_line: Command line provider, or a mapping of key to value
            configuration_file: Explicit configuration file path given by flag
            environ: Environment used for the configuration file variable
            candidates: Discovery candidates, defaults to the platform list

        Returns:
            A Resolution. On a fatal error its values are left empty.
        """
        resolution = Resolution()
        environ = os.environ if environ is None else environ

        if not isinstance(command_line, CommandLineConfigProvider):
            command_line = CommandLineConfigProvider(self.registry, command_line or {})

        file_provider = self._file_provider(configuration_file, environ, candidates, resolution)

        if not resolution.is_valid:
            return resolution

        providers = [command_line]
        if file_provider is not None:
            providers.append(file_provider)
        providers.append(DefaultConfigProvider(self.registry))

        for provider in providers:
            for key in provider.unrecognized_keys():
                warning = UnrecognizedOptionKey(key, provider.source)
                resolution.result.add_warning(warning)
                self.logger.warning("Unrecognized option ignored", key=key, source=provider.source)

        resolution.values = self._layer(providers)
        return resolution

    def _file_provider(
        self,
        configuration_file: Optional[Union[str, Path]],
        environ: Mapping[str, str],
        candidates: Optional[Iterable[Path]],
        resolution: Resolution,
    ) -> Optional[FileConfigProvider]:
        explicit = configuration_file or environ.get(CONFIGURATION_FILE_ENV) or None

        if explicit is not None:
            path = Path(explicit).expanduser()
            self.logger.info("Reading configuration file", path=str(path))
            try:
                provider = FileConfigProvider(self.registry, path).load()
            except OSError as e:
                resolution.result.add_error(ExplicitFileUnreadable(path, e.strerror))
                return None
            except ConfigurationFileError as e:
                resolution.result.add_error(e)
                return None
            resolution.configuration_file = path
            return provider

        discovery = discover_configuration_file(candidates)

        if not discovery.found:
            warning = DiscoveredFileAbsent(discovery.candidates)
            resolution.result.add_warning(warning)
            self.logger.warning(
                "No configuration file specified and none found in the environment",
                looked_up=[str(c) for c in discovery.candidates],
            )
            return None

        self.logger.info("Reading configuration file", path=str(discovery.path))
        try:
            provider = FileConfigProvider(self.registry, discovery.path).load()
        except OSError as e:
            # The candidate passed the readability check but went away since
            resolution.result.add_error(ConfigurationFileError(discovery.path, e.strerror or str(e)))
            return None
        except ConfigurationFileError as e:
            resolution.result.add_error(e)
            return None

        resolution.configuration_file = discovery.path
        return provider

    def _layer(self, providers: Iterable[ConfigProvider]) -> Dict[str, Optional[RawOptionValue]]:
        tiers = [provider.get_values() for provider in providers]
        values: Dict[str, Optional[RawOptionValue]] = {}

        for descriptor in self.registry:
            winner = None
            for tier_values in tiers:
                if descriptor.key in tier_values:
                    winner = tier_values[descriptor.key]
                    break

            values[descriptor.key] = winner
            if winner is not None:
                self.logger.debug("Option resolved", key=descriptor.key, tier=winner.tier.name.lower())

        return values
