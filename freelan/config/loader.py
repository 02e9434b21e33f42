"""
Configuration loading: resolution followed by assembly.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

from .assembly import Configuration, ConfigurationAssembler
from .core.errors import ConfigurationError
from .core.provider import CommandLineConfigProvider
from .core.registry import OptionRegistry
from .core.resolver import Resolution, SourceLayeringResolver
from .core.validator import ValidationResult
from .options import get_default_registry
from freelan.logger import FreelanStructLogger, get_freelan_logger


@dataclass
class LoadResult:
    """Outcome of loading the configuration from every source."""
    configuration: Optional[Configuration] = None
    result: ValidationResult = field(default_factory=ValidationResult)
    configuration_file: Optional[Path] = None
    resolution: Optional[Resolution] = None

    @property
    def is_valid(self) -> bool:
        return self.configuration is not None and self.result.is_valid

    @property
    def errors(self) -> List[ConfigurationError]:
        return self.result.errors

    @property
    def warnings(self) -> List[ConfigurationError]:
        return self.result.warnings

    def unwrap(self) -> Configuration:
        """
        Return the configuration.

        Raises:
            ConfigurationError: The first fatal error, if loading failed
        """
        self.result.raise_for_errors()
        return self.configuration


def load_configuration(
    command_line: Union[CommandLineConfigProvider, Mapping[str, object], None] = None,
    configuration_file: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    candidates: Optional[Iterable[Path]] = None,
    registry: Optional[OptionRegistry] = None,
    logger: Optional[FreelanStructLogger] = None,
) -> LoadResult:
    """
    Resolve and assemble the node configuration.

    Fatal resolution errors (such as an unreadable explicit configuration
    file) stop before assembly: no defaults are substituted for that run.
    """
    registry = registry or get_default_registry()
    logger = logger or get_freelan_logger()

    resolution = SourceLayeringResolver(registry, logger).resolve(
        command_line,
        configuration_file=configuration_file,
        environ=environ,
        candidates=candidates,
    )

    load = LoadResult(
        result=ValidationResult(warnings=resolution.result.warnings, errors=resolution.result.errors),
        configuration_file=resolution.configuration_file,
        resolution=resolution,
    )

    if not resolution.is_valid:
        return load

    assembly = ConfigurationAssembler(registry, logger).assemble(resolution.values)
    load.result.extend(assembly.result)
    load.configuration = assembly.configuration
    return load
