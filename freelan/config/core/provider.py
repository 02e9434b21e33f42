"""
Configuration value providers.

Each provider contributes raw option values from one precedence tier:
the command line, a configuration file or the built-in defaults.
"""

import configparser
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import yaml

from .errors import ConfigurationFileError
from .registry import OptionRegistry
from freelan.logger import get_freelan_logger

YAML_SUFFIXES = ('.yaml', '.yml')

# Holds the `group.name = value` lines written before the first section header
INI_LEADING_SECTION = "__freelan_leading__"


class SourceTier(IntEnum):
    """Precedence tiers. Lower values win."""
    COMMAND_LINE = 0
    FILE = 1
    DEFAULT = 2


@dataclass(frozen=True)
class RawOptionValue:
    """The value of one option as contributed by one tier."""
    key: str
    value: Any
    tier: SourceTier


class ConfigProvider(ABC):
    """
    Abstract base class for configuration providers.

    Defines the interface that all tier providers must implement.
    """

    tier: SourceTier

    def __init__(self, registry: OptionRegistry):
        self.registry = registry
        self.logger = get_freelan_logger().bind(component=type(self).__name__)

    @property
    @abstractmethod
    def source(self) -> str:
        """Human readable name of the source, used in diagnostics."""
        pass

    @abstractmethod
    def get_values(self) -> Dict[str, RawOptionValue]:
        """Get the raw values of the registered options this tier holds."""
        pass

    def unrecognized_keys(self) -> Tuple[str, ...]:
        """Keys present in the source that no descriptor matches."""
        return ()

    def _split(self, values: Mapping[str, Any]) -> Tuple[Dict[str, RawOptionValue], Tuple[str, ...]]:
        known = {}
        unknown = []
        for key, value in values.items():
            if value is None:
                continue
            if key in self.registry:
                known[key] = RawOptionValue(key, value, self.tier)
            else:
                unknown.append(key)
        return known, tuple(unknown)


class CommandLineConfigProvider(ConfigProvider):
    """Values given as `--<group>.<name>` flags."""

    tier = SourceTier.COMMAND_LINE

    def __init__(self, registry: OptionRegistry, values: Mapping[str, Any],
                 unrecognized: Iterable[str] = ()):
        super().__init__(registry)
        self._values, unknown = self._split(values)
        self._unrecognized = unknown + tuple(unrecognized)

    @property
    def source(self) -> str:
        return "the command line"

    def get_values(self) -> Dict[str, RawOptionValue]:
        return dict(self._values)

    def unrecognized_keys(self) -> Tuple[str, ...]:
        return self._unrecognized


class FileConfigProvider(ConfigProvider):
    """
    File-based configuration provider.

    Files are INI-style, with one section per option group, unless their
    name ends in `.yaml` or `.yml`, in which case they are read as YAML
    mappings of group to options.

    In INI files, options may also be written as `group.name = value`
    before the first section header, and `#` starts a comment anywhere
    after whitespace.
    """

    tier = SourceTier.FILE

    def __init__(self, registry: OptionRegistry, path: Union[str, Path]):
        super().__init__(registry)
        self.path = Path(path)
        self._values: Optional[Dict[str, RawOptionValue]] = None
        self._unrecognized: Tuple[str, ...] = ()

    @property
    def source(self) -> str:
        return f"configuration file {self.path}"

    def load(self) -> "FileConfigProvider":
        """
        Read and parse the file.

        Raises:
            OSError: If the file can not be opened or read
            ConfigurationFileError: If the content is malformed
        """
        with open(self.path, 'r', encoding='utf-8') as f:
            try:
                content = f.read()
            except UnicodeDecodeError as e:
                raise ConfigurationFileError(self.path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from None

        if self.path.suffix.lower() in YAML_SUFFIXES:
            flat = self._parse_yaml(content)
        else:
            flat = self._parse_ini(content)

        self._values, self._unrecognized = self._split(flat)
        self.logger.debug("Configuration file loaded", path=str(self.path), options=len(self._values))
        return self

    def get_values(self) -> Dict[str, RawOptionValue]:
        if self._values is None:
            self.load()
        return dict(self._values)

    def unrecognized_keys(self) -> Tuple[str, ...]:
        return self._unrecognized

    def _parse_ini(self, content: str) -> Dict[str, Any]:
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            default_section="__freelan_defaults__",
            inline_comment_prefixes=('#',),
        )
        try:
            parser.read_string(f"[{INI_LEADING_SECTION}]\n{content}", source=str(self.path))
        except configparser.Error as e:
            raise ConfigurationFileError(self.path, str(e).splitlines()[0]) from None

        flat = {}
        for section in parser.sections():
            for name, value in parser.items(section):
                key = name if section == INI_LEADING_SECTION else f"{section}.{name}"
                flat[key] = value
        return flat

    def _parse_yaml(self, content: str) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigurationFileError(self.path, str(e).splitlines()[0]) from None

        if not isinstance(data, dict):
            raise ConfigurationFileError(self.path, "expected a mapping of option groups")

        flat = {}
        for group, options in data.items():
            if isinstance(options, dict):
                for name, value in options.items():
                    flat[f"{group}.{name}"] = value
            else:
                flat[str(group)] = options
        return flat


class DefaultConfigProvider(ConfigProvider):
    """Built-in defaults declared by the option descriptors."""

    tier = SourceTier.DEFAULT

    @property
    def source(self) -> str:
        return "the built-in defaults"

    def get_values(self) -> Dict[str, RawOptionValue]:
        return {
            descriptor.key: RawOptionValue(descriptor.key, descriptor.default, self.tier)
            for descriptor in self.registry
            if descriptor.has_default
        }
