"""
Option schema registry.

This module provides the catalog of every recognized option: its group,
name, value kind, default, requiredness and the parser that turns its raw
value into the typed value stored in the configuration records.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple


class OptionKind(Enum):
    """Raw value kinds an option accepts."""
    STRING = "string"
    BOOLEAN = "bool"
    INTEGER = "integer"
    STRING_LIST = "string-list"


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Describes one configuration option.

    `default` is `None` when the option has no built-in default. `parser`
    converts the kind-coerced raw value into the typed value; options
    without a parser keep the coerced value as-is.
    """
    group: str
    name: str
    kind: OptionKind = OptionKind.STRING
    default: Any = None
    required: bool = False
    help: str = ""
    parser: Optional[Callable[[Any], Any]] = None
    paired_with: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.group}.{self.name}"

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_list(self) -> bool:
        return self.kind is OptionKind.STRING_LIST


class OptionRegistry:
    """
    Registry of option descriptors, grouped by option group.

    Groups are registered once at startup; after `freeze()` the registry is
    read-only and any further registration raises `RuntimeError`.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._groups: Dict[str, Tuple[OptionDescriptor, ...]] = {}
        self._titles: Dict[str, str] = {}
        self._by_key: Dict[str, OptionDescriptor] = {}
        self._frozen = False

    def register_group(self, group: str, descriptors: Iterable[OptionDescriptor], title: str = "") -> Tuple[OptionDescriptor, ...]:
        """
        Register an option group with its descriptors.

        Args:
            group: Group name (e.g. 'fscp', 'security', 'tap_adapter', 'switch')
            descriptors: Descriptors belonging to the group
            title: Human readable title used for help output

        Returns:
            The registered descriptors

        Raises:
            RuntimeError: If the registry is frozen
            ValueError: If the group or one of the keys is already registered
        """
        with self._lock:
            if self._frozen:
                raise RuntimeError("The option registry is read-only once frozen")
            if group in self._groups:
                raise ValueError(f"Option group '{group}' is already registered")

            descriptors = tuple(descriptors)

            for descriptor in descriptors:
                if descriptor.group != group:
                    raise ValueError(f"Option '{descriptor.key}' does not belong to group '{group}'")
                if descriptor.key in self._by_key:
                    raise ValueError(f"Option '{descriptor.key}' is already registered")

            for descriptor in descriptors:
                self._by_key[descriptor.key] = descriptor

            self._groups[group] = descriptors
            self._titles[group] = title or f"{group} options"

            return descriptors

    def freeze(self) -> "OptionRegistry":
        with self._lock:
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def descriptors(self, group: str) -> Tuple[OptionDescriptor, ...]:
        """Get the descriptors of a group, or an empty tuple for unknown groups."""
        return self._groups.get(group, ())

    def title(self, group: str) -> str:
        return self._titles.get(group, group)

    def groups(self) -> Tuple[str, ...]:
        return tuple(self._groups)

    def get(self, key: str) -> Optional[OptionDescriptor]:
        return self._by_key.get(key)

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[OptionDescriptor]:
        for descriptors in self._groups.values():
            yield from descriptors

    def __len__(self) -> int:
        return len(self._by_key)
