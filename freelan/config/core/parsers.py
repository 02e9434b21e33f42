"""
Typed value parsers.

Each parser turns a raw option value into its typed form or raises
`InvalidOptionValue`. None of them touch the network or the filesystem.
"""

import ipaddress
import re
from datetime import timedelta
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Type, TypeVar

from .errors import ConfigurationError, InvalidOptionValue
from .registry import OptionDescriptor, OptionKind
from .types import AddressPrefixLength, Endpoint, EthernetAddress

E = TypeVar('E', bound=Enum)
T = TypeVar('T')

TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
FALSE_STRINGS = frozenset({"false", "no", "off", "0"})

MAX_PORT = 65535
MAX_UNSIGNED_INT = 2 ** 32 - 1

_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
_ETHERNET_ADDRESS = re.compile(r"^[0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5}$")
_UNSIGNED = re.compile(r"^[0-9]+$")
_LIST_SEPARATOR = re.compile(r"[\n,]")


# Kind coercion

def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    raise InvalidOptionValue(f"\"{value}\" is not a valid boolean value", value=value)


def parse_unsigned(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidOptionValue(f"\"{value}\" is not a valid unsigned integer", value=value)
    if isinstance(value, int):
        if value < 0:
            raise InvalidOptionValue(f"\"{value}\" is not a valid unsigned integer", value=value)
        return value
    if isinstance(value, str) and _UNSIGNED.match(value.strip()):
        return int(value.strip())
    raise InvalidOptionValue(f"\"{value}\" is not a valid unsigned integer", value=value)


def parse_string_list(value: Any) -> Tuple[str, ...]:
    """
    Accept a sequence of strings or a single string.

    A single string is split on newlines and commas, which is how list
    options are written in INI configuration files.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        items = _LIST_SEPARATOR.split(value)
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        raise InvalidOptionValue(f"\"{value}\" is not a valid list of values", value=value)

    result = []
    for item in items:
        if not isinstance(item, (str, int)) or isinstance(item, bool):
            raise InvalidOptionValue(f"\"{item}\" is not a valid list item", value=value)
        item = str(item).strip()
        if item:
            result.append(item)
    return tuple(result)


def parse_string(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidOptionValue(f"\"{value}\" is not a valid string value", value=value)
    return str(value).strip()


_KIND_PARSERS: Dict[OptionKind, Callable[[Any], Any]] = {
    OptionKind.STRING: parse_string,
    OptionKind.BOOLEAN: parse_bool,
    OptionKind.INTEGER: parse_unsigned,
    OptionKind.STRING_LIST: parse_string_list,
}


def coerce_kind(descriptor: OptionDescriptor, value: Any) -> Any:
    """Coerce a raw value to the kind declared by its descriptor."""
    try:
        return _KIND_PARSERS[descriptor.kind](value)
    except InvalidOptionValue as e:
        raise e.with_key(descriptor.key)


def parse_option(descriptor: OptionDescriptor, value: Any) -> Any:
    """Coerce the kind of a raw value, then run the descriptor's parser over it."""
    value = coerce_kind(descriptor, value)
    if descriptor.parser is None:
        return value
    try:
        return descriptor.parser(value)
    except ConfigurationError as e:
        raise e.with_key(descriptor.key)


# Structured values

def is_valid_hostname(host: str) -> bool:
    if not host or len(host) > 253:
        return False
    labels = host[:-1].split(".") if host.endswith(".") else host.split(".")
    return all(_HOSTNAME_LABEL.match(label) for label in labels)


def parse_endpoint(value: str) -> Endpoint:
    """
    Parse a `host:port` endpoint.

    IPv6 literals must be enclosed in brackets: `[fe80::1]:12000`.
    """
    value = value.strip()

    if value.startswith("["):
        host, sep, port = value[1:].partition("]:")
        if not sep:
            raise InvalidOptionValue(f"\"{value}\" is not a valid endpoint", value=value)
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            raise InvalidOptionValue(f"\"{host}\" is not a valid IPv6 address", value=value) from None
    else:
        host, sep, port = value.rpartition(":")
        if not sep or not host:
            raise InvalidOptionValue(f"\"{value}\" is not a valid endpoint: expected host:port", value=value)
        if ":" in host:
            raise InvalidOptionValue(
                f"\"{value}\" is not a valid endpoint: IPv6 addresses must be enclosed in brackets",
                value=value,
            )
        if not _is_address(host) and not is_valid_hostname(host):
            raise InvalidOptionValue(f"\"{host}\" is not a valid hostname", value=value)

    if not _UNSIGNED.match(port) or int(port) > MAX_PORT:
        raise InvalidOptionValue(f"\"{port}\" is not a valid port number", value=value)

    return Endpoint(host=host, port=int(port))


def parse_duration(value: Any) -> timedelta:
    """Interpret a 32-bit unsigned integer as a number of milliseconds."""
    milliseconds = parse_unsigned(value)
    if milliseconds > MAX_UNSIGNED_INT:
        raise InvalidOptionValue(
            f"\"{value}\" is out of range (0-{MAX_UNSIGNED_INT} milliseconds)", value=value)
    return timedelta(milliseconds=milliseconds)


def _is_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def _parse_address_prefix_length(value: str, version: int) -> AddressPrefixLength:
    max_prefix_length = 32 if version == 4 else 128
    address_type = ipaddress.IPv4Address if version == 4 else ipaddress.IPv6Address

    address, sep, prefix_length = value.strip().partition("/")
    if not sep:
        raise InvalidOptionValue(f"\"{value}\" is not a valid address/prefix length", value=value)

    try:
        parsed_address = address_type(address)
    except ValueError:
        raise InvalidOptionValue(f"\"{address}\" is not a valid IPv{version} address", value=value) from None

    if not _UNSIGNED.match(prefix_length) or int(prefix_length) > max_prefix_length:
        raise InvalidOptionValue(
            f"\"{prefix_length}\" is not a valid IPv{version} prefix length (0-{max_prefix_length})",
            value=value,
        )

    return AddressPrefixLength(address=parsed_address, prefix_length=int(prefix_length))


def parse_ipv4_address_prefix_length(value: str) -> AddressPrefixLength:
    return _parse_address_prefix_length(value, 4)


def parse_ipv6_address_prefix_length(value: str) -> AddressPrefixLength:
    return _parse_address_prefix_length(value, 6)


def parse_ethernet_address(value: str) -> EthernetAddress:
    value = value.strip()
    if not _ETHERNET_ADDRESS.match(value):
        raise InvalidOptionValue(f"\"{value}\" is not a valid ethernet address", value=value)
    return EthernetAddress(bytes(int(octet, 16) for octet in value.split(":")))


def optional(parser: Callable[[str], T]) -> Callable[[str], Optional[T]]:
    """Wrap a parser so that an empty string yields None."""
    def parse(value: str) -> Optional[T]:
        if not value.strip():
            return None
        return parser(value)

    parse.__name__ = f"optional_{getattr(parser, '__name__', 'parser')}"
    return parse


def list_of(parser: Callable[[str], T]) -> Callable[[Sequence[str]], Tuple[T, ...]]:
    """Wrap a parser so that it applies to every item of a list option."""
    def parse(values: Sequence[str]) -> Tuple[T, ...]:
        return tuple(parser(value) for value in values)

    parse.__name__ = f"list_of_{getattr(parser, '__name__', 'parser')}"
    return parse


def choice(enum_type: Type[E], choices: Dict[str, E], label: str) -> Callable[[str], E]:
    """
    Build a parser accepting exactly the given strings (case-sensitive).

    Args:
        enum_type: Enum the choices map to
        choices: Accepted strings and the members they map to
        label: Description used in error messages
    """
    def parse(value: str) -> E:
        try:
            return choices[value]
        except KeyError:
            raise InvalidOptionValue(f"\"{value}\" is not a valid {label}", value=value) from None

    parse.__name__ = f"parse_{enum_type.__name__}"
    return parse
