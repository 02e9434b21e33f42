"""
Command line entry point.

Parses the command line, resolves the node configuration and hands it to
a runner. Resolution failures are printed to stderr and exit with status 1.
"""

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from freelan.config import (
    CommandLineConfigProvider, Configuration, ConfigurationError,
    OptionKind, OptionRegistry, get_default_registry, load_configuration
)
from freelan.config.core.errors import InvalidOptionValue
from freelan.logger import FreelanStructLogger, init_logger

Runner = Callable[[Configuration, FreelanStructLogger], int]

PROGRAM = "freelan"

METAVARS = {
    OptionKind.STRING: "VALUE",
    OptionKind.BOOLEAN: "BOOL",
    OptionKind.INTEGER: "N",
    OptionKind.STRING_LIST: "VALUE",
}


class OptionParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors as InvalidOptionValue instead of exiting."""

    def error(self, message):
        raise InvalidOptionValue(message)


@dataclass
class CommandLineOptions:
    help: bool = False
    debug: bool = False
    configuration_file: Optional[str] = None
    values: Dict[str, object] = field(default_factory=dict)
    unrecognized: Tuple[str, ...] = ()


def _describe(descriptor) -> str:
    text = descriptor.help
    if descriptor.required:
        return f"{text} (required)"
    if descriptor.kind is OptionKind.BOOLEAN and descriptor.has_default:
        return f"{text} (default: {'yes' if descriptor.default else 'no'})"
    if descriptor.has_default and not descriptor.is_list:
        return f"{text} (default: {descriptor.default})"
    return text


def build_parser(registry: OptionRegistry) -> OptionParser:
    """Build the parser: generic flags plus one flag per registered option."""
    parser = OptionParser(
        prog=PROGRAM,
        description="Peer-to-peer virtual private network node.",
        add_help=False,
        allow_abbrev=False,
    )

    generic = parser.add_argument_group("Generic options")
    generic.add_argument("-h", "--help", action="store_true", help="Produce help message.")
    generic.add_argument("-d", "--debug", action="store_true", help="Enables debug output.")
    generic.add_argument("-c", "--configuration_file", metavar="PATH",
                         help="The configuration file to use.")

    for group in registry.groups():
        arguments = parser.add_argument_group(registry.title(group))
        for descriptor in registry.descriptors(group):
            kwargs = {
                'dest': descriptor.key,
                'default': None,
                'metavar': METAVARS[descriptor.kind],
                'help': _describe(descriptor),
            }
            if descriptor.is_list:
                kwargs.update(nargs="*", action="extend")
            arguments.add_argument(f"--{descriptor.key}", **kwargs)

    return parser


def _unrecognized_keys(extras: Sequence[str]) -> Tuple[str, ...]:
    keys = []
    for token in extras:
        if token.startswith("-") and token.strip("-"):
            keys.append(token.lstrip("-").split("=", 1)[0])
    return tuple(keys)


def parse_command_line(
    argv: Optional[Sequence[str]] = None,
    registry: Optional[OptionRegistry] = None,
    parser: Optional[OptionParser] = None,
) -> CommandLineOptions:
    """
    Parse the command line.

    Unknown flags are returned in `unrecognized` rather than rejected.

    Raises:
        InvalidOptionValue: On malformed usage, such as a flag missing its value
    """
    registry = registry or get_default_registry()
    parser = parser or build_parser(registry)

    namespace, extras = parser.parse_known_args(argv)
    arguments = vars(namespace)

    return CommandLineOptions(
        help=arguments.pop("help"),
        debug=arguments.pop("debug"),
        configuration_file=arguments.pop("configuration_file"),
        values={key: value for key, value in arguments.items() if value is not None},
        unrecognized=_unrecognized_keys(extras),
    )


def log_configuration(configuration: Configuration, logger: FreelanStructLogger) -> int:
    """Default runner: report the resolved configuration."""
    if configuration.tap_adapter.enabled:
        logger.info("Tap adapter enabled", **configuration.tap_adapter.to_dict())
    else:
        logger.info("Configured not to use any tap adapter.")

    logger.info("Listening on", endpoint=str(configuration.fscp.listen_on))
    logger.debug("Resolved configuration", configuration=configuration.to_dict())
    return 0


def _print_errors(errors: List[ConfigurationError]):
    for error in errors:
        print(f"Error: {error}", file=sys.stderr)


def main(
    argv: Optional[Sequence[str]] = None,
    runner: Optional[Runner] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Run the command line interface.

    Args:
        argv: Arguments, defaults to sys.argv[1:]
        runner: Called with the configuration and the logger once resolution
            succeeded; its return value is the exit status
        environ: Environment, defaults to os.environ

    Returns:
        The process exit status
    """
    registry = get_default_registry()
    parser = build_parser(registry)

    try:
        options = parse_command_line(argv, registry, parser)
    except ConfigurationError as e:
        _print_errors([e])
        return 1

    if options.help:
        parser.print_help()
        return 0

    logger = init_logger(debug=options.debug)

    load = load_configuration(
        CommandLineConfigProvider(registry, options.values, options.unrecognized),
        configuration_file=options.configuration_file,
        environ=environ,
        registry=registry,
        logger=logger,
    )

    if not load.is_valid:
        _print_errors(load.errors)
        return 1

    return (runner or log_configuration)(load.configuration, logger)
