"""
Configuration error taxonomy.

Every failure raised while resolving the node configuration carries an
`ErrorKind`, so callers can branch on the kind rather than on the message.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(Enum):
    """Kinds of configuration errors."""
    MISSING_REQUIRED_OPTION = "missing_required_option"
    INVALID_OPTION_VALUE = "invalid_option_value"
    EXPLICIT_FILE_UNREADABLE = "explicit_file_unreadable"
    DISCOVERED_FILE_ABSENT = "discovered_file_absent"
    UNRECOGNIZED_OPTION_KEY = "unrecognized_option_key"
    CREDENTIAL_LOAD_ERROR = "credential_load_error"
    CONFIGURATION_FILE_ERROR = "configuration_file_error"
    INCOMPLETE_OPTION_PAIR = "incomplete_option_pair"

    @property
    def fatal(self) -> bool:
        """Whether this kind aborts the startup sequence."""
        return self not in (
            ErrorKind.DISCOVERED_FILE_ABSENT,
            ErrorKind.UNRECOGNIZED_OPTION_KEY,
            ErrorKind.INCOMPLETE_OPTION_PAIR,
        )


class ConfigurationError(Exception):
    """Base exception for configuration errors."""

    kind: ErrorKind = ErrorKind.INVALID_OPTION_VALUE

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        path: Optional[Union[str, Path]] = None,
    ):
        self.message = message
        self.key = key
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    @property
    def fatal(self) -> bool:
        return self.kind.fatal

    def with_key(self, key: str) -> "ConfigurationError":
        """Attach the option key the failure relates to."""
        if self.key is None:
            self.key = key
        return self

    def __str__(self) -> str:
        if self.key and self.key not in self.message:
            return f"{self.key}: {self.message}"
        return self.message


class MissingRequiredOption(ConfigurationError):
    """Raised when a required option has no value in any source."""
    kind = ErrorKind.MISSING_REQUIRED_OPTION

    def __init__(self, key: str):
        super().__init__(f"the option '{key}' is required but missing", key=key)


class InvalidOptionValue(ConfigurationError):
    """Raised when a raw value cannot be converted to its typed form."""
    kind = ErrorKind.INVALID_OPTION_VALUE

    def __init__(self, message: str, key: Optional[str] = None, value: object = None):
        self.value = value
        super().__init__(message, key=key)


class ExplicitFileUnreadable(ConfigurationError):
    """Raised when an explicitly named configuration file cannot be opened."""
    kind = ErrorKind.EXPLICIT_FILE_UNREADABLE

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        message = f"can not read configuration file {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path=path)


class DiscoveredFileAbsent(ConfigurationError):
    """Signals that none of the configuration file candidates exist."""
    kind = ErrorKind.DISCOVERED_FILE_ABSENT

    def __init__(self, candidates):
        self.candidates = tuple(Path(candidate) for candidate in candidates)
        locations = ", ".join(str(candidate) for candidate in self.candidates)
        super().__init__(
            f"No configuration file specified and none found in the environment. "
            f"Looked up locations were: {locations}"
        )


class UnrecognizedOptionKey(ConfigurationError):
    """Signals an option key that no descriptor matches."""
    kind = ErrorKind.UNRECOGNIZED_OPTION_KEY

    def __init__(self, key: str, source: str):
        self.source = source
        super().__init__(f"unrecognized option '{key}' in {source}", key=key)


class CredentialLoadError(ConfigurationError):
    """Raised when a certificate or private key file can not be opened or parsed."""
    kind = ErrorKind.CREDENTIAL_LOAD_ERROR

    def __init__(self, path: Union[str, Path], key: Optional[str] = None):
        super().__init__(f"Unable to open the specified file: {path}", key=key, path=path)


class ConfigurationFileError(ConfigurationError):
    """Raised when a configuration file opens but its content is malformed."""
    kind = ErrorKind.CONFIGURATION_FILE_ERROR

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"invalid configuration file {path}: {reason}", path=path)


class IncompleteOptionPair(ConfigurationError):
    """Signals that only one option of a pair meant to be given together was set."""
    kind = ErrorKind.INCOMPLETE_OPTION_PAIR

    def __init__(self, given: str, missing: str):
        self.given = given
        super().__init__(
            f"'{given}' is set but '{missing}' is not; the two are expected together",
            key=missing,
        )
