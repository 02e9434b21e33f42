"""
Configuration file discovery.

When no configuration file is named explicitly, the candidates below are
tried in order: a per-user location first, then a system-wide one.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

CONFIGURATION_FILENAME = "freelan.cfg"
CONFIGURATION_FILE_ENV = "FREELAN_CONFIGURATION_FILE"


@dataclass(frozen=True)
class DiscoveryResult:
    """The discovered file, if any, and every candidate that was tried."""
    path: Optional[Path]
    candidates: Tuple[Path, ...]

    @property
    def found(self) -> bool:
        return self.path is not None


def get_configuration_files(platform: Optional[str] = None) -> Tuple[Path, ...]:
    """Return the ordered configuration file candidates for the platform."""
    platform = platform or sys.platform
    home = Path.home()

    if platform.startswith("win"):
        program_data = Path(os.environ.get("PROGRAMDATA", r"C:\ProgramData"))
        return (
            home / CONFIGURATION_FILENAME,
            program_data / "freelan" / CONFIGURATION_FILENAME,
        )

    return (
        home / ".freelan" / CONFIGURATION_FILENAME,
        Path("/etc/freelan") / CONFIGURATION_FILENAME,
    )


def is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def discover_configuration_file(candidates: Optional[Iterable[Path]] = None) -> DiscoveryResult:
    """
    Find the first existing and readable configuration file.

    Only existence and readability are checked; the content is not read.
    """
    candidates = tuple(Path(c) for c in (candidates if candidates is not None else get_configuration_files()))

    for candidate in candidates:
        if is_readable_file(candidate):
            return DiscoveryResult(candidate, candidates)

    return DiscoveryResult(None, candidates)
