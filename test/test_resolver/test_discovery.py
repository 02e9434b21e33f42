import os
import sys
from pathlib import Path

import pytest

from freelan.config.core.discovery import (
    CONFIGURATION_FILENAME, discover_configuration_file, get_configuration_files
)

pytestmark = pytest.mark.unit


class TestConfigurationFileDiscovery:
    """Test the fallback search for a configuration file."""

    def test_posix_candidates(self):
        candidates = get_configuration_files("linux")

        assert candidates == (
            Path.home() / ".freelan" / CONFIGURATION_FILENAME,
            Path("/etc/freelan") / CONFIGURATION_FILENAME,
        )

    def test_windows_candidates_start_with_home(self):
        candidates = get_configuration_files("win32")

        assert candidates[0] == Path.home() / CONFIGURATION_FILENAME
        assert candidates[1].name == CONFIGURATION_FILENAME
        assert len(candidates) == 2

    def test_first_existing_candidate_wins(self, tmp_path):
        user = tmp_path / "user.cfg"
        system = tmp_path / "system.cfg"
        user.write_text("[fscp]\n")
        system.write_text("[fscp]\n")

        result = discover_configuration_file([user, system])

        assert result.found
        assert result.path == user

    def test_missing_candidates_are_skipped(self, tmp_path):
        system = tmp_path / "system.cfg"
        system.write_text("[fscp]\n")

        result = discover_configuration_file([tmp_path / "missing.cfg", system])

        assert result.path == system
        assert result.candidates == (tmp_path / "missing.cfg", system)

    def test_nothing_found(self, missing_candidates):
        result = discover_configuration_file(missing_candidates)

        assert not result.found
        assert result.path is None
        assert result.candidates == tuple(missing_candidates)

    def test_directories_are_not_candidates(self, tmp_path):
        directory = tmp_path / "freelan.cfg"
        directory.mkdir()

        assert not discover_configuration_file([directory]).found

    @pytest.mark.skipif(sys.platform.startswith("win") or os.geteuid() == 0,
                        reason="permission bits are not enforced")
    def test_unreadable_candidate_is_skipped(self, tmp_path):
        unreadable = tmp_path / "unreadable.cfg"
        unreadable.write_text("[fscp]\n")
        unreadable.chmod(0)

        try:
            assert not discover_configuration_file([unreadable]).found
        finally:
            unreadable.chmod(0o600)
