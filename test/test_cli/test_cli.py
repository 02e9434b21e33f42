import pytest

from freelan.cli import build_parser, main, parse_command_line
from freelan.config import Configuration
from freelan.config.core.discovery import CONFIGURATION_FILE_ENV
from freelan.config.core.errors import InvalidOptionValue

pytestmark = pytest.mark.unit


class TestParseCommandLine:

    def test_option_flags(self, registry):
        options = parse_command_line(
            ['-d', '--fscp.listen_on', '127.0.0.1:4000', '--fscp.contact', 'a.example.com:1', 'b.example.com:2'],
            registry,
        )

        assert options.debug is True
        assert options.help is False
        assert options.values == {
            'fscp.listen_on': '127.0.0.1:4000',
            'fscp.contact': ['a.example.com:1', 'b.example.com:2'],
        }

    def test_repeated_list_flag_accumulates(self, registry):
        options = parse_command_line(
            ['--fscp.contact', 'a.example.com:1', '--fscp.contact', 'b.example.com:2'], registry)

        assert options.values['fscp.contact'] == ['a.example.com:1', 'b.example.com:2']

    def test_unset_flags_are_absent(self, registry):
        options = parse_command_line([], registry)

        assert options.values == {}
        assert options.configuration_file is None

    def test_unknown_flag_is_collected(self, registry):
        options = parse_command_line(['--server.enabled=yes'], registry)

        assert options.unrecognized == ('server.enabled',)

    def test_flag_missing_its_value(self, registry):
        with pytest.raises(InvalidOptionValue):
            parse_command_line(['--fscp.listen_on'], registry)

    def test_abbreviations_are_not_accepted(self, registry):
        options = parse_command_line(['--fscp.listen', '127.0.0.1:4000'], registry)

        assert 'fscp.listen_on' not in options.values
        assert options.unrecognized == ('fscp.listen',)

    def test_help_lists_every_option(self, registry):
        text = build_parser(registry).format_help()

        for key in registry.keys():
            assert f"--{key}" in text
        assert "FreeLAN Secure Channel Protocol (FSCP) options" in text


@pytest.mark.usefixtures("reset_logging")
class TestMain:

    @pytest.fixture(autouse=True)
    def setup(self, credentials, write_config):
        self.configuration_file = write_config(
            "[security]\n"
            f"signature_certificate_file = {credentials['signature_certificate']}\n"
            f"signature_private_key_file = {credentials['signature_private_key']}\n"
        )
        self.empty_file = write_config("", name="empty.cfg")
        self.received = []

    def runner(self, configuration, logger):
        self.received.append(configuration)
        return 0

    def test_help(self, capsys):
        assert main(['--help'], runner=self.runner, environ={}) == 0

        out = capsys.readouterr().out
        assert "--security.signature_certificate_file" in out
        assert self.received == []

    def test_success_hands_configuration_to_runner(self):
        status = main(['-c', str(self.configuration_file), '--switch.routing_method', 'hub'],
                      runner=self.runner, environ={})

        assert status == 0
        assert len(self.received) == 1
        assert isinstance(self.received[0], Configuration)
        assert self.received[0].switch.routing_method.value == 'hub'

    def test_runner_status_is_returned(self):
        assert main(['-c', str(self.configuration_file)], runner=lambda configuration, logger: 3, environ={}) == 3

    def test_configuration_file_from_environment(self):
        status = main([], runner=self.runner, environ={CONFIGURATION_FILE_ENV: str(self.configuration_file)})

        assert status == 0
        assert len(self.received) == 1

    def test_default_runner(self):
        assert main(['-c', str(self.configuration_file), '--tap_adapter.enabled', 'no'], environ={}) == 0

    def test_missing_required_option(self, capsys):
        status = main(['-c', str(self.empty_file)], runner=self.runner, environ={})

        assert status == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "security.signature_certificate_file" in err
        assert self.received == []

    def test_unknown_flag_is_not_fatal(self):
        status = main(['-c', str(self.configuration_file), '--server.enabled', 'yes'],
                      runner=self.runner, environ={})

        assert status == 0
        assert len(self.received) == 1

    def test_flag_missing_its_value(self, capsys):
        status = main(['-c', str(self.configuration_file), '--fscp.listen_on'], runner=self.runner, environ={})

        assert status == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_explicit_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "missing.cfg"

        status = main(['-c', str(missing)], runner=self.runner, environ={})

        assert status == 1
        assert str(missing) in capsys.readouterr().err
        assert self.received == []

    def test_invalid_value(self, capsys):
        status = main(['-c', str(self.configuration_file), '--fscp.hello_timeout', 'soon'],
                      runner=self.runner, environ={})

        assert status == 1
        assert "fscp.hello_timeout" in capsys.readouterr().err

    @pytest.mark.parametrize("value", ["4294967296", "100000000000000000", "999999999999999999999"])
    def test_out_of_range_timeout(self, value, capsys):
        status = main(['-c', str(self.configuration_file), '--fscp.hello_timeout', value],
                      runner=self.runner, environ={})

        assert status == 1
        assert "fscp.hello_timeout" in capsys.readouterr().err
        assert self.received == []

    def test_configuration_file_not_in_utf8(self, tmp_path, capsys):
        latin1 = tmp_path / "latin1.cfg"
        latin1.write_bytes("# caf\xe9\n[fscp]\nlisten_on = 0.0.0.0:12000\n".encode("latin-1"))

        status = main(['-c', str(latin1)], runner=self.runner, environ={})

        assert status == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert str(latin1) in err
