import logging

import pytest
import structlog

from freelan.logger import FreelanStructLogger, get_freelan_logger, init_logger

pytestmark = pytest.mark.unit


@pytest.mark.usefixtures("reset_logging")
class TestInitLogger:

    def setup_method(self):
        self.root = logging.getLogger()
        for handler in list(self.root.handlers):
            self.root.removeHandler(handler)

    def structlog_handlers(self):
        return [
            handler for handler in self.root.handlers
            if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        ]

    def test_installs_one_stderr_handler(self):
        logger = init_logger()

        assert isinstance(logger, FreelanStructLogger)
        assert len(self.structlog_handlers()) == 1
        assert self.root.level == logging.INFO

    def test_repeated_setup_only_adjusts_level(self):
        init_logger()
        init_logger(debug=True)

        assert len(self.structlog_handlers()) == 1
        assert self.root.level == logging.DEBUG

    def test_lines_go_to_stderr(self, capsys):
        init_logger().info("Listening on", endpoint="0.0.0.0:12000")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Listening on" in captured.err
        assert "0.0.0.0:12000" in captured.err


class TestFreelanStructLogger:

    def test_bind_returns_a_new_logger(self):
        logger = get_freelan_logger()
        bound = logger.bind(component="SourceLayeringResolver")

        assert bound is not logger
        assert bound.context == {'component': "SourceLayeringResolver"}
        assert logger.context == {}

    def test_bind_merges_context(self):
        bound = get_freelan_logger().bind(component="ConfigurationAssembler").bind(path="/etc/freelan/freelan.cfg")

        assert bound.context == {'component': "ConfigurationAssembler", 'path': "/etc/freelan/freelan.cfg"}
        assert bound.log_name == "freelan"
