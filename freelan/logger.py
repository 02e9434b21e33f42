import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the freelan package"""

    root_logger = logging.getLogger()

    # Reuse an existing structlog handler, only adjusting the level
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
            isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            root_logger.setLevel(log_level.upper())
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            # Remove _record & _from_structlog.
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    # Log lines go to stderr so that stdout stays free for help output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class FreelanStructLogger:
    """
    Structured logger for the freelan package.
    Uses context variables to bind data that will be automatically included in all log messages.
    """

    def __init__(self, log_name: str = "freelan", **initial_values: Any):
        self.log_name = log_name
        self.context = initial_values
        # Lazy proxy: the logging setup is looked up when a line is emitted
        self.logger = structlog.stdlib.get_logger(log_name, **initial_values)

    def bind(self, **new_values: Any) -> "FreelanStructLogger":
        """
        Bind values to the logger.

        Unlike `bind_context`, the values are only attached to the returned
        logger, so components can tag their own lines (e.g. `component="resolver"`).
        """
        return FreelanStructLogger(self.log_name, **{**self.context, **new_values})

    @staticmethod
    def bind_context(**new_values: Any):
        """Bind values to the context of every logger in the current run"""
        structlog.contextvars.bind_contextvars(**new_values)

    @staticmethod
    def unbind_context(*keys: str):
        """Unbind keys from the logger context"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_freelan_logger(log_name: str = "freelan") -> FreelanStructLogger:
    """Return a structured logger without touching the logging setup."""
    return FreelanStructLogger(log_name)


def init_logger(debug: bool = False, json_logs: bool = False) -> FreelanStructLogger:
    """
    Initialize the structured logger for the freelan package.

    Args:
        debug: Whether debug output was requested on the command line
        json_logs: Render log lines as JSON instead of console text

    Returns:
        FreelanStructLogger: Configured structured logger instance
    """
    log_level = "DEBUG" if debug else "INFO"

    setup_logging(json_logs=json_logs, log_level=log_level)

    return FreelanStructLogger("freelan")
