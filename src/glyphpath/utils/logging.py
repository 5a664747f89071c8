"""Logging utilities for glyphpath."""

import logging
from pathlib import Path

import structlog

from glyphpath.config import LoggingConfig


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging for the library.

    glyphpath modules log through structlog; this routes those events to
    the console and, if log_file is given, to a file. Calling it again
    replaces the handlers set up by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    # Handlers live on the package logger so the host application's root
    # logger is left alone. Reconfiguring replaces the previous handlers.
    package_logger = logging.getLogger("glyphpath")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.DEBUG)
    package_logger.propagate = False

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        package_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("glyphpath")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


def configure_from_settings(config: LoggingConfig) -> structlog.stdlib.BoundLogger:
    """Configure logging from a LoggingConfig.

    Args:
        config: Logging settings

    Returns:
        Configured structlog logger
    """
    return configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
    )
