"""
Logging utilities for the Dark Web Leak Monitor
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "darkweb_monitor"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for different log levels"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset_color = self.COLORS['RESET']

        formatted = super().format(record)
        return f"{log_color}[{record.levelname}]{reset_color} {formatted}"


def setup_logger(
    name: str = LOGGER_NAME,
    log_level: str = "INFO",
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Setup a logger with console and optional file output

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path

    Returns:
        Configured logger instance
    """
    global _global_logger

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_formatter = ColoredFormatter(
        '%(asctime)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    if name == LOGGER_NAME:
        _global_logger = logger

    return logger


def log_probe_start(logger: logging.Logger, probe_name: str, sources: int):
    """Log the start of a probe over a source group"""
    logger.debug(f"Starting {probe_name} ({sources} sources)")


def log_probe_complete(logger: logging.Logger, probe_name: str, attempted: int, findings: int = 0):
    """Log the completion of a probe"""
    logger.debug(f"Completed {probe_name}: {attempted} checks, {findings} findings")


def log_error(logger: logging.Logger, probe_name: str, error: str):
    """Log an error that aborted a probe"""
    logger.error(f"Error checking {probe_name}: {error}")


# Global logger instance
_global_logger = None


def get_logger() -> logging.Logger:
    """Get the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = setup_logger()
    return _global_logger
