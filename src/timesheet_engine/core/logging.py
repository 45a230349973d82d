"""
Logging configuration for the application.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Set up logging configuration."""
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Disable noisy loggers
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    logger = logging.getLogger("timesheet_engine")
    logger.setLevel(log_level)
    return logger
