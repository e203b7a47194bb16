"""Logging setup for applications embedding the UEFI check."""

import logging


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure the root ``gce_uefi`` logger with a single stream handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s - %(message)s"))
    pkg_logger = logging.getLogger("gce_uefi")
    pkg_logger.handlers = [handler]
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False

    # Silence noisy third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("google.auth").setLevel(logging.WARNING)
