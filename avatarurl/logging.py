from sys import stderr
import logging

# logging module doesn't provide an easy way to get this
LOG_LEVELS = [
    "CRITICAL",
    "ERROR",
    "WARNING",
    "INFO",
    "DEBUG",
]

# wide enough for the longest module name, "avatarurl.builder"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)-17s - %(message)s"

CONFIGURED = False


def configure_logging(level: str = "WARNING") -> None:
    """Send avatarurl's log records to stderr, at the given level.

    Only the package logger is touched: the library never configures logging
    for whatever imports it.  The level is (re)applied on every call.

    """
    global CONFIGURED
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level: {level}")
    package_logger = logging.getLogger("avatarurl")
    package_logger.setLevel(level)
    if not CONFIGURED:
        handler = logging.StreamHandler(stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    CONFIGURED = True
