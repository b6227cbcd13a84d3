import logging
import sys

LOG_FORMAT = "time=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"
HANDLER_NAME = "hookreceiver.stdout"


def configure_logging(level: str = "INFO") -> None:
    """Send the package's text log lines to stdout at the given level.

    Safe to call more than once; the stdout handler is only added the first
    time. Records still propagate to the root logger.
    """
    package_logger = logging.getLogger("hookreceiver")
    package_logger.setLevel(level.upper())

    if any(h.get_name() == HANDLER_NAME for h in package_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
