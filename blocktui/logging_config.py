import logging
import sys


def setup_logging(level=logging.INFO):
    """Send every log record to stdout with a single timestamped handler."""
    logger = logging.getLogger()
    logger.setLevel(level)

    while logger.handlers:
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s")
    )
    logger.addHandler(handler)

    return logger
