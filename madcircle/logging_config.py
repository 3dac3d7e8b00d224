"""Console logging for applications embedding madcircle."""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """Send ``madcircle.*`` records at ``level`` or above to stdout.

    Calling it again replaces the handler rather than adding a second one.
    """
    logger = logging.getLogger("madcircle")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')
    )
    logger.addHandler(handler)
