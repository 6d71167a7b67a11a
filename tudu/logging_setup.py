import logging
import sys

LOGGER_NAME = "tudu"


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure the tudu logger with a single stderr handler.

    Task output goes to stdout, so logs never mix with it. Calling this more
    than once replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logger.setLevel(numeric)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    logger.propagate = False
