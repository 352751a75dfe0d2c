import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=None) -> int:
    """
    Replace loguru's default handler with a single formatted sink.

    Args:
        level: Minimum level to emit
        sink: Where to write (defaults to stdout)

    Returns:
        The id of the added handler
    """
    logger.remove()  # Remove default handler
    return logger.add(
        sink if sink is not None else sys.stdout,
        format=LOG_FORMAT,
        level=level
    )
