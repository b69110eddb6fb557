import logging
import os


def setup_logging(level: str | None = None) -> None:
    """Configure console logging for the command line.

    Uses LOG_LEVEL when ``level`` is None (default WARNING). Request lines
    are logged at DEBUG.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()
    level_value = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
