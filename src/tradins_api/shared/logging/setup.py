import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler on first call; later calls only adjust the level."""
    resolved_level = logging.getLevelName(level.upper())
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved_level)
