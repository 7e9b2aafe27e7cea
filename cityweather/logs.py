import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the root logger for the whole package."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
