# marketplace/utils/logging.py
import logging

from rich.logging import RichHandler

from marketplace.utils.settings import DEBUG


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Logger z RichHandlerem, handler dodawany tylko raz na logger.
    """
    logger = logging.getLogger(name or "marketplace")
    level = logging.DEBUG if DEBUG else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter("[%(name)s]  %(message)s"))
        handler.setLevel(level)
        logger.addHandler(handler)
        logger.propagate = False

    return logger
