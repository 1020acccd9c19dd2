import logging
from typing import Optional


class ErrorFormatter(logging.Formatter):
    """Formatter that keeps the message of an attached exception on the log line."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        error = getattr(record, "error", None)
        if isinstance(error, BaseException) and not record.exc_info:
            line = f"{line} | error: {error}"
        return line


def create_logger(level: Optional[str] = None) -> logging.Logger:
    """Create the application logger with a single console handler."""
    logger = logging.getLogger("github_repos")
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            ErrorFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(console_handler)
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    logger.propagate = False
    return logger
