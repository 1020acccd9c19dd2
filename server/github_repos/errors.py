import logging
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_API_ERROR = "INTERNAL_API_ERROR"


class GitHubAPIError(Exception):
    """Raised when GitHub API requests fail."""
    pass


class ApiError(Exception):
    """Caller-facing error. `extensions` is reported with the GraphQL error."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def extensions(self) -> Dict[str, Any]:
        return {"code": self.code.value}


def log_and_return_error(
    logger: logging.Logger,
    code: ErrorCode,
    message: str,
    error: Optional[BaseException] = None,
) -> ApiError:
    """Log the original cause and build the error to raise to the caller."""
    if error is not None:
        logger.error(str(error) or message, exc_info=error, extra={"error": error})
    else:
        logger.error(message)
    return ApiError(code, message)
