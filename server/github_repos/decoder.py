import json
import logging
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import ErrorCode, log_and_return_error

T = TypeVar("T")


class SchemaParser:
    """Decodes raw JSON into typed values.

    Validation runs in lax mode, so compatible values are converted first
    (numeric strings to numbers, "true" to True). Unknown fields are dropped
    by the models. The parser keeps no state; one instance is created at
    startup and handed to every request.
    """

    def decode(self, data: Any, schema: Type[T], logger: logging.Logger) -> T:
        try:
            return TypeAdapter(schema).validate_python(data)
        except ValidationError as e:
            errors = [
                {
                    "field": ".".join(str(part) for part in error["loc"]),
                    "message": error["msg"],
                }
                for error in e.errors()
            ]
            raise log_and_return_error(
                logger,
                ErrorCode.VALIDATION_ERROR,
                "Failed to parse schema",
                error=ValueError(json.dumps(errors)),
            ) from e
