from enum import Enum
from typing import Any, ClassVar, final


class ErrorKind(str, Enum):
    REQUEST_FAILED = "request_failed"
    DESERIALIZE_FAILED = "deserialize_failed"
    API_ERROR = "api_error"
    NO_RESULT = "no_result"
    CONVERSION_FAILED = "conversion_failed"


class BancaDItaliaError(Exception):
    """Base for the five failure kinds a client call can end with.

    Only the subclasses below are ever raised; each one maps to exactly one
    ErrorKind so callers can dispatch on ``err.kind`` or on the class.
    """

    kind: ClassVar[ErrorKind]


@final
class RequestFailed(BancaDItaliaError):
    """Transport, network or non-success HTTP status."""

    kind = ErrorKind.REQUEST_FAILED

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(f"Request to Banca d'Italia API failed: {message}")
        self.url = url
        self.status_code = status_code


@final
class DeserializeFailed(BancaDItaliaError):
    """Body is not well-formed structured data, or a required field is absent."""

    kind = ErrorKind.DESERIALIZE_FAILED

    def __init__(self, message: str, field: str | None = None, index: int | None = None):
        location = _describe_location(field, index)
        super().__init__(f"Deserializing response from Banca d'Italia API failed: {message}{location}")
        self.field = field
        self.index = index


@final
class ApiError(BancaDItaliaError):
    """The provider answered with an error envelope instead of data."""

    kind = ErrorKind.API_ERROR

    def __init__(self, message: str, code: Any = None):
        super().__init__(f"Banca d'Italia returned api error: {message}")
        self.message = message
        self.code = code


@final
class NoResult(BancaDItaliaError):
    kind = ErrorKind.NO_RESULT

    def __init__(self, operation: str):
        super().__init__(f"Banca d'Italia API returned an empty dataset for {operation}.")
        self.operation = operation


@final
class ConversionFailed(BancaDItaliaError):
    """A decimal or date string could not be converted."""

    kind = ErrorKind.CONVERSION_FAILED

    def __init__(
        self,
        raw: Any,
        target: str,
        reason: str,
        field: str | None = None,
        index: int | None = None,
    ):
        location = _describe_location(field, index)
        super().__init__(f"Failed to convert {raw!r} into {target}: {reason}{location}")
        self.raw = raw
        self.target = target
        self.reason = reason
        self.field = field
        self.index = index

    def at(self, field: str, index: int) -> "ConversionFailed":
        """Return a copy annotated with the record position it came from."""
        return ConversionFailed(self.raw, self.target, self.reason, field=field, index=index)


ERROR_TYPES: tuple[type[BancaDItaliaError], ...] = (
    RequestFailed,
    DeserializeFailed,
    ApiError,
    NoResult,
    ConversionFailed,
)


def _describe_location(field: str | None, index: int | None) -> str:
    parts = []
    if field is not None:
        parts.append(f"field '{field}'")
    if index is not None:
        parts.append(f"record {index}")
    return f" ({', '.join(parts)})" if parts else ""
