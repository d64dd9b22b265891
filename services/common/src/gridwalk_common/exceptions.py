"""Exceptions shared by the GridWalk web service and its clients."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories, each rendered with a fixed HTTP status."""

    INVALID_INPUT = "invalid_input"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UPSTREAM: 500,
}


class GridwalkError(Exception):
    """Base class for errors that map onto an HTTP response."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.UPSTREAM):
        self.message = message
        self.kind = kind
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class StorageUploadError(GridwalkError):
    """Raised when writing an object to S3 fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class TableAccessError(GridwalkError):
    """Raised when a DynamoDB read or write fails."""

    def __init__(self, table_name: str, operation: str, cause: Exception | None = None):
        self.table_name = table_name
        self.operation = operation
        self.cause = cause
        super().__init__(f"DynamoDB {operation} on '{table_name}' failed")
