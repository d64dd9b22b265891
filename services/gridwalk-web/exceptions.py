"""Custom exceptions for the gridwalk-web service."""

from gridwalk_common import ErrorKind, GridwalkError


class AuthenticationError(GridwalkError):
    """Raised when a request carries no usable session token."""

    def __init__(self, message: str = "Authentication token not found"):
        super().__init__(message, ErrorKind.UNAUTHENTICATED)


class InvalidRequestError(GridwalkError):
    """Raised when a required field is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INVALID_INPUT)


class UpstreamError(GridwalkError):
    """Raised when the GridWalk API rejects a call or cannot be reached."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UPSTREAM,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.upstream_status = status_code
        self.cause = cause
        super().__init__(message, kind)


class TileServerError(GridwalkError):
    """Raised when the tile server fails to return a tile."""

    def __init__(self, tile_url: str, cause: Exception | None = None):
        self.tile_url = tile_url
        self.cause = cause
        super().__init__("Error proxying to tile server")


class TokenGenerationError(GridwalkError):
    """Raised when the OS Maps OAuth2 endpoint does not issue a token."""

    def __init__(self, message: str = "Error generating token", cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
