"""Custom exceptions for network clients."""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when a network connection fails or times out."""

    pass


class APIError(ClientError):
    """Raised when the API returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class RateLimitError(APIError):
    """Raised when the API returns a 429 rate limit response."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class NotFoundError(APIError):
    """Raised when the API returns a 404 not found response."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class DecodeError(ClientError):
    """Raised when a response body cannot be decoded into a MediaRecord."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list | None = None,
        *args,
        **kwargs,
    ):
        self.field = field
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class UnknownMediaType(DecodeError):
    """Raised when media_type is missing or not "image"/"video"."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message, field="media_type", errors=errors)


class MalformedRecord(DecodeError):
    """Raised when a required field is missing or has the wrong type."""

    pass


class InvalidUrl(DecodeError):
    """Raised when a URL field is not a parseable absolute URL."""

    pass
