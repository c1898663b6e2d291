"""Tests for client exception classes."""


from apod_fetcher.clients import (
    APIError,
    ClientError,
    ConnectionError,
    DecodeError,
    InvalidUrl,
    MalformedRecord,
    NotFoundError,
    RateLimitError,
    UnknownMediaType,
)


class TestClientError:
    """Tests for the base ClientError exception."""

    def test_instantiation_with_message(self):
        """ClientError stores the error message."""
        error = ClientError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        """ClientError is an Exception."""
        assert isinstance(ClientError("test"), Exception)


class TestConnectionError:
    """Tests for ConnectionError exception."""

    def test_inheritance(self):
        """ConnectionError inherits from ClientError."""
        error = ConnectionError("Network unreachable")

        assert error.message == "Network unreachable"
        assert isinstance(error, ClientError)


class TestAPIError:
    """Tests for APIError and its subclasses."""

    def test_instantiation_with_status_code(self):
        """APIError stores message and status code."""
        error = APIError("Server error", status_code=500)

        assert error.message == "Server error"
        assert error.status_code == 500

    def test_rate_limit_defaults(self):
        """RateLimitError has a default message and status 429."""
        error = RateLimitError()

        assert error.message == "Rate limit exceeded"
        assert error.status_code == 429
        assert isinstance(error, APIError)

    def test_not_found_defaults(self):
        """NotFoundError has a default message and status 404."""
        error = NotFoundError()

        assert error.message == "Resource not found"
        assert error.status_code == 404
        assert isinstance(error, APIError)


class TestDecodeErrors:
    """Tests for the decode error family."""

    def test_decode_error_defaults(self):
        """DecodeError has no field and no details by default."""
        error = DecodeError("Bad body")

        assert error.message == "Bad body"
        assert error.field is None
        assert error.errors == []

    def test_malformed_record_stores_field(self):
        """MalformedRecord names the offending field."""
        error = MalformedRecord("Field 'title' is invalid", field="title")

        assert error.field == "title"
        assert isinstance(error, DecodeError)
        assert isinstance(error, ClientError)

    def test_invalid_url_stores_details(self):
        """InvalidUrl keeps validation details."""
        error = InvalidUrl("Not a URL", field="hdurl", errors=["relative URL"])

        assert error.field == "hdurl"
        assert error.errors == ["relative URL"]

    def test_unknown_media_type_field(self):
        """UnknownMediaType always refers to media_type."""
        error = UnknownMediaType("Unknown media type: 'audio'")

        assert error.field == "media_type"
        assert isinstance(error, DecodeError)
