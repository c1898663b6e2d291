"""Network clients for the APOD API."""

from .apod_client import USER_AGENT, ApodClient
from .client import Client
from .decoder import decode_media_record
from .exceptions import (
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

__all__ = [
    "Client",
    "ApodClient",
    "USER_AGENT",
    "decode_media_record",
    "ClientError",
    "ConnectionError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
    "DecodeError",
    "UnknownMediaType",
    "MalformedRecord",
    "InvalidUrl",
]
