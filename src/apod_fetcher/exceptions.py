"""Errors raised by the fetch pipeline.

Each pipeline stage wraps whatever went wrong underneath in one of these,
with a short prefix naming the stage. The original exception is kept as
``__cause__``.
"""

from pathlib import Path


class ApodError(Exception):
    """Base exception for all apod-fetcher failures."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigError(ApodError):
    """Raised when the config file exists but cannot be read or parsed."""

    pass


class MetadataFetchError(ApodError):
    """Raised when the APOD record cannot be fetched or decoded."""

    pass


class NoImageAvailable(ApodError):
    """Raised when today's record is a video and has no image to download."""

    def __init__(self, message: str = "Unable to fetch image, media type is video"):
        super().__init__(message)


class ImageFetchError(ApodError):
    """Raised when the high-resolution image cannot be downloaded."""

    pass


class WriteError(ApodError):
    """Raised when the image cannot be written to disk."""

    def __init__(self, message: str, path: Path | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)
