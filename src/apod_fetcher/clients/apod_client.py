"""APOD API client for fetching the Astronomy Picture of the Day."""

import logging

from pydantic import HttpUrl

from schemas.media_record import MediaRecord

from .client import Client
from .decoder import decode_media_record

logger = logging.getLogger(__name__)

USER_AGENT = "I CAN HAZ STARS?"


class ApodClient(Client):
    """Client for NASA's Astronomy Picture of the Day API.

    Fetches today's APOD record from api.nasa.gov and the image files it
    references. Image URLs are absolute and may live on another host
    (apod.nasa.gov), so ``fetch_image`` bypasses the base URL.

    Example:
        with ApodClient.from_defaults() as client:
            record = client.fetch("DEMO_KEY")
            data = client.fetch_image(record.high_res_url)
    """

    API_PATH = "/planetary/apod"
    DEFAULT_BASE_URL = "https://api.nasa.gov"
    DEFAULT_TIMEOUT = 5 * 60
    DEFAULT_KEEPALIVE = 60

    @classmethod
    def from_defaults(cls) -> "ApodClient":
        """Build a client pointed at api.nasa.gov with the fixed transport settings."""
        return cls({
            "base_url": cls.DEFAULT_BASE_URL,
            "timeout": cls.DEFAULT_TIMEOUT,
            "keepalive": cls.DEFAULT_KEEPALIVE,
            "headers": {"User-Agent": USER_AGENT},
        })

    def fetch(self, api_key: str) -> MediaRecord:
        """Fetch and decode the current APOD record.

        Args:
            api_key: api.nasa.gov key sent as the ``api_key`` query parameter

        Returns:
            The decoded MediaRecord

        Raises:
            DecodeError: If the response body is not a valid APOD record
            APIError: If the API returns a non-2xx response
            ConnectionError: If the network connection fails
        """
        return decode_media_record(self.fetch_metadata(api_key))

    def fetch_metadata(self, api_key: str) -> bytes:
        """Fetch the raw JSON body of the current APOD record."""
        response = self.get(
            self.API_PATH,
            params={"api_key": api_key},
            headers={"Accept": "application/json"},
        )
        return response.content

    def fetch_image(self, url: HttpUrl | str) -> bytes:
        """Download an image file.

        Args:
            url: Absolute URL of the image

        Returns:
            The raw response body

        Raises:
            APIError: If the server returns a non-2xx response
            ConnectionError: If the network connection fails
        """
        response = self.get(str(url))
        logger.debug(f"Downloaded {len(response.content)} bytes from {url}")
        return response.content
