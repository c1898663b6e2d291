"""Pipeline orchestrator for the APOD fetch run.

Runs the stages strictly in order and stops at the first failure:

    START -> METADATA_FETCHED -> DECODED -> IMAGE_URL_RESOLVED
          -> IMAGE_FETCHED -> WRITTEN -> DONE

At most two requests are made per run, and the image request is never
issued before the metadata record has been decoded.
"""

import logging
from enum import Enum
from pathlib import Path

from apod_fetcher.aggregators import ImageDownloader
from apod_fetcher.clients import ApodClient, ClientError, decode_media_record
from apod_fetcher.config import resolve_api_key
from apod_fetcher.exceptions import MetadataFetchError
from schemas.config import ApodConfig
from schemas.media_record import MediaRecord

logger = logging.getLogger(__name__)


class Stage(Enum):
    """States of a single pipeline run."""

    START = "start"
    METADATA_FETCHED = "metadata_fetched"
    DECODED = "decoded"
    IMAGE_URL_RESOLVED = "image_url_resolved"
    IMAGE_FETCHED = "image_fetched"
    WRITTEN = "written"
    DONE = "done"


class Orchestrator:
    """End-to-end fetch pipeline.

    Fetches today's APOD record, downloads its high-resolution image and
    writes it to the configured directory.

    Attributes:
        config: Loaded user configuration
        stage: Last stage the run reached
    """

    def __init__(
        self,
        config: ApodConfig,
        client: ApodClient | None = None,
        downloader: ImageDownloader | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            config: User configuration, loaded once at startup
            client: Optional APOD client. If not provided, one is created
                    with the default transport settings and closed on exit.
            downloader: Optional image downloader sharing the client
        """
        self.config = config
        self._owns_client = client is None
        self._client = client if client is not None else ApodClient.from_defaults()
        self._downloader = downloader or ImageDownloader(self._client)
        self.stage = Stage.START

    def close(self) -> None:
        """Close the APOD client if we own it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Orchestrator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def run(self) -> Path:
        """Run the pipeline once.

        Returns:
            Path of the written image

        Raises:
            MetadataFetchError: If the record cannot be fetched or decoded
            NoImageAvailable: If the record is a video
            ImageFetchError: If the image cannot be downloaded
            WriteError: If the image cannot be written
        """
        self.stage = Stage.START
        api_key = resolve_api_key(self.config)

        record = self._fetch_record(api_key)

        url = self._downloader.resolve_image_url(record)
        self._advance(Stage.IMAGE_URL_RESOLVED)

        data = self._downloader.fetch_image(url)
        self._advance(Stage.IMAGE_FETCHED)

        path = self._downloader.write_image(self.config.output_dir, record, url, data)
        self._advance(Stage.WRITTEN)

        self._advance(Stage.DONE)
        return path

    def _fetch_record(self, api_key: str) -> MediaRecord:
        """Fetch and decode the APOD record."""
        try:
            body = self._client.fetch_metadata(api_key)
            self._advance(Stage.METADATA_FETCHED)
            record = decode_media_record(body)
        except ClientError as e:
            raise MetadataFetchError(f"Error fetching metadata: {e.message}") from e

        self._advance(Stage.DECODED)
        logger.info(f"APOD {record.date}: {record.title}")
        return record

    def _advance(self, stage: Stage) -> None:
        logger.debug(f"Pipeline stage {self.stage.value} -> {stage.value}")
        self.stage = stage
