"""Image downloader for fetching APOD images to local storage."""

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from urllib.parse import unquote, urlsplit

import httpx
from pydantic import AnyUrl, HttpUrl

from apod_fetcher.clients import ApodClient, ClientError
from apod_fetcher.exceptions import ImageFetchError, NoImageAvailable, WriteError
from schemas.date_string import DateString
from schemas.media_record import MediaRecord

logger = logging.getLogger(__name__)

UNSAFE_NAMES = {".", ".."}
UNSAFE_CHARACTERS = ("/", "\\", "\x00")


def image_filename(date: DateString, url: AnyUrl | httpx.URL | str) -> str:
    """Derive the output filename for an image.

    The last path segment of the URL already carries the original name and
    extension, so it is percent-decoded and prefixed with the record date:
    ``2024-04-19_NGC3372_ETA CARINA_LOPES.jpg``. When there is no usable
    segment the bare date is returned.

    Args:
        date: Publication date of the record
        url: URL the image was downloaded from

    Returns:
        A single path component, never empty
    """
    try:
        path = urlsplit(str(url)).path
    except ValueError:
        return str(date)

    segment = path.rsplit("/", 1)[-1]
    if not segment:
        return str(date)

    try:
        name = unquote(segment, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        logger.debug(f"Path segment {segment!r} is not valid UTF-8 once decoded")
        return str(date)

    if not name or name in UNSAFE_NAMES or any(c in name for c in UNSAFE_CHARACTERS):
        return str(date)

    return f"{date}_{name}"


def _new_file_mode() -> int:
    """Permissions a plainly created file would get under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class ImageDownloader:
    """Downloads the high-resolution image of an APOD record and stores it.

    Example:
        with ApodClient.from_defaults() as client:
            downloader = ImageDownloader(client)
            url = downloader.resolve_image_url(record)
            data = downloader.fetch_image(url)
            path = downloader.write_image(Path("pictures"), record, url, data)
    """

    def __init__(self, client: ApodClient):
        """Initialize the image downloader.

        Args:
            client: Client used for the image request. Not closed by the
                    downloader.
        """
        self._client = client

    def resolve_image_url(self, record: MediaRecord) -> HttpUrl:
        """Return the high-resolution URL, refusing video records."""
        url = record.high_res_url
        if url is None:
            raise NoImageAvailable()
        return url

    def fetch_image(self, url: HttpUrl) -> bytes:
        """Download the image bytes.

        Raises:
            ImageFetchError: On transport failure or a non-2xx response
        """
        try:
            return self._client.fetch_image(url)
        except ClientError as e:
            raise ImageFetchError(f"Error fetching image: {e.message}") from e

    def write_image(
        self,
        directory: Path,
        record: MediaRecord,
        url: HttpUrl,
        data: bytes,
    ) -> Path:
        """Write image bytes to ``directory/<derived filename>``.

        The bytes go to a short-named temporary file in the same directory
        that is then renamed over the target, so an existing file is
        replaced whole or left untouched. The temporary name does not grow
        with the target name.
        The directory itself is not created.

        Raises:
            WriteError: If the file cannot be written
        """
        destination = directory / image_filename(record.date, url)
        partial = None

        try:
            with tempfile.NamedTemporaryFile(
                dir=directory, prefix=".apod-", suffix=".part", delete=False
            ) as f:
                partial = Path(f.name)
                f.write(data)
            os.chmod(partial, _new_file_mode())
            os.replace(partial, destination)
        except OSError as e:
            if partial is not None:
                with contextlib.suppress(OSError):
                    partial.unlink(missing_ok=True)
            raise WriteError(
                f"Unable to write image data: {e}", path=destination
            ) from e

        logger.info(f"Wrote {len(data)} bytes to {destination}")
        return destination
