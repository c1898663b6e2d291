"""Schema definitions for apod-fetcher."""

from .config import ApodConfig
from .date_string import DateString
from .media_record import ImageMedia, MediaRecord, RecordFields, VideoMedia

__all__ = [
    "ApodConfig",
    "DateString",
    "ImageMedia",
    "MediaRecord",
    "RecordFields",
    "VideoMedia",
]
