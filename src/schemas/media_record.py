"""Astronomy Picture of the Day record schemas.

The APOD API returns one JSON object per day. Its shape depends on the
``media_type`` field: images carry an ``hdurl`` pointing at the
full-resolution file, videos do not.

Example image record:
    {
        "copyright": "Nicolas Lefaudeux",
        "date": "2021-03-08",
        "explanation": "What created the unusual red tail[...]",
        "hdurl": "https://apod.nasa.gov/apod/image/2103/Neowise3Tails_Lefaudeux_1088.jpg",
        "media_type": "image",
        "service_version": "v1",
        "title": "Three Tails of Comet NEOWISE",
        "url": "https://apod.nasa.gov/apod/image/2103/Neowise3Tails_Lefaudeux_960.jpg"
    }
"""

from typing import Literal

from pydantic import AnyUrl, BaseModel, Field, HttpUrl

from .date_string import DateString


class ImageMedia(BaseModel):
    """Image variant of an APOD record.

    Attributes:
        media_type: Always "image"
        hdurl: URL of the highest-resolution version of the image
    """

    media_type: Literal["image"] = "image"
    hdurl: HttpUrl

    model_config = {"frozen": True}


class VideoMedia(BaseModel):
    """Video variant of an APOD record. Videos never have a high-res image."""

    media_type: Literal["video"] = "video"

    model_config = {"frozen": True}


class RecordFields(BaseModel):
    """Fields shared by every APOD record regardless of media type.

    Attributes:
        copyright: Credit line, absent for public domain images
        date: Publication day of the record
        explanation: Description written by the APOD editors
        title: Title of the picture
        url: Display-sized image, or the embed URL for videos
    """

    copyright: str | None = None
    date: DateString
    explanation: str
    title: str
    url: AnyUrl

    model_config = {"frozen": True, "extra": "ignore"}


class MediaRecord(RecordFields):
    """A decoded APOD record: shared fields plus the media variant."""

    media: ImageMedia | VideoMedia = Field(discriminator="media_type")

    @property
    def thumbnail_url(self) -> AnyUrl:
        return self.url

    @property
    def high_res_url(self) -> HttpUrl | None:
        """The full-resolution image URL, or None for videos."""
        if isinstance(self.media, ImageMedia):
            return self.media.hdurl
        return None
