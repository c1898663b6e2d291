"""Decoder for APOD metadata response bodies.

The record shape depends on ``media_type``, so decoding happens in two
steps: the body is parsed as generic JSON, the shared fields are validated,
and only then is the discriminator inspected to pick the media variant.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schemas.media_record import ImageMedia, MediaRecord, RecordFields, VideoMedia

from .exceptions import InvalidUrl, MalformedRecord, UnknownMediaType

logger = logging.getLogger(__name__)

MEDIA_TYPES = {"image": ImageMedia, "video": VideoMedia}

# pydantic error types raised for strings that are not absolute URLs
URL_ERROR_TYPES = {"url_parsing", "url_scheme", "url_syntax_violation", "url_too_long"}


def decode_media_record(raw: bytes | str) -> MediaRecord:
    """Decode one APOD JSON object into a MediaRecord.

    Args:
        raw: Response body holding a single JSON object

    Returns:
        The decoded record

    Raises:
        MalformedRecord: If the body is not a JSON object or a required
            field is missing or has the wrong type
        InvalidUrl: If ``url`` or ``hdurl`` is not an absolute URL
        UnknownMediaType: If ``media_type`` is missing or unrecognized
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise MalformedRecord(f"Response body is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedRecord(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    fields = _validate(RecordFields, data)
    media = _decode_media(data)

    record = MediaRecord(**dict(fields), media=media)
    logger.debug(f"Decoded {media.media_type} record for {record.date}: {record.title}")
    return record


def _decode_media(data: dict[str, Any]) -> ImageMedia | VideoMedia:
    """Pick the media variant from the ``media_type`` discriminator."""
    media_type = data.get("media_type")
    model = MEDIA_TYPES.get(media_type) if isinstance(media_type, str) else None
    if model is None:
        raise UnknownMediaType(f"Unknown media type: {media_type!r}")

    if model is VideoMedia:
        return VideoMedia()

    hdurl = data.get("hdurl")
    if not isinstance(hdurl, str):
        raise MalformedRecord(
            "Field 'hdurl' is required for image records and must be a string",
            field="hdurl",
        )
    return _validate(ImageMedia, {"media_type": media_type, "hdurl": hdurl})


def _validate(model, data: dict[str, Any]):
    """Validate data against a model, translating pydantic errors."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        errors = e.errors()
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        if first["type"] in URL_ERROR_TYPES:
            raise InvalidUrl(
                f"Field '{field}' is not a valid URL: {first['msg']}",
                field=field,
                errors=[str(err) for err in errors],
            ) from e
        raise MalformedRecord(
            f"Field '{field}' is invalid: {first['msg']}",
            field=field,
            errors=[str(err) for err in errors],
        ) from e
