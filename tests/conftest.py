"""Pytest fixtures for apod-fetcher tests."""

import json

import pytest


@pytest.fixture
def image_record():
    """APOD record for an image day, as returned by api.nasa.gov."""
    return {
        "copyright": "Nicolas Lefaudeux",
        "date": "2021-03-08",
        "explanation": "What created the unusual red tail[…]",
        "hdurl": "https://apod.nasa.gov/apod/image/2103/Neowise3Tails_Lefaudeux_1088.jpg",
        "media_type": "image",
        "service_version": "v1",
        "title": "Three Tails of Comet NEOWISE",
        "url": "https://apod.nasa.gov/apod/image/2103/Neowise3Tails_Lefaudeux_960.jpg",
    }


@pytest.fixture
def video_record():
    """APOD record for a video day. Video records have no hdurl."""
    return {
        "date": "2021-03-09",
        "explanation": "Is that a fossil?[…]",
        "media_type": "video",
        "service_version": "v1",
        "title": "Perseverance 360: Unusual Rocks and the Search for Life on Mars",
        "url": "https://mars.nasa.gov/layout/embed/image/mars-panorama/?id=25674",
    }


@pytest.fixture
def image_record_body(image_record):
    """Image record encoded as a response body."""
    return json.dumps(image_record).encode()


@pytest.fixture
def video_record_body(video_record):
    """Video record encoded as a response body."""
    return json.dumps(video_record).encode()
