"""Aggregators for gathering resources from clients."""

from .image_downloader import ImageDownloader, image_filename

__all__ = ["ImageDownloader", "image_filename"]
