"""Image loader interfaces and related errors."""

from .errors import (
    ImageDecodeError,
    ImageLoadError,
    ImageNotFoundError,
    UnsupportedReferenceError,
)
from .image_loader import AsyncImageLoader, ImageLoader

__all__ = [
    "AsyncImageLoader",
    "ImageLoader",
    "ImageLoadError",
    "ImageNotFoundError",
    "ImageDecodeError",
    "UnsupportedReferenceError",
]
