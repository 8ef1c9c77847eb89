"""In-memory image representations."""

from .decoded_image import DecodedImage

__all__ = ["DecodedImage"]
