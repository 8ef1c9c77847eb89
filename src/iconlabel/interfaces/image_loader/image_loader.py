"""Interfaces for loading an image from a reference string."""

import abc

from iconlabel.image import DecodedImage

# pylint: disable=too-few-public-methods


class ImageLoader(abc.ABC):
    """Contract for a synchronous image loader."""

    @abc.abstractmethod
    def load(self, reference: str) -> DecodedImage:
        """Load and decode the image named by ``reference``.

        Args:
            reference (str): A URL or local name identifying the image.

        Returns:
            DecodedImage: The decoded image.

        Raises:
            ImageNotFoundError: If nothing exists for the reference.
            ImageDecodeError: If the data cannot be decoded.
            UnsupportedReferenceError: If the loader cannot handle the reference.
        """


class AsyncImageLoader(abc.ABC):
    """Contract for an image loader that may suspend while fetching.

    Cancellation and stale-result handling are the loader's (or the sink's)
    responsibility; see `iconlabel.adapters.sinks.LatestRequestImageSink`.
    """

    @abc.abstractmethod
    async def load(self, reference: str) -> DecodedImage:
        """Load and decode the image named by ``reference``.

        Raises:
            ImageLoadError: If the image cannot be produced.
        """
