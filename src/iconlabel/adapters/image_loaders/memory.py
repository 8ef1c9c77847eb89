"""Dictionary-backed image loaders for tests and local development.

Images are registered under their reference string and returned as-is on
load. Every load request is recorded in ``requests`` so callers can assert
how often (and in which order) references were fetched.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping

from iconlabel.image import DecodedImage
from iconlabel.interfaces.image_loader import (
    AsyncImageLoader,
    ImageLoader,
    ImageNotFoundError,
)

__all__ = ["InMemoryImageLoader", "AsyncInMemoryImageLoader"]


class InMemoryImageLoader(ImageLoader):
    """Synchronous loader backed by a reference -> image mapping."""

    def __init__(self, images: Mapping[str, DecodedImage] | None = None) -> None:
        self._images: dict[str, DecodedImage] = dict(images or {})
        self.requests: list[str] = []

    def register(self, reference: str, image: DecodedImage) -> None:
        """Make ``image`` available under ``reference``."""
        self._images[reference] = image

    def load(self, reference: str) -> DecodedImage:
        self.requests.append(reference)
        try:
            return self._images[reference]
        except KeyError as e:
            raise ImageNotFoundError(reference) from e


class AsyncInMemoryImageLoader(AsyncImageLoader):
    """Asynchronous loader backed by a reference -> image mapping.

    Args:
        images: Initial images keyed by reference.
        delay: Default number of seconds each load sleeps before returning.
        delays: Per-reference delays overriding ``delay``, handy for
            simulating loads that finish out of order.
    """

    def __init__(
        self,
        images: Mapping[str, DecodedImage] | None = None,
        delay: float = 0.0,
        delays: Mapping[str, float] | None = None,
    ) -> None:
        self._images: dict[str, DecodedImage] = dict(images or {})
        self._delay = delay
        self._delays = dict(delays or {})
        self.requests: list[str] = []

    def register(self, reference: str, image: DecodedImage) -> None:
        """Make ``image`` available under ``reference``."""
        self._images[reference] = image

    async def load(self, reference: str) -> DecodedImage:
        self.requests.append(reference)
        await asyncio.sleep(self._delays.get(reference, self._delay))
        try:
            return self._images[reference]
        except KeyError as e:
            raise ImageNotFoundError(reference) from e
