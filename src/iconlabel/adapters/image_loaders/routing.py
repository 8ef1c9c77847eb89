"""Remote-or-local image loader.

Sends URLs with a network scheme to a remote loader and everything else
(local names, paths, ``file://`` URLs) to a local loader. No remote loader
ships with this package; networking and caching live in the application.
"""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from iconlabel.image import DecodedImage
from iconlabel.interfaces.image_loader import ImageLoader, UnsupportedReferenceError

__all__ = ["RemoteOrLocalImageLoader", "REMOTE_SCHEMES"]

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = frozenset({"http", "https"})


class RemoteOrLocalImageLoader(ImageLoader):
    """Dispatch each reference to a remote or a local loader by URL scheme."""

    def __init__(self, local: ImageLoader, remote: ImageLoader | None = None) -> None:
        self._local = local
        self._remote = remote

    @staticmethod
    def is_remote(reference: str) -> bool:
        """True when ``reference`` is an http(s) URL."""
        return urlparse(reference).scheme.lower() in REMOTE_SCHEMES

    def load(self, reference: str) -> DecodedImage:
        if not self.is_remote(reference):
            return self._local.load(reference)
        if self._remote is None:
            logger.warning("No remote image loader configured for %r", reference)
            raise UnsupportedReferenceError(reference)
        return self._remote.load(reference)
