"""Local filesystem image loader.

Images are stored as numpy ``.npy`` arrays (shape ``(h, w)`` or ``(h, w, c)``)
under a root directory. A reference may be:

- a local name relative to the root, with or without the ``.npy`` suffix
  (``"icons/star"`` and ``"icons/star.npy"`` name the same file);
- an absolute filesystem path;
- a ``file://`` URL.

Relative names may not escape the root directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

import numpy as np

from iconlabel.image import DecodedImage
from iconlabel.interfaces.image_loader import (
    ImageDecodeError,
    ImageLoader,
    ImageNotFoundError,
    UnsupportedReferenceError,
)

__all__ = ["LocalImageLoader"]

logger = logging.getLogger(__name__)

IMAGE_SUFFIX = ".npy"
FILE_SCHEME = "file"


class LocalImageLoader(ImageLoader):
    """Load ``.npy`` images from a directory on the local filesystem."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        """The directory relative names are resolved against."""
        return self._root

    def load(self, reference: str) -> DecodedImage:
        path = self.resolve_path(reference)
        if not path.is_file():
            raise ImageNotFoundError(reference)

        logger.debug("Reading image %r from %s", reference, path)
        try:
            pixels = np.load(path, allow_pickle=False)
        except (OSError, ValueError, EOFError) as e:
            # empty files raise EOFError before the header is read
            raise ImageDecodeError(reference, str(e)) from e

        if not isinstance(pixels, np.ndarray):
            # .npz archives load as a lazily-read mapping of arrays
            pixels.close()
            raise ImageDecodeError(reference, "file does not hold a single array")
        try:
            return DecodedImage(pixels)
        except (TypeError, ValueError) as e:
            raise ImageDecodeError(reference, str(e)) from e

    def resolve_path(self, reference: str) -> Path:
        """Map a reference to the file it names.

        Raises:
            UnsupportedReferenceError: If the reference uses a non-file URL
                scheme or a relative name points outside the root.
        """
        if not reference:
            raise UnsupportedReferenceError(reference)

        parsed = urlparse(reference)
        if parsed.scheme == FILE_SCHEME:
            path = Path(url2pathname(parsed.path))
        elif parsed.scheme and len(parsed.scheme) > 1:
            # single letters are Windows drive names, not schemes
            raise UnsupportedReferenceError(reference)
        else:
            path = Path(reference)

        if path.suffix != IMAGE_SUFFIX:
            path = path.with_name(path.name + IMAGE_SUFFIX)

        if path.is_absolute():
            return path

        resolved = (self._root / path).resolve()
        if not resolved.is_relative_to(self._root):
            raise UnsupportedReferenceError(reference)
        return resolved
