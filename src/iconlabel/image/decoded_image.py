"""Immutable in-memory image ready for display.

The DecodedImage class wraps pixel data that has already been loaded and
decoded: a numeric numpy array shaped ``(height, width)`` for single-channel
images or ``(height, width, channels)`` for gray, RGB or RGBA images. The
array is copied when needed and locked read-only so the image can be shared
freely between view-models and sinks.

Note:
    This module requires numpy to be installed.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# pylint: disable=magic-value-comparison

# Type alias for a numeric ndarray; shape is enforced at runtime, not by the type system.
PixelArray = npt.NDArray[np.number]

ALLOWED_CHANNELS = (1, 3, 4)


@dataclass(frozen=True, slots=True, eq=False)
class DecodedImage:
    """Immutable decoded pixel data."""

    pixels: PixelArray  # shape (h, w) or (h, w, c)

    def __post_init__(self):
        """Validate the pixel array and lock it against writes."""

        pixels = self.pixels
        if not isinstance(pixels, np.ndarray):
            raise TypeError("DecodedImage.pixels must be a numpy array.")
        self._validate_pixels(pixels)

        # decouple from the caller's buffer (and any view's writable base)
        flags = pixels.flags
        if flags.writeable or not flags.owndata or not flags["C_CONTIGUOUS"]:
            pixels = np.ascontiguousarray(pixels).copy()
            pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)

    @classmethod
    def blank(
        cls, width: int, height: int, channels: int = 4, dtype: npt.DTypeLike = np.uint8
    ) -> DecodedImage:
        """Create a fully transparent (all-zero) image of the given size."""

        shape = (height, width) if channels == 1 else (height, width, channels)
        return cls(np.zeros(shape, dtype=dtype))

    @property
    def height(self) -> int:
        """Number of pixel rows."""
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        """Number of pixel columns."""
        return int(self.pixels.shape[1])

    @property
    def channels(self) -> int:
        """Number of channels per pixel (1 for 2D arrays)."""
        return 1 if self.pixels.ndim == 2 else int(self.pixels.shape[2])

    @property
    def size(self) -> tuple[int, int]:
        """Image size as ``(width, height)``."""
        return (self.width, self.height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodedImage):
            return NotImplemented
        return self.pixels.dtype == other.pixels.dtype and np.array_equal(
            self.pixels, other.pixels
        )

    def __hash__(self) -> int:
        return hash((self.pixels.shape, self.pixels.dtype.str, self.pixels.tobytes()))

    def __repr__(self) -> str:
        return (
            f"DecodedImage(width={self.width}, height={self.height}, "
            f"channels={self.channels}, dtype={self.pixels.dtype})"
        )

    # --- Internals ---

    @staticmethod
    def _validate_pixels(pixels: np.ndarray) -> None:
        """Validate shape and dtype of the pixel array.

        Raises:
            ValueError: If the array is not a non-empty numeric 2D/3D array with
                an allowed channel count.
        """

        if pixels.ndim not in (2, 3):
            raise ValueError("DecodedImage.pixels must be a 2D or 3D array.")
        if not np.issubdtype(pixels.dtype, np.number):
            raise ValueError("DecodedImage.pixels must have a numeric dtype.")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError("DecodedImage.pixels must not be empty.")
        if pixels.ndim == 3 and pixels.shape[2] not in ALLOWED_CHANNELS:
            raise ValueError(
                f"DecodedImage.pixels must have {ALLOWED_CHANNELS} channels, "
                f"got {pixels.shape[2]}."
            )
