"""Errors raised by image loaders."""


class ImageLoadError(Exception):
    """Base class for image loader errors.

    Attributes:
        reference (str): The reference that failed to load.
    """

    def __init__(self, reference: str, message: str | None = None) -> None:
        if message is None:
            message = f"Failed to load image '{reference}'."
        super().__init__(message)
        self.reference = reference


class ImageNotFoundError(ImageLoadError):
    """Raised when no image exists for the reference."""

    def __init__(self, reference: str) -> None:
        super().__init__(reference, f"Image '{reference}' not found.")


class ImageDecodeError(ImageLoadError):
    """Raised when the data behind a reference cannot be decoded as an image.

    Attributes:
        reference (str): The reference that failed to decode.
        reason (str): Why decoding failed.
    """

    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(reference, f"Image '{reference}' could not be decoded: {reason}")
        self.reason = reason


class UnsupportedReferenceError(ImageLoadError):
    """Raised when a loader cannot handle the kind of reference it was given."""

    def __init__(self, reference: str) -> None:
        super().__init__(
            reference, f"Reference '{reference}' is not supported by this loader."
        )
