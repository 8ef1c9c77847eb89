"""Errors raised by the service layer."""


class ResolverError(Exception):
    """Base class for display-value resolver errors."""


class MissingImageLoaderError(ResolverError):
    """Raised when a reference image must be loaded but no loader was given.

    Attributes:
        reference (str): The reference that could not be loaded.
    """

    def __init__(self, reference: str) -> None:
        super().__init__(
            f"Image reference '{reference}' requires a loader, but none was provided."
        )
        self.reference = reference
