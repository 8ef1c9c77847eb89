"""Tagged display sources.

This module defines the two closed sum types the resolver dispatches on:

* `ImageSource`: either a *reference* (a URL or local name that still has to
  be loaded) or a *decoded* in-memory `DecodedImage`.
* `TextSource`: either a *plain* string or *styled* text.

Exactly one payload is active per instance, and the active kind is declared
at construction through one of the smart constructors
(`ImageSource.from_reference`, `ImageSource.from_decoded`, `TextSource.plain`,
`TextSource.styled`). Malformed combinations are rejected immediately so the
resolver never has to deal with them.

The `image_source` and `text_source` helpers coerce raw values (``str``,
path-like objects, `DecodedImage`, `StyledText`) into sources based on their
Python type. Classification is always nominal: an empty styled text is still
styled, and a string is always a reference when an image is expected.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TypeAlias

from iconlabel.image import DecodedImage

from .errors import (
    InvalidImageSourceError,
    InvalidTextSourceError,
    UnsupportedSourceTypeError,
)
from .value_objects import ImageSourceKind, StyledText, TextSourceKind


# ============================================================================
#                               Image sources
# ============================================================================


@dataclass(frozen=True, slots=True)
class ImageSource:
    """An image supplied either by reference or as decoded pixels.

    Prefer the smart constructors over calling the class directly.
    """

    kind: ImageSourceKind
    payload: str | DecodedImage

    def __post_init__(self) -> None:
        if self.kind is ImageSourceKind.REFERENCE:
            if not isinstance(self.payload, str):
                raise InvalidImageSourceError(
                    self.kind.value, "payload must be a reference string"
                )
            if not self.payload:
                raise InvalidImageSourceError(
                    self.kind.value, "reference must not be empty"
                )
        elif self.kind is ImageSourceKind.DECODED:
            if not isinstance(self.payload, DecodedImage):
                raise InvalidImageSourceError(
                    self.kind.value, "payload must be a DecodedImage"
                )
        else:
            raise InvalidImageSourceError(str(self.kind), "unknown source kind")

    @classmethod
    def from_reference(cls, reference: str | os.PathLike[str]) -> ImageSource:
        """Build a source naming an image to be loaded (URL or local name)."""
        if isinstance(reference, os.PathLike):
            reference = os.fspath(reference)
        return cls(ImageSourceKind.REFERENCE, reference)

    @classmethod
    def from_decoded(cls, image: DecodedImage) -> ImageSource:
        """Build a source holding an already decoded image."""
        return cls(ImageSourceKind.DECODED, image)

    @property
    def is_reference(self) -> bool:
        """True when the image must still be loaded."""
        return self.kind is ImageSourceKind.REFERENCE

    @property
    def reference(self) -> str | None:
        """The lookup string for reference sources, otherwise None."""
        return self.payload if isinstance(self.payload, str) else None

    @property
    def image(self) -> DecodedImage | None:
        """The decoded image for decoded sources, otherwise None."""
        return self.payload if isinstance(self.payload, DecodedImage) else None


# ============================================================================
#                               Text sources
# ============================================================================


@dataclass(frozen=True, slots=True)
class TextSource:
    """A text supplied either as a plain string or as styled text."""

    kind: TextSourceKind
    payload: str | StyledText

    def __post_init__(self) -> None:
        if self.kind is TextSourceKind.PLAIN:
            if not isinstance(self.payload, str):
                raise InvalidTextSourceError(self.kind.value, "payload must be a string")
        elif self.kind is TextSourceKind.STYLED:
            if not isinstance(self.payload, StyledText):
                raise InvalidTextSourceError(
                    self.kind.value, "payload must be StyledText"
                )
        else:
            raise InvalidTextSourceError(str(self.kind), "unknown source kind")

    @classmethod
    def plain(cls, text: str) -> TextSource:
        """Build a plain-text source. Empty strings are allowed."""
        return cls(TextSourceKind.PLAIN, text)

    @classmethod
    def styled(cls, text: StyledText) -> TextSource:
        """Build a styled-text source."""
        return cls(TextSourceKind.STYLED, text)

    @property
    def plain_text(self) -> str:
        """Plain-text rendering of either payload."""
        if isinstance(self.payload, StyledText):
            return self.payload.plain_text
        return self.payload

    @property
    def styled_text(self) -> StyledText | None:
        """The styled payload for styled sources, otherwise None."""
        return self.payload if isinstance(self.payload, StyledText) else None

    def __str__(self) -> str:
        return self.plain_text


# ============================================================================
#                                 Coercion
# ============================================================================

ImageLike: TypeAlias = ImageSource | str | os.PathLike[str] | DecodedImage
TextLike: TypeAlias = TextSource | str | StyledText


def image_source(value: ImageLike | None) -> ImageSource | None:
    """Coerce a raw value into an `ImageSource`.

    Args:
        value: None, an existing source, a reference string or path, or a
            decoded image.

    Returns:
        The matching source, or None when ``value`` is None.

    Raises:
        UnsupportedSourceTypeError: If ``value`` has no image representation.
    """
    if value is None or isinstance(value, ImageSource):
        return value
    if isinstance(value, (str, os.PathLike)):
        return ImageSource.from_reference(value)
    if isinstance(value, DecodedImage):
        return ImageSource.from_decoded(value)
    raise UnsupportedSourceTypeError("image", value)


def text_source(value: TextLike | None) -> TextSource | None:
    """Coerce a raw value into a `TextSource`.

    Raises:
        UnsupportedSourceTypeError: If ``value`` has no text representation.
    """
    if value is None or isinstance(value, TextSource):
        return value
    if isinstance(value, str):
        return TextSource.plain(value)
    if isinstance(value, StyledText):
        return TextSource.styled(value)
    raise UnsupportedSourceTypeError("text", value)
