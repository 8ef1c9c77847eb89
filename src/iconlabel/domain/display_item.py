"""View-model describing what an icon/label pair should show."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidImageSourceError, InvalidTextSourceError
from .sources import (
    ImageLike,
    ImageSource,
    TextLike,
    TextSource,
    image_source,
    text_source,
)


@dataclass(frozen=True, slots=True)
class DisplayItem:
    """A title, an optional subtitle and an optional image.

    Instances are read-only once constructed. They do not own the surface they
    are rendered on; rendering code hands them to the resolver together with
    the target sinks.
    """

    title: TextSource
    subtitle: TextSource | None = None
    image: ImageSource | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.title, TextSource):
            raise InvalidTextSourceError("title", "title must be a TextSource")
        if self.subtitle is not None and not isinstance(self.subtitle, TextSource):
            raise InvalidTextSourceError("subtitle", "subtitle must be a TextSource")
        if self.image is not None and not isinstance(self.image, ImageSource):
            raise InvalidImageSourceError("image", "image must be an ImageSource")

    @classmethod
    def of(
        cls,
        title: TextLike,
        subtitle: TextLike | None = None,
        image: ImageLike | None = None,
    ) -> DisplayItem:
        """Build an item from raw values, coercing each to its source type.

        Example:
            DisplayItem.of("Alice", image="https://example.com/alice.png")
        """
        title_source = text_source(title)
        if title_source is None:
            raise InvalidTextSourceError("title", "title is required")
        return cls(
            title=title_source,
            subtitle=text_source(subtitle),
            image=image_source(image),
        )
