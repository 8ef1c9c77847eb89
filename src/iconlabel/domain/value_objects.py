"""Module including value objects used across the domain layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .errors import InvalidStyleRangeError


class ImageSourceKind(Enum):
    """Enumeration of the ways an image can be supplied."""

    REFERENCE = "reference"
    DECODED = "decoded"


class TextSourceKind(Enum):
    """Enumeration of the ways a text can be supplied."""

    PLAIN = "plain"
    STYLED = "styled"


@dataclass(frozen=True, slots=True)
class StyleRange:
    """Formatting attributes applied to the half-open range ``[start, end)``."""

    start: int
    end: int
    attributes: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise InvalidStyleRangeError(self.start, self.end)
        # copy to decouple from the caller's dict
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


@dataclass(frozen=True, slots=True)
class StyledText:
    """Text plus embedded formatting ranges.

    Styled text is always reducible to its plain-text projection, which is
    simply the underlying string with every formatting range dropped.

    Example:
        bold_name = StyledText("Alice Smith", [StyleRange(0, 5, {"weight": "bold"})])
        bold_name.plain_text  # "Alice Smith"
    """

    text: str
    ranges: tuple[StyleRange, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable of ranges but store an immutable tuple
        object.__setattr__(self, "ranges", tuple(self.ranges))
        self._validate_ranges()

    @property
    def plain_text(self) -> str:
        """The text with all formatting stripped."""
        return self.text

    def attributes_at(self, index: int) -> dict[str, object]:
        """Return the merged attributes in effect at ``index``.

        Later ranges win over earlier ones when they set the same attribute.
        """
        merged: dict[str, object] = {}
        for style in self.ranges:
            if style.start <= index < style.end:
                merged.update(style.attributes)
        return merged

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    # --- Internals ---

    def _validate_ranges(self) -> None:
        length = len(self.text)
        for style in self.ranges:
            if style.end > length:
                raise InvalidStyleRangeError(style.start, style.end, length)
