"""In-memory recording sinks.

These sinks keep the state a real widget would hold (the current image, the
current plain or styled text) plus an ordered log of every mutator call. They
are meant for tests, examples and headless rendering.

Typical usage
-------------
    sink = RecordingTextSink()
    resolve_text(TextSource.plain("Alice"), sink)
    sink.text   # "Alice"
    sink.calls  # [("set_plain_text", "Alice")]
"""

from __future__ import annotations

from iconlabel.domain.value_objects import StyledText
from iconlabel.image import DecodedImage
from iconlabel.interfaces.sinks import ImageSink, TextSink

__all__ = ["RecordingImageSink", "RecordingTextSink"]


class RecordingImageSink(ImageSink):
    """Image sink that remembers the current image and every call made."""

    def __init__(self) -> None:
        self.image: DecodedImage | None = None
        self.calls: list[tuple[str, DecodedImage | None]] = []

    def clear(self) -> None:
        self.image = None
        self.calls.append(("clear", None))

    def set_decoded_image(self, image: DecodedImage) -> None:
        self.image = image
        self.calls.append(("set_decoded_image", image))

    @property
    def call_names(self) -> list[str]:
        """Names of the mutators called, in order."""
        return [name for name, _ in self.calls]


class RecordingTextSink(TextSink):
    """Text sink mirroring a label's plain/styled text pair.

    Setting plain text drops any styled text and vice versa, as a label
    would; `clear_all` drops both.
    """

    def __init__(self) -> None:
        self.text: str | None = None
        self.styled_text: StyledText | None = None
        self.calls: list[tuple[str, str | StyledText | None]] = []

    def clear_all(self) -> None:
        self.text = None
        self.styled_text = None
        self.calls.append(("clear_all", None))

    def set_plain_text(self, text: str) -> None:
        self.text = text
        self.styled_text = None
        self.calls.append(("set_plain_text", text))

    def set_styled_text(self, text: StyledText) -> None:
        self.styled_text = text
        self.text = text.plain_text
        self.calls.append(("set_styled_text", text))

    @property
    def call_names(self) -> list[str]:
        """Names of the mutators called, in order."""
        return [name for name, _ in self.calls]
