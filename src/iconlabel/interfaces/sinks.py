"""Sink interfaces implemented by rendering surfaces.

A sink is a capability object exposing the mutators a resolver calls to apply
a resolved value to a presentation surface: an image slot for `ImageSink` and
a text slot (plain and styled) for `TextSink`.
"""

import abc

from iconlabel.domain.value_objects import StyledText
from iconlabel.image import DecodedImage


class ImageSink(abc.ABC):
    """Contract for an image-presentation surface."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove any image currently shown."""

    @abc.abstractmethod
    def set_decoded_image(self, image: DecodedImage) -> None:
        """Show the given decoded image, replacing any previous one.

        Args:
            image (DecodedImage): The pixel data to display.
        """


class TextSink(abc.ABC):
    """Contract for a text-presentation surface.

    Plain and styled text occupy the same slot: setting one replaces the other.
    """

    @abc.abstractmethod
    def clear_all(self) -> None:
        """Remove both the plain and the styled text."""

    @abc.abstractmethod
    def set_plain_text(self, text: str) -> None:
        """Show a plain string.

        Args:
            text (str): The text to display. May be empty.
        """

    @abc.abstractmethod
    def set_styled_text(self, text: StyledText) -> None:
        """Show styled text.

        Args:
            text (StyledText): The styled text to display.
        """
