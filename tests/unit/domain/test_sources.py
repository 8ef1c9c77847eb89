"""Unit tests for ImageSource / TextSource and their coercion helpers."""

from pathlib import Path

import pytest

from iconlabel.domain.errors import (
    InvalidImageSourceError,
    InvalidTextSourceError,
    UnsupportedSourceTypeError,
)
from iconlabel.domain.sources import (
    ImageSource,
    TextSource,
    image_source,
    text_source,
)
from iconlabel.domain.value_objects import ImageSourceKind, StyledText, TextSourceKind

# pylint: disable=magic-value-comparison


class TestImageSource:
    """Tests for ImageSource."""

    @staticmethod
    def test_from_reference():
        """A reference source exposes the lookup string only."""
        source = ImageSource.from_reference("https://x/a.png")
        assert source.kind is ImageSourceKind.REFERENCE
        assert source.is_reference
        assert source.reference == "https://x/a.png"
        assert source.image is None

    @staticmethod
    def test_from_reference_accepts_paths():
        """Path-like references are normalized to strings."""
        source = ImageSource.from_reference(Path("icons") / "star.npy")
        assert source.reference == str(Path("icons") / "star.npy")

    @staticmethod
    def test_from_decoded(make_image):
        """A decoded source exposes the image only."""
        image = make_image()
        source = ImageSource.from_decoded(image)
        assert source.kind is ImageSourceKind.DECODED
        assert not source.is_reference
        assert source.image is image
        assert source.reference is None

    @staticmethod
    def test_empty_reference_rejected():
        """A reference source must carry a non-empty string."""
        with pytest.raises(InvalidImageSourceError, match="must not be empty"):
            ImageSource.from_reference("")

    @staticmethod
    def test_reference_kind_with_image_payload_rejected(make_image):
        """A reference tag with a decoded payload is rejected at construction."""
        with pytest.raises(InvalidImageSourceError, match="reference string"):
            ImageSource(ImageSourceKind.REFERENCE, make_image())

    @staticmethod
    def test_decoded_kind_with_string_payload_rejected():
        """A decoded tag with a string payload is rejected at construction."""
        with pytest.raises(InvalidImageSourceError, match="DecodedImage"):
            ImageSource(ImageSourceKind.DECODED, "a.png")

    @staticmethod
    def test_unknown_kind_rejected():
        """A kind outside ImageSourceKind is rejected."""
        with pytest.raises(InvalidImageSourceError, match="unknown source kind"):
            ImageSource("url", "a.png")  # type: ignore[arg-type]

    @staticmethod
    def test_immutable():
        """Sources cannot be mutated after construction."""
        source = ImageSource.from_reference("a.png")
        with pytest.raises(AttributeError):
            source.payload = "b.png"  # type: ignore[misc]


class TestTextSource:
    """Tests for TextSource."""

    @staticmethod
    def test_plain():
        """A plain source projects to its own string."""
        source = TextSource.plain("Alice")
        assert source.kind is TextSourceKind.PLAIN
        assert source.plain_text == "Alice"
        assert source.styled_text is None
        assert str(source) == "Alice"

    @staticmethod
    def test_plain_allows_empty_string():
        """Empty plain text is a valid plain source."""
        assert TextSource.plain("").plain_text == ""

    @staticmethod
    def test_styled(make_styled):
        """A styled source projects to its styled text's plain string."""
        styled = make_styled("Alice Smith")
        source = TextSource.styled(styled)
        assert source.kind is TextSourceKind.STYLED
        assert source.styled_text is styled
        assert source.plain_text == "Alice Smith"
        assert str(source) == "Alice Smith"

    @staticmethod
    def test_empty_styled_text_stays_styled():
        """Classification is by declared tag, not by content."""
        source = TextSource.styled(StyledText(""))
        assert source.kind is TextSourceKind.STYLED
        assert source.plain_text == ""

    @staticmethod
    def test_plain_kind_with_styled_payload_rejected(make_styled):
        """A plain tag with a styled payload is rejected."""
        with pytest.raises(InvalidTextSourceError, match="must be a string"):
            TextSource(TextSourceKind.PLAIN, make_styled())

    @staticmethod
    def test_styled_kind_with_string_payload_rejected():
        """A styled tag with a string payload is rejected."""
        with pytest.raises(InvalidTextSourceError, match="StyledText"):
            TextSource(TextSourceKind.STYLED, "Alice")

    @staticmethod
    def test_unknown_kind_rejected():
        """A kind outside TextSourceKind is rejected."""
        with pytest.raises(InvalidTextSourceError, match="unknown source kind"):
            TextSource("markdown", "Alice")  # type: ignore[arg-type]


class TestImageSourceCoercion:
    """Tests for image_source()."""

    @staticmethod
    def test_none_passes_through():
        """None means no image."""
        assert image_source(None) is None

    @staticmethod
    def test_existing_source_returned_unchanged():
        """A source is returned as-is."""
        source = ImageSource.from_reference("a.png")
        assert image_source(source) is source

    @staticmethod
    @pytest.mark.parametrize("value", ["a.png", "https://x/a.png", Path("a.png")])
    def test_strings_and_paths_become_references(value):
        """Strings and paths become reference sources."""
        source = image_source(value)
        assert source is not None
        assert source.kind is ImageSourceKind.REFERENCE

    @staticmethod
    def test_decoded_image_becomes_decoded(make_image):
        """Decoded images become decoded sources."""
        image = make_image()
        source = image_source(image)
        assert source == ImageSource.from_decoded(image)

    @staticmethod
    @pytest.mark.parametrize("value", [42, b"a.png", ["a.png"]])
    def test_unsupported_values_rejected(value):
        """Values without an image representation are rejected."""
        with pytest.raises(UnsupportedSourceTypeError):
            image_source(value)


class TestTextSourceCoercion:
    """Tests for text_source()."""

    @staticmethod
    def test_none_passes_through():
        """None means no text."""
        assert text_source(None) is None

    @staticmethod
    def test_string_becomes_plain():
        """Strings become plain sources."""
        assert text_source("Alice") == TextSource.plain("Alice")

    @staticmethod
    def test_styled_text_becomes_styled(make_styled):
        """Styled text becomes a styled source."""
        styled = make_styled()
        assert text_source(styled) == TextSource.styled(styled)

    @staticmethod
    def test_existing_source_returned_unchanged():
        """A source is returned as-is."""
        source = TextSource.plain("Alice")
        assert text_source(source) is source

    @staticmethod
    @pytest.mark.parametrize("value", [3.5, Path("a.txt"), object()])
    def test_unsupported_values_rejected(value):
        """Values without a text representation are rejected."""
        with pytest.raises(UnsupportedSourceTypeError):
            text_source(value)
