"""Display-value resolver.

Classifies image and text sources by their declared kind and applies them to
sinks. Each call is a single classify-and-dispatch step with no state carried
between calls:

- ``resolve_image``: absent clears the sink, a decoded image is set directly,
  a reference is loaded through the given loader and then set.
- ``resolve_text``: absent clears the sink, plain text and styled text go to
  their respective setters.

Exactly one sink mutator runs per call. Loader failures are not caught here:
they propagate to the caller and the sink keeps whatever it showed before.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from iconlabel.domain.value_objects import ImageSourceKind, TextSourceKind

from .errors import MissingImageLoaderError

if TYPE_CHECKING:
    from iconlabel.domain.display_item import DisplayItem
    from iconlabel.domain.sources import ImageSource, TextSource
    from iconlabel.domain.value_objects import StyledText
    from iconlabel.image import DecodedImage
    from iconlabel.interfaces.image_loader import AsyncImageLoader, ImageLoader
    from iconlabel.interfaces.sinks import ImageSink, TextSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayTarget:
    """The sinks making up an icon/label view."""

    title: TextSink
    subtitle: TextSink
    image: ImageSink


# ============================================================================
#                               Image resolution
# ============================================================================


def resolve_image(
    source: ImageSource | None, sink: ImageSink, loader: ImageLoader | None = None
) -> None:
    """Apply an image source to an image sink.

    Args:
        source: The image to show, or None to clear the sink.
        sink: The image-presentation surface.
        loader: Loader used for reference sources. Not consulted otherwise.

    Raises:
        MissingImageLoaderError: If ``source`` is a reference and no loader was given.
        ImageLoadError: Propagated unchanged from the loader.
    """
    if source is None:
        logger.debug("No image source; clearing image sink")
        sink.clear()
        return

    if source.kind is ImageSourceKind.DECODED:
        logger.debug("Applying decoded image %r", source.payload)
        sink.set_decoded_image(cast("DecodedImage", source.image))
        return

    reference = cast(str, source.reference)
    if loader is None:
        raise MissingImageLoaderError(reference)
    logger.debug("Loading image reference %r", reference)
    image = loader.load(reference)
    sink.set_decoded_image(image)


async def resolve_image_async(
    source: ImageSource | None,
    sink: ImageSink,
    loader: AsyncImageLoader | None = None,
) -> None:
    """Apply an image source to an image sink, awaiting the loader if needed.

    Same contract as `resolve_image`; only the reference branch suspends, and
    the sink is mutated once the load has completed.
    """
    if source is None:
        logger.debug("No image source; clearing image sink")
        sink.clear()
        return

    if source.kind is ImageSourceKind.DECODED:
        logger.debug("Applying decoded image %r", source.payload)
        sink.set_decoded_image(cast("DecodedImage", source.image))
        return

    reference = cast(str, source.reference)
    if loader is None:
        raise MissingImageLoaderError(reference)
    logger.debug("Loading image reference %r asynchronously", reference)
    image = await loader.load(reference)
    sink.set_decoded_image(image)


# ============================================================================
#                               Text resolution
# ============================================================================


def resolve_text(source: TextSource | None, sink: TextSink) -> None:
    """Apply a text source to a text sink.

    Args:
        source: The text to show, or None to clear both plain and styled text.
        sink: The text-presentation surface.
    """
    if source is None:
        logger.debug("No text source; clearing text sink")
        sink.clear_all()
    elif source.kind is TextSourceKind.STYLED:
        logger.debug("Applying styled text %r", source.plain_text)
        sink.set_styled_text(cast("StyledText", source.styled_text))
    else:
        logger.debug("Applying plain text %r", source.plain_text)
        sink.set_plain_text(source.plain_text)


# ============================================================================
#                               Display items
# ============================================================================


def display_item(
    item: DisplayItem, target: DisplayTarget, loader: ImageLoader | None = None
) -> None:
    """Apply every part of a display item to its sink in the target."""
    resolve_text(item.title, target.title)
    resolve_text(item.subtitle, target.subtitle)
    resolve_image(item.image, target.image, loader)


async def display_item_async(
    item: DisplayItem, target: DisplayTarget, loader: AsyncImageLoader | None = None
) -> None:
    """Apply a display item, awaiting the image load if one is needed.

    Text is applied before the image is awaited so labels are never held back
    by a slow fetch.
    """
    resolve_text(item.title, target.title)
    resolve_text(item.subtitle, target.subtitle)
    await resolve_image_async(item.image, target.image, loader)

