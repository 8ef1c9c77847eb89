"""Fixtures for image sink contract tests."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

import pytest

from iconlabel.adapters.sinks import LatestRequestImageSink, RecordingImageSink
from iconlabel.image import DecodedImage
from iconlabel.interfaces.sinks import ImageSink


@dataclass
class ImageSinkHarness:
    """An image sink plus a way to read what it currently shows."""

    sink: ImageSink
    shown: Callable[[], DecodedImage | None]


@pytest.fixture(params=["recording", "latest_request"])
def image_sink_harness(request: pytest.FixtureRequest) -> Iterable[ImageSinkHarness]:
    """Return a fresh image sink harness.

    Supported params:
      - `"recording"` → RecordingImageSink
      - `"latest_request"` → the proxy from a freshly bound LatestRequestImageSink
    """

    match request.param:
        case "recording":
            sink = RecordingImageSink()
            yield ImageSinkHarness(sink=sink, shown=lambda: sink.image)
        case "latest_request":
            inner = RecordingImageSink()
            guard = LatestRequestImageSink(inner)
            yield ImageSinkHarness(sink=guard.bind(), shown=lambda: inner.image)
        case _:
            raise ValueError(f"unknown image sink type: {request.param}")
