"""Concrete image and text sinks."""

from .guarded import LatestRequestImageSink
from .memory import RecordingImageSink, RecordingTextSink

__all__ = ["LatestRequestImageSink", "RecordingImageSink", "RecordingTextSink"]
