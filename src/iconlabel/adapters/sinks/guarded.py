"""Image sink guard against stale asynchronous loads.

When a view is reused for a different item before the previous image load has
finished, the older load can complete last and overwrite the newer image. The
`LatestRequestImageSink` prevents that by tagging each request with a token:

    guard = LatestRequestImageSink(image_view_sink)
    await resolve_image_async(source, guard.bind(), loader)

Every `bind()` issues a new token and returns a proxy sink stamped with it.
Only the proxy carrying the latest token forwards to the wrapped sink; writes
through older proxies are dropped.
"""

from __future__ import annotations

import itertools
import logging
import threading

from iconlabel.image import DecodedImage
from iconlabel.interfaces.sinks import ImageSink

__all__ = ["LatestRequestImageSink"]

logger = logging.getLogger(__name__)


class LatestRequestImageSink:
    """Hand out per-request image sinks; only the newest one may write.

    Thread-safe: tokens are issued and checked under a reentrant lock, so
    loads that complete on worker threads are filtered the same way and the
    wrapped sink may call back into the guard while a write is forwarded.
    """

    def __init__(self, sink: ImageSink) -> None:
        self._sink = sink
        self._lock = threading.RLock()
        self._tokens = itertools.count(1)
        self._current = 0

    @property
    def current_token(self) -> int:
        """Token of the most recently bound request (0 before any bind)."""
        with self._lock:
            return self._current

    def bind(self) -> ImageSink:
        """Start a new request and return the sink it must write through."""
        with self._lock:
            self._current = next(self._tokens)
            return _RequestSink(self, self._current)

    def _forward(self, token: int, action: str, image: DecodedImage | None) -> bool:
        with self._lock:
            if token != self._current:
                logger.debug(
                    "Dropping %s from stale request %d (current=%d)",
                    action,
                    token,
                    self._current,
                )
                return False
            if image is None:
                self._sink.clear()
            else:
                self._sink.set_decoded_image(image)
            return True


class _RequestSink(ImageSink):
    """Proxy sink bound to a single request token."""

    def __init__(self, guard: LatestRequestImageSink, token: int) -> None:
        self._guard = guard
        self.token = token

    def clear(self) -> None:
        self._guard._forward(self.token, "clear", None)  # pylint: disable=protected-access

    def set_decoded_image(self, image: DecodedImage) -> None:
        self._guard._forward(self.token, "set_decoded_image", image)  # pylint: disable=protected-access
