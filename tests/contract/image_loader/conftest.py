"""Fixtures for image loader contract tests."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pytest

from iconlabel.adapters.image_loaders import (
    InMemoryImageLoader,
    LocalImageLoader,
    RemoteOrLocalImageLoader,
)
from iconlabel.image import DecodedImage
from iconlabel.interfaces.image_loader import ImageLoader


@dataclass
class LoaderHarness:
    """A loader plus a way to make an image available under a reference."""

    loader: ImageLoader
    put: Callable[[str, DecodedImage], None]


def _npy_writer(root: Path) -> Callable[[str, DecodedImage], None]:
    def _put(reference: str, image: DecodedImage) -> None:
        path = root / f"{reference}.npy"
        path.parent.mkdir(parents=True, exist_ok=True)
        np.save(path, image.pixels)

    return _put


@pytest.fixture(params=["memory", "local", "remote_or_local"])
def loader_harness(
    request: pytest.FixtureRequest, tmp_path: Path
) -> Iterable[LoaderHarness]:
    """Return a fresh loader harness for the requested backend.

    Supported params:
      - `"memory"` → InMemoryImageLoader
      - `"local"` → LocalImageLoader rooted at a temp dir
      - `"remote_or_local"` → RemoteOrLocalImageLoader over a LocalImageLoader
    """

    match request.param:
        case "memory":
            memory = InMemoryImageLoader()
            yield LoaderHarness(loader=memory, put=memory.register)
        case "local":
            yield LoaderHarness(
                loader=LocalImageLoader(tmp_path), put=_npy_writer(tmp_path)
            )
        case "remote_or_local":
            yield LoaderHarness(
                loader=RemoteOrLocalImageLoader(LocalImageLoader(tmp_path)),
                put=_npy_writer(tmp_path),
            )
        case _:
            raise ValueError(f"unknown image loader type: {request.param}")
