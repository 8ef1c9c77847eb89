"""Concrete image loaders."""

from .local import LocalImageLoader
from .memory import AsyncInMemoryImageLoader, InMemoryImageLoader
from .routing import RemoteOrLocalImageLoader

__all__ = [
    "AsyncInMemoryImageLoader",
    "InMemoryImageLoader",
    "LocalImageLoader",
    "RemoteOrLocalImageLoader",
]
