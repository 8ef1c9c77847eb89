"""ICONLABEL

Display-value resolution for icon/label views. View-model objects describe a
title, an optional subtitle and an optional image as tagged sources, and the
resolver applies them to image and text sinks without caller-side type checks.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
