"""Adapters for ICONLABEL.

Provide concrete implementations of the interfaces: in-memory and guarded
sinks, and image loaders backed by memory or the local filesystem.

Dependency rule: may import `iconlabel.domain`, `iconlabel.image` and
`iconlabel.interfaces`; the domain must not import this package.
"""
