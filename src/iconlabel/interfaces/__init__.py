"""Interfaces (application boundary) for ICONLABEL.

Defines framework-free capability contracts shared by the service layer and
adapters: the image and text sinks a rendering surface implements, and the
image loaders that turn a reference into a decoded image. Business rules stay
out of this package.

Dependency rule: may import `iconlabel.domain` and `iconlabel.image` for
payload types only. It may be imported by `iconlabel.service_layer` and
`iconlabel.adapters`.
"""
