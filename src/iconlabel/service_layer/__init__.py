"""Service layer for ICONLABEL.

Implements the display-value resolver: classifies image and text sources by
their declared kind and dispatches them to sinks, calling out to image loaders
for references.

Dependency rule: may import `iconlabel.domain` and `iconlabel.interfaces`, but
not `iconlabel.adapters`.
"""
