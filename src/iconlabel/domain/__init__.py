"""Domain layer for ICONLABEL.

Contains the display value types: source-kind enums, styled text, the
`ImageSource` / `TextSource` sum types and the `DisplayItem` view-model. This
package is deliberately technology-agnostic.

Dependency rule: do not import from `iconlabel.adapters` or
`iconlabel.service_layer`.
"""
