"""ICONLABEL test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with external systems (here: the filesystem).
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; prefer in-memory adapters over mocks at boundaries.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, contract, property
"""
