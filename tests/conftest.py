"""Global pytest fixtures for ICONLABEL."""

pytest_plugins = [
    "tests.fixtures.datagen",
]
