"""Integration tests.

Purpose
- Exercise adapters against real external resources (the local filesystem).

Guidelines
- Use pytest's tmp_path for every file written; never touch the user's home.
"""
