"""Test-only helpers.

Nothing under this package is imported by production code.
"""
