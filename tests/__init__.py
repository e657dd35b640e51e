"""
Tests Package - Unit Tests

Test structure:
- tests/unit/ - Fast, isolated unit tests (no live network)
- tests/conftest.py - Shared pytest fixtures
"""
