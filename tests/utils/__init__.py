"""
Test Utilities
==============

Mocked Playwright objects for rendering tests.
"""
