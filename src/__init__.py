"""
Carousel Slide Renderer
=======================

A rendering service that turns declarative slide descriptions into PNG images
by filling HTML layout templates and capturing them with a headless browser.

This package provides:
- Layout template storage and variable injection
- A shared Playwright browser session with per-render pages
- Single-slide and carousel batch rendering
- FastAPI REST endpoints for HTTP access
"""

__version__ = "0.1.0"
__author__ = "Carousel Slide Renderer Team"
