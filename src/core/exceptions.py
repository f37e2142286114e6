"""
Rendering Exceptions
====================

Error taxonomy of the slide rendering pipeline. Each error carries the HTTP
status and error code the API layer reports it with.
"""


class SlideRenderingError(Exception):
    """Base class for slide rendering failures."""

    error_code = "RENDERING_ERROR"
    status_code = 500


class TemplateNotFound(SlideRenderingError):
    """No stored layout template exists for a style key."""

    error_code = "TEMPLATE_NOT_FOUND"
    status_code = 500

    def __init__(self, style_key: str):
        self.style_key = style_key
        super().__init__(f"Template not found: {style_key}")


class MissingLayoutStyle(SlideRenderingError):
    """A single-slide request did not name a layout style."""

    error_code = "MISSING_LAYOUT_STYLE"
    status_code = 400

    def __init__(self, message: str = "layout_style is required"):
        super().__init__(message)


class EmptyCarousel(SlideRenderingError):
    """A carousel request held no slides, or no list at all."""

    error_code = "EMPTY_CAROUSEL"
    status_code = 400

    def __init__(self, message: str = "slides array is required"):
        super().__init__(message)


class InvalidSlideData(SlideRenderingError):
    """A carousel element is not a slide record."""

    error_code = "INVALID_SLIDE_DATA"
    status_code = 400


class RenderTimeout(SlideRenderingError):
    """The browser did not finish loading or capturing in time."""

    error_code = "RENDER_TIMEOUT"
    status_code = 504


class SessionUnavailable(SlideRenderingError):
    """The browser session could not be started."""

    error_code = "SESSION_UNAVAILABLE"
    status_code = 503


class RenderFailed(SlideRenderingError):
    """The browser failed while rendering a page."""

    error_code = "RENDER_FAILED"
    status_code = 500
