"""
Pydantic Models and Schemas
===========================

Core data models for render geometry, rendered images and API requests/responses.
"""

from typing import Optional, List, Dict, Any, Literal
from datetime import datetime, timezone
import base64

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Rendering Models
class RenderGeometry(BaseModel):
    """Viewport applied identically to every render."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(1080, gt=0, description="Viewport width in CSS pixels")
    height: int = Field(1350, gt=0, description="Viewport height in CSS pixels")
    device_scale_factor: float = Field(2.0, gt=0, le=4.0, description="Device pixel ratio")

    @property
    def pixel_width(self) -> int:
        return int(round(self.width * self.device_scale_factor))

    @property
    def pixel_height(self) -> int:
        return int(round(self.height * self.device_scale_factor))


class RenderedImage(BaseModel):
    """Result of rendering one slide."""

    model_config = ConfigDict(frozen=True)

    image_data: bytes = Field(..., description="PNG binary data", exclude=True)
    format: str = Field("png", description="Image format")
    width: int = Field(..., description="Image width in pixels")
    height: int = Field(..., description="Image height in pixels")
    file_size: int = Field(..., description="File size in bytes")

    @property
    def base64_data(self) -> str:
        return base64.b64encode(self.image_data).decode("utf-8")


class CarouselSlideResult(BaseModel):
    """One rendered slide of a carousel, in input order."""

    position: int = Field(..., ge=1, description="1-based slide position")
    total: int = Field(..., ge=1, description="Number of slides in the carousel")
    image: RenderedImage


# API Request/Response Models
class SlideRenderRequest(BaseModel):
    """Slide data for a single render; any extra field is passed to the template."""

    model_config = ConfigDict(extra="allow")

    layout_style: Optional[str] = Field(None, description="Layout template style key")

    def to_slide_data(self) -> Dict[str, Any]:
        return self.model_dump()


class CarouselRenderRequest(BaseModel):
    """Ordered slides for a carousel render; shape is checked by the route."""

    slides: Any = Field(None, description="Ordered list of slide data records")


class SlideRenderResponse(BaseModel):
    """Response model for single-slide rendering."""

    success: bool = Field(..., description="Whether rendering succeeded")
    image: str = Field(..., description="Base64 encoded image data")
    format: str = Field("png", description="Image format")
    width: int = Field(..., description="Image width in pixels")
    height: int = Field(..., description="Image height in pixels")


class CarouselSlideImage(BaseModel):
    """One entry of a carousel response."""

    position: int = Field(..., description="1-based slide position")
    image: str = Field(..., description="Base64 encoded image data")
    format: str = Field("png", description="Image format")


class CarouselRenderResponse(BaseModel):
    """Response model for carousel rendering."""

    success: bool = Field(..., description="Whether rendering succeeded")
    slides: List[CarouselSlideImage] = Field(default_factory=list, description="Slides in order")


# Health Check Models
class HealthStatus(BaseModel):
    """Health check status."""

    status: Literal["ok", "degraded"] = Field(..., description="Overall status")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    version: str = Field(..., description="Application version")
    templates: List[str] = Field(default_factory=list, description="Available layout styles")
    session: Dict[str, Any] = Field(default_factory=dict, description="Browser session status")


# Error Models
class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Error code")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")
