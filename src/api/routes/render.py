"""
Render Routes
=============

FastAPI routes for single-slide and carousel rendering.
Request shape is checked here, before the rendering core is invoked.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_carousel_batcher, get_slide_renderer
from src.config.logging import get_logger
from src.core.exceptions import EmptyCarousel, MissingLayoutStyle
from src.core.rendering.carousel import CarouselBatcher
from src.core.rendering.slide_renderer import SlideRenderer
from src.models.schemas import (
    CarouselRenderRequest,
    CarouselRenderResponse,
    CarouselSlideImage,
    SlideRenderRequest,
    SlideRenderResponse,
)

logger = get_logger(__name__)

router = APIRouter(tags=["Rendering"])


@router.post("/render-slide", response_model=SlideRenderResponse)
async def render_slide(
    request: SlideRenderRequest,
    renderer: SlideRenderer = Depends(get_slide_renderer),
) -> SlideRenderResponse:
    """
    Render one slide to PNG.

    Args:
        request: Slide data; ``layout_style`` is required

    Returns:
        Base64 PNG with its pixel dimensions
    """
    if not request.layout_style:
        raise MissingLayoutStyle()

    logger.info("Slide render requested", layout_style=request.layout_style)
    image = await renderer.render_slide(request.to_slide_data())

    return SlideRenderResponse(
        success=True,
        image=image.base64_data,
        format=image.format,
        width=image.width,
        height=image.height,
    )


@router.post("/render-carousel", response_model=CarouselRenderResponse)
async def render_carousel(
    request: CarouselRenderRequest,
    batcher: CarouselBatcher = Depends(get_carousel_batcher),
) -> CarouselRenderResponse:
    """
    Render an ordered list of slides to PNG.

    Args:
        request: Object with a non-empty ``slides`` array

    Returns:
        One base64 PNG per slide, in input order
    """
    if not isinstance(request.slides, list) or not request.slides:
        raise EmptyCarousel()

    logger.info("Carousel render requested", total=len(request.slides))
    results = await batcher.render_carousel(request.slides)

    return CarouselRenderResponse(
        success=True,
        slides=[
            CarouselSlideImage(
                position=result.position,
                image=result.image.base64_data,
                format=result.image.format,
            )
            for result in results
        ],
    )
