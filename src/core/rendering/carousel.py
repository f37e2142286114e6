"""
Carousel Batcher
================

Render an ordered list of slides one after another, stamping each with its
1-based position and the carousel size.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from src.config.logging import get_logger
from src.core.exceptions import EmptyCarousel, InvalidSlideData
from src.core.rendering.slide_renderer import SlideRenderer
from src.models.schemas import CarouselSlideResult

logger = get_logger(__name__)


class CarouselBatcher:
    """Sequential carousel rendering on top of a slide renderer."""

    def __init__(self, renderer: SlideRenderer, default_layout_style: Optional[str] = None):
        self.renderer = renderer
        self.default_layout_style = default_layout_style
        self.logger: Any = logger.bind(component="carousel")

    def enrich(self, slide: Mapping[str, Any], position: int, total: int) -> Dict[str, Any]:
        """Copy a slide record with its position and total stamped in."""
        enriched = dict(slide)
        if self.default_layout_style and not enriched.get("layout_style"):
            enriched["layout_style"] = self.default_layout_style
        enriched.update(
            position=position,
            total=total,
            slide_number=position,
            total_slides=total,
        )
        return enriched

    async def render_carousel(self, slides: Sequence[Mapping[str, Any]]) -> List[CarouselSlideResult]:
        """
        Render every slide in input order.

        Slides render strictly one at a time. The first failure aborts the
        batch and propagates; slides already rendered are discarded.

        Args:
            slides: Ordered slide data records

        Returns:
            One result per slide, in input order

        Raises:
            EmptyCarousel: If slides is not a non-empty list
            InvalidSlideData: If an element is not a mapping
        """
        if not isinstance(slides, (list, tuple)) or not slides:
            raise EmptyCarousel()

        for index, slide in enumerate(slides):
            if not isinstance(slide, Mapping):
                raise InvalidSlideData(f"Slide {index + 1} must be an object")

        total = len(slides)
        self.logger.info("Rendering carousel", total=total)

        results: List[CarouselSlideResult] = []
        for index, slide in enumerate(slides):
            position = index + 1
            try:
                image = await self.renderer.render_slide(self.enrich(slide, position, total))
            except Exception as e:
                self.logger.error(
                    "Carousel render aborted", position=position, total=total, error=str(e)
                )
                raise
            results.append(CarouselSlideResult(position=position, total=total, image=image))

        self.logger.info("Carousel rendered", total=total)
        return results
