"""
Slide Renderer
==============

Turn one slide data record into one PNG image: template lookup, variable
injection and a single browser render.
"""

from typing import Any, Mapping, Optional
import time

from src.config.logging import get_logger
from src.config.settings import get_settings
from src.core.exceptions import MissingLayoutStyle
from src.core.rendering.session_manager import BrowserSessionManager
from src.core.rendering.template_store import TemplateStore, get_template_store
from src.core.rendering.variable_injector import inject
from src.models.schemas import RenderGeometry, RenderedImage

logger = get_logger(__name__)


class SlideRenderer:
    """Renders slide data records through the shared browser session."""

    def __init__(
        self,
        template_store: TemplateStore,
        session_manager: BrowserSessionManager,
        geometry: RenderGeometry,
        render_timeout: float = 15.0,
    ):
        self.template_store = template_store
        self.session_manager = session_manager
        self.geometry = geometry
        self.render_timeout = render_timeout
        self.logger: Any = logger.bind(component="slide_renderer")

    async def render_slide(self, slide_data: Mapping[str, Any]) -> RenderedImage:
        """
        Render one slide.

        Args:
            slide_data: Slide fields; ``layout_style`` selects the template

        Returns:
            RenderedImage with PNG bytes and output pixel dimensions

        Raises:
            MissingLayoutStyle: If ``layout_style`` is absent or empty
            TemplateNotFound: If the layout style has no template
            RenderTimeout: If the page does not load in time
            SessionUnavailable: If the browser cannot be started
        """
        layout_style = slide_data.get("layout_style")
        if layout_style is None or layout_style == "":
            raise MissingLayoutStyle()

        start_time = time.perf_counter()
        template = self.template_store.load(layout_style)
        html_content = inject(template, slide_data)

        async with self.session_manager.surface(self.geometry) as surface:
            image_data = await surface.render_and_capture(html_content, self.render_timeout)

        result = RenderedImage(
            image_data=image_data,
            format="png",
            width=self.geometry.pixel_width,
            height=self.geometry.pixel_height,
            file_size=len(image_data),
        )

        self.logger.info(
            "Slide rendered",
            layout_style=layout_style,
            html_length=len(html_content),
            file_size=result.file_size,
            duration=round(time.perf_counter() - start_time, 3),
        )
        return result


def create_slide_renderer(
    session_manager: BrowserSessionManager,
    template_store: Optional[TemplateStore] = None,
) -> SlideRenderer:
    """Build a slide renderer from application settings."""
    settings = get_settings()
    return SlideRenderer(
        template_store=template_store or get_template_store(),
        session_manager=session_manager,
        geometry=settings.render_geometry,
        render_timeout=settings.render_timeout,
    )
