"""
Unit Tests for Slide Renderer
=============================
"""

import asyncio

import pytest

from src.core.exceptions import MissingLayoutStyle, RenderTimeout, TemplateNotFound
from src.core.rendering.slide_renderer import SlideRenderer, create_slide_renderer
from src.core.rendering.session_manager import BrowserSessionManager
from src.models.schemas import RenderedImage

from tests.utils.mocks import MockChromium, PNG_BYTES


class TestSlideRenderer:
    """Test single-slide rendering."""

    @pytest.mark.asyncio
    async def test_render_slide(self, slide_renderer: SlideRenderer, mock_chromium: MockChromium):
        image = await slide_renderer.render_slide({"layout_style": "centered", "heading": "Hello"})

        assert isinstance(image, RenderedImage)
        assert image.image_data == PNG_BYTES
        assert image.format == "png"
        assert (image.width, image.height) == (2160, 2700)
        assert image.file_size == len(PNG_BYTES)

        page = mock_chromium.browsers[0].pages[0]
        assert "<h1>Hello</h1>" in page.content
        assert "background: #FFFFFF" in page.content
        assert "<p>" not in page.content
        assert page.closed is True

    @pytest.mark.asyncio
    async def test_base64_data(self, slide_renderer: SlideRenderer):
        image = await slide_renderer.render_slide({"layout_style": "quote", "heading": "Q"})
        assert image.base64_data == "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slide_data", [{}, {"layout_style": ""}, {"layout_style": None}])
    async def test_missing_layout_style(
        self, slide_renderer: SlideRenderer, mock_chromium: MockChromium, slide_data
    ):
        with pytest.raises(MissingLayoutStyle, match="layout_style is required"):
            await slide_renderer.render_slide(slide_data)
        assert mock_chromium.launch_count == 0

    @pytest.mark.asyncio
    async def test_unknown_layout_style(
        self, slide_renderer: SlideRenderer, mock_chromium: MockChromium
    ):
        with pytest.raises(TemplateNotFound, match="Template not found: nope"):
            await slide_renderer.render_slide({"layout_style": "nope"})
        assert mock_chromium.launch_count == 0

    @pytest.mark.asyncio
    async def test_timeout_propagates_without_retry(
        self,
        slide_renderer: SlideRenderer,
        session_manager: BrowserSessionManager,
        mock_chromium: MockChromium,
    ):
        browser = await session_manager.acquire()
        browser.fail_with = "timeout"

        with pytest.raises(RenderTimeout):
            await slide_renderer.render_slide({"layout_style": "centered"})

        assert len(browser.pages) == 1
        assert browser.open_pages == 0

    @pytest.mark.asyncio
    async def test_sequential_renders_share_one_session(
        self, slide_renderer: SlideRenderer, mock_chromium: MockChromium
    ):
        for heading in ("one", "two", "three"):
            await slide_renderer.render_slide({"layout_style": "centered", "heading": heading})

        assert mock_chromium.launch_count == 1
        assert len(mock_chromium.browsers[0].pages) == 3

    @pytest.mark.asyncio
    async def test_concurrent_renders_before_session_exists(
        self, slide_renderer: SlideRenderer, mock_chromium: MockChromium
    ):
        mock_chromium.launch_delay = 0.05

        images = await asyncio.gather(*(
            slide_renderer.render_slide({"layout_style": "centered", "heading": str(i)})
            for i in range(8)
        ))

        assert len(images) == 8
        assert mock_chromium.launch_count == 1
        browser = mock_chromium.browsers[0]
        assert len(browser.pages) == 8
        assert browser.open_pages == 0

    def test_create_from_settings(self, session_manager: BrowserSessionManager):
        renderer = create_slide_renderer(session_manager)

        assert renderer.session_manager is session_manager
        assert renderer.geometry.width == 1080
        assert renderer.geometry.height == 1350
        assert renderer.render_timeout == 15.0
