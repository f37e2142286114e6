"""
Browser Session Manager
=======================

Playwright-based browser session shared by every render.
Owns at most one Chromium instance, relaunches it when it disconnects, and hands
out one short-lived page (render surface) per render.
"""

from typing import Optional, Dict, Any, AsyncGenerator
import asyncio
from contextlib import asynccontextmanager

from playwright.async_api import (
    async_playwright,
    Browser,
    Page,
    Playwright,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
)

from src.config.logging import get_logger
from src.config.settings import get_settings, Settings
from src.core.exceptions import RenderFailed, RenderTimeout, SessionUnavailable
from src.models.schemas import RenderGeometry

logger = get_logger(__name__)

FONTS_READY_SCRIPT = "() => document.fonts.ready.then(() => true)"


class RenderSurface:
    """A single page opened for one render and closed right after."""

    def __init__(self, page: Page, geometry: RenderGeometry):
        self.page = page
        self.geometry = geometry
        self.released = False
        self.logger: Any = logger.bind(component="render_surface")

    async def render_and_capture(self, markup: str, timeout: float) -> bytes:
        """
        Load markup into the page and capture a PNG screenshot.

        Waits for the network to go idle and for all fonts to be ready
        before capturing.

        Args:
            markup: Filled HTML markup
            timeout: Load bound in seconds

        Returns:
            PNG bytes

        Raises:
            RenderTimeout: If loading or capturing exceeds the bound
            RenderFailed: If the browser reports any other error
        """
        timeout_ms = timeout * 1000
        try:
            await self.page.set_content(markup, wait_until="networkidle", timeout=timeout_ms)
            await asyncio.wait_for(self.page.evaluate(FONTS_READY_SCRIPT), timeout=timeout)
            return await self.page.screenshot(type="png", timeout=timeout_ms)
        except (PlaywrightTimeoutError, asyncio.TimeoutError) as e:
            self.logger.warning("Render timed out", timeout=timeout, error=str(e))
            raise RenderTimeout(f"Render timed out after {timeout:g}s") from e
        except PlaywrightError as e:
            self.logger.error("Render failed", error=str(e))
            raise RenderFailed(f"Render failed: {e}") from e

    async def release(self) -> None:
        """Close the page. Safe to call more than once."""
        if self.released:
            return
        self.released = True
        try:
            await self.page.close()
        except PlaywrightError as e:
            # The browser may already be gone; the page goes with it.
            self.logger.warning("Failed to close page", error=str(e))


class BrowserSessionManager:
    """Owner of the one shared browser session."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="browser_session")
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._start_lock = asyncio.Lock()
        self.launch_count = 0

    @property
    def is_live(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    async def acquire(self) -> Browser:
        """
        Return the live browser, launching one if there is none or it disconnected.

        Concurrent callers during a launch wait for that launch instead of
        starting their own.

        Raises:
            SessionUnavailable: If the browser cannot be started
        """
        if self.is_live:
            return self._browser  # type: ignore[return-value]

        async with self._start_lock:
            if self.is_live:
                return self._browser  # type: ignore[return-value]

            if self._browser is not None:
                self.logger.warning("Browser disconnected, relaunching")
                await self._discard_browser()

            self._browser = await self._launch()
            return self._browser

    async def _launch(self) -> Browser:
        launch_options: Dict[str, Any] = {
            "headless": self.settings.browser_headless,
            "args": list(self.settings.browser_args),
        }
        if self.settings.browser_executable_path:
            launch_options["executable_path"] = self.settings.browser_executable_path

        try:
            if self._playwright is None:
                self._playwright = await async_playwright().start()
            browser = await self._playwright.chromium.launch(**launch_options)
        except Exception as e:
            self.logger.error("Browser launch failed", error=str(e))
            await self._stop_playwright()
            raise SessionUnavailable(f"Browser launch failed: {e}") from e

        self.launch_count += 1
        self.logger.info(
            "Browser session started",
            launch_count=self.launch_count,
            executable_path=self.settings.browser_executable_path,
        )
        return browser

    async def _discard_browser(self) -> None:
        browser, self._browser = self._browser, None
        if browser is None:
            return
        try:
            await browser.close()
        except PlaywrightError as e:
            self.logger.warning("Failed to close browser", error=str(e))

    async def _stop_playwright(self) -> None:
        playwright, self._playwright = self._playwright, None
        if playwright is None:
            return
        try:
            await playwright.stop()
        except Exception as e:
            self.logger.warning("Failed to stop playwright", error=str(e))

    async def new_surface(self, geometry: RenderGeometry) -> RenderSurface:
        """Open a new page sized to the render geometry."""
        browser = await self.acquire()
        try:
            page = await browser.new_page(
                viewport={"width": geometry.width, "height": geometry.height},
                device_scale_factor=geometry.device_scale_factor,
            )
        except PlaywrightError as e:
            self.logger.error("Failed to open page", error=str(e))
            raise RenderFailed(f"Failed to open page: {e}") from e
        return RenderSurface(page, geometry)

    @asynccontextmanager
    async def surface(self, geometry: RenderGeometry) -> AsyncGenerator[RenderSurface, None]:
        """Open a render surface and release it on every exit path."""
        surface = await self.new_surface(geometry)
        try:
            yield surface
        finally:
            await surface.release()

    def status(self) -> Dict[str, Any]:
        return {"live": self.is_live, "launch_count": self.launch_count}

    async def close(self) -> None:
        """Close the browser session and stop the Playwright driver."""
        async with self._start_lock:
            was_live = self.is_live
            await self._discard_browser()
            await self._stop_playwright()
        if was_live:
            self.logger.info("Browser session closed")
