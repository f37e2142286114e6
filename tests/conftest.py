"""
Test Configuration
==================

Pytest configuration with fixtures shared by unit and integration tests.
Provides test settings, a template directory, and a mocked Playwright driver.
"""

import os

os.environ.setdefault("CAROUSEL_ENVIRONMENT", "testing")

from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from pydantic_settings import SettingsConfigDict

from src.api.main import create_app
from src.config.settings import Settings
from src.core.rendering.session_manager import BrowserSessionManager
from src.core.rendering.slide_renderer import SlideRenderer
from src.core.rendering.template_store import TemplateStore
from src.core.rendering.carousel import CarouselBatcher

from tests.data.sample_templates import SAMPLE_TEMPLATES
from tests.utils.mocks import MockChromium, MockPlaywright, MockPlaywrightContextManager


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    browser_headless: bool = True
    browser_warmup: bool = False
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Directory with two small layout templates."""
    directory = tmp_path / "templates"
    directory.mkdir()
    for style_key, markup in SAMPLE_TEMPLATES.items():
        (directory / f"{style_key}.html").write_text(markup, encoding="utf-8")
    (directory / "notes.txt").write_text("not a template", encoding="utf-8")
    return directory


@pytest.fixture
def test_settings(templates_dir: Path) -> TestSettings:
    """Test settings fixture."""
    return TestSettings(templates_path=templates_dir)


@pytest.fixture
def mock_chromium() -> MockChromium:
    return MockChromium()


@pytest.fixture
def mock_async_playwright(mock_chromium: MockChromium) -> Generator[MockPlaywrightContextManager, None, None]:
    """Replace the Playwright driver with in-memory mocks."""
    context_manager = MockPlaywrightContextManager(MockPlaywright(mock_chromium))
    with patch("src.core.rendering.session_manager.async_playwright", context_manager):
        yield context_manager


@pytest.fixture
def session_manager(
    test_settings: TestSettings, mock_async_playwright: MockPlaywrightContextManager
) -> BrowserSessionManager:
    return BrowserSessionManager(test_settings)


@pytest.fixture
def template_store(templates_dir: Path) -> TemplateStore:
    return TemplateStore(templates_dir)


@pytest.fixture
def slide_renderer(
    template_store: TemplateStore,
    session_manager: BrowserSessionManager,
    test_settings: TestSettings,
) -> SlideRenderer:
    return SlideRenderer(
        template_store=template_store,
        session_manager=session_manager,
        geometry=test_settings.render_geometry,
        render_timeout=test_settings.render_timeout,
    )


@pytest.fixture
def carousel_batcher(slide_renderer: SlideRenderer) -> CarouselBatcher:
    return CarouselBatcher(slide_renderer)


@pytest.fixture
def client(
    test_settings: TestSettings, session_manager: BrowserSessionManager
) -> Generator[TestClient, None, None]:
    """FastAPI test client running the application lifespan."""
    app = create_app(test_settings, session_manager=session_manager)
    with TestClient(app) as test_client:
        yield test_client
