"""
API Dependencies
================

Accessors for the rendering components owned by the running application.
"""

from fastapi import Request

from src.config.settings import Settings

from src.core.rendering.carousel import CarouselBatcher
from src.core.rendering.session_manager import BrowserSessionManager
from src.core.rendering.slide_renderer import SlideRenderer
from src.core.rendering.template_store import TemplateStore


def get_template_store(request: Request) -> TemplateStore:
    return request.app.state.template_store


def get_session_manager(request: Request) -> BrowserSessionManager:
    return request.app.state.session_manager


def get_slide_renderer(request: Request) -> SlideRenderer:
    return request.app.state.slide_renderer


def get_carousel_batcher(request: Request) -> CarouselBatcher:
    return request.app.state.carousel_batcher


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
