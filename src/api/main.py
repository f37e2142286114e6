"""
FastAPI Application
==================

Main FastAPI application with REST endpoints for slide and carousel rendering.
Owns the rendering components for the lifetime of the process and closes the
browser session on shutdown.
"""

from contextlib import asynccontextmanager
import uuid
from typing import AsyncGenerator, Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from src.config.settings import get_settings, Settings
from src.config.logging import get_logger
from src.core.exceptions import SlideRenderingError
from src.core.rendering.carousel import CarouselBatcher
from src.core.rendering.session_manager import BrowserSessionManager
from src.core.rendering.slide_renderer import SlideRenderer
from src.core.rendering.template_store import TemplateStore
from src.api.routes.health import router as health_router
from src.api.routes.render import router as render_router
from src.models.schemas import ErrorResponse

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    session_manager: Optional[BrowserSessionManager] = None,
) -> FastAPI:
    """
    Application factory.

    Args:
        settings: Settings to use instead of the global ones
        session_manager: Browser session manager to use instead of a new one

    Returns:
        FastAPI application instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info("Starting slide renderer", environment=settings.environment)

        template_store = TemplateStore(
            settings.templates_path,
            suffix=settings.template_suffix,
            cache=settings.cache_templates,
        )
        manager = session_manager or BrowserSessionManager(settings)
        renderer = SlideRenderer(
            template_store=template_store,
            session_manager=manager,
            geometry=settings.render_geometry,
            render_timeout=settings.render_timeout,
        )

        app.state.settings = settings
        app.state.template_store = template_store
        app.state.session_manager = manager
        app.state.slide_renderer = renderer
        app.state.carousel_batcher = CarouselBatcher(renderer, settings.default_layout_style)

        logger.info(
            "Templates available",
            templates=template_store.list_available_styles(),
            templates_path=str(settings.templates_path),
        )

        if settings.browser_warmup:
            await manager.acquire()

        try:
            yield
        finally:
            logger.info("Shutting down slide renderer")
            try:
                await manager.close()
            except Exception as e:
                logger.error("Error closing browser session", error=str(e))

    app = FastAPI(
        title=settings.app_name,
        description="Render declarative slide data to PNG images through HTML templates",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_hosts,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.middleware("http")
    async def add_request_id(request: Request, call_next) -> JSONResponse:  # type: ignore
        """Add request ID to all requests."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)  # type: ignore
        response.headers["X-Request-ID"] = request_id  # type: ignore

        return response  # type: ignore

    @app.exception_handler(SlideRenderingError)
    async def rendering_exception_handler(
        request: Request, exc: SlideRenderingError
    ) -> JSONResponse:
        """Report rendering errors with their own status and message."""
        error_response = ErrorResponse(
            error=str(exc),
            error_code=exc.error_code,
            details=None,
            request_id=getattr(request.state, "request_id", None),
        )

        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            "Rendering error",
            error_code=exc.error_code,
            error_message=str(exc),
            path=request.url.path,
            request_id=error_response.request_id,
        )

        return JSONResponse(
            status_code=exc.status_code, content=error_response.model_dump(mode="json")
        )

    @app.exception_handler(HTTPException)
    async def custom_http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """Custom HTTP exception handler with structured error response."""
        error_response = ErrorResponse(
            error=str(exc.detail),
            error_code=str(exc.status_code),
            details=None,
            request_id=getattr(request.state, "request_id", None),
        )
        return JSONResponse(
            status_code=exc.status_code, content=error_response.model_dump(mode="json")
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """General exception handler for unexpected errors."""
        error_response = ErrorResponse(
            error=str(exc),
            error_code="INTERNAL_ERROR",
            details={"exception": type(exc).__name__} if settings.debug else None,
            request_id=getattr(request.state, "request_id", None),
        )

        logger.error(
            "Unhandled exception",
            exception=str(exc),
            request_id=error_response.request_id,
            exc_info=True,
        )

        return JSONResponse(status_code=500, content=error_response.model_dump(mode="json"))

    @app.get("/", tags=["General"])
    async def root() -> dict[str, Any]:
        """Root endpoint with basic API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs_url": "/docs" if settings.debug else None,
            "health_check": "/health",
            "endpoints": {
                "render_slide": "POST /render-slide",
                "render_carousel": "POST /render-carousel",
            },
        }

    app.include_router(health_router)
    app.include_router(render_router)

    return app


app = create_app()


def run_server() -> None:
    """Run the API server; uvicorn closes the app on SIGINT/SIGTERM."""
    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug and settings.environment == "development",
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    run_server()
