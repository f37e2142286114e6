"""
Health Routes
=============

FastAPI routes for health check endpoints.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_app_settings, get_session_manager, get_template_store
from src.config.logging import get_logger
from src.config.settings import Settings
from src.core.rendering.session_manager import BrowserSessionManager
from src.core.rendering.template_store import TemplateStore
from src.models.schemas import HealthStatus

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthStatus)
async def health_check(
    template_store: TemplateStore = Depends(get_template_store),
    session_manager: BrowserSessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_app_settings),
) -> HealthStatus:
    """
    Get application health status.

    Lists the available layout styles and the browser session state. The
    session is launched lazily, so a session that is not live yet is healthy.
    """
    templates = template_store.list_available_styles()
    health_status = HealthStatus(
        status="ok" if templates else "degraded",
        version=settings.app_version,
        templates=templates,
        session=session_manager.status(),
    )
    logger.debug("Health check completed", status=health_status.status, templates=len(templates))
    return health_status
