import logging

from fastapi import APIRouter, HTTPException, Request

from pagegen.config import get_settings
from pagegen.models.derive_response import PluginResponse, PluginsResponse
from pagegen.plugins import build_plugins, redact_options
from pagegen.routers.derive import limiter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/plugins", response_model=PluginsResponse, summary="Show the declared pipeline plugins")
@limiter.limit("10/minute")
async def list_plugins(request: Request) -> PluginsResponse:
    """Return the plugin declarations with tokens masked."""
    settings = get_settings()
    try:
        plugins = build_plugins(settings)
    except ValueError as exc:
        logger.error("Pipeline is not configured: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc))

    return PluginsResponse(
        dev=settings.is_dev,
        plugins=[
            PluginResponse(module=p.module, options=redact_options(p.options)) for p in plugins
        ],
    )
