"""Derivation endpoints: turn content entries into target page data."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from pagegen.config import get_settings
from pagegen.models.derive_request import DeriveRequest, PagePropsRequest
from pagegen.models.derive_response import DeriveResponse
from pagegen.plugins import target_plugin
from pagegen.services.pipeline import generate_data, props_for_path, static_paths

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post("/derive", response_model=DeriveResponse, summary="Derive pages and common props")
@limiter.limit("30/minute")
async def derive(request: Request, body: DeriveRequest) -> DeriveResponse:
    """Run the target's page and common-props hooks over ``objects``.

    Only page layout entries become pages; their ``__metadata`` gains a
    ``urlPath`` and the ``pageCssClasses`` derived from it.  The first
    ``Config`` entry is returned as ``props.site``.
    """
    logger.info("Derive request received", extra={"objects": len(body.objects)})
    data = _generate(body)
    return DeriveResponse(
        objects=data["objects"],
        pages=data["pages"],
        props=data["props"],
        paths=static_paths(data),
    )


@router.post("/derive/page", summary="Resolve the props of a single page")
@limiter.limit("30/minute")
async def derive_page(request: Request, body: PagePropsRequest) -> Dict[str, Any]:
    """Return the common props merged with the page routed at ``url_path``."""
    data = _generate(body)
    props = props_for_path(data, body.url_path)
    if props is None:
        raise HTTPException(status_code=404, detail=f"No page found at {body.url_path!r}.")
    return props


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _generate(body: DeriveRequest) -> Dict[str, Any]:
    """Generate target data with the configured target plugin.

    Malformed entries raise :class:`InvalidEntryError`, which the app turns
    into HTTP 422.
    """
    return generate_data(body.objects, target_plugin(get_settings()))
