from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class CommonProps(BaseModel):
    """Props merged into every page."""

    site: Optional[Dict[str, Any]] = None


class DeriveResponse(BaseModel):
    objects: List[Dict[str, Any]]
    pages: List[Dict[str, Any]]
    """Page records; each ``__metadata`` carries ``urlPath`` and ``pageCssClasses``."""
    props: CommonProps
    paths: List[str]


class PluginResponse(BaseModel):
    module: str
    options: Dict[str, Any]


class PluginsResponse(BaseModel):
    dev: bool
    plugins: List[PluginResponse]
