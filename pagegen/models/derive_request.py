from typing import Any, Dict, List

from pydantic import BaseModel, Field


class DeriveRequest(BaseModel):
    objects: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Content entries as produced by the content source, each with a `__metadata.modelName` tag.",
    )


class PagePropsRequest(DeriveRequest):
    url_path: str = Field(
        description="URL path of the page to resolve, e.g. `/about`.",
        examples=["/", "/blog/post-1"],
    )
