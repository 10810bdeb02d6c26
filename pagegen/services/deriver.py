"""Page derivation: shapes fetched content entries into page records and common props.

Every entry carries its schema tag under ``__metadata.modelName``.  Layout
entries become pages routed by their ``slug``; the single ``Config`` entry is
exposed to every page as ``site``.  Both transforms are pure: inputs are never
mutated and each call returns fresh mappings.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pagegen.services.page_utils import css_classes_from_url_path, normalize_url_path

logger = logging.getLogger(__name__)

METADATA_KEY = "__metadata"
CONFIG_MODEL_NAME = "Config"
PAGE_MODEL_NAMES = frozenset(
    {
        "PageLayout",
        "PostLayout",
        "PostFeedLayout",
        "PostFeedCategoryLayout",
    }
)

ContentEntry = Mapping[str, Any]


class InvalidEntryError(ValueError):
    """Raised when a content entry lacks the fields derivation relies on."""


def _model_name(entry: ContentEntry) -> str:
    metadata = entry.get(METADATA_KEY)
    if not isinstance(metadata, Mapping) or "modelName" not in metadata:
        raise InvalidEntryError(f"Content entry has no {METADATA_KEY}.modelName")
    model_name = metadata["modelName"]
    if not isinstance(model_name, str):
        raise InvalidEntryError(
            f"Content entry {METADATA_KEY}.modelName must be a string (got {model_name!r})"
        )
    return model_name


def derive_common_props(objects: Sequence[ContentEntry]) -> Dict[str, Any]:
    """Return the props merged into every page: ``{"site": <Config entry or None>}``."""
    site: Optional[ContentEntry] = None
    for entry in objects:
        if _model_name(entry) == CONFIG_MODEL_NAME:
            site = entry
            break

    if site is None:
        logger.debug("No %s entry among %d objects", CONFIG_MODEL_NAME, len(objects))
    return {"site": site}


def _to_page(entry: ContentEntry) -> Dict[str, Any]:
    rest = {key: value for key, value in entry.items() if key != METADATA_KEY}
    slug = rest.get("slug")
    if not isinstance(slug, str):
        raise InvalidEntryError(
            f"{_model_name(entry)} entry has no string slug (got {slug!r})"
        )

    url_path = normalize_url_path(slug)
    metadata = dict(entry[METADATA_KEY])
    metadata["urlPath"] = url_path
    metadata["pageCssClasses"] = css_classes_from_url_path(url_path)

    page: Dict[str, Any] = {METADATA_KEY: metadata}
    page.update(rest)
    return page


def derive_pages(objects: Sequence[ContentEntry]) -> List[Dict[str, Any]]:
    """Return one page record per layout entry in *objects*, in input order.

    Entries whose model is not a page layout are dropped.  A layout entry
    without a string ``slug`` raises :class:`InvalidEntryError` and aborts the
    derivation.
    """
    pages = [_to_page(entry) for entry in objects if _model_name(entry) in PAGE_MODEL_NAMES]
    logger.debug("Derived %d pages from %d objects", len(pages), len(objects))
    return pages
