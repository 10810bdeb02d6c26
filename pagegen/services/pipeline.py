"""Target-side helpers over the generated data: static paths and per-page props."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from pagegen.plugins import PluginSpec
from pagegen.services.deriver import METADATA_KEY, ContentEntry
from pagegen.services.page_utils import normalize_url_path

logger = logging.getLogger(__name__)


def generate_data(objects: Sequence[ContentEntry], target: PluginSpec) -> Dict[str, Any]:
    """Run the target's ``commonProps`` and ``pages`` hooks over *objects*.

    Returns the generated data object with ``objects``, ``pages`` and ``props``.
    """
    common_props = target.options["commonProps"]
    pages_hook = target.options["pages"]

    data = {
        "objects": list(objects),
        "pages": pages_hook(objects),
        "props": common_props(objects),
    }
    logger.info(
        "Generated target data",
        extra={"objects": len(data["objects"]), "pages": len(data["pages"])},
    )
    return data


def _canonical(url_path: str) -> str:
    # "/about/" and "about" both resolve to "/about"; the root stays "/"
    return normalize_url_path(url_path).rstrip("/") or "/"


def static_paths(data: Dict[str, Any]) -> List[str]:
    """Return the URL path of every page, in page order."""
    return [page[METADATA_KEY]["urlPath"] for page in data["pages"]]


def props_for_path(data: Dict[str, Any], url_path: str) -> Optional[Dict[str, Any]]:
    """Return the common props merged with the page at *url_path*, or ``None``."""
    wanted = _canonical(url_path)
    for page in data["pages"]:
        if _canonical(page[METADATA_KEY]["urlPath"]) == wanted:
            props = dict(data["props"])
            props["page"] = page
            return props

    logger.debug("No page found for %s", url_path)
    return None
