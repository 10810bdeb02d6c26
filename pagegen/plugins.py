"""Pipeline plugin declarations.

The pipeline runs two plugins in order:

* ``sourcebit-source-contentful`` pulls entries from a Contentful space and
  passes them on as content objects.
* ``sourcebit-target-next`` turns those objects into the data consumed by the
  Next.js ``getStaticPaths`` / ``getStaticProps`` methods.  Its ``pages`` and
  ``commonProps`` hooks are the derivations in :mod:`pagegen.services.deriver`.

Fetching and caching belong to the plugins themselves; this module only
assembles their options from :class:`~pagegen.config.Settings`.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from pagegen.config import Settings
from pagegen.services.deriver import derive_common_props, derive_pages

logger = logging.getLogger(__name__)

SOURCE_MODULE = "sourcebit-source-contentful"
TARGET_MODULE = "sourcebit-target-next"

_SECRET_OPTIONS = frozenset({"accessToken", "deliveryToken", "previewToken"})
_MASK = "***"


@dataclass
class PluginSpec:
    """One entry of the pipeline's plugin list."""

    module: str
    options: Dict[str, Any] = field(default_factory=dict)


def source_plugin(settings: Settings) -> PluginSpec:
    """Declare the Contentful source; raises ``ValueError`` on missing credentials."""
    settings.validate_source_credentials()
    return PluginSpec(
        module=SOURCE_MODULE,
        options={
            "accessToken": settings.contentful_access_token,
            "deliveryToken": settings.contentful_delivery_token,
            "previewToken": settings.contentful_preview_token,
            "spaceId": settings.contentful_space_id,
            "environment": settings.contentful_environment,
            "preview": settings.is_dev,
            "watch": settings.is_dev,
        },
    )


def target_plugin(settings: Settings) -> PluginSpec:
    """Declare the Next.js target with the page derivation hooks."""
    return PluginSpec(
        module=TARGET_MODULE,
        options={
            "liveUpdate": settings.is_dev,
            "flattenAssetUrls": True,
            "commonProps": derive_common_props,
            "pages": derive_pages,
        },
    )


def build_plugins(settings: Settings) -> List[PluginSpec]:
    """Return the full plugin list, source first."""
    plugins = [source_plugin(settings), target_plugin(settings)]
    logger.info(
        "Pipeline plugins declared",
        extra={"plugins": [p.module for p in plugins], "dev": settings.is_dev},
    )
    return plugins


def redact_options(options: Dict[str, Any]) -> Dict[str, Any]:
    """Return a display-safe copy of *options*.

    Token values are masked and hook callables are replaced by their names.
    """
    redacted: Dict[str, Any] = {}
    for key, value in options.items():
        if key in _SECRET_OPTIONS and value:
            redacted[key] = _MASK
        elif callable(value):
            redacted[key] = getattr(value, "__name__", repr(value))
        else:
            redacted[key] = value
    return redacted
