"""URL path helpers shared by page derivation: path normalisation and page CSS classes."""

from typing import List

_CLASS_PREFIX = "page"


def normalize_url_path(slug: str) -> str:
    """Return *slug* as an absolute URL path (always starting with ``/``)."""
    if slug.startswith("/"):
        return slug
    return f"/{slug}"


def css_classes_from_url_path(url_path: str) -> List[str]:
    """Derive cumulative CSS class names from the segments of *url_path*.

    Each class extends the previous one with the next path segment, so
    ``/blog/post-1`` yields ``["page-blog", "page-blog-post-1"]``.  The site
    root yields no classes.
    """
    parts = [part for part in url_path.strip("/").split("/") if part]

    classes: List[str] = []
    css = _CLASS_PREFIX
    for part in parts:
        css = f"{css}-{part}"
        classes.append(css)
    return classes
