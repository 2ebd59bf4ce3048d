from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from docsite.core.settings import Settings

RESOURCE_SEPARATOR = ";"


@dataclass(frozen=True)
class ExternalResources:
    css_external: str
    js_external: str


def build_external_resources(
    external_scripts: Iterable[str], *, settings: Settings
) -> ExternalResources:
    """Build CodePen's external CSS/JS resource lists.

    Scripts are ordered: caller scripts, the framework build, then the asset
    cache shim. The stylesheet list is always the framework stylesheet alone.
    """
    scripts = []
    for url in external_scripts:
        if not isinstance(url, str) or not url.strip():
            raise ValueError(f"external script URL must be a non-empty string (got: {url!r})")
        scripts.append(url)

    scripts.extend([settings.core_js_url, settings.asset_cache_url])
    return ExternalResources(
        css_external=settings.core_css_url,
        js_external=RESOURCE_SEPARATOR.join(scripts),
    )


__all__ = ["ExternalResources", "RESOURCE_SEPARATOR", "build_external_resources"]
