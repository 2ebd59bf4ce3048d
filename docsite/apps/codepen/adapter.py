"""Translate docs demos into CodePen submissions.

A demo is a bundle of fragments written against the docs build (its own
module, separate template files). CodePen wants a single HTML/CSS/JS triple
plus lists of external resources, so the adapter:

- rewrites the demo's module declaration to the sandbox module
- bootstraps the index markup with that module and embeds the templates
- lists the framework build and the asset cache as external resources

Translation is pure: no I/O, no shared mutable state.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from pydantic import ValidationError

from docsite.apps.codepen.html_augmenter import augment_html
from docsite.apps.codepen.module_rewriter import rewrite_module
from docsite.apps.codepen.resources import build_external_resources
from docsite.core.settings import Settings, get_settings
from docsite.domain.errors import TranslationError
from docsite.domain.models import Demo, TranslationResult

logger = logging.getLogger(__name__)

DemoInput = Union[Demo, Mapping[str, Any]]


@contextmanager
def _translation_step(step: str, fragment: object, demo_id: Optional[str]) -> Iterator[None]:
    try:
        yield
    except TranslationError:
        raise
    except Exception as exc:
        logger.exception(
            "Codepen translation step %s failed for demo %s",
            step,
            demo_id,
            extra={"step": step},
        )
        raise TranslationError(step, str(exc), fragment=fragment, demo_id=demo_id) from exc


def _coerce_demo(demo: DemoInput) -> Demo:
    if isinstance(demo, Demo):
        return demo
    demo_id = demo.get("id") if isinstance(demo, Mapping) else None
    try:
        return Demo.model_validate(demo)
    except ValidationError as exc:
        raise TranslationError("validate", str(exc), fragment=demo, demo_id=demo_id) from exc


class CodepenDataAdapter:
    """Turns demo records into payloads for the CodePen prefill form."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def translate(self, demo: DemoInput, external_scripts: Iterable[str]) -> TranslationResult:
        """Translate ``demo`` into the fields CodePen expects.

        Args:
            demo: Demo record, or its raw mapping form
            external_scripts: Extra script URLs the demo depends on

        Returns:
            TranslationResult with title, css, css_external, js, js_external, html

        Raises:
            TranslationError: If any step fails; ``step`` names the failing one
        """
        record = _coerce_demo(demo)
        settings = self._settings

        with _translation_step("aggregate", external_scripts, record.id):
            scripts = list(external_scripts)
            resources = build_external_resources(scripts, settings=settings)

        script = "\n".join(record.js)
        with _translation_step("rewrite", script, record.id):
            js = rewrite_module(script, module_name=settings.sandbox_module)

        with _translation_step("augment", record.index, record.id):
            html = augment_html(
                record.index,
                record.id,
                record.html,
                module_name=settings.sandbox_module,
            )

        logger.debug(
            "Translated demo %s (%d templates, %d external scripts)",
            record.id,
            len(record.html),
            len(scripts),
        )
        return TranslationResult(
            title=record.title,
            css="\n".join(record.css),
            css_external=resources.css_external,
            js=js,
            js_external=resources.js_external,
            html=html,
        )


_adapter: Optional[CodepenDataAdapter] = None


def get_adapter() -> CodepenDataAdapter:
    """Get the process-wide adapter built from current settings."""
    global _adapter
    if _adapter is None:
        _adapter = CodepenDataAdapter()
    return _adapter


def reset_adapter() -> None:
    """Drop the process-wide adapter (useful for testing)."""
    global _adapter
    _adapter = None


def translate(
    demo: DemoInput,
    external_scripts: Iterable[str],
    *,
    settings: Optional[Settings] = None,
) -> TranslationResult:
    if settings is not None:
        return CodepenDataAdapter(settings).translate(demo, external_scripts)
    return get_adapter().translate(demo, external_scripts)


__all__ = [
    "CodepenDataAdapter",
    "get_adapter",
    "reset_adapter",
    "translate",
]
