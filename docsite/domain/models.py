"""Pydantic models for demo records and their CodePen translation.

- ``Template`` – inline ng-template markup shipped with a demo
- ``Demo`` – one usage example of a component (markup, styles, scripts, templates)
- ``TranslationResult`` – the payload handed to the CodePen submission form
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Template(BaseModel):
    """Template registered as ``<script type="text/ng-template">``."""

    model_config = ConfigDict(frozen=True)

    name: str
    contents: str = ""


class Demo(BaseModel):
    """Demo record as produced by the docs build."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    module: str = ""
    index: str
    css: Tuple[str, ...] = ()
    js: Tuple[str, ...] = ()
    html: Tuple[Template, ...] = ()


class TranslationResult(BaseModel):
    """Fields posted to CodePen; names match the form fields it expects."""

    model_config = ConfigDict(frozen=True)

    title: str
    css: str
    css_external: str
    js: str
    js_external: str
    html: str


__all__ = ["Template", "Demo", "TranslationResult"]
