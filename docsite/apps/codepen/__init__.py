"""CodePen export of docs demos."""

from __future__ import annotations

from .adapter import CodepenDataAdapter, get_adapter, reset_adapter, translate

__all__ = [
    "CodepenDataAdapter",
    "get_adapter",
    "reset_adapter",
    "translate",
]
