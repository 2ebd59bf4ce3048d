from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from docsite.core.env import load_env


PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_SANDBOX_MODULE = "MyApp"
DEFAULT_CORE_CSS_URL = "https://cdn.rawgit.com/angular/bower-material/master/angular-material.css"
DEFAULT_CORE_JS_URL = "https://cdn.rawgit.com/angular/bower-material/master/angular-material.js"
# CodePen cannot serve the demo SVG icons without this cache shim.
DEFAULT_ASSET_CACHE_URL = "https://s3-us-west-2.amazonaws.com/s.cdpn.io/t-114/assets-cache.js"

_ENVIRONMENTS = {"development", "production", "staging", "test"}
_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True)
class Settings:
    environment: str
    sandbox_module: str
    core_css_url: str
    core_js_url: str
    asset_cache_url: str
    log_level: str
    log_json: bool
    log_file: str


load_env()


def _get_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _validate_sandbox_module(name: str) -> str:
    if not _JS_IDENTIFIER.match(name):
        raise ValueError(
            f"CODEPEN_SANDBOX_MODULE must be a plain JavaScript identifier (got: {name!r})"
        )
    return name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    environment = os.getenv("ENVIRONMENT", "development").strip().lower()
    if environment not in _ENVIRONMENTS:
        environment = "development"

    sandbox_module = _validate_sandbox_module(
        _get_str("CODEPEN_SANDBOX_MODULE", DEFAULT_SANDBOX_MODULE)
    )

    log_level = _get_str("LOG_LEVEL", "INFO").upper()

    return Settings(
        environment=environment,
        sandbox_module=sandbox_module,
        core_css_url=_get_str("CODEPEN_CORE_CSS_URL", DEFAULT_CORE_CSS_URL),
        core_js_url=_get_str("CODEPEN_CORE_JS_URL", DEFAULT_CORE_JS_URL),
        asset_cache_url=_get_str("CODEPEN_ASSET_CACHE_URL", DEFAULT_ASSET_CACHE_URL),
        log_level=log_level,
        log_json=_get_bool("LOG_JSON", default=False),
        log_file=os.getenv("LOG_FILE", "").strip(),
    )


__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_SANDBOX_MODULE",
    "DEFAULT_CORE_CSS_URL",
    "DEFAULT_CORE_JS_URL",
    "DEFAULT_ASSET_CACHE_URL",
]
