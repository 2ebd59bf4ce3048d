import os

import pytest

TEST_ENV = {
    "ENVIRONMENT": "test",
    "CODEPEN_SANDBOX_MODULE": "MyApp",
    "LOG_LEVEL": "DEBUG",
    "LOG_JSON": "0",
    "LOG_FILE": "",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value

for key in ("CODEPEN_CORE_CSS_URL", "CODEPEN_CORE_JS_URL", "CODEPEN_ASSET_CACHE_URL"):
    os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def _reset_cached_settings():
    """Every test starts from the TEST_ENV settings and a fresh adapter."""
    from docsite.apps.codepen import adapter as adapter_module
    from docsite.core import settings as settings_module

    settings_module.get_settings.cache_clear()
    adapter_module.reset_adapter()
    yield
    settings_module.get_settings.cache_clear()
    adapter_module.reset_adapter()


@pytest.fixture
def external_scripts():
    return ["http://some-url-to-external-js-files-required-for-codepen"]


@pytest.fixture
def demo_data():
    return {
        "id": "spec-demo",
        "title": "demo-title",
        "module": "demo-module",
        "index": "<div></div>",
        "css": [".fake-class { color: red }"],
        "js": ['angular.module("SomeOtherModule", ["Dependency1"]);'],
        "html": [],
    }
