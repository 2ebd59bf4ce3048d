import os

import pytest

from docsite.core import env as env_module
from docsite.core.settings import (
    DEFAULT_ASSET_CACHE_URL,
    DEFAULT_CORE_CSS_URL,
    DEFAULT_CORE_JS_URL,
    DEFAULT_SANDBOX_MODULE,
    get_settings,
)


def test_defaults_match_codepen_resources():
    settings = get_settings()

    assert settings.environment == "test"
    assert settings.sandbox_module == DEFAULT_SANDBOX_MODULE == "MyApp"
    assert settings.core_css_url == DEFAULT_CORE_CSS_URL
    assert settings.core_js_url == DEFAULT_CORE_JS_URL
    assert settings.asset_cache_url == DEFAULT_ASSET_CACHE_URL


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CODEPEN_SANDBOX_MODULE", "DocsSandbox")
    monkeypatch.setenv("CODEPEN_CORE_JS_URL", " https://cdn.example/material.js ")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_JSON", "yes")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.sandbox_module == "DocsSandbox"
    assert settings.core_js_url == "https://cdn.example/material.js"
    assert settings.log_level == "WARNING"
    assert settings.log_json is True


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("CODEPEN_CORE_CSS_URL", "   ")
    monkeypatch.setenv("ENVIRONMENT", "qa")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.core_css_url == DEFAULT_CORE_CSS_URL
    assert settings.environment == "development"


@pytest.mark.parametrize("name", ["My App", "my-app", "1app", "app');alert(1);//"])
def test_invalid_sandbox_module_is_rejected(monkeypatch, name):
    monkeypatch.setenv("CODEPEN_SANDBOX_MODULE", name)
    get_settings.cache_clear()

    with pytest.raises(ValueError):
        get_settings()


def _unset(monkeypatch, *names):
    # teardown then removes whatever load_env wrote
    for name in names:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_load_env_does_not_override_existing_values(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "DOCSITE_TEST_NEW='from file'\n"
        "export DOCSITE_TEST_EXPORTED=1\n"
        "DOCSITE_TEST_EXISTING=from file\n"
        "not a pair\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("DOCSITE_TEST_EXISTING", "from shell")
    _unset(monkeypatch, "DOCSITE_TEST_NEW", "DOCSITE_TEST_EXPORTED")

    env_module.load_env(env_file)

    assert os.environ["DOCSITE_TEST_NEW"] == "from file"
    assert os.environ["DOCSITE_TEST_EXPORTED"] == "1"
    assert os.environ["DOCSITE_TEST_EXISTING"] == "from shell"


def test_load_env_local_overrides_env_but_not_shell(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("DOCSITE_TEST_A=base\nDOCSITE_TEST_B=base\n", encoding="utf-8")
    (tmp_path / ".env.local").write_text("DOCSITE_TEST_A=local\nDOCSITE_TEST_B=local\n", encoding="utf-8")
    _unset(monkeypatch, "DOCSITE_TEST_A")
    monkeypatch.setenv("DOCSITE_TEST_B", "shell")
    monkeypatch.setattr(env_module, "_default_env_path", lambda: tmp_path / ".env")

    env_module.load_env()

    assert os.environ["DOCSITE_TEST_A"] == "local"
    assert os.environ["DOCSITE_TEST_B"] == "shell"
