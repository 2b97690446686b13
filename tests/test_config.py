"""Tests para config.py - Carga y validación de configuración."""

import json

import pytest
from pydantic import ValidationError

from portfolio_forms.config import CONFIG_ENV_VAR, Settings, load_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.endpoint is None
        assert settings.honeypot_name == "website"
        assert settings.max_file_size == 5 * 1024 * 1024
        assert settings.counter_default_max == 500
        assert settings.messages.fix_errors == "Please fix the errors above"

    def test_endpoint_must_be_http(self):
        with pytest.raises(ValidationError):
            Settings(endpoint="ftp://example.com")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(timeout_s=0)


class TestLoadSettings:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "none.json") == Settings()

    def test_loads_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "endpoint": "https://formspree.io/f/abc",
            "messages": {"success": "Thanks!"},
        }))
        settings = load_settings(path)
        assert settings.endpoint == "https://formspree.io/f/abc"
        assert settings.messages.success == "Thanks!"
        assert settings.messages.required == "This field is required"

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"honeypot_name": "fax"}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_settings().honeypot_name == "fax"
