"""Tests for the webhook configuration store."""

import pytest

from murmure.settings_store import SettingsFile
from murmure.webhooks.config_store import ConfigStore
from murmure.webhooks.errors import ConfigurationError, PersistenceError
from murmure.webhooks.models import WebhookConfig
from tests.helpers import FailingBackend


class TestConfigStore:
    def test_starts_empty(self, config_store):
        config = config_store.get()
        assert config == WebhookConfig(url=None, token=None)
        assert not config.is_enabled()

    def test_set_url_trims(self, config_store, settings_file):
        config_store.set_url("  https://example.com/ok \n")
        assert config_store.get().url == "https://example.com/ok"
        assert settings_file.get("webhook_url") == "https://example.com/ok"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_url_is_absent(self, config_store, value):
        config_store.set_url("https://example.com/ok")
        config_store.set_url(value)
        assert config_store.get().url is None
        assert not config_store.get().is_enabled()

    def test_token_independent_of_url(self, config_store):
        config_store.set_url("https://example.com/ok")
        config_store.set_token("toto")
        config_store.set_url(None)
        assert config_store.get() == WebhookConfig(url=None, token="toto")

    def test_loads_from_backend(self, settings_file):
        settings_file.set("webhook_url", " https://example.com/hook ")
        settings_file.set("webhook_token", "")
        store = ConfigStore(settings_file)
        assert store.get() == WebhookConfig(url="https://example.com/hook", token=None)

    @pytest.mark.parametrize("stored", [5, ["https://example.com"], {"url": "x"}, True])
    def test_non_string_settings_are_ignored(self, stored, caplog):
        with caplog.at_level("WARNING"):
            store = ConfigStore(FailingBackend({"webhook_url": stored, "webhook_token": stored}))

        assert store.get() == WebhookConfig(url=None, token=None)
        assert "Ignoring non-string webhook_url" in caplog.text

    def test_survives_restart(self, settings):
        ConfigStore(SettingsFile(settings.settings_path)).set_token("secret")
        assert ConfigStore(SettingsFile(settings.settings_path)).get().token == "secret"

    def test_failed_write_keeps_previous_value(self):
        store = ConfigStore(FailingBackend({"webhook_url": "https://example.com/old"}))

        with pytest.raises(ConfigurationError, match="disk full"):
            store.set_url("https://example.com/new")
        assert store.get().url == "https://example.com/old"

        with pytest.raises(PersistenceError):
            store.set_token("toto")
        assert store.get().token is None


class TestWebhookConfig:
    def test_headers_without_token(self):
        assert WebhookConfig(url="https://x").headers() == {"Content-Type": "application/json"}

    def test_headers_with_token(self):
        headers = WebhookConfig(url="https://x", token="toto").headers()
        assert headers["Authorization"] == "Bearer toto"
