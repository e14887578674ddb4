"""Shared fixtures for webhook tests."""

from pathlib import Path

import pytest

from murmure.config.settings import Settings, reset_settings
from murmure.settings_store import SettingsFile
from murmure.webhooks.bus import NotificationBus
from murmure.webhooks.config_store import ConfigStore
from murmure.webhooks.history import HistoryStore
from murmure.webhooks.service import WebhookService
from tests.helpers import RecordingEndpoint


@pytest.fixture(autouse=True)
def _reset_global_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(config_dir=tmp_path / "config")


@pytest.fixture
def settings_file(settings: Settings) -> SettingsFile:
    return SettingsFile(settings.settings_path)


@pytest.fixture
def config_store(settings_file: SettingsFile) -> ConfigStore:
    return ConfigStore(settings_file)


@pytest.fixture
def history(settings: Settings) -> HistoryStore:
    return HistoryStore(path=settings.history_path, max_entries=settings.history_max_entries)


@pytest.fixture
def bus() -> NotificationBus:
    return NotificationBus()


@pytest.fixture
def endpoint() -> RecordingEndpoint:
    return RecordingEndpoint()


@pytest.fixture
def service(settings, settings_file, endpoint) -> WebhookService:
    return WebhookService.from_settings(settings, backend=settings_file, client=endpoint.client())
