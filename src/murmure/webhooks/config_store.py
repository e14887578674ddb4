"""In-memory webhook configuration backed by the settings file."""

import logging
import threading
from dataclasses import replace
from typing import Any, Optional, Protocol

from murmure.webhooks.errors import ConfigurationError
from murmure.webhooks.models import WebhookConfig

URL_KEY = "webhook_url"
TOKEN_KEY = "webhook_token"


class SettingsBackend(Protocol):
    """Durable key/value storage the config store caches."""

    def get(self, key: str, default: Optional[Any] = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


def _normalize(value: Optional[str]) -> Optional[str]:
    """Trim whitespace; empty means absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class ConfigStore:
    """Current webhook URL and bearer token.

    Reads are served from memory. Each setter writes through to the
    backend and only then swaps the cached value, so a failed write
    leaves reads on the previous value and raises ConfigurationError.
    """

    def __init__(self, backend: SettingsBackend, logger: logging.Logger | None = None):
        self.backend = backend
        self.logger = logger or logging.getLogger(__name__)
        self._write_lock = threading.Lock()
        self._config = WebhookConfig(
            url=self._load(URL_KEY),
            token=self._load(TOKEN_KEY),
        )

    def _load(self, key: str) -> Optional[str]:
        value = self.backend.get(key)
        if value is not None and not isinstance(value, str):
            self.logger.warning(f"Ignoring non-string {key} in settings: {value!r}")
            return None
        return _normalize(value)

    def get(self) -> WebhookConfig:
        return self._config

    def set_url(self, value: Optional[str]) -> None:
        self._set(URL_KEY, "url", value)

    def set_token(self, value: Optional[str]) -> None:
        self._set(TOKEN_KEY, "token", value)

    def _set(self, key: str, field_name: str, value: Optional[str]) -> None:
        value = _normalize(value)
        with self._write_lock:
            try:
                self.backend.set(key, value)
            except OSError as e:
                raise ConfigurationError(f"Failed to save webhook {field_name}: {e}") from e
            self._config = replace(self._config, **{field_name: value})
        self.logger.debug(f"Webhook {field_name} {'updated' if value else 'cleared'}")
