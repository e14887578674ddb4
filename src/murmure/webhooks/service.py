"""Query/command surface for webhook configuration and history."""

import logging
import threading
from typing import Callable, Optional

from murmure.config.settings import Settings, get_settings
from murmure.settings_store import SettingsFile
from murmure.webhooks.bus import EventKind, Listener, NotificationBus, Subscription
from murmure.webhooks.client import WebhookClient
from murmure.webhooks.config_store import ConfigStore, SettingsBackend
from murmure.webhooks.dispatcher import WebhookDispatcher
from murmure.webhooks.history import HistoryStore
from murmure.webhooks.models import WebhookHistoryEntry


class WebhookService:
    """Everything a UI or the transcription pipeline needs from webhooks.

    All configuration and history mutation goes through here so that
    notifications always match state changes.

    Usage:
        service = WebhookService.from_settings()
        service.set_webhook_url("https://example.com/hook")
        unsubscribe = service.listen(EventKind.DELIVERY_FAILED, show_toast)
        service.on_transcription("hello world", duration=1.8)
    """

    def __init__(
        self,
        config_store: ConfigStore,
        history: HistoryStore,
        bus: NotificationBus | None = None,
        client: WebhookClient | None = None,
        logger: logging.Logger | None = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.config_store = config_store
        self.history = history
        self.bus = bus or NotificationBus()
        self.dispatcher = WebhookDispatcher(
            config_store, history, self.bus, client=client, logger=self.logger
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        backend: SettingsBackend | None = None,
        client: WebhookClient | None = None,
        logger: logging.Logger | None = None,
    ) -> "WebhookService":
        """Build a fully wired service from application settings."""
        settings = settings or get_settings()
        logger = logger or logging.getLogger("murmure")
        backend = backend or SettingsFile(settings.settings_path)
        history = HistoryStore(
            path=settings.history_path,
            max_entries=settings.history_max_entries,
            logger=logger,
        )
        client = client or WebhookClient(timeout=settings.webhook_timeout, logger=logger)
        return cls(ConfigStore(backend, logger=logger), history, client=client, logger=logger)

    # === Configuration ===

    def get_webhook_url(self) -> Optional[str]:
        return self.config_store.get().url

    def get_webhook_token(self) -> Optional[str]:
        return self.config_store.get().token

    def set_webhook_url(self, url: Optional[str]) -> None:
        """Set or clear (None / blank) the webhook URL.

        Raises:
            ConfigurationError: If the value could not be saved.
        """
        self.config_store.set_url(url)

    def set_webhook_token(self, token: Optional[str]) -> None:
        """Set or clear (None / blank) the bearer token.

        Raises:
            ConfigurationError: If the value could not be saved.
        """
        self.config_store.set_token(token)

    # === History ===

    def get_webhook_history(self) -> list[WebhookHistoryEntry]:
        """Return recorded delivery attempts, newest first."""
        return self.history.list()

    def clear_webhook_history(self) -> None:
        self.history.clear()
        self.bus.history_changed()

    # === Notifications ===

    def subscribe(self, *kinds: EventKind) -> Subscription:
        return self.bus.subscribe(*kinds)

    def listen(self, kind: EventKind, callback: Listener) -> Callable[[], None]:
        return self.bus.listen(kind, callback)

    # === Delivery ===

    def on_transcription(
        self,
        text: str,
        timestamp: Optional[float] = None,
        duration: Optional[float] = None,
    ) -> threading.Thread:
        """Hand a completed transcription to the dispatcher without blocking."""
        return self.dispatcher.deliver_in_background(text, timestamp=timestamp, duration=duration)

    def send_test_webhook(self) -> Optional[WebhookHistoryEntry]:
        return self.dispatcher.send_test()
