"""Webhook dispatcher for transcription events."""

import logging
import threading
import time
from typing import Optional

from murmure.webhooks.bus import NotificationBus
from murmure.webhooks.client import WebhookClient
from murmure.webhooks.config_store import ConfigStore
from murmure.webhooks.history import HistoryStore
from murmure.webhooks.models import WebhookHistoryEntry, WebhookPayload, WebhookResult

TEST_WEBHOOK_TEXT = "This is a test webhook from Murmure."


class WebhookDispatcher:
    """Delivers each completed transcription to the configured webhook.

    One call to ``deliver`` makes at most one HTTP attempt and, when an
    attempt is made, records exactly one history entry whatever the
    outcome. Delivery problems are logged, recorded and published on the
    bus; they are never raised to the caller.
    """

    def __init__(
        self,
        config_store: ConfigStore,
        history: HistoryStore,
        bus: NotificationBus,
        client: WebhookClient | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            config_store: Source of the webhook URL and token.
            history: Where delivery attempts are recorded.
            bus: Where history-changed and delivery-failed are published.
            client: HTTP client; a default one is created if omitted.
            logger: Optional logger for debug output.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_store = config_store
        self.history = history
        self.bus = bus
        self.client = client or WebhookClient(logger=self.logger)

    def deliver(
        self,
        text: str,
        timestamp: Optional[float] = None,
        duration: Optional[float] = None,
    ) -> Optional[WebhookHistoryEntry]:
        """Send one transcription to the webhook.

        Args:
            text: The transcribed text.
            timestamp: When the transcription completed (seconds since
                epoch); defaults to now.
            duration: Recording duration in seconds, if known.

        Returns:
            The recorded history entry, or None if no URL is configured.
        """
        config = self.config_store.get()
        if not config.is_enabled():
            self.logger.debug("No webhook URL configured, skipping delivery")
            return None

        started_at = int(time.time())
        try:
            payload = WebhookPayload.create(text, timestamp=timestamp, duration=duration)
            result = self.client.send(payload, config)
        except Exception as e:
            self.logger.exception(f"Webhook client failed unexpectedly: {e}")
            result = WebhookResult(success=False, error_message=f"Webhook request failed: {e}")

        entry = self.history.record(text, started_at, result)
        self.bus.history_changed()

        if not result.success:
            self.bus.delivery_failed(result.error_message or "Webhook request failed")

        return entry

    def deliver_in_background(
        self,
        text: str,
        timestamp: Optional[float] = None,
        duration: Optional[float] = None,
    ) -> threading.Thread:
        """Run ``deliver`` on a daemon thread and return the thread."""

        def deliver_thread():
            try:
                self.deliver(text, timestamp=timestamp, duration=duration)
            except Exception as e:
                self.logger.exception(f"Webhook delivery crashed: {e}")

        thread = threading.Thread(target=deliver_thread, name="webhook-delivery", daemon=True)
        thread.start()
        return thread

    def send_test(self) -> Optional[WebhookHistoryEntry]:
        """Send a test webhook through the normal delivery path."""
        return self.deliver(TEST_WEBHOOK_TEXT, duration=0.0)
