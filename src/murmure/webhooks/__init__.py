"""Webhook support for Murmure."""

from murmure.webhooks.models import (
    WebhookConfig,
    WebhookHistoryEntry,
    WebhookPayload,
    WebhookResult,
)
from murmure.webhooks.errors import (
    ConfigurationError,
    DeliveryError,
    DeliveryHTTPError,
    DeliveryTimeout,
    DeliveryTransportError,
    HistoryPersistenceError,
    PersistenceError,
    WebhookError,
)
from murmure.webhooks.bus import EventKind, Notification, NotificationBus, Subscription
from murmure.webhooks.client import WebhookClient
from murmure.webhooks.config_store import ConfigStore
from murmure.webhooks.history import HistoryStore
from murmure.webhooks.dispatcher import WebhookDispatcher
from murmure.webhooks.service import WebhookService

__all__ = [
    "WebhookConfig",
    "WebhookHistoryEntry",
    "WebhookPayload",
    "WebhookResult",
    "ConfigurationError",
    "DeliveryError",
    "DeliveryHTTPError",
    "DeliveryTimeout",
    "DeliveryTransportError",
    "HistoryPersistenceError",
    "PersistenceError",
    "WebhookError",
    "EventKind",
    "Notification",
    "NotificationBus",
    "Subscription",
    "WebhookClient",
    "ConfigStore",
    "HistoryStore",
    "WebhookDispatcher",
    "WebhookService",
]
