"""Publish/subscribe notifications for webhook history and failures."""

import logging
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    HISTORY_CHANGED = "history-changed"
    DELIVERY_FAILED = "delivery-failed"


@dataclass(frozen=True)
class Notification:
    kind: EventKind
    message: Optional[str] = None  # Error message for delivery-failed


# Listener callback type: called with each notification of the subscribed kind
Listener = Callable[[Notification], None]


class Subscription:
    """A stream of notifications for one subscriber.

    Usage:
        with bus.subscribe(EventKind.HISTORY_CHANGED) as sub:
            event = sub.get(timeout=1.0)
    """

    def __init__(self, bus: "NotificationBus", kinds: frozenset[EventKind], max_pending: int):
        self.kinds = kinds
        self._bus = bus
        self._queue: queue.Queue[Notification] = queue.Queue(maxsize=max_pending)
        self.closed = False

    def _offer(self, notification: Notification) -> None:
        try:
            self._queue.put_nowait(notification)
        except queue.Full:
            logger.warning(f"Dropping {notification.kind.value} notification: subscriber queue full")

    def get(self, timeout: Optional[float] = None) -> Optional[Notification]:
        """Wait for the next notification; None if the timeout expires."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def drain(self) -> list[Notification]:
        """Return every pending notification without waiting."""
        pending: list[Notification] = []
        while True:
            try:
                pending.append(self._queue.get_nowait())
            except queue.Empty:
                return pending

    def close(self) -> None:
        self.closed = True
        self._bus._remove(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class NotificationBus:
    """Fan-out of history-changed and delivery-failed notifications.

    Publishing never blocks: each subscriber has its own bounded queue and
    a full queue drops the notification for that subscriber only. There is
    no replay; a subscriber only sees what is published after it joins.
    """

    def __init__(self, max_pending: int = 256):
        self._max_pending = max_pending
        self._subscriptions: list[Subscription] = []
        self._lock = threading.Lock()

    def subscribe(self, *kinds: EventKind, max_pending: Optional[int] = None) -> Subscription:
        """Subscribe to the given kinds (all kinds if none are given)."""
        subscription = Subscription(
            self,
            frozenset(kinds or EventKind),
            max_pending if max_pending is not None else self._max_pending,
        )
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def listen(self, kind: EventKind, callback: Listener) -> Callable[[], None]:
        """Call ``callback`` for every notification of ``kind``.

        Callbacks run on a dedicated daemon thread, so a slow listener only
        delays itself.

        Returns:
            Unsubscribe function.
        """
        subscription = self.subscribe(kind)

        def pump() -> None:
            while not subscription.closed:
                notification = subscription.get(timeout=0.5)
                if notification is None:
                    continue
                try:
                    callback(notification)
                except Exception as e:
                    logger.exception(f"Notification listener error: {e}")

        thread = threading.Thread(target=pump, name=f"notify-{kind.value}", daemon=True)
        thread.start()
        return subscription.close

    def publish(self, kind: EventKind, message: Optional[str] = None) -> None:
        notification = Notification(kind=kind, message=message)
        with self._lock:
            targets = [s for s in self._subscriptions if kind in s.kinds]
        for subscription in targets:
            subscription._offer(notification)

    def history_changed(self) -> None:
        self.publish(EventKind.HISTORY_CHANGED)

    def delivery_failed(self, message: str) -> None:
        self.publish(EventKind.DELIVERY_FAILED, message)

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)
