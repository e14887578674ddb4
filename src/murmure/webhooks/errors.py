"""Exceptions raised by the webhook subsystem."""

from typing import Optional


class WebhookError(Exception):
    """Base class for webhook errors."""

    pass


class ConfigurationError(WebhookError):
    """Raised when the webhook URL or token could not be persisted."""

    pass


PersistenceError = ConfigurationError


class HistoryPersistenceError(WebhookError):
    """Raised when the history file could not be written."""

    pass


class DeliveryError(WebhookError):
    """A delivery attempt failed.

    These never escape the dispatcher; they are turned into failed
    history entries.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body


class DeliveryTimeout(DeliveryError):
    """The endpoint did not answer within the timeout."""


class DeliveryTransportError(DeliveryError):
    """DNS, connection or TLS failure, or a URL that cannot be sent to."""


class DeliveryHTTPError(DeliveryError):
    """The endpoint answered with a non-2xx status."""
