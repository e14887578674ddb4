"""HTTP client for sending webhooks."""

import logging
import ssl
import time
from typing import Optional

import certifi
import httpx

from murmure import __version__
from murmure.webhooks.errors import (
    DeliveryError,
    DeliveryHTTPError,
    DeliveryTimeout,
    DeliveryTransportError,
)
from murmure.webhooks.models import WebhookConfig, WebhookPayload, WebhookResult

WEBHOOK_TIMEOUT = 10  # seconds
USER_AGENT = f"murmure/{__version__}"

# Longest response body quoted in an error message
ERROR_BODY_PREVIEW = 500


def _get_ssl_context() -> ssl.SSLContext:
    """Create an SSL context using certifi's CA bundle."""
    return ssl.create_default_context(cafile=certifi.where())


def _error_message_for_status(status_code: int, body: Optional[str]) -> str:
    if not body:
        return f"Webhook request failed with status {status_code}"
    if len(body) > ERROR_BODY_PREVIEW:
        body = body[:ERROR_BODY_PREVIEW] + "..."
    return f"Status {status_code}: {body}"


def _validate_url(url: str) -> httpx.URL:
    """Parse the webhook URL, rejecting anything we cannot POST to."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise DeliveryTransportError(f"Invalid webhook URL: {url}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise DeliveryTransportError(f"Invalid webhook URL: {url}")
    return parsed


class WebhookClient:
    """HTTP client for sending webhook requests."""

    def __init__(
        self,
        timeout: float = WEBHOOK_TIMEOUT,
        logger: logging.Logger | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the webhook client.

        Args:
            timeout: Request timeout in seconds.
            logger: Optional logger for debug output.
            transport: Optional httpx transport, used to stub the network.
        """
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.transport = transport

    def send(self, payload: WebhookPayload, config: WebhookConfig) -> WebhookResult:
        """Send a webhook request.

        Never raises for delivery problems; every outcome is described by
        the returned result.

        Args:
            payload: The payload to send.
            config: Webhook configuration.

        Returns:
            WebhookResult indicating success or failure.
        """
        try:
            url = _validate_url((config.url or "").strip())
        except DeliveryError as e:
            self.logger.warning(e.message)
            return WebhookResult(success=False, error_message=e.message)

        started = time.monotonic()
        try:
            status_code, body = self._post(url, payload, config)
        except DeliveryError as e:
            self.logger.warning(e.message)
            return WebhookResult(
                success=False,
                status_code=e.status_code,
                error_message=e.message,
                response_body=e.response_body,
                duration=time.monotonic() - started,
            )

        self.logger.debug(f"Webhook sent successfully to {url.host}: {status_code}")
        return WebhookResult(
            success=True,
            status_code=status_code,
            response_body=body,
            duration=time.monotonic() - started,
        )

    def _post(
        self,
        url: httpx.URL,
        payload: WebhookPayload,
        config: WebhookConfig,
    ) -> tuple[int, str]:
        """POST the payload and return (status, body).

        Raises:
            DeliveryTimeout: The call exceeded the timeout.
            DeliveryTransportError: The request could not be built or never
                got a response.
            DeliveryHTTPError: The response status was not 2xx.
        """
        headers = config.headers()
        headers["User-Agent"] = USER_AGENT

        try:
            with httpx.Client(
                timeout=self.timeout,
                verify=_get_ssl_context(),
                transport=self.transport,
            ) as client:
                response = client.post(url, json=payload.to_dict(), headers=headers)
                body = response.text
        except httpx.TimeoutException as e:
            raise DeliveryTimeout(
                f"Webhook request timed out after {self.timeout:g}s"
            ) from e
        except httpx.RequestError as e:
            raise DeliveryTransportError(f"Webhook request failed: {e}") from e
        except ValueError as e:
            # Header values must be ASCII and the JSON body must be finite
            raise DeliveryTransportError(f"Webhook request could not be built: {e}") from e

        if not response.is_success:
            raise DeliveryHTTPError(
                _error_message_for_status(response.status_code, body),
                status_code=response.status_code,
                response_body=body,
            )

        return response.status_code, body
