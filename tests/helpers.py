"""Test doubles for the webhook receiver and settings backend."""

import json
from typing import Callable, Optional

import httpx

from murmure.webhooks.client import WebhookClient


class RecordingEndpoint:
    """Stand-in webhook receiver that remembers every request it gets."""

    def __init__(self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: list[httpx.Request] = []
        self._handler = handler or (lambda request: httpx.Response(200, json={"success": True}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def client(self, timeout: float = 10) -> WebhookClient:
        return WebhookClient(timeout=timeout, transport=httpx.MockTransport(self))


class FailingBackend:
    """Settings backend whose writes always fail."""

    def __init__(self, initial: Optional[dict] = None):
        self.data = dict(initial or {})

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        raise OSError("disk full")
