"""Data models for webhook support."""

import math
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Optional


@dataclass(frozen=True)
class WebhookConfig:
    """The single webhook destination.

    An absent URL disables delivery. An absent token means no
    Authorization header is sent.
    """

    url: Optional[str] = None
    token: Optional[str] = None

    def is_enabled(self) -> bool:
        """Check if delivery should be attempted."""
        return bool(self.url and self.url.strip())

    def headers(self) -> dict[str, str]:
        """Build the request headers for this destination."""
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


@dataclass(frozen=True)
class WebhookPayload:
    """Payload sent to the webhook endpoint."""

    text: str
    timestamp: str  # ISO 8601
    duration: Optional[float] = None  # Recording duration in seconds

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.text,
            "timestamp": self.timestamp,
            "duration": self.duration,
        }

    @classmethod
    def create(
        cls,
        text: str,
        timestamp: Optional[float] = None,
        duration: Optional[float] = None,
    ) -> "WebhookPayload":
        """Create a payload, stamping it with the transcription time (now by default)."""
        if duration is not None and not math.isfinite(duration):
            # JSON has no NaN or Infinity
            duration = None
        if timestamp is None:
            when = datetime.now(timezone.utc)
        else:
            when = datetime.fromtimestamp(timestamp, tz=timezone.utc)
        return cls(text=text, timestamp=when.isoformat(), duration=duration)


@dataclass
class WebhookResult:
    """Result of a webhook call."""

    success: bool
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    response_body: Optional[str] = None
    duration: Optional[float] = None  # Wall-clock seconds, None if never sent


@dataclass(frozen=True)
class WebhookHistoryEntry:
    """A single entry in the webhook call history."""

    id: int
    timestamp: int  # Seconds since epoch, taken when the dispatch started
    text: str
    success: bool
    error_message: Optional[str] = None
    duration: Optional[float] = None
    response_body: Optional[str] = None

    @classmethod
    def from_result(
        cls,
        entry_id: int,
        timestamp: int,
        text: str,
        result: WebhookResult,
    ) -> "WebhookHistoryEntry":
        """Create a history entry from a webhook call."""
        return cls(
            id=entry_id,
            timestamp=timestamp,
            text=text,
            success=result.success,
            error_message=None if result.success else result.error_message,
            duration=result.duration,
            response_body=result.response_body,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WebhookHistoryEntry":
        """Create a history entry from a dictionary."""
        return cls(
            id=int(data["id"]),
            timestamp=int(data.get("timestamp", 0)),
            text=data.get("text", ""),
            success=bool(data.get("success", False)),
            error_message=data.get("error_message"),
            duration=data.get("duration"),
            response_body=data.get("response_body"),
        )
