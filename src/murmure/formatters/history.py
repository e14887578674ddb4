"""Formatting of webhook history entries for display."""

import json
import time
from typing import Optional

# Non-JSON bodies longer than this are cut for display
MAX_BODY_DISPLAY = 1000


def format_relative_time(timestamp: int, now: Optional[float] = None) -> str:
    """Format a seconds-since-epoch timestamp as a short relative age.

    Args:
        timestamp: When the webhook was sent.
        now: Current time in seconds; defaults to the wall clock.

    Returns:
        "Just now", "5m ago", "3h ago" or "2d ago".
    """
    if now is None:
        now = time.time()

    minutes = int((now - timestamp) // 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"


def format_response_body(body: str) -> str:
    """Pretty-print a JSON response body, or truncate a long plain one."""
    try:
        return json.dumps(json.loads(body), indent=2, ensure_ascii=False)
    except ValueError:
        if len(body) > MAX_BODY_DISPLAY:
            return body[:MAX_BODY_DISPLAY] + "..."
        return body


def mask_token(token: Optional[str]) -> str:
    # Keep the last four characters so users can tell tokens apart
    if not token:
        return ""
    if len(token) <= 4:
        return "*" * len(token)
    return "*" * (len(token) - 4) + token[-4:]
