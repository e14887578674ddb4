"""Webhook history storage and management."""

import json
import logging
import os
import threading
from dataclasses import replace
from pathlib import Path
from typing import Optional

from murmure.webhooks.errors import HistoryPersistenceError
from murmure.webhooks.models import WebhookHistoryEntry, WebhookResult

# Maximum number of history entries to keep
MAX_HISTORY_ENTRIES = 100


def load_history(path: Path) -> tuple[list[WebhookHistoryEntry], int]:
    """Load webhook history from disk.

    Returns:
        Tuple of (entries newest first, next id to assign).

    Raises:
        ValueError: If the file exists but cannot be parsed.
    """
    if not path.exists():
        return [], 1

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        entries = [WebhookHistoryEntry.from_dict(entry) for entry in data.get("entries", [])]
        next_id = int(data.get("next_id", 1))
    except (OSError, json.JSONDecodeError, TypeError, KeyError, AttributeError) as e:
        raise ValueError(f"Unreadable webhook history at {path}: {e}") from e

    # Never hand out an id that is already on disk
    if entries:
        next_id = max(next_id, max(e.id for e in entries) + 1)
    return entries, next_id


def save_history(path: Path, entries: list[WebhookHistoryEntry], next_id: int) -> None:
    """Save webhook history to disk.

    Raises:
        HistoryPersistenceError: If the file could not be written.
    """
    data = {
        "entries": [entry.to_dict() for entry in entries],
        "next_id": next_id,
    }
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as e:
        raise HistoryPersistenceError(f"Failed to write webhook history to {path}: {e}") from e


class HistoryStore:
    """Bounded, newest-first record of webhook delivery attempts.

    Ids are assigned on append and are never reused, not even after an
    entry is evicted or the history is cleared. Writers are serialized by
    a lock; readers get a copy of the list, so they see either the state
    before or after a write and never a partial one.

    Persistence to ``path`` is best effort: a failed write is logged and
    the in-memory history stays authoritative.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        max_entries: int = MAX_HISTORY_ENTRIES,
        logger: logging.Logger | None = None,
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.path = path
        self.max_entries = max_entries
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._entries: list[WebhookHistoryEntry] = []
        self._next_id = 1

        if path is not None:
            try:
                self._entries, self._next_id = load_history(path)
            except ValueError as e:
                self.logger.warning(f"{e}; starting with empty history")
            self._entries = self._entries[: self.max_entries]

    def append(self, entry: WebhookHistoryEntry) -> int:
        """Insert an entry as the newest one and return its assigned id.

        The entry's own ``id`` is ignored and replaced.
        """
        return self._insert(entry).id

    def record(self, text: str, started_at: int, result: WebhookResult) -> WebhookHistoryEntry:
        """Append the outcome of one delivery attempt and return the stored entry."""
        return self._insert(WebhookHistoryEntry.from_result(0, started_at, text, result))

    def _insert(self, entry: WebhookHistoryEntry) -> WebhookHistoryEntry:
        with self._lock:
            stored = replace(entry, id=self._next_id)
            self._next_id += 1
            # Add to front (most recent first), trim oldest from the back
            entries = [stored] + self._entries
            del entries[self.max_entries :]
            self._entries = entries
            self._persist()
        return stored

    def list(self) -> list[WebhookHistoryEntry]:
        """Return a snapshot of all entries, newest first."""
        with self._lock:
            return list(self._entries)

    def get(self, entry_id: int) -> Optional[WebhookHistoryEntry]:
        """Get a specific history entry by ID."""
        for entry in self.list():
            if entry.id == entry_id:
                return entry
        return None

    def clear(self) -> None:
        """Clear all webhook history. The id counter keeps counting."""
        with self._lock:
            self._entries = []
            self._persist()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def next_id(self) -> int:
        return self._next_id

    def _persist(self) -> None:
        """Write the current state to disk. Caller holds the lock."""
        if self.path is None:
            return
        try:
            save_history(self.path, self._entries, self._next_id)
        except HistoryPersistenceError as e:
            self.logger.warning(str(e))
