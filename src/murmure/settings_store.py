"""Thread-safe key/value settings file with atomic writes."""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class SettingsFile:
    """Durable JSON key/value store.

    Usage:
        store = SettingsFile(Path("~/.config/murmure/settings.json").expanduser())

        url = store.get("webhook_url")
        store.set("webhook_url", "https://example.com/hook")

    Writes go to a temp file in the same directory which is fsynced and
    renamed over the target, so a crash never leaves a half-written file.
    Keys this store does not know about are preserved on write.
    """

    def __init__(self, path: Path):
        self.path = path
        self._data: dict[str, Any] = {}
        self._write_lock = threading.Lock()
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        if not self.path.exists():
            self._data = {}
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load settings from {self.path}: {e}")
            self._data = {}
            return

        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings file {self.path}: not a JSON object")
            data = {}
        self._data = data

    def _save_atomic(self, data: dict[str, Any]) -> None:
        """Save settings atomically using temp file + fsync + rename."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file in same directory (for atomic rename)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=".settings_",
            suffix=".tmp",
        )
        try:
            json_bytes = json.dumps(data, indent=2).encode("utf-8")
            os.write(fd, json_bytes)
            os.fsync(fd)
            os.close(fd)

            # Atomic replace
            os.replace(tmp_path, self.path)
        except Exception:
            try:
                os.close(fd)
            except OSError:
                pass
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Persist a single key.

        Raises:
            OSError: If the file could not be written. The in-memory
                copy is left unchanged in that case.
        """
        with self._write_lock:
            data = dict(self._data)
            data[key] = value
            self._save_atomic(data)
            self._data = data

    def reload(self) -> None:
        """Reload settings from disk."""
        with self._write_lock:
            self._load()
