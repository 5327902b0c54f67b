"""Persistent key-value store — the only thing the engines write through.

The engines only need integer / float / blob get-set and a ``synchronize``
hook.  ``JsonFileStore`` keeps everything in a single JSON document on disk;
``MemoryStore`` is the in-process variant used by tests and headless runs.
"""

from __future__ import annotations

import base64
import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

SAVE_DIR = Path.home() / ".luckyjet"
STORE_FILE_NAME = "store.json"


class StoreError(Exception):
    """Raised when the store cannot persist a value."""


class PersistentStore(Protocol):
    def get_int(self, key: str, default: int = 0) -> int: ...

    def get_float(self, key: str, default: float = 0.0) -> float: ...

    def get_blob(self, key: str) -> bytes | None: ...

    def set_int(self, key: str, value: int) -> None: ...

    def set_float(self, key: str, value: float) -> None: ...

    def set_blob(self, key: str, value: bytes) -> None: ...

    def synchronize(self) -> None: ...


class MemoryStore:
    """Dict-backed store.  Nothing survives the process."""

    def __init__(self) -> None:
        self._values: dict[str, object] = {}

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._values.get(key, default)
        return int(value) if isinstance(value, (int, float)) else default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._values.get(key, default)
        return float(value) if isinstance(value, (int, float)) else default

    def get_blob(self, key: str) -> bytes | None:
        value = self._values.get(key)
        return value if isinstance(value, bytes) else None

    def set_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)

    def set_float(self, key: str, value: float) -> None:
        self._values[key] = float(value)

    def set_blob(self, key: str, value: bytes) -> None:
        self._values[key] = bytes(value)

    def synchronize(self) -> None:
        pass

    def keys(self) -> list[str]:
        return sorted(self._values)


class JsonFileStore(MemoryStore):
    """Store persisted as one JSON document.  Sets stay in memory until
    ``synchronize`` flushes the whole document.

    Blobs are base64-encoded so arbitrary bytes survive the JSON layer.
    A missing file starts empty; a corrupt one is logged and ignored.
    """

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self._file_path = path if path is not None else SAVE_DIR / STORE_FILE_NAME
        self._load()

    @property
    def path(self) -> Path:
        return self._file_path

    def synchronize(self) -> None:
        """Flush the whole document to disk."""
        payload: dict[str, dict] = {"ints": {}, "floats": {}, "blobs": {}}
        for key, value in self._values.items():
            if isinstance(value, bytes):
                payload["blobs"][key] = base64.b64encode(value).decode("ascii")
            elif isinstance(value, float):
                payload["floats"][key] = value
            else:
                payload["ints"][key] = value
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Could not write {self._file_path}: {e}") from e

    def _load(self) -> None:
        if not self._file_path.exists():
            return
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load store from %s: %s", self._file_path, e)
            return
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed store file %s", self._file_path)
            return

        for key, value in self._section(payload, "ints").items():
            if isinstance(value, (int, float)):
                self._values[key] = int(value)
        for key, value in self._section(payload, "floats").items():
            if isinstance(value, (int, float)):
                self._values[key] = float(value)
        for key, value in self._section(payload, "blobs").items():
            try:
                self._values[key] = base64.b64decode(value, validate=True)
            except (ValueError, TypeError) as e:
                logger.warning("Dropping unreadable blob %r: %s", key, e)

    def _section(self, payload: dict, name: str) -> dict:
        section = payload.get(name, {})
        if not isinstance(section, dict):
            logger.warning("Ignoring malformed %r section in %s", name, self._file_path)
            return {}
        return section


# ── Blob helpers ─────────────────────────────────────────────────


def encode_json(value: object) -> bytes:
    """Serialise a JSON-compatible value into a blob."""
    return json.dumps(value, sort_keys=True).encode("utf-8")


def decode_json(blob: bytes | None) -> object | None:
    """Inverse of :func:`encode_json`.  Returns None for absent or corrupt blobs."""
    if blob is None:
        return None
    try:
        return json.loads(blob.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Could not decode stored blob: %s", e)
        return None


def save_id_set(store: PersistentStore, key: str, ids: set[str]) -> bool:
    """Persist a set of ids as a sorted list.  Failures are logged, not raised."""
    try:
        store.set_blob(key, encode_json(sorted(ids)))
        store.synchronize()
    except (StoreError, TypeError, ValueError) as e:
        logger.warning("Could not persist %s: %s", key, e)
        return False
    return True


def load_id_set(store: PersistentStore, key: str) -> set[str]:
    """Load a set of ids written by :func:`save_id_set`.  Absent → empty."""
    data = decode_json(store.get_blob(key))
    if data is None:
        return set()
    if not isinstance(data, list):
        logger.warning("Ignoring malformed %s blob", key)
        return set()
    return {str(item) for item in data}
