"""
Storage Backends (Sync)

The persistence store talks to its medium only through this small boundary:
- get(key) -> bytes or None
- set(key, value) -> None, raising StorageUnavailable if the medium refuses
- remove(key) -> None, a no-op when the key is absent

Implementations:
- FileStorageBackend: one JSON file per key under <data_dir>/store, atomic writes
- MemoryStorageBackend: dict-backed, for tests and throwaway sessions

Both accept an optional byte quota to emulate a full medium.
"""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from models.errors import StorageUnavailable


class StorageBackend(ABC):
    """Durable key-value medium used by the PersistenceStore."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        ...

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...


class MemoryStorageBackend(StorageBackend):
    def __init__(self, quota_bytes: Optional[int] = None):
        self._data: Dict[str, bytes] = {}
        self.quota_bytes = quota_bytes
        self.available = True

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        if not self.available:
            raise StorageUnavailable(key, "storage disabled")
        if self.quota_bytes is not None:
            used = sum(len(v) for k, v in self._data.items() if k != key)
            if used + len(value) > self.quota_bytes:
                raise StorageUnavailable(key, "quota exceeded")
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data.keys())


class FileStorageBackend(StorageBackend):
    def __init__(self, data_dir: str | Path, quota_bytes: Optional[int] = None):
        """
        Args:
            data_dir: Base data directory; files are kept in <data_dir>/store
            quota_bytes: Optional upper bound on the total size of stored values
        """
        self.logger = logging.getLogger(__name__)
        self.store_dir = Path(data_dir) / "store"
        self.store_dir.mkdir(parents=True, exist_ok=True)
        self.quota_bytes = quota_bytes

    def _path(self, key: str) -> Path:
        return self.store_dir / f"{key}.json"

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        if self.quota_bytes is not None:
            used = sum(
                p.stat().st_size for p in self.store_dir.glob("*.json") if p.stem != key
            )
            if used + len(value) > self.quota_bytes:
                raise StorageUnavailable(key, "quota exceeded")

        tmp_name = None
        try:
            # Write to a temp file in the same directory, then swap it in
            fd, tmp_name = tempfile.mkstemp(dir=self.store_dir, prefix=f".{key}_", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(value)
            os.replace(tmp_name, self._path(key))
            tmp_name = None
        except OSError as e:
            self.logger.error(f"Failed to write '{key}' to {self.store_dir}: {e}")
            raise StorageUnavailable(key, str(e)) from e
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)

    def remove(self, key: str) -> None:
        try:
            self._path(key).unlink()
        except FileNotFoundError:
            pass


def create_backend(settings: dict) -> StorageBackend:
    """Build the backend selected by settings['storage']['backend'] ('file' or 'memory')."""
    storage_settings = settings.get('storage', {})
    backend = storage_settings.get('backend', 'file')
    quota = storage_settings.get('quota_bytes')

    if backend == 'memory':
        return MemoryStorageBackend(quota_bytes=quota)
    if backend == 'file':
        data_dir = settings.get('system', {}).get('data_dir', './data')
        return FileStorageBackend(data_dir, quota_bytes=quota)
    raise ValueError(f"Unsupported storage backend: {backend}")
