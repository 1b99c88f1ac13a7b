"""
Storage Package

This package handles all data persistence operations: the key-value storage
media, the entity store built on top of them, CSV export and logging.

Components:
- StorageBackend / FileStorageBackend / MemoryStorageBackend: storage media
- PersistenceStore: entity collections, ids and timestamps
- CSVExporter: pandas-based CSV export of collections
- LogsManager: Manages application logging
"""

from .backends import StorageBackend, FileStorageBackend, MemoryStorageBackend, create_backend
from .app_storage import PersistenceStore
from .csv_storage import CSVExporter
from .logs_manager import LogsManager

__all__ = [
    'StorageBackend', 'FileStorageBackend', 'MemoryStorageBackend', 'create_backend',
    'PersistenceStore', 'CSVExporter', 'LogsManager',
]
