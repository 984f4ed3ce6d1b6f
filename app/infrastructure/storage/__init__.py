"""Content store abstraction.

Templates, locale message files and the asset manifest are all read through a
``ContentStore`` so the same code serves a directory on disk or an embedded
bundle.
"""

from infrastructure.storage.base import ContentStore, normalize_path
from infrastructure.storage.exceptions import ContentNotFoundError, ContentStoreError
from infrastructure.storage.filesystem import FileSystemContentStore
from infrastructure.storage.memory import InMemoryContentStore

__all__ = [
    "ContentStore",
    "ContentStoreError",
    "ContentNotFoundError",
    "FileSystemContentStore",
    "InMemoryContentStore",
    "normalize_path",
]
