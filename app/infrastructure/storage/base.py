"""Content store abstract base class."""

from abc import ABC, abstractmethod
from typing import List


def normalize_path(path: str) -> str:
    """Normalize a store path to forward slashes without a leading slash."""
    parts = [p for p in path.replace("\\", "/").split("/") if p not in ("", ".")]
    return "/".join(parts)


class ContentStore(ABC):
    """Abstract base class for read-only content stores.

    A content store hands out raw bytes for templates, locale files and
    asset manifests by relative path. Paths always use forward slashes and
    are relative to the store root.
    """

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """Read the raw bytes stored at ``path``.

        Args:
            path: Store-relative path (e.g., "templates/index.html").

        Returns:
            File contents.

        Raises:
            ContentNotFoundError: If nothing is stored at ``path``.
            ContentStoreError: If the store cannot be read.
        """
        pass

    @abstractmethod
    def list_files(self) -> List[str]:
        """List every file path in the store, sorted.

        Raises:
            ContentStoreError: If the store cannot be read.
        """
        pass

    def exists(self, path: str) -> bool:
        """Check whether a file exists at ``path``."""
        return normalize_path(path) in self.list_files()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read and decode the file stored at ``path``."""
        return self.read_file(path).decode(encoding)
