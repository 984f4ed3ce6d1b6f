"""File-system backed content store."""

from pathlib import Path
from typing import List

from infrastructure.logging import get_module_logger
from infrastructure.storage.base import ContentStore, normalize_path
from infrastructure.storage.exceptions import ContentNotFoundError, ContentStoreError

logger = get_module_logger()


class FileSystemContentStore(ContentStore):
    """Serves files below a root directory.

    Attributes:
        root: Directory all paths are resolved against.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise ContentStoreError(f"Content root not found: {self.root}")
        logger.info("initialized_filesystem_store", root=str(self.root))

    def _resolve(self, path: str) -> Path:
        target = (self.root / normalize_path(path)).resolve()
        # Keep lookups inside the root
        if self.root != target and self.root not in target.parents:
            raise ContentNotFoundError(path)
        return target

    def read_file(self, path: str) -> bytes:
        target = self._resolve(path)
        if not target.is_file():
            raise ContentNotFoundError(path)
        try:
            return target.read_bytes()
        except OSError as e:
            raise ContentStoreError(f"Failed to read {path}: {e}") from e

    def list_files(self) -> List[str]:
        try:
            return sorted(
                p.relative_to(self.root).as_posix()
                for p in self.root.rglob("*")
                if p.is_file()
            )
        except OSError as e:
            raise ContentStoreError(f"Failed to list {self.root}: {e}") from e

    def exists(self, path: str) -> bool:
        try:
            return self._resolve(path).is_file()
        except ContentNotFoundError:
            return False
